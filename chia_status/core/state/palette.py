"""Static (text_color, icon_color) tokens per display status, consumed by the UI."""

from typing import Dict, Tuple

from chia_status.core.state.enums import DisplayStatus

STATUS_COLORS: Dict[DisplayStatus, Tuple[str, str]] = {
    DisplayStatus.SYNCED_FARMING: ("text-chia", "fill-chia"),
    DisplayStatus.SYNCED_NOT_FARMING: ("text-red-800", "fill-red-800"),
    DisplayStatus.SYNCING: ("text-amber-600", "fill-amber-600"),
    DisplayStatus.NOT_SYNCING: ("text-red-800", "fill-red-800"),
    DisplayStatus.UNKNOWN: ("text-stone-700", "fill-stone-700"),
}

# Poll failed before a state could be derived; not a DisplayStatus.
ERROR_LABEL = "Error"
ERROR_COLORS: Tuple[str, str] = ("text-red-800", "fill-red-800")


def colors_for(status: DisplayStatus) -> Tuple[str, str]:
    return STATUS_COLORS[status]
