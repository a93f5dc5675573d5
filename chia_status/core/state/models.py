"""Immutable inputs and outputs of status derivation."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from chia_status.core.state.enums import DisplayStatus


@dataclass(frozen=True)
class SyncState:
    """Full node's self-reported sync progress. tip_height == 0 means tip unknown."""

    syncing: bool
    synced_fully: bool
    progress_height: int
    tip_height: int


# Safe stand-in for callers that must degrade a failed sync query.
DEFAULT_SYNC_STATE = SyncState(syncing=False, synced_fully=False, progress_height=0, tip_height=0)


@dataclass(frozen=True)
class PlotRecord:
    size_in_bytes: int


@dataclass(frozen=True)
class HeightProgress:
    progress_height: int
    tip_height: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "height",
            "progress_height": self.progress_height,
            "tip_height": self.tip_height,
        }


@dataclass(frozen=True)
class PlotProgress:
    plot_count: int
    total_size: int  # bytes; formatting is left to the UI

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "plots",
            "plot_count": self.plot_count,
            "total_size": self.total_size,
        }


Progress = Union[HeightProgress, PlotProgress]


@dataclass(frozen=True)
class DisplayState:
    """Derived per refresh; never persisted."""

    status: DisplayStatus
    text_color: str
    icon_color: str
    progress: Optional[Progress] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "text_color": self.text_color,
            "icon_color": self.icon_color,
            "progress": self.progress.to_dict() if self.progress is not None else None,
        }
