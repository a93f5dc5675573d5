"""Status classifier: map sync state, farmer reachability and plots to a DisplayState."""

from typing import Optional, Sequence

from chia_status.core.state.enums import DisplayStatus
from chia_status.core.state.models import (
    DisplayState,
    HeightProgress,
    PlotProgress,
    PlotRecord,
    Progress,
    SyncState,
)
from chia_status.core.state.palette import colors_for


class StatusClassifier:
    """Pure, total: every input maps to exactly one DisplayState."""

    @staticmethod
    def _classify_status(sync: SyncState, farmer_up: bool) -> DisplayStatus:
        # First match wins
        if not sync.syncing and sync.synced_fully:
            # Farming means only that the farmer port accepts TCP connections
            if farmer_up:
                return DisplayStatus.SYNCED_FARMING
            return DisplayStatus.SYNCED_NOT_FARMING
        if sync.syncing and not sync.synced_fully:
            return DisplayStatus.SYNCING
        if not sync.syncing and not sync.synced_fully:
            return DisplayStatus.NOT_SYNCING
        return DisplayStatus.UNKNOWN

    @staticmethod
    def _select_progress(
        sync: SyncState,
        status: DisplayStatus,
        plots: Sequence[PlotRecord],
    ) -> Optional[Progress]:
        if sync.tip_height > 0:
            return HeightProgress(progress_height=sync.progress_height, tip_height=sync.tip_height)
        if status == DisplayStatus.SYNCED_FARMING:
            return PlotProgress(
                plot_count=len(plots),
                total_size=sum(p.size_in_bytes for p in plots),
            )
        return None

    @classmethod
    def classify(cls, sync: SyncState, farmer_up: bool, plots: Sequence[PlotRecord]) -> DisplayState:
        status = cls._classify_status(sync, farmer_up)
        text_color, icon_color = colors_for(status)
        return DisplayState(
            status=status,
            text_color=text_color,
            icon_color=icon_color,
            progress=cls._select_progress(sync, status, plots),
        )


def derive_status(sync: SyncState, farmer_up: bool, plots: Sequence[PlotRecord]) -> DisplayState:
    """Derive the display state for one refresh. Never raises."""
    return StatusClassifier.classify(sync, farmer_up, plots)
