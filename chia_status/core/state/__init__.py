"""Display status enum, sync/plot models and the status classifier."""

from .enums import DisplayStatus
from .models import (
    DEFAULT_SYNC_STATE,
    DisplayState,
    HeightProgress,
    PlotProgress,
    PlotRecord,
    SyncState,
)
from .classifier import StatusClassifier, derive_status

__all__ = [
    "DisplayStatus",
    "DisplayState",
    "SyncState",
    "PlotRecord",
    "HeightProgress",
    "PlotProgress",
    "DEFAULT_SYNC_STATE",
    "StatusClassifier",
    "derive_status",
]
