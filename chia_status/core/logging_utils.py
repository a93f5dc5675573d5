"""Structured logging for derived display states and failed polls."""

import logging
import uuid
from typing import Optional

from chia_status.core.state.models import DisplayState

logger = logging.getLogger(__name__)


def _ensure_trace_id(extra: dict) -> str:
    trace_id = extra.get("trace_id")
    if not trace_id:
        trace_id = str(uuid.uuid4())[:8]
        extra["trace_id"] = trace_id
    return trace_id


def new_trace_id() -> str:
    return str(uuid.uuid4())[:8]


def log_display_state(
    trace_id: Optional[str] = None,
    state: Optional[DisplayState] = None,
    farmer_up: Optional[bool] = None,
    plot_count: Optional[int] = None,
    extra: Optional[dict] = None,
) -> None:
    """Log DisplayState as structured key-value."""
    extra = extra or {}
    if trace_id:
        extra["trace_id"] = trace_id
    _ensure_trace_id(extra)
    if state is not None:
        extra["status"] = state.status.name
        if state.progress is not None:
            for k, v in state.progress.to_dict().items():
                extra[f"progress_{k}"] = v
    if farmer_up is not None:
        extra["farmer_up"] = farmer_up
    if plot_count is not None:
        extra["plots"] = plot_count
    msg = "display_state " + " ".join(f"{k}={v}" for k, v in sorted(extra.items()))
    logger.info(msg)


def log_poll_failure(
    source: str,
    error: BaseException,
    trace_id: Optional[str] = None,
    extra: Optional[dict] = None,
) -> None:
    """Log a failed data-source query (sync state, plots) as structured key-value."""
    extra = extra or {}
    if trace_id:
        extra["trace_id"] = trace_id
    _ensure_trace_id(extra)
    extra["source"] = source
    extra["error"] = type(error).__name__
    msg = "poll_failure " + " ".join(f"{k}={v}" for k, v in sorted(extra.items())) + f": {error}"
    logger.warning(msg)
