"""Minimal structural guards and decoders for backend RPC responses.

Guards check only the keys needed to tell a real response from garbage (wrong endpoint,
error page, version skew); they are not schema validation. Decoders additionally require
the fields they read (sync flags and heights, plot file_size) and raise
UnexpectedResponseError rather than substituting defaults.
"""

from typing import Any, List, Mapping

import httpx

from chia_status.core.errors import UnexpectedResponseError
from chia_status.core.state.models import PlotRecord, SyncState


def is_blockchain_state_response(data: Any) -> bool:
    return isinstance(data, Mapping) and "blockchain_state" in data


def is_plots_response(data: Any) -> bool:
    return isinstance(data, Mapping) and "plots" in data


def _json_body(response: httpx.Response) -> Any:
    if not response.is_success:
        raise UnexpectedResponseError(
            "Error response from Chia", response.status_code, response.reason_phrase
        )
    try:
        return response.json()
    except ValueError as e:
        raise UnexpectedResponseError(
            "Response is not JSON", response.status_code, response.reason_phrase
        ) from e


def _field(section: Mapping, key: str, kind: type, where: str, response: httpx.Response) -> Any:
    """Required field of the given type; bool is not accepted as int."""
    value = section.get(key)
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise UnexpectedResponseError(
            f"Unknown response: {where}.{key} missing or not {kind.__name__}",
            response.status_code,
            response.reason_phrase,
        )
    return value


def decode_blockchain_state(response: httpx.Response) -> SyncState:
    """get_blockchain_state -> SyncState (blockchain_state.sync.*)."""
    data = _json_body(response)
    if not is_blockchain_state_response(data):
        raise UnexpectedResponseError("Unknown response", response.status_code, response.reason_phrase)
    state = data["blockchain_state"]
    sync = state.get("sync") if isinstance(state, Mapping) else None
    if not isinstance(sync, Mapping):
        raise UnexpectedResponseError(
            "Unknown response: blockchain_state.sync missing", response.status_code, response.reason_phrase
        )
    where = "blockchain_state.sync"
    return SyncState(
        syncing=_field(sync, "sync_mode", bool, where, response),
        synced_fully=_field(sync, "synced", bool, where, response),
        progress_height=max(_field(sync, "sync_progress_height", int, where, response), 0),
        tip_height=max(_field(sync, "sync_tip_height", int, where, response), 0),
    )


def decode_plots(response: httpx.Response) -> List[PlotRecord]:
    """get_plots -> [PlotRecord] (plots[].file_size)."""
    data = _json_body(response)
    if not is_plots_response(data):
        raise UnexpectedResponseError("Unknown response", response.status_code, response.reason_phrase)
    plots = data["plots"]
    if not isinstance(plots, list):
        raise UnexpectedResponseError("Unknown response: plots is not a list", response.status_code, response.reason_phrase)
    records: List[PlotRecord] = []
    for i, p in enumerate(plots):
        if not isinstance(p, Mapping):
            raise UnexpectedResponseError(
                f"Unknown response: plots[{i}] is not an object", response.status_code, response.reason_phrase
            )
        records.append(PlotRecord(size_in_bytes=max(_field(p, "file_size", int, f"plots[{i}]", response), 0)))
    return records
