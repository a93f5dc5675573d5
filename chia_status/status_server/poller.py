"""Poll full node, harvester and farmer concurrently and reduce to one StatusReport."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from chia_status.core.logging_utils import log_display_state, log_poll_failure, new_trace_id
from chia_status.core.state.classifier import derive_status
from chia_status.core.state.models import DisplayState, PlotRecord, SyncState
from chia_status.core.state.palette import ERROR_COLORS, ERROR_LABEL
from chia_status.rpc.client import RpcClient
from chia_status.rpc.factory import ClientFactory
from chia_status.rpc.probe import is_reachable
from chia_status.rpc.responses import decode_blockchain_state, decode_plots
from chia_status.rpc.services import ChiaService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatusReport:
    """Outcome of one poll: exactly one of display / error is set."""

    trace_id: str
    display: Optional[DisplayState] = None
    error: Optional[str] = None
    farmer_up: bool = False
    plot_count: int = 0
    total_size: int = 0

    @property
    def ok(self) -> bool:
        return self.display is not None

    def to_dict(self) -> Dict[str, Any]:
        if self.display is None:
            text_color, icon_color = ERROR_COLORS
            return {
                "status": ERROR_LABEL,
                "message": self.error,
                "text_color": text_color,
                "icon_color": icon_color,
                "trace_id": self.trace_id,
            }
        payload = self.display.to_dict()
        payload.update(
            {
                "farmer": self.farmer_up,
                "plots": self.plot_count,
                "total_size": self.total_size,
                "trace_id": self.trace_id,
            }
        )
        return payload


class StatusPoller:
    """Owns one RpcClient per queried service; clients are built on first use and reused."""

    def __init__(self, factory: ClientFactory, farmer_url: Optional[str] = None, probe_timeout: float = 5.0):
        self.factory = factory
        self.farmer_url = farmer_url or factory.service_url(ChiaService.FARMER)
        self.probe_timeout = probe_timeout
        self._clients: Dict[ChiaService, RpcClient] = {}

    def _client(self, service: ChiaService) -> RpcClient:
        client = self._clients.get(service)
        if client is None:
            client = self.factory.build_client(service)
            self._clients[service] = client
        return client

    async def fetch_blockchain_state(self) -> SyncState:
        response = await self._client(ChiaService.FULL_NODE).call("get_blockchain_state")
        return decode_blockchain_state(response)

    async def fetch_plots(self) -> List[PlotRecord]:
        response = await self._client(ChiaService.HARVESTER).call("get_plots")
        return decode_plots(response)

    async def fetch_farmer_status(self) -> bool:
        return await is_reachable(self.farmer_url, timeout=self.probe_timeout)

    async def poll(self) -> StatusReport:
        """Run the three queries jointly; derive only when all settled and none failed."""
        trace_id = new_trace_id()
        sync, farmer_up, plots = await asyncio.gather(
            self.fetch_blockchain_state(),
            self.fetch_farmer_status(),
            self.fetch_plots(),
            return_exceptions=True,
        )
        if isinstance(farmer_up, BaseException):
            # Probe already maps connection errors to False; anything else is still "not reachable".
            log_poll_failure("farmer", farmer_up, trace_id=trace_id)
            farmer_up = False

        failures = [
            (source, result)
            for source, result in (("blockchain_state", sync), ("plots", plots))
            if isinstance(result, BaseException)
        ]
        for source, exc in failures:
            log_poll_failure(source, exc, trace_id=trace_id)
        if failures:
            return StatusReport(
                trace_id=trace_id,
                error="; ".join(str(exc) or type(exc).__name__ for _, exc in failures),
                farmer_up=farmer_up,
            )

        display = derive_status(sync, farmer_up, plots)
        total_size = sum(p.size_in_bytes for p in plots)
        log_display_state(trace_id=trace_id, state=display, farmer_up=farmer_up, plot_count=len(plots))
        return StatusReport(
            trace_id=trace_id,
            display=display,
            farmer_up=farmer_up,
            plot_count=len(plots),
            total_size=total_size,
        )

    async def aclose(self) -> None:
        for client in self._clients.values():
            await client.aclose()
        self._clients.clear()
