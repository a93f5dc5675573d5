"""FastAPI app: GET /status returns the current farm status as JSON for the UI."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from chia_status.config.settings import get_client_config, get_probe_timeout, get_server_config
from chia_status.rpc.factory import ClientFactory
from chia_status.status_server.poller import StatusPoller

logger = logging.getLogger(__name__)


def create_app(poller: StatusPoller) -> FastAPI:
    """Build FastAPI app around a poller. Poller clients are closed on shutdown."""

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        yield
        await poller.aclose()

    app = FastAPI(title="Chia Status Server", description="Farm status indicator API", lifespan=lifespan)

    @app.get("/status")
    async def get_status() -> JSONResponse:
        """Poll once. 200 with derived state; 503 with status=Error when a data source failed."""
        report = await poller.poll()
        return JSONResponse(status_code=200 if report.ok else 503, content=report.to_dict())

    return app


def build_poller(config: dict) -> StatusPoller:
    factory = ClientFactory(get_client_config(config))
    return StatusPoller(factory, probe_timeout=get_probe_timeout(config))


def run_server(config: dict) -> None:
    """Start the status server (host/port from status_server section)."""
    import uvicorn

    server_cfg = get_server_config(config)
    app = create_app(build_poller(config))
    logger.info("Status server on %s:%s", server_cfg["host"], server_cfg["port"])
    uvicorn.run(app, host=server_cfg["host"], port=server_cfg["port"], log_level="info")
