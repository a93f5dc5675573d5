"""Client factory: service kind -> RpcClient with that service's TLS identity."""

import logging
from typing import Optional, Union

import httpx

from chia_status.config.settings import ClientConfig
from chia_status.core.errors import UnknownServiceError
from chia_status.rpc.client import RpcClient
from chia_status.rpc.identity import load_identity
from chia_status.rpc.services import ChiaService

logger = logging.getLogger(__name__)


class ClientFactory:
    """Builds per-service RpcClients from an explicit ClientConfig."""

    def __init__(self, config: ClientConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._transport = transport

    def _resolve_service(self, service: Union[ChiaService, str]) -> ChiaService:
        try:
            svc = ChiaService(service)
        except ValueError:
            raise UnknownServiceError(service) from None
        if svc not in self.config.services:
            raise UnknownServiceError(service)
        return svc

    def service_url(self, service: Union[ChiaService, str]) -> str:
        """Base URL for service (no identity load)."""
        return self.config.services[self._resolve_service(service)].url

    def build_client(self, service: Union[ChiaService, str]) -> RpcClient:
        """Load the service's cert/key and bind an RpcClient to it.

        Raises UnknownServiceError or IdentityLoadError before any network I/O.
        """
        svc = self._resolve_service(service)
        endpoint = self.config.services[svc]
        identity = load_identity(svc, endpoint.url, endpoint.cert_path, endpoint.key_path)
        logger.info("RPC client for %s at %s", svc.value, endpoint.url)
        return RpcClient(identity, timeout_sec=self.config.timeout_sec, transport=self._transport)
