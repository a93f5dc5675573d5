"""Mutual-TLS JSON RPC client bound to one service identity."""

import logging
import ssl
from typing import Any, Dict, Optional

import httpx

from chia_status.core.errors import RpcTimeoutError, ServiceConnectionError
from chia_status.rpc.identity import ServiceIdentity

logger = logging.getLogger(__name__)

_JSON_HEADERS = {"Content-Type": "application/json"}


class RpcClient:
    """POSTs JSON to <base_url>/<path> using the identity's client certificate.

    No retries and no body interpretation: call() returns the raw httpx.Response.
    The TLS context is built at construction (IdentityLoadError on bad PEM); the
    underlying httpx.AsyncClient is created on first use and pooled until aclose().
    """

    def __init__(
        self,
        identity: ServiceIdentity,
        timeout_sec: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        ssl_context: Optional[ssl.SSLContext] = None,
    ):
        self.identity = identity
        self.timeout_sec = timeout_sec
        # Built once per client; read-only afterwards and shared by concurrent calls
        self.ssl_context = ssl_context if ssl_context is not None else identity.ssl_context()
        self._transport = transport
        self._http: Optional[httpx.AsyncClient] = None
        base = identity.base_url
        # Trailing slash so relative paths join under the base path instead of replacing it
        self._base_url = httpx.URL(base if base.endswith("/") else base + "/")

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            if self._transport is not None:
                self._http = httpx.AsyncClient(transport=self._transport, timeout=self.timeout_sec)
            else:
                self._http = httpx.AsyncClient(
                    verify=self.ssl_context,
                    timeout=self.timeout_sec,
                )
        return self._http

    def resolve(self, path: str) -> httpx.URL:
        """Resolve path against the base URL; absolute URLs win."""
        return self._base_url.join(path)

    async def call(self, path: str, body: Optional[Dict[str, Any]] = None) -> httpx.Response:
        """POST body (default {}) as JSON to path. Raises RpcTimeoutError, ServiceConnectionError."""
        url = self.resolve(path)
        payload = body if body is not None else {}
        try:
            response = await self._client().post(url, json=payload, headers=_JSON_HEADERS)
        except httpx.TimeoutException as e:
            raise RpcTimeoutError(
                f"{self.identity.service.value} {path}: no response within {self.timeout_sec}s"
            ) from e
        except httpx.TransportError as e:
            raise ServiceConnectionError(f"{self.identity.service.value} {path}: {e}") from e
        logger.debug(
            "rpc %s %s -> %s", self.identity.service.value, url, response.status_code
        )
        return response

    async def aclose(self) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def __aenter__(self) -> "RpcClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
