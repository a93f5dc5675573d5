"""Error taxonomy for client construction, RPC calls and response decoding."""

from typing import Optional


class ChiaStatusError(Exception):
    """Base class for all status-indicator errors."""


class IdentityLoadError(ChiaStatusError):
    """Certificate or private key for a service could not be read."""

    def __init__(self, service: str, path: str, reason: str):
        super().__init__(f"cannot load TLS identity for {service} from {path}: {reason}")
        self.service = service
        self.path = path


class UnknownServiceError(ChiaStatusError):
    """Requested service kind is not registered."""

    def __init__(self, service: object):
        super().__init__(f"unknown service: {service!r}")
        self.service = service


class RpcTimeoutError(ChiaStatusError, TimeoutError):
    """RPC call exceeded its timeout."""


class ServiceConnectionError(ChiaStatusError):
    """Peer unreachable or TLS handshake failed."""


class UnexpectedResponseError(ChiaStatusError):
    """Non-2xx HTTP status, or a payload that failed its shape guard."""

    def __init__(self, message: str, status_code: Optional[int] = None, reason: Optional[str] = None):
        if status_code is not None:
            message = f"{message}: {status_code} {reason}" if reason else f"{message}: {status_code}"
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
