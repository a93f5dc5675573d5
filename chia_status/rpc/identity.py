"""TLS client identity (cert + key) for one backend service."""

import logging
import os
import ssl
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from chia_status.core.errors import IdentityLoadError
from chia_status.rpc.services import ChiaService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceIdentity:
    """Immutable after load; safe to share across concurrent calls."""

    service: ChiaService
    base_url: str
    certificate: bytes = field(repr=False)
    private_key: bytes = field(repr=False)

    def ssl_context(self) -> ssl.SSLContext:
        """Client context presenting this identity; server chain is not verified.

        The deployment trusts a fixed self-issued node certificate, so public CA
        verification and hostname checks are off. Raises IdentityLoadError if the
        cert/key bytes are not a usable PEM pair.
        """
        ctx = ssl.create_default_context(ssl.Purpose.SERVER_AUTH)
        ctx.check_hostname = False
        ctx.verify_mode = ssl.CERT_NONE
        # load_cert_chain only takes paths; stage the blobs in a private dir for the load.
        with tempfile.TemporaryDirectory(prefix="chia-tls-") as tmp:
            cert_file = os.path.join(tmp, "client.crt")
            key_file = os.path.join(tmp, "client.key")
            for path, blob in ((cert_file, self.certificate), (key_file, self.private_key)):
                fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
                with os.fdopen(fd, "wb") as f:
                    f.write(blob)
            try:
                ctx.load_cert_chain(certfile=cert_file, keyfile=key_file)
            except ssl.SSLError as e:
                raise IdentityLoadError(self.service.value, "certificate/key", e.reason or str(e)) from e
        return ctx


def _read_bytes(service: ChiaService, path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise IdentityLoadError(service.value, str(path), e.strerror or str(e)) from e


def load_identity(service: ChiaService, base_url: str, cert_path: Path, key_path: Path) -> ServiceIdentity:
    """Read cert and key from disk/secret mount. Raises IdentityLoadError if either is unreadable."""
    certificate = _read_bytes(service, Path(cert_path))
    private_key = _read_bytes(service, Path(key_path))
    logger.debug("Loaded TLS identity for %s from %s", service.value, cert_path)
    return ServiceIdentity(
        service=service,
        base_url=base_url,
        certificate=certificate,
        private_key=private_key,
    )
