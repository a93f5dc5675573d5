"""Bare TCP reachability probe (no TLS, no payload)."""

import asyncio
import logging
from typing import Union

import httpx

logger = logging.getLogger(__name__)

_DEFAULT_PORTS = {"https": 443, "http": 80}


def _host_port(url: Union[str, httpx.URL]) -> tuple[str, int]:
    """Raises httpx.InvalidURL or ValueError when url has no usable host:port."""
    parsed = httpx.URL(url) if isinstance(url, str) else url
    if not parsed.host:
        raise ValueError(f"no host in {url!s}")
    port = parsed.port or _DEFAULT_PORTS.get(parsed.scheme, 443)
    return parsed.host, port


async def is_reachable(url: Union[str, httpx.URL], timeout: float = 5.0) -> bool:
    """True iff a TCP listener accepts a connection at url's host:port within timeout.

    Any connection error, timeout or unusable URL yields False. The socket is closed on every path.
    """
    writer = None
    try:
        host, port = _host_port(url)
        _, writer = await asyncio.wait_for(asyncio.open_connection(host, port), timeout=timeout)
        return True
    # ValueError covers IDNA UnicodeError from the resolver; OverflowError an out-of-range port
    except (OSError, asyncio.TimeoutError, ValueError, OverflowError, httpx.InvalidURL) as e:
        logger.debug("Probe %s failed: %s", url, e)
        return False
    finally:
        if writer is not None:
            writer.close()
            try:
                await writer.wait_closed()
            except OSError:
                pass
