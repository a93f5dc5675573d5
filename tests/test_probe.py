"""Tests for is_reachable against real loopback listeners."""

import asyncio
import socket

import pytest

from chia_status.rpc.probe import _host_port, is_reachable


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


class TestHostPort:
    def test_explicit_port(self):
        assert _host_port("https://localhost:8559") == ("localhost", 8559)

    def test_default_ports(self):
        assert _host_port("https://farmer.lan") == ("farmer.lan", 443)
        assert _host_port("http://farmer.lan") == ("farmer.lan", 80)

    def test_no_host_raises(self):
        with pytest.raises(ValueError):
            _host_port("/get_plots")


class TestIsReachable:
    @pytest.mark.asyncio
    async def test_listener_reachable_and_socket_released(self):
        closed = asyncio.Event()
        opened = []

        async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
            opened.append(True)
            # EOF means the probe closed its end
            data = await reader.read()
            assert data == b""
            closed.set()
            writer.close()

        server = await asyncio.start_server(handle, "127.0.0.1", 0)
        port = server.sockets[0].getsockname()[1]
        try:
            assert await is_reachable(f"https://127.0.0.1:{port}", timeout=2.0) is True
            await asyncio.wait_for(closed.wait(), timeout=2.0)
            assert opened == [True]
        finally:
            server.close()
            await server.wait_closed()

    @pytest.mark.asyncio
    async def test_refused_is_false(self):
        port = _free_port()
        assert await is_reachable(f"https://127.0.0.1:{port}", timeout=2.0) is False

    @pytest.mark.asyncio
    async def test_timeout_is_false(self, monkeypatch):
        async def never_connects(host, port):
            await asyncio.sleep(10)

        monkeypatch.setattr(asyncio, "open_connection", never_connects)
        assert await is_reachable("https://127.0.0.1:8559", timeout=0.05) is False

    @pytest.mark.asyncio
    async def test_repeated_checks(self):
        server = await asyncio.start_server(lambda r, w: w.close(), "127.0.0.1", 0)
        port = server.sockets[0].getsockname()[1]
        try:
            results = await asyncio.gather(*(is_reachable(f"http://127.0.0.1:{port}", 2.0) for _ in range(20)))
            assert all(results)
        finally:
            server.close()
            await server.wait_closed()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "url",
        ["https://127.0.0.1:99999", "https://[::1:8559", "/get_plots", "not a url::"],
    )
    async def test_unusable_url_is_false(self, url):
        assert await is_reachable(url, timeout=0.5) is False

    @pytest.mark.asyncio
    async def test_resolver_encoding_error_is_false(self, monkeypatch):
        async def idna_failure(host, port):
            raise UnicodeError("label empty or too long")

        monkeypatch.setattr(asyncio, "open_connection", idna_failure)
        assert await is_reachable("https://farmer.lan:8559", timeout=0.5) is False
