"""Pytest fixtures for Chia status indicator tests."""

import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Callable

import httpx
import pytest
import yaml

# Ensure project root is in path for chia_status imports
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from chia_status.config.settings import ClientConfig, ServiceEndpoint  # noqa: E402
from chia_status.rpc.factory import ClientFactory  # noqa: E402
from chia_status.rpc.services import ChiaService  # noqa: E402


@pytest.fixture
def project_root() -> Path:
    return _project_root


@pytest.fixture
def config(project_root: Path) -> dict:
    """Example config (defaults) as a dict."""
    with open(project_root / "config" / "config.yaml.example", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


_FIXTURES = _project_root / "tests" / "fixtures"


@pytest.fixture
def tls_pair() -> SimpleNamespace:
    """Self-signed client cert + RSA key (tests/fixtures/client.crt|.key)."""
    return SimpleNamespace(
        cert=(_FIXTURES / "client.crt").read_bytes(),
        key=(_FIXTURES / "client.key").read_bytes(),
    )


@pytest.fixture
def certs_dir(tmp_path: Path, tls_pair: SimpleNamespace) -> Path:
    """certs/<service>/private_<service>.crt|.key for every service, same real pair."""
    root = tmp_path / "certs"
    for service in ChiaService:
        d = root / service.value
        d.mkdir(parents=True)
        (d / f"private_{service.value}.crt").write_bytes(tls_pair.cert)
        (d / f"private_{service.value}.key").write_bytes(tls_pair.key)
    return root


@pytest.fixture
def client_config(certs_dir: Path) -> ClientConfig:
    ports = {ChiaService.FULL_NODE: 8555, ChiaService.FARMER: 8559, ChiaService.HARVESTER: 8560}
    services = {
        service: ServiceEndpoint(
            url=f"https://localhost:{port}",
            cert_path=certs_dir / service.value / f"private_{service.value}.crt",
            key_path=certs_dir / service.value / f"private_{service.value}.key",
        )
        for service, port in ports.items()
    }
    return ClientConfig(services=services, timeout_sec=5.0)


@pytest.fixture
def make_factory(client_config: ClientConfig) -> Callable[[Callable[[httpx.Request], httpx.Response]], ClientFactory]:
    """Factory whose clients route through httpx.MockTransport(handler)."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> ClientFactory:
        return ClientFactory(client_config, transport=httpx.MockTransport(handler))

    return _make


def blockchain_state_payload(
    sync_mode: bool = False,
    synced: bool = True,
    progress: int = 0,
    tip: int = 0,
) -> dict:
    return {
        "blockchain_state": {
            "sync": {
                "sync_mode": sync_mode,
                "sync_progress_height": progress,
                "sync_tip_height": tip,
                "synced": synced,
            }
        },
        "success": True,
    }


def plots_payload(*sizes: int) -> dict:
    return {"plots": [{"file_size": s, "filename": f"plot-{i}.plot"} for i, s in enumerate(sizes)], "success": True}


@pytest.fixture
def payloads() -> SimpleNamespace:
    """Builders for well-formed RPC response bodies."""
    return SimpleNamespace(blockchain_state=blockchain_state_payload, plots=plots_payload)
