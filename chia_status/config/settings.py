"""Unified config: rpc, services, farmer_probe, status_server.

Defaults: loaded from config/config.yaml.example (single source of truth). Environment
overrides for service URLs are applied once, in get_client_config, so the client factory
itself never reads the environment.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from chia_status.rpc.services import SERVICE_TABLE, ChiaService

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

DEFAULT_TIMEOUT_SEC = 5.0
DEFAULT_CERTS_DIR = "certs"
DEFAULT_SERVER_HOST = "0.0.0.0"
DEFAULT_SERVER_PORT = 8765

# Lazy-loaded example config (single source of truth for defaults)
_EXAMPLE_CONFIG: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class ServiceEndpoint:
    """Resolved base URL and credential paths for one backend service."""

    url: str
    cert_path: Path
    key_path: Path


@dataclass(frozen=True)
class ClientConfig:
    """Everything the client factory needs; built once from YAML + env."""

    services: Dict[ChiaService, ServiceEndpoint] = field(default_factory=dict)
    timeout_sec: float = DEFAULT_TIMEOUT_SEC


def read_config(config_path: Optional[str] = None) -> tuple[dict, str]:
    """Load YAML config. Returns (config, resolved_path)."""
    config_path = config_path or os.environ.get("CHIA_STATUS_CONFIG", "config/config.yaml")
    if not Path(config_path).exists():
        config_path = str(_PROJECT_ROOT / "config" / "config.yaml.example")
    config_path = str(Path(config_path).resolve())
    with open(config_path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}
    return config, config_path


def _load_example_config() -> Dict[str, Any]:
    """Load config.yaml.example as defaults."""
    global _EXAMPLE_CONFIG
    if _EXAMPLE_CONFIG is None:
        path = _PROJECT_ROOT / "config" / "config.yaml.example"
        if path.exists():
            with open(path, encoding="utf-8") as f:
                _EXAMPLE_CONFIG = yaml.safe_load(f) or {}
        else:
            _EXAMPLE_CONFIG = {}
    return _EXAMPLE_CONFIG


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge override into base. Override values take precedence."""
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _merged_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    return _deep_merge(_load_example_config(), cfg)


def _section(cfg: Dict[str, Any], section: str) -> Dict[str, Any]:
    sec = cfg.get(section)
    return sec if isinstance(sec, dict) else {}


def get_client_config(
    config: Optional[Dict[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ClientConfig:
    """Resolve every known service into a ClientConfig.

    URL precedence: env var (e.g. CHIA_FARMER_URL) > services.<name>.url > built-in default.
    Cert/key: services.<name>.cert|key, else <rpc.certs_dir>/<name>/private_<name>.crt|.key.
    """
    env = os.environ if environ is None else environ
    merged = _merged_config(config or {})
    rpc = _section(merged, "rpc")
    services_cfg = _section(merged, "services")
    certs_dir = Path(rpc.get("certs_dir") or DEFAULT_CERTS_DIR)

    services: Dict[ChiaService, ServiceEndpoint] = {}
    for service, spec in SERVICE_TABLE.items():
        svc = services_cfg.get(service.value) or {}
        url = env.get(spec.env_var) or svc.get("url") or spec.default_url
        cert = svc.get("cert")
        key = svc.get("key")
        services[service] = ServiceEndpoint(
            url=url,
            cert_path=Path(cert) if cert else certs_dir / spec.cert_file(),
            key_path=Path(key) if key else certs_dir / spec.key_file(),
        )

    timeout = rpc.get("timeout_sec")
    return ClientConfig(
        services=services,
        timeout_sec=float(timeout) if timeout is not None else DEFAULT_TIMEOUT_SEC,
    )


def get_probe_timeout(config: Optional[Dict[str, Any]] = None) -> float:
    """Farmer reachability probe timeout (seconds)."""
    probe = _section(_merged_config(config or {}), "farmer_probe")
    timeout = probe.get("timeout_sec")
    return float(timeout) if timeout is not None else DEFAULT_TIMEOUT_SEC


def get_server_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return {"host", "port"} for the status server."""
    server = _section(_merged_config(config or {}), "status_server")
    return {
        "host": server.get("host") or DEFAULT_SERVER_HOST,
        "port": int(server.get("port") or DEFAULT_SERVER_PORT),
    }
