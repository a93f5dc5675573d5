"""Tests for config/settings: service resolution, env overrides, defaults."""

from pathlib import Path

from chia_status.config.settings import (
    get_client_config,
    get_probe_timeout,
    get_server_config,
    read_config,
)
from chia_status.rpc.services import SERVICE_TABLE, ChiaService


class TestClientConfig:
    def test_defaults_from_example(self):
        cc = get_client_config({}, environ={})
        assert cc.timeout_sec == 5.0
        assert cc.services[ChiaService.FULL_NODE].url == "https://localhost:8555"
        assert cc.services[ChiaService.FARMER].url == "https://localhost:8559"
        assert set(cc.services) == set(SERVICE_TABLE)

    def test_default_cert_paths(self):
        cc = get_client_config({"rpc": {"certs_dir": "/mnt/secrets"}}, environ={})
        ep = cc.services[ChiaService.FULL_NODE]
        assert ep.cert_path == Path("/mnt/secrets/full_node/private_full_node.crt")
        assert ep.key_path == Path("/mnt/secrets/full_node/private_full_node.key")

    def test_explicit_cert_paths(self):
        cfg = {"services": {"harvester": {"cert": "/a/h.crt", "key": "/a/h.key"}}}
        ep = get_client_config(cfg, environ={}).services[ChiaService.HARVESTER]
        assert ep.cert_path == Path("/a/h.crt")
        assert ep.key_path == Path("/a/h.key")

    def test_env_overrides_yaml(self):
        cfg = {"services": {"farmer": {"url": "https://yaml-host:8559"}}}
        cc = get_client_config(cfg, environ={"CHIA_FARMER_URL": "https://env-host:9000"})
        assert cc.services[ChiaService.FARMER].url == "https://env-host:9000"

    def test_yaml_overrides_default(self):
        cfg = {"services": {"full_node": {"url": "https://node:18555"}}}
        cc = get_client_config(cfg, environ={})
        assert cc.services[ChiaService.FULL_NODE].url == "https://node:18555"

    def test_empty_env_value_falls_back(self):
        cc = get_client_config({}, environ={"CHIA_FULL_NODE_URL": ""})
        assert cc.services[ChiaService.FULL_NODE].url == "https://localhost:8555"

    def test_timeout_override(self):
        assert get_client_config({"rpc": {"timeout_sec": 2}}, environ={}).timeout_sec == 2.0


class TestOtherSections:
    def test_probe_timeout(self):
        assert get_probe_timeout({}) == 5.0
        assert get_probe_timeout({"farmer_probe": {"timeout_sec": 1.5}}) == 1.5

    def test_server_config(self):
        assert get_server_config({}) == {"host": "0.0.0.0", "port": 8765}
        assert get_server_config({"status_server": {"port": "9000"}})["port"] == 9000

    def test_read_config_falls_back_to_example(self, tmp_path: Path):
        config, path = read_config(str(tmp_path / "missing.yaml"))
        assert path.endswith("config.yaml.example")
        assert config["rpc"]["timeout_sec"] == 5.0

    def test_read_config_explicit(self, tmp_path: Path):
        p = tmp_path / "c.yaml"
        p.write_text("status_server:\n  port: 9100\n", encoding="utf-8")
        config, path = read_config(str(p))
        assert path == str(p.resolve())
        assert get_server_config(config)["port"] == 9100
