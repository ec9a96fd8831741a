"""
Unit tests for configuration loading and parsing.
"""

import pytest

from devbridge.adapters.config.loader import ConfigLoader
from devbridge.adapters.config.deploy_parser import (
    parse_transport_config,
    parse_push_configs,
)
from devbridge.core.exceptions import ConfigError
from devbridge.domain.deploy import DeploymentRequest

CONFIG_TOML = """
[transport]
kind = "sdb"
serial = "emulator-26101"
timeout = 30

[[push]]
src = "build/*.wgt"
dest = "/home/developer"
overwrite = true
chmod = "+x"

[[push]]
src = "scripts/run.sh"
dest = "/home/developer/bin"
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "devbridge.toml"
    path.write_text(CONFIG_TOML)
    return path


@pytest.fixture
def clean_env(monkeypatch):
    for name in ConfigLoader.ENV_MAPPINGS:
        monkeypatch.delenv("DEVBRIDGE_" + name, raising=False)
    return monkeypatch


class TestConfigLoader:

    def test_load_toml(self, config_file, clean_env):
        cfg = ConfigLoader().load(toml_path=config_file)

        assert cfg["transport"]["serial"] == "emulator-26101"
        assert len(cfg["push"]) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            ConfigLoader().load_toml(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "broken.toml"
        path.write_text("[transport\nkind = ")

        with pytest.raises(ConfigError, match="Failed to parse"):
            ConfigLoader().load_toml(path)

    def test_cli_overrides_toml_and_ignores_none(self, config_file, clean_env):
        cfg = ConfigLoader().load(
            toml_path=config_file,
            cli_overrides={"transport": {"serial": "device-2", "kind": None}},
        )

        assert cfg["transport"]["serial"] == "device-2"
        assert cfg["transport"]["kind"] == "sdb"
        assert cfg["transport"]["timeout"] == 30

    def test_env_overrides_cli(self, config_file, clean_env):
        clean_env.setenv("DEVBRIDGE_SERIAL", "from-env")
        clean_env.setenv("DEVBRIDGE_PORT", "2222")

        cfg = ConfigLoader().load(
            toml_path=config_file,
            cli_overrides={"transport": {"serial": "device-2"}},
        )

        assert cfg["transport"]["serial"] == "from-env"
        assert cfg["transport"]["port"] == 2222

    def test_numeric_serial_stays_string(self, clean_env):
        clean_env.setenv("DEVBRIDGE_SERIAL", "0123456789")

        assert ConfigLoader().load_env() == {"transport": {"serial": "0123456789"}}


class TestParseTransportConfig:

    def test_defaults(self):
        settings = parse_transport_config({})

        assert settings.kind == "sdb"
        assert settings.executable == "sdb"
        assert settings.serial is None

    def test_values(self):
        settings = parse_transport_config(
            {"transport": {"kind": "ssh", "host": "device.local", "user": "developer", "port": "2222"}}
        )

        assert settings.kind == "ssh"
        assert settings.port == 2222

    def test_unknown_option(self):
        with pytest.raises(ConfigError, match="Unknown transport option"):
            parse_transport_config({"transport": {"baud": 115200}})

    def test_unknown_kind(self):
        with pytest.raises(ConfigError, match="Unknown transport"):
            parse_transport_config({"transport": {"kind": "jtag"}})

    def test_invalid_port(self):
        with pytest.raises(ConfigError, match="port"):
            parse_transport_config({"transport": {"port": "ssh"}})


class TestParsePushConfigs:

    def test_requests_in_file_order(self, config_file, clean_env):
        cfg = ConfigLoader().load(toml_path=config_file)

        assert parse_push_configs(cfg) == [
            DeploymentRequest("build/*.wgt", "/home/developer", overwrite=True, chmod="+x"),
            DeploymentRequest("scripts/run.sh", "/home/developer/bin", overwrite=False, chmod=None),
        ]

    def test_no_push_entries(self):
        assert parse_push_configs({}) == []

    def test_single_table(self):
        cfg = {"push": {"src": "a/*", "dest": "/a"}}

        assert parse_push_configs(cfg) == [DeploymentRequest("a/*", "/a")]

    def test_missing_keys(self):
        with pytest.raises(ConfigError, match="dest"):
            parse_push_configs({"push": [{"src": "a/*"}]})
