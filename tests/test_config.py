"""Tests for configuration loading."""

import json

import pytest

from bpmnsense.config import BridgeConfig, config_path, load_config, write_default_config
from bpmnsense.constants import DEFAULT_EXECUTABLE, ENV_EXECUTABLE
from bpmnsense.types.errors import ConfigurationError, ErrorCode


@pytest.fixture(autouse=True)
def _no_env_override(monkeypatch):
    monkeypatch.delenv(ENV_EXECUTABLE, raising=False)


def _write(root, data):
    path = config_path(root)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data) if not isinstance(data, str) else data)
    return path


class TestLoadConfig:
    """Tests for load_config()."""

    def test_defaults(self):
        config = load_config()
        assert config == BridgeConfig()
        assert config.executable_path == DEFAULT_EXECUTABLE
        assert config.timeout == 10.0
        assert config.language_id == "bpmn"

    def test_missing_file_uses_defaults(self, tmp_path):
        assert load_config(tmp_path) == BridgeConfig()

    def test_file_values(self, tmp_path):
        _write(tmp_path, {"executablePath": "/opt/bpmncode/bin/bpmncode", "timeout": 4, "changeDelay": 0.25})
        config = load_config(tmp_path)
        assert config.executable_path == "/opt/bpmncode/bin/bpmncode"
        assert config.timeout == 4.0
        assert config.change_delay == 0.25

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        _write(tmp_path, {"executablePath": "from-file"})
        monkeypatch.setenv(ENV_EXECUTABLE, "from-env")
        assert load_config(tmp_path).executable_path == "from-env"

    def test_unknown_keys_ignored(self, tmp_path):
        _write(tmp_path, {"executablePath": "x", "colour": "blue"})
        assert load_config(tmp_path).executable_path == "x"

    def test_invalid_json(self, tmp_path):
        _write(tmp_path, "{not json")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(tmp_path)
        assert exc_info.value.code == ErrorCode.INVALID_CONFIG

    def test_not_an_object(self, tmp_path):
        _write(tmp_path, [1, 2])
        with pytest.raises(ConfigurationError, match="Expected a JSON object"):
            load_config(tmp_path)

    def test_bad_executable(self, tmp_path):
        _write(tmp_path, {"executablePath": ""})
        with pytest.raises(ConfigurationError, match="executablePath"):
            load_config(tmp_path)

    def test_bad_timeout(self, tmp_path):
        _write(tmp_path, {"timeout": "soon"})
        with pytest.raises(ConfigurationError, match="timeout"):
            load_config(tmp_path)


class TestWriteDefaultConfig:
    """Tests for write_default_config()."""

    def test_creates_file(self, tmp_path):
        path = write_default_config(tmp_path)
        data = json.loads(path.read_text())
        assert data == {"executablePath": "bpmncode", "timeout": 10.0, "changeDelay": 1.0}

    def test_round_trips_through_loader(self, tmp_path):
        write_default_config(tmp_path)
        assert load_config(tmp_path) == BridgeConfig()

    def test_keeps_existing_without_force(self, tmp_path):
        _write(tmp_path, {"executablePath": "custom"})
        write_default_config(tmp_path)
        assert load_config(tmp_path).executable_path == "custom"

    def test_force_overwrites(self, tmp_path):
        _write(tmp_path, {"executablePath": "custom"})
        write_default_config(tmp_path, force=True)
        assert load_config(tmp_path).executable_path == DEFAULT_EXECUTABLE
