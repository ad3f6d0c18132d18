"""Bridge configuration.

Settings are resolved in three layers: built-in defaults, the project's
``.bpmnsense/config.json``, then environment overrides.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any

from bpmnsense.constants import (
    CHANGE_DELAY_SECONDS,
    CHECK_TIMEOUT_SECONDS,
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_EXECUTABLE,
    ENV_EXECUTABLE,
    LANGUAGE_ID,
)
from bpmnsense.types.errors import ConfigurationError, ErrorContext, RecoveryAction
from bpmnsense.utils.logger import logger

# config.json key -> BridgeConfig field
_FILE_KEYS: dict[str, str] = {
    "executablePath": "executable_path",
    "timeout": "timeout",
    "changeDelay": "change_delay",
}


@dataclass(frozen=True)
class BridgeConfig:
    """Runtime settings for the diagnostics bridge."""

    executable_path: str = DEFAULT_EXECUTABLE
    timeout: float = CHECK_TIMEOUT_SECONDS
    change_delay: float = CHANGE_DELAY_SECONDS
    language_id: str = LANGUAGE_ID

    def with_executable(self, executable_path: str) -> BridgeConfig:
        return replace(self, executable_path=executable_path)

    def to_file_dict(self) -> dict[str, Any]:
        """Serialize to the on-disk ``config.json`` shape."""
        values = asdict(self)
        return {key: values[attr] for key, attr in _FILE_KEYS.items()}


def config_path(project_root: str | Path) -> Path:
    return Path(project_root) / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in {path}: {e}",
            user_message="BPMNSense config file is not valid JSON.",
            context=ErrorContext(operation="load_config", file_path=str(path)),
            recovery_actions=[RecoveryAction("Fix or delete the config file", command=f"bpmnsense init --force {path.parent.parent}")],
            original_error=e,
        ) from e
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Expected a JSON object in {path}, got {type(data).__name__}",
            user_message="BPMNSense config file must contain a JSON object.",
            context=ErrorContext(operation="load_config", file_path=str(path)),
        )
    return data


def _coerce(attr: str, value: Any, path: Path) -> Any:
    if attr == "executable_path":
        if not isinstance(value, str) or not value.strip():
            raise ConfigurationError(
                f"executablePath must be a non-empty string in {path}",
                context=ErrorContext(operation="load_config", file_path=str(path)),
            )
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        raise ConfigurationError(
            f"{attr} must be a non-negative number in {path}",
            context=ErrorContext(operation="load_config", file_path=str(path)),
        )
    return float(value)


def load_config(project_root: str | Path | None = None) -> BridgeConfig:
    """Resolve the bridge configuration for a project.

    Args:
        project_root: Directory that may contain ``.bpmnsense/config.json``.
            When None, only defaults and the environment are used.

    Raises:
        ConfigurationError: If the config file exists but is malformed.
    """
    config = BridgeConfig()

    if project_root is not None:
        path = config_path(project_root)
        if path.is_file():
            data = _read_config_file(path)
            overrides = {
                attr: _coerce(attr, data[key], path)
                for key, attr in _FILE_KEYS.items()
                if key in data
            }
            unknown = sorted(set(data) - set(_FILE_KEYS))
            if unknown:
                logger.warning("Ignoring unknown config keys in {}: {}", path, unknown)
            config = replace(config, **overrides)

    env_executable = os.environ.get(ENV_EXECUTABLE, "").strip()
    if env_executable:
        config = config.with_executable(env_executable)

    return config


def write_default_config(project_root: str | Path, force: bool = False) -> Path:
    """Write a default ``config.json`` under the project root.

    Returns:
        Path of the config file. An existing file is left untouched unless
        ``force`` is set.
    """
    path = config_path(project_root)
    if path.exists() and not force:
        return path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(BridgeConfig().to_file_dict(), indent=2) + "\n", encoding="utf-8")
    return path
