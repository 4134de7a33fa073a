"""Configuration helpers for the client manager command line."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .repository import DEFAULT_DATA_FILE

LOGGER = logging.getLogger(__name__)

DATA_FILE_ENV_VAR = "CLIENT_MANAGER_DATA_FILE"

_SUPPORTED_EXTENSIONS = {".json", ".yaml", ".yml"}


class ConfigurationError(RuntimeError):
    """Raised when configuration files are missing or malformed."""


@dataclass(frozen=True)
class Settings:
    """Runtime settings resolved from the config file and environment."""

    data_file: Path = DEFAULT_DATA_FILE


def load_configuration(path: Union[str, Path]) -> Dict[str, Any]:
    """Load configuration data from a JSON or YAML file."""

    file_path = Path(path)
    if not file_path.exists():
        raise ConfigurationError(f"Configuration file '{file_path}' was not found")

    if file_path.suffix.lower() not in _SUPPORTED_EXTENSIONS:
        raise ConfigurationError(
            f"Unsupported configuration format '{file_path.suffix}'. Supported extensions: {sorted(_SUPPORTED_EXTENSIONS)}"
        )

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Configuration file '{file_path}' could not be read: {exc}") from exc

    if file_path.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Configuration file '{file_path}' is not valid JSON: {exc}") from exc
    else:
        import yaml

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Configuration file '{file_path}' is not valid YAML: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file '{file_path}' must contain a mapping")
    return data


def resolve_settings(
    config_path: Optional[Union[str, Path]] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Combine the config file, environment and defaults into :class:`Settings`.

    A ``data_file`` from the config file wins over ``CLIENT_MANAGER_DATA_FILE``;
    relative paths in the config file resolve against the file's directory.
    """

    environ = os.environ if environ is None else environ

    if config_path is not None:
        config = load_configuration(config_path)
        data_file = config.get("data_file")
        if data_file:
            resolved = Path(config_path).parent / Path(str(data_file)).expanduser()
            LOGGER.debug("Using data file %s from %s", resolved, config_path)
            return Settings(data_file=resolved)

    env_value = environ.get(DATA_FILE_ENV_VAR)
    if env_value:
        LOGGER.debug("Using data file %s from %s", env_value, DATA_FILE_ENV_VAR)
        return Settings(data_file=Path(env_value).expanduser())

    return Settings()


__all__ = [
    "ConfigurationError",
    "DATA_FILE_ENV_VAR",
    "Settings",
    "load_configuration",
    "resolve_settings",
]
