"""Reading config and document files.

JSON and YAML are both accepted; the format follows the file extension.
``load_app_config`` caches the result for the default path only, so explicit
paths (tests, ``--config``) always re-read.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
from pathlib import Path
from typing import Any

import yaml

from daypath.core.config.models import AppConfig
from daypath.core.utils.json import read_json
from daypath.core.utils.logging import configure_logging as _install_logging

logger = logging.getLogger(__name__)

_SUFFIX_FORMATS = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}

_DEFAULT_APP_CONFIG_PATH = AppConfig.default_path()
_app_config_cache: AppConfig | None = None


def detect_format(file_path: Path | str) -> str:
    """Map a file extension to "json" or "yaml".

    Raises:
        ValueError: For any other extension

    Example:
        >>> detect_format("curve.json")
        'json'
        >>> detect_format("curve.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()
    try:
        return _SUFFIX_FORMATS[suffix]
    except KeyError:
        raise ValueError(f"Unsupported config format: {suffix}") from None


def _read_json_mapping(path: Path) -> dict[str, Any]:
    try:
        return read_json(path)
    except ValueError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e


def _read_yaml_mapping(path: Path) -> dict[str, Any]:
    try:
        content = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Invalid YAML in {path}: expected a mapping, got {type(content).__name__}")
    return content


_READERS: dict[str, Callable[[Path], dict[str, Any]]] = {
    "json": _read_json_mapping,
    "yaml": _read_yaml_mapping,
}


def load_config(path: str | Path) -> dict[str, Any]:
    """Read a JSON or YAML file whose top level is a mapping.

    Args:
        path: File to read (.json, .yaml, .yml)

    Returns:
        The mapping; an empty YAML file gives {}

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: On an unsupported extension, unparsable content or a
            non-mapping top level
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")
    return _READERS[detect_format(path)](path)


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load application settings, falling back to defaults.

    Args:
        path: Settings file. Defaults to ``daypath.json`` in the working
            directory; a missing file yields ``AppConfig()``.

    Raises:
        ValidationError: If the file content does not match AppConfig
    """
    global _app_config_cache

    path = _DEFAULT_APP_CONFIG_PATH if path is None else Path(path)
    is_default = path == _DEFAULT_APP_CONFIG_PATH
    if is_default and _app_config_cache is not None:
        return _app_config_cache

    if path.exists():
        config = AppConfig.model_validate(load_config(path))
        logger.debug("Loaded app config from %s", path)
    else:
        logger.debug("No app config at %s; using defaults", path)
        config = AppConfig()

    if is_default:
        _app_config_cache = config
    return config


def configure_logging(config: AppConfig | None = None) -> None:
    """Apply ``config.logging`` (or the default app config's) to the root logger."""
    settings = (config or load_app_config()).logging
    _install_logging(
        level=settings.level,
        format_string=settings.format,
        filename=settings.filename,
        structured=settings.structured,
    )
