#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration discovery and loading for chromepdf.

This module handles automatic discovery of configuration files, loading
configs from JSON, TOML or YAML format, reading environment variables, and
merging them with proper priority handling.

Configuration layout
--------------------
Connection settings live at the top level, rendering options in a ``pdf``
table keyed by ``PdfOptions`` field names::

    api_url = "http://localhost:3000"
    request_timeout = 60

    [pdf]
    format = "Letter"
    margin = ["1cm", "2cm"]
    landscape = true

"""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Callable, Dict, Mapping, Optional

import yaml

from chromepdf.constants import (
    CONFIG_FILENAMES,
    ENV_API_KEY,
    ENV_API_URL,
    ENV_CONFIG_PATH,
    ENV_REQUEST_TIMEOUT,
    ENV_USER_AGENT,
    PYPROJECT_TOOL_SECTION,
)
from chromepdf.exceptions import ConfigurationError, ValidationError
from chromepdf.options import ConnectionOptions, PdfOptions

logger = logging.getLogger(__name__)

PDF_SECTION = "pdf"

_ENV_CONNECTION_KEYS = {
    ENV_API_KEY: "api_key",
    ENV_API_URL: "api_url",
    ENV_REQUEST_TIMEOUT: "request_timeout",
    ENV_USER_AGENT: "user_agent",
}


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load [tool.chromepdf] section from pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration dictionary from [tool.chromepdf] section, or empty dict if not found

    Raises
    ------
    ConfigurationError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(
            f"Invalid TOML in pyproject.toml {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Error reading pyproject.toml {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e
        ) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}",
            config_path=str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find configuration file by searching parent directories.

    Walks up the directory tree from start_dir to the filesystem root,
    checking each directory for ``.chromepdf.toml``, ``.chromepdf.yaml``,
    ``.chromepdf.yml``, ``.chromepdf.json`` and finally a ``pyproject.toml``
    with a ``[tool.chromepdf]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigurationError:
                # Invalid pyproject.toml, keep searching
                logger.debug(f"Skipping unreadable {pyproject_path}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file() -> Optional[Path]:
    """Discover configuration file in standard locations.

    Searches parent directories from the cwd up to the filesystem root, then
    falls back to the user's home directory.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents()
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from JSON, TOML, YAML, or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    ConfigurationError
        If the file cannot be read, parsed, or has invalid format

    Examples
    --------
    >>> config = load_config_file(".chromepdf.toml")
    >>> print(config.get("api_url"))
    http://localhost:3000

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))
    if not config_path.is_file():
        raise ConfigurationError(f"Configuration path is not a file: {config_path}", config_path=str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)
    if ext == ".toml":
        return _load_with(config_path, "TOML", _parse_toml)
    if ext in (".yaml", ".yml"):
        return _load_with(config_path, "YAML", _parse_yaml)
    if ext == ".json":
        return _load_with(config_path, "JSON", _parse_json)
    raise ConfigurationError(
        f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", config_path=str(config_path)
    )


def _parse_toml(config_path: Path) -> Any:
    with open(config_path, "rb") as f:
        return tomllib.load(f)


def _parse_yaml(config_path: Path) -> Any:
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _parse_json(config_path: Path) -> Any:
    with open(config_path, "r", encoding="utf-8") as f:
        return json.load(f)


def _load_with(config_path: Path, kind: str, parse: Callable[[Path], Any]) -> Dict[str, Any]:
    """Parse a config file and check that its root is a mapping."""
    try:
        config = parse(config_path)
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Invalid {kind} in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Error reading {kind} config {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    if not isinstance(config, dict):
        raise ConfigurationError(
            f"{kind} config file must contain a mapping at root level, got {type(config).__name__}",
            config_path=str(config_path),
        )
    return config


def load_env_config(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Read connection settings from ``CHROMEPDF_*`` environment variables.

    Parameters
    ----------
    environ : Mapping[str, str], optional
        Environment to read, defaults to ``os.environ``

    Returns
    -------
    dict
        Connection keys for the variables that are set and non-empty

    """
    if environ is None:
        environ = os.environ

    config: Dict[str, Any] = {}
    for env_name, key in _ENV_CONNECTION_KEYS.items():
        value = environ.get(env_name)
        if value:
            config[key] = value
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries with deep merging.

    The override dictionary takes precedence over base for conflicting keys.
    Nested dictionaries are merged recursively, not replaced entirely.

    Examples
    --------
    >>> base = {'pdf': {'format': 'A4'}, 'api_url': 'http://a'}
    >>> override = {'pdf': {'landscape': True}, 'api_url': 'http://b'}
    >>> merge_configs(base, override)
    {'pdf': {'format': 'A4', 'landscape': True}, 'api_url': 'http://b'}

    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def load_config(explicit_path: Optional[str] = None, include_env: bool = True) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Environment variables (``CHROMEPDF_API_KEY``, ``CHROMEPDF_API_URL``, ...)
    2. Explicit config file path
    3. Config file path from ``CHROMEPDF_CONFIG``
    4. Auto-discovered config file

    Only one config file is read: the first of 2-4 that applies.

    Parameters
    ----------
    explicit_path : str, optional
        Explicit config file path
    include_env : bool, default True
        Whether to overlay environment variables

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if nothing was found)

    Raises
    ------
    ConfigurationError
        If a config file is specified but cannot be loaded

    """
    config_path: Optional[Path | str] = explicit_path or os.getenv(ENV_CONFIG_PATH) or discover_config_file()

    config: Dict[str, Any] = {}
    if config_path:
        logger.debug(f"Loading configuration from {config_path}")
        config = load_config_file(config_path)

    if include_env:
        config = merge_configs(config, load_env_config())

    return config


def resolve_options(config: Mapping[str, Any]) -> tuple[ConnectionOptions, PdfOptions]:
    """Split a configuration mapping into connection and rendering options.

    Parameters
    ----------
    config : Mapping[str, Any]
        Loaded configuration

    Returns
    -------
    tuple[ConnectionOptions, PdfOptions]
        Connection settings and rendering options

    Raises
    ------
    ConfigurationError
        If the mapping holds unknown keys or invalid values

    """
    pdf_section = config.get(PDF_SECTION, {})
    if not isinstance(pdf_section, Mapping):
        raise ConfigurationError(f"'{PDF_SECTION}' section must be a table, got {type(pdf_section).__name__}")

    connection_section = {key: value for key, value in config.items() if key != PDF_SECTION}

    try:
        connection = ConnectionOptions.from_dict(connection_section)
        options = PdfOptions.from_dict(pdf_section)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e.message}", original_error=e) from e

    return connection, options
