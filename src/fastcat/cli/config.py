#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file loading for the fastcat CLI.

A configuration file holds :class:`~fastcat.options.RenderOptions` field names
and values, for example::

    # .fastcat.toml
    theme_enabled = true
    max_table_rows = 200

The same keys may live in the ``[tool.fastcat]`` table of a ``pyproject.toml``
or in a YAML or JSON mapping.
"""

import argparse
import json
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict

import yaml


def _load_pyproject_fastcat_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.fastcat]`` section from a pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration dictionary from ``[tool.fastcat]``, or empty dict if absent

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    data = _read_toml(pyproject_path)
    config = data.get("tool", {}).get("fastcat", {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.fastcat] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def _read_toml(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    """Load configuration from a JSON file holding a single object."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"JSON config file must contain an object, got {type(config).__name__}")
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """Load configuration from a YAML file holding a mapping.

    An empty YAML document is an empty configuration.
    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"YAML config file must contain a mapping, got {type(config).__name__}")
    return config


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    The format is chosen from the file name:

    - ``pyproject.toml``: the ``[tool.fastcat]`` table
    - ``.toml``: the whole document
    - ``.yaml`` / ``.yml``: a YAML mapping
    - ``.json``: a JSON object

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
    argparse.ArgumentTypeError
        If the file is missing, unreadable, malformed or of an unsupported type

    Examples
    --------
    >>> config = load_config_file(".fastcat.toml")
    >>> config.get("theme_enabled")
    True

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    try:
        if filename == "pyproject.toml":
            return _load_pyproject_fastcat_section(config_path)
        elif ext == ".toml":
            return _read_toml(config_path)
        elif ext in (".yaml", ".yml"):
            return _load_yaml_config(config_path)
        elif ext == ".json":
            return _load_json_config(config_path)
        else:
            raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
    except (OSError, UnicodeDecodeError) as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e
