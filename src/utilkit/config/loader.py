"""
Configuration loading utilities.

Parses YAML configuration files into the typed Pydantic models of
:mod:`utilkit.config.schema`. Supports environment-specific overrides and
environment variable interpolation.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from yaml.loader import SafeLoader

from utilkit.utils.env import selected_environment

from .schema import ToolkitConfig

LOGGER = logging.getLogger(__name__)


def _merge_sections(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``base`` with ``override`` merged in, section by section."""

    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _merge_sections(current, value)
        else:
            merged[key] = value
    return merged


def _read_document(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        document = yaml.load(handle, Loader=SafeLoader)
    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level.")
    return document


def _is_path_key(key: str) -> bool:
    return key.endswith("_path") or key.endswith("_dir")


def _expand_values(section: Dict[str, Any], base_dir: Path) -> Dict[str, Any]:
    """
    Expand ``${VAR}`` references in string values of ``section``.

    Values under ``*_dir``/``*_path`` keys become paths, resolved against
    ``base_dir`` when relative.
    """

    expanded: Dict[str, Any] = {}
    for key, value in section.items():
        if isinstance(value, dict):
            expanded[key] = _expand_values(value, base_dir)
        elif isinstance(value, str):
            text = os.path.expandvars(value)
            if _is_path_key(key):
                location = Path(text).expanduser()
                text = str(location if location.is_absolute() else (base_dir / location).resolve())
            expanded[key] = text
        else:
            expanded[key] = value
    return expanded


def load_config(
    path: Path | str,
    environment: Optional[str] = None,
) -> ToolkitConfig:
    """
    Load the toolkit configuration.

    Parameters
    ----------
    path:
        Path to the YAML configuration file.
    environment:
        Optional environment name (e.g., ``local``, ``ci``). When provided, or
        selected through ``UTILKIT_ENV``, the section
        ``environments.<name>`` is merged on top of the base configuration.
    """

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found at {config_path}")

    raw_config = _read_document(config_path)
    env_name = environment or selected_environment(raw_config.get("environment", "local"))

    base_cfg = raw_config.get("base", raw_config)
    environments = raw_config.get("environments", {})
    selected_env = environments.get(env_name, {})
    if environments and not selected_env:
        LOGGER.debug("No overrides for environment %s in %s", env_name, config_path)

    merged = _merge_sections(base_cfg, selected_env)
    merged.pop("environments", None)
    merged["environment"] = env_name

    merged = _expand_values(merged, config_path.parent)

    return ToolkitConfig.model_validate(merged)


__all__ = ["load_config"]
