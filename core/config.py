"""
Configuration loading for Explorer.

Settings live in an optional YAML file. A missing or unreadable file means
defaults; the explorer never writes the file back.
"""

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_MAX_DEPTH: Optional[int] = None
DEFAULT_AUDIT_LOG = "data/audit_log.jsonl"


def _default_config() -> Dict[str, Any]:
    """Return default configuration."""
    return {
        "display": {
            "time_format": DEFAULT_TIME_FORMAT,
        },
        "search": {
            "max_depth": DEFAULT_MAX_DEPTH,
        },
        "audit": {
            "enabled": False,
            "log_path": DEFAULT_AUDIT_LOG,
        },
    }


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` into a copy of ``base``, one level of sections deep."""
    merged = copy.deepcopy(base)
    for section, values in override.items():
        # Unknown or malformed sections are ignored
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section].update(values)
    return merged


@dataclass
class ExplorerConfig:
    """Resolved explorer settings."""
    time_format: str = DEFAULT_TIME_FORMAT
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH
    audit_enabled: bool = False
    audit_log_path: str = DEFAULT_AUDIT_LOG

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExplorerConfig":
        """Build a config from a (possibly partial) settings mapping."""
        merged = _merge(_default_config(), data)

        max_depth = merged["search"].get("max_depth")
        if max_depth is not None:
            try:
                max_depth = int(max_depth)
            except (TypeError, ValueError):
                raise ValueError(f"search.max_depth must be an integer, got {max_depth!r}")
            if max_depth < 1:
                raise ValueError(f"search.max_depth must be positive, got {max_depth}")

        return cls(
            time_format=str(merged["display"].get("time_format") or DEFAULT_TIME_FORMAT),
            max_depth=max_depth,
            audit_enabled=bool(merged["audit"].get("enabled", False)),
            audit_log_path=str(merged["audit"].get("log_path") or DEFAULT_AUDIT_LOG),
        )


def load_config(config_path: str = "config.yaml") -> ExplorerConfig:
    """
    Load configuration from a YAML file.

    The settings may sit under an ``explorer:`` root key or at the top level.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        ExplorerConfig with file values layered over the defaults
    """
    path = Path(config_path)
    if not path.exists():
        return ExplorerConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return ExplorerConfig()

    if not isinstance(data, dict):
        return ExplorerConfig()

    section = data.get("explorer", data)
    if not isinstance(section, dict):
        return ExplorerConfig()

    return ExplorerConfig.from_dict(section)
