"""Load RouterConfig from memroute.yaml if present.

Merges file config with keyword overrides. Overrides take precedence.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from memroute._errors import ConfigError
from memroute.config import RouterConfig

_CONFIG_KEYS = frozenset(
    {"initial_history", "initial_position", "single_route", "starting_route", "routes"}
)


def load_config(root: Path, **overrides: object) -> RouterConfig:
    """Load RouterConfig from root, optionally merging memroute.yaml.

    Looks for memroute.yaml, memroute.yml, or memroute.toml in root. If
    found, loads and merges with overrides. Overrides take precedence.

    Raises:
        ConfigError: The file cannot be parsed or holds unknown keys.

    """
    file_config = _read_memroute_config(root)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}
    unknown = sorted(set(merged) - _CONFIG_KEYS)
    if unknown:
        msg = f"Unknown router config keys: {', '.join(unknown)}"
        raise ConfigError(msg)
    return RouterConfig(**merged)  # type: ignore[arg-type]


def _read_memroute_config(root: Path) -> dict[str, object]:
    """Read router config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("memroute.yaml", "memroute.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "memroute.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read {path}: {exc}"
        raise ConfigError(msg) from exc


def _parse_yaml(path: Path) -> dict[str, object]:
    text = _read_text(path)
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        msg = f"Invalid YAML in {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping, got {type(data).__name__}"
        raise ConfigError(msg)
    return _flatten_memroute_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    text = _read_text(path)
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_memroute_section(data)


def _flatten_memroute_section(data: dict[str, object]) -> dict[str, object]:
    """Extract memroute.* keys into top-level config."""
    result: dict[str, object] = {}
    section = data.get("memroute")
    if isinstance(section, dict):
        result.update(section)
    for k, v in data.items():
        if k != "memroute" and k in _CONFIG_KEYS:
            result[k] = v
    return result
