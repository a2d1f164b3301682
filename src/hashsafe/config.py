"""Configuration handling."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

try:
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - Python < 3.11
    import tomli as tomllib

from hashsafe.constants import CHUNK_SIZE

THEMES = ("dark", "light")


@dataclass(frozen=True)
class HashConfig:
    chunk_size: int = CHUNK_SIZE  # Bytes per read


@dataclass(frozen=True)
class GuiConfig:
    theme: str = "dark"  # dark or light
    poll_interval_ms: int = 100  # How often the panel checks for a result
    width: int = 450
    height: int = 580
    min_width: int = 400
    min_height: int = 500


@dataclass(frozen=True)
class HashSafeConfig:
    hash: HashConfig = HashConfig()
    gui: GuiConfig = GuiConfig()


DEFAULT_CONFIG_PATH = Path("hashsafe.toml")


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _config_to_dict(config: HashSafeConfig) -> Dict[str, Any]:
    return {
        "hash": config.hash.__dict__,
        "gui": config.gui.__dict__,
    }


def _check_keys(section: str, cls: type, values: Any) -> None:
    if not isinstance(values, dict):
        raise ValueError(f"[{section}] must be a table")
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"unknown key(s) in [{section}]: {', '.join(unknown)}")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate(config: HashSafeConfig) -> None:
    if not _is_int(config.hash.chunk_size):
        raise ValueError("hash.chunk_size must be an integer")
    for name in ("poll_interval_ms", "width", "height", "min_width", "min_height"):
        if not _is_int(getattr(config.gui, name)):
            raise ValueError(f"gui.{name} must be an integer")
    if not isinstance(config.gui.theme, str):
        raise ValueError("gui.theme must be a string")
    if config.hash.chunk_size < 1:
        raise ValueError("hash.chunk_size must be at least 1")
    if config.gui.theme not in THEMES:
        raise ValueError(f"gui.theme must be one of {', '.join(THEMES)}")
    if config.gui.poll_interval_ms < 1:
        raise ValueError("gui.poll_interval_ms must be at least 1")


def load_config(path: Optional[Path] = None) -> HashSafeConfig:
    path = path or DEFAULT_CONFIG_PATH
    base = _config_to_dict(HashSafeConfig())
    if path.exists():
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ValueError(f"cannot read {path}: {e.strerror or e}") from e
        data = tomllib.loads(text)
        unknown = sorted(set(data) - set(base))
        if unknown:
            raise ValueError(f"unknown section(s): {', '.join(unknown)}")
        merged = _deep_merge(base, data)
    else:
        merged = base
    _check_keys("hash", HashConfig, merged["hash"])
    _check_keys("gui", GuiConfig, merged["gui"])
    config = HashSafeConfig(
        hash=HashConfig(**merged["hash"]),
        gui=GuiConfig(**merged["gui"]),
    )
    _validate(config)
    return config
