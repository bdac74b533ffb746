"""Configuration loading and defaults."""

from __future__ import annotations

from dataclasses import dataclass
import copy
from pathlib import Path
from typing import Any, Mapping

from .culture import CultureInfo, get_culture
from .filtering import DEFAULT_TRIM_CHARACTERS

_TOML = None
try:  # pragma: no cover - module availability depends on Python version
    import tomllib as _TOML
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    try:
        import tomli as _TOML
    except ModuleNotFoundError:
        _TOML = None


CONFIG_FILE_NAME = "stringkit.toml"

DEFAULT_CONFIG: dict[str, Any] = {
    "buffers": {
        "max_buffers_per_bucket": 8,
        "max_buffer_length": 1 << 20,
    },
    "text": {
        "culture": "en-US",
        "trim_characters": "".join(sorted(DEFAULT_TRIM_CHARACTERS)),
    },
    "logging": {
        "level": "WARNING",
        "console_level": "WARNING",
        "file": None,
    },
}


@dataclass(frozen=True)
class BufferConfig:
    max_buffers_per_bucket: int
    max_buffer_length: int


@dataclass(frozen=True)
class TextConfig:
    culture: CultureInfo
    trim_characters: frozenset[str]


@dataclass(frozen=True)
class LoggingConfig:
    level: str
    console_level: str
    file: Path | None


@dataclass(frozen=True)
class Config:
    buffers: BufferConfig
    text: TextConfig
    logging: LoggingConfig
    source: Path | None = None


def load_config(config_path: Path | None = None, *, cwd: Path | None = None) -> Config:
    cwd = cwd or Path.cwd()
    source: Path | None = None
    raw: Mapping[str, Any] = {}

    if config_path is None:
        candidate = cwd / CONFIG_FILE_NAME
        if candidate.exists():
            source = candidate
            raw = _read_toml(candidate)
    else:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        source = config_path
        raw = _read_toml(config_path)

    merged = _deep_merge(_clone_defaults(DEFAULT_CONFIG), raw)
    base_dir = source.parent if source is not None else cwd

    buffers_raw = merged.get("buffers", {})
    buffers = BufferConfig(
        max_buffers_per_bucket=int(buffers_raw.get("max_buffers_per_bucket", 8)),
        max_buffer_length=int(buffers_raw.get("max_buffer_length", 1 << 20)),
    )
    if buffers.max_buffers_per_bucket < 0:
        raise ValueError("buffers.max_buffers_per_bucket cannot be negative")
    if buffers.max_buffer_length <= 0:
        raise ValueError("buffers.max_buffer_length must be positive")

    text_raw = merged.get("text", {})
    text = TextConfig(
        culture=get_culture(str(text_raw.get("culture", "en-US"))),
        trim_characters=frozenset(str(text_raw.get("trim_characters", ""))) or DEFAULT_TRIM_CHARACTERS,
    )
    logging = LoggingConfig(
        level=str(merged["logging"]["level"]).upper(),
        console_level=str(merged["logging"]["console_level"]).upper(),
        file=_optional_path(base_dir, merged["logging"].get("file")),
    )
    return Config(buffers=buffers, text=text, logging=logging, source=source)


def config_summary(config: Config) -> str:
    source = str(config.source) if config.source is not None else "defaults"
    return (
        "Config\n"
        f"  source: {source}\n"
        "Buffers\n"
        f"  max_buffers_per_bucket: {config.buffers.max_buffers_per_bucket}\n"
        f"  max_buffer_length: {config.buffers.max_buffer_length}\n"
        "Text\n"
        f"  culture: {config.text.culture.name}\n"
        f"  trim_characters: {''.join(sorted(config.text.trim_characters))!r}\n"
        "Logging\n"
        f"  level: {config.logging.level}\n"
        f"  console level: {config.logging.console_level}\n"
        f"  file: {config.logging.file or 'none'}"
    )


def _read_toml(path: Path) -> Mapping[str, Any]:
    if _TOML is None:  # pragma: no cover
        raise RuntimeError("TOML parser unavailable. Install tomli or use Python 3.11+.")
    with path.open("rb") as handle:
        return _TOML.load(handle)


def _optional_path(base_dir: Path, value: Any) -> Path | None:
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    path = value if isinstance(value, Path) else Path(str(value))
    return path if path.is_absolute() else base_dir / path


def _clone_defaults(defaults: Mapping[str, Any]) -> dict[str, Any]:
    return copy.deepcopy(defaults)


def _deep_merge(base: Mapping[str, Any], updates: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged
