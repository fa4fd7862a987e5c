"""Sound helper configuration loaded from JSON resources."""

from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import resources
from math import isfinite
from pathlib import Path
from typing import Any, Mapping

from shared.logging_config import LogVerbosity
from sound_tools.formats import dedupe_formats, is_allowed_format

_CONFIG_RESOURCE = "sound.json"
_SOUND_CONFIG_CACHE: SoundConfig | None = None

_DEFAULT_SAMPLE_RATE = 44100
_DEFAULT_MASTER_VOLUME = 1.0
_DEFAULT_STATIC_FORMATS: tuple[str, ...] = ("wav",)
_DEFAULT_LOG_VERBOSITY = LogVerbosity.WARNING

CODEC_MODE_PROBE = "probe"
CODEC_MODE_STATIC = "static"
_CODEC_MODES = frozenset({CODEC_MODE_PROBE, CODEC_MODE_STATIC})


@dataclass(frozen=True)
class EngineConfig:
    """Initial state of the shared audio output."""

    sample_rate: int
    master_volume: float


@dataclass(frozen=True)
class CodecSupportConfig:
    """How the codec-support oracle is chosen."""

    mode: str
    supported: tuple[str, ...]


@dataclass(frozen=True)
class FormatsConfig:
    preferred: tuple[str, ...]
    codec_support: CodecSupportConfig


@dataclass(frozen=True)
class LoggingConfig:
    """Minimum severity written to the sound log file."""

    verbosity: LogVerbosity


@dataclass(frozen=True)
class SoundConfig:
    """Structured configuration values for the sound helpers."""

    engine: EngineConfig
    formats: FormatsConfig
    logging: LoggingConfig


def get_sound_config() -> SoundConfig:
    """Return the cached sound configuration."""

    global _SOUND_CONFIG_CACHE
    if _SOUND_CONFIG_CACHE is None:
        _SOUND_CONFIG_CACHE = load_sound_config()
    return _SOUND_CONFIG_CACHE


def reset_sound_config_cache() -> None:
    """Reset the cached configuration for subsequent reloads."""

    global _SOUND_CONFIG_CACHE
    _SOUND_CONFIG_CACHE = None


def load_sound_config(path: str | Path | None = None) -> SoundConfig:
    """Load configuration from ``path`` or the bundled JSON resource."""

    data = _read_config_data(path)
    engine = _parse_engine_section(data.get("engine"))
    formats = _parse_formats_section(data.get("formats"))
    logging_section = _parse_logging_section(data.get("logging"))
    return SoundConfig(engine=engine, formats=formats, logging=logging_section)


def _read_config_data(path: str | Path | None) -> Mapping[str, Any]:
    if path is not None:
        return _load_json_from_path(Path(path).expanduser())
    return _load_default_config_data()


def _load_json_from_path(path: Path) -> Mapping[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError:
        return {}
    return _parse_json(raw)


def _load_default_config_data() -> Mapping[str, Any]:
    try:
        resource = resources.files(__package__).joinpath(_CONFIG_RESOURCE)
        raw = resource.read_text(encoding="utf-8")
    except (FileNotFoundError, OSError):
        return {}
    return _parse_json(raw)


def _parse_json(raw: str) -> Mapping[str, Any]:
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        return {}
    if isinstance(parsed, Mapping):
        return parsed
    return {}


def _parse_engine_section(section: Any) -> EngineConfig:
    if not isinstance(section, Mapping):
        return EngineConfig(sample_rate=_DEFAULT_SAMPLE_RATE, master_volume=_DEFAULT_MASTER_VOLUME)
    sample_rate = _coerce_positive_int(section.get("sample_rate"), default=_DEFAULT_SAMPLE_RATE)
    volume = _coerce_volume(section.get("master_volume"), default=_DEFAULT_MASTER_VOLUME)
    return EngineConfig(sample_rate=sample_rate, master_volume=volume)


def _parse_formats_section(section: Any) -> FormatsConfig:
    if not isinstance(section, Mapping):
        return FormatsConfig(preferred=(), codec_support=_parse_codec_support(None))
    preferred = _coerce_format_list(section.get("preferred"), default=())
    codec_support = _parse_codec_support(section.get("codec_support"))
    return FormatsConfig(preferred=preferred, codec_support=codec_support)


def _parse_logging_section(section: Any) -> LoggingConfig:
    if not isinstance(section, Mapping):
        return LoggingConfig(verbosity=_DEFAULT_LOG_VERBOSITY)
    value = section.get("verbosity")
    try:
        verbosity = LogVerbosity(value.strip().lower()) if isinstance(value, str) else _DEFAULT_LOG_VERBOSITY
    except ValueError:
        verbosity = _DEFAULT_LOG_VERBOSITY
    return LoggingConfig(verbosity=verbosity)


def _parse_codec_support(section: Any) -> CodecSupportConfig:
    if not isinstance(section, Mapping):
        return CodecSupportConfig(mode=CODEC_MODE_PROBE, supported=_DEFAULT_STATIC_FORMATS)
    mode = section.get("mode")
    if not isinstance(mode, str) or mode.strip().lower() not in _CODEC_MODES:
        mode = CODEC_MODE_PROBE
    else:
        mode = mode.strip().lower()
    supported = _coerce_format_list(section.get("supported"), default=_DEFAULT_STATIC_FORMATS)
    return CodecSupportConfig(mode=mode, supported=supported)


def _coerce_format_list(value: Any, *, default: tuple[str, ...]) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        return default
    formats = [
        item.strip().lower()
        for item in value
        if isinstance(item, str) and is_allowed_format(item.strip())
    ]
    return tuple(dedupe_formats(formats))


def _coerce_finite_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, (int, float)):
        return None
    try:
        candidate = float(value)
    except (ValueError, OverflowError):
        return None
    if not isfinite(candidate):
        return None
    return candidate


def _coerce_positive_int(value: Any, *, default: int) -> int:
    candidate = _coerce_finite_float(value)
    if candidate is None or int(candidate) <= 0:
        return default
    return int(candidate)


def _coerce_volume(value: Any, *, default: float) -> float:
    candidate = _coerce_finite_float(value)
    if candidate is None or candidate < 0:
        return default
    return candidate


__all__ = [
    "CODEC_MODE_PROBE",
    "CODEC_MODE_STATIC",
    "CodecSupportConfig",
    "EngineConfig",
    "FormatsConfig",
    "LoggingConfig",
    "SoundConfig",
    "get_sound_config",
    "load_sound_config",
    "reset_sound_config_cache",
]
