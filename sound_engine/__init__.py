"""Host-facing sound helpers for sketches."""
from __future__ import annotations

import logging

from app.config import SoundConfig, get_sound_config
from shared.logging_config import ensure_sound_logging

from .capabilities import CodecSupport, StaticCodecSupport, ToolCodecSupport, build_codec_support
from .engine import AudioEngine, OutputGain, SoundHandle
from .sketch import SoundSketch

logger = logging.getLogger(__name__)


def build_sound_sketch(config: SoundConfig | None = None) -> SoundSketch:
    """Return a sketch wired up from ``config`` (the bundled defaults when omitted)."""
    if config is None:
        config = get_sound_config()
    ensure_sound_logging(config.logging.verbosity)
    engine = AudioEngine(
        sample_rate=config.engine.sample_rate,
        master_volume=config.engine.master_volume,
    )
    oracle = build_codec_support(config.formats.codec_support)
    logger.debug(
        "Sound sketch ready (sample_rate=%s, oracle=%s)",
        engine.sample_rate,
        type(oracle).__name__,
    )
    return SoundSketch(engine, oracle, config.formats.preferred)


__all__ = [
    "AudioEngine",
    "CodecSupport",
    "OutputGain",
    "SoundHandle",
    "SoundSketch",
    "StaticCodecSupport",
    "ToolCodecSupport",
    "build_codec_support",
    "build_sound_sketch",
]
