"""Codec-support oracles answering which sound formats the host can decode."""
from __future__ import annotations

import logging
import shutil
from typing import Callable, Iterable, Mapping, Optional

from app.config import CODEC_MODE_STATIC, CodecSupportConfig
from sound_tools.formats import ALLOWED_EXTENSIONS

logger = logging.getLogger(__name__)

# Decoder executables and the formats each one can read.
_DECODER_TOOLS: tuple[tuple[str, frozenset[str]], ...] = (
    ("ffmpeg", ALLOWED_EXTENSIONS),
    ("mpg123", frozenset({"mp3"})),
    ("oggdec", frozenset({"ogg"})),
    ("faad", frozenset({"m4a", "aac"})),
)
# The standard library ``wave`` module reads these without any external tool.
_BUILTIN_FORMATS = frozenset({"wav"})


class CodecSupport:
    def is_format_supported(self, extension: str) -> bool:  # pragma: no cover - interface only
        raise NotImplementedError

    def __call__(self, extension: str) -> bool:
        return self.is_format_supported(extension)


class StaticCodecSupport(CodecSupport):
    """Fixed capability set, used headless and in tests."""

    def __init__(self, extensions: Iterable[str]) -> None:
        self._extensions = frozenset(extension.lower() for extension in extensions)

    @property
    def extensions(self) -> frozenset[str]:
        return self._extensions

    def is_format_supported(self, extension: str) -> bool:
        return extension.lower() in self._extensions


class ToolCodecSupport(CodecSupport):
    """Probe the host for decoder tools the first time a format is queried."""

    def __init__(
        self,
        which: Callable[[str], Optional[str]] = shutil.which,
        tools: Iterable[tuple[str, frozenset[str]]] = _DECODER_TOOLS,
    ) -> None:
        self._which = which
        self._tools = tuple(tools)
        self._supported: frozenset[str] | None = None
        self._found_tools: dict[str, str] = {}

    @property
    def found_tools(self) -> Mapping[str, str]:
        self._probe()
        return dict(self._found_tools)

    def is_format_supported(self, extension: str) -> bool:
        return extension.lower() in self._probe()

    def _probe(self) -> frozenset[str]:
        if self._supported is not None:
            return self._supported
        supported = set(_BUILTIN_FORMATS)
        for executable, formats in self._tools:
            path = self._which(executable)
            if not path:
                continue
            self._found_tools[executable] = path
            supported.update(formats)
        self._supported = frozenset(supported)
        if self._found_tools:
            logger.debug("Sound decoders found: %s", ", ".join(sorted(self._found_tools)))
        else:
            logger.info("No sound decoder tools found; only %s files are supported", "/".join(sorted(supported)))
        return self._supported


def build_codec_support(config: CodecSupportConfig) -> CodecSupport:
    """Return the oracle selected by ``config``."""
    if config.mode == CODEC_MODE_STATIC:
        return StaticCodecSupport(config.supported)
    return ToolCodecSupport()


__all__ = [
    "CodecSupport",
    "StaticCodecSupport",
    "ToolCodecSupport",
    "build_codec_support",
]
