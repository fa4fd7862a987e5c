"""Global sound helpers exposed to a sketch."""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Sequence

from sound_tools import pitch
from sound_tools.resolver import AssetRequest, CodecOracle, FormatResolver, PathResolution

from .engine import AudioEngine, SoundHandle

logger = logging.getLogger(__name__)


class SoundSketch:
    """Sound helpers bound to one sketch's engine, oracle and format list.

    When the sketch ends, :meth:`remove` runs every helper registered with
    :meth:`register_remove_func`; ``dispose_all_sounds`` is registered by
    default.
    """

    def __init__(
        self,
        engine: AudioEngine,
        is_supported: CodecOracle,
        preferred_formats: Iterable[str] = (),
    ) -> None:
        self.engine = engine
        self._is_supported = is_supported
        self.resolver = FormatResolver(is_supported, preferred_formats)
        self._remove_funcs: list[str] = []
        self._removed = False
        self.register_remove_func("dispose_all_sounds")

    # Volume and sample rate -------------------------------------------------
    def set_master_volume(self, volume: float) -> None:
        self.engine.set_master_volume(volume)

    def get_master_volume(self) -> float:
        return self.engine.get_master_volume()

    def get_sample_rate(self) -> int:
        return self.engine.sample_rate

    # Pitch ------------------------------------------------------------------
    @staticmethod
    def frequency_to_midi(frequency: float) -> int:
        return pitch.frequency_to_midi(frequency)

    @staticmethod
    def midi_to_frequency(midi: float) -> float:
        return pitch.midi_to_frequency(midi)

    # Formats ----------------------------------------------------------------
    def set_preferred_formats(self, *extensions: str) -> None:
        self.resolver.set_preferred_formats(*extensions)

    @property
    def preferred_formats(self) -> tuple[str, ...]:
        return self.resolver.preferred_formats

    def is_file_supported(self, extension: str) -> bool:
        return bool(self._is_supported(extension.lower()))

    def resolve_single_path(self, path: str) -> PathResolution:
        return self.resolver.resolve_single_path(path)

    def resolve_from_candidates(self, paths: Sequence[str]) -> PathResolution:
        return self.resolver.resolve_from_candidates(paths)

    def resolve_path(self, request: AssetRequest) -> str:
        return self.resolver.resolve_path(request)

    # Sounds -----------------------------------------------------------------
    def register_sound(self, sound: SoundHandle) -> None:
        self.engine.register_sound(sound)

    def dispose_all_sounds(self) -> None:
        self.engine.dispose_all_sounds()

    # Lifecycle --------------------------------------------------------------
    def register_remove_func(self, name: str) -> None:
        """Run the helper called ``name`` when the sketch is removed."""
        func: Optional[Callable[[], object]] = getattr(self, name, None)
        if not callable(func):
            raise AttributeError(f"{type(self).__name__} has no helper named {name!r}")
        if name not in self._remove_funcs:
            self._remove_funcs.append(name)

    def remove(self) -> None:
        if self._removed:
            return
        self._removed = True
        for name in self._remove_funcs:
            logger.debug("Running remove function %s", name)
            getattr(self, name)()


__all__ = ["SoundSketch"]
