"""Shared audio output state: master gain, sample rate and the sound registry."""
from __future__ import annotations

import logging
from typing import Iterable, Protocol

logger = logging.getLogger(__name__)


class SoundHandle(Protocol):
    """Anything a sketch creates that must be released when it ends."""

    def dispose(self) -> None:
        ...


class OutputGain:
    """Linear gain of the single output node every sound passes through."""

    def __init__(self, value: float = 1.0) -> None:
        self.value = value


class AudioEngine:
    """Host audio state shared by all sound objects in a sketch.

    All sounds route through :attr:`output` before reaching the speakers, so
    changing its gain changes the volume of everything.  Values above 1.0 are
    passed through untouched and may clip downstream.
    """

    def __init__(
        self,
        sample_rate: int = 44100,
        master_volume: float = 1.0,
        sounds: Iterable[SoundHandle] = (),
    ) -> None:
        self._sample_rate = int(sample_rate)
        self.output = OutputGain(master_volume)
        self.sounds: list[SoundHandle] = list(sounds)

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    def set_master_volume(self, volume: float) -> None:
        self.output.value = volume

    def get_master_volume(self) -> float:
        return self.output.value

    def register_sound(self, sound: SoundHandle) -> None:
        self.sounds.append(sound)

    def unregister_sound(self, sound: SoundHandle) -> None:
        try:
            self.sounds.remove(sound)
        except ValueError:
            logger.debug("Sound %r was not registered", sound)

    def dispose_all_sounds(self) -> None:
        """Dispose every registered sound without clearing the registry.

        Iterates over a snapshot: sounds that unregister themselves while
        disposing do not cause their neighbours to be skipped.
        """
        for sound in list(self.sounds):
            try:
                sound.dispose()
            except Exception:
                logger.warning("Failed disposing sound %r", sound, exc_info=True)


__all__ = ["AudioEngine", "OutputGain", "SoundHandle"]
