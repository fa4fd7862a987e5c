"""MIDI note and frequency conversions used by sketch helpers."""

from __future__ import annotations

import math

A4_FREQUENCY = 440.0
A4_MIDI = 69
# Offset used when mapping a frequency back to a note number (440 Hz -> 57).
FREQUENCY_TO_MIDI_OFFSET = 57


def frequency_to_midi(frequency: float) -> int:
    """Return the closest MIDI note value for ``frequency`` in Hz.

    Halves round upward so results match the helpers sketches were written
    against.
    """
    if frequency <= 0:
        raise ValueError(f"Frequency must be positive: {frequency}")
    semitones = 12 * math.log2(frequency / A4_FREQUENCY)
    return int(math.floor(semitones + 0.5)) + FREQUENCY_TO_MIDI_OFFSET


def midi_to_frequency(midi: float) -> float:
    """Return the frequency of a MIDI note (middle C is 60)."""
    return A4_FREQUENCY * (2 ** ((midi - A4_MIDI) / 12.0))


__all__ = ["A4_FREQUENCY", "A4_MIDI", "frequency_to_midi", "midi_to_frequency"]
