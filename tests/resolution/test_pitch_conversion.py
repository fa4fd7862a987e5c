from __future__ import annotations

import pytest

from sound_tools.pitch import frequency_to_midi, midi_to_frequency


def test_frequency_to_midi_reference_pitch() -> None:
    assert frequency_to_midi(440) == 57


@pytest.mark.parametrize(
    "frequency, expected",
    [
        (880.0, 69),
        (220.0, 45),
        (261.63, 48),
        (450.0, 57),
        (430.0, 57),
    ],
)
def test_frequency_to_midi_rounds_to_nearest_note(frequency, expected) -> None:
    assert frequency_to_midi(frequency) == expected


@pytest.mark.parametrize("frequency", [0, -440.0])
def test_frequency_to_midi_rejects_non_positive(frequency) -> None:
    with pytest.raises(ValueError):
        frequency_to_midi(frequency)


def test_midi_to_frequency() -> None:
    assert midi_to_frequency(69) == pytest.approx(440.0)
    assert midi_to_frequency(60) == pytest.approx(261.6255653)
    assert midi_to_frequency(81) == pytest.approx(880.0)
    assert midi_to_frequency(69.5) == pytest.approx(440.0 * 2 ** (0.5 / 12))
