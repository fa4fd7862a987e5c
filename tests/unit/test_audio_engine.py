from __future__ import annotations

import logging

from sound_engine import AudioEngine
from tests.helpers import DisposableSound, FailingSound


def test_master_volume_is_written_through_unclamped() -> None:
    engine = AudioEngine()
    assert engine.get_master_volume() == 1.0

    engine.set_master_volume(0.25)
    assert engine.output.value == 0.25

    engine.set_master_volume(1.8)
    assert engine.get_master_volume() == 1.8


def test_sample_rate_comes_from_construction() -> None:
    engine = AudioEngine(sample_rate=48000)

    assert engine.sample_rate == 48000


def test_dispose_all_sounds_disposes_each_once_and_keeps_registry() -> None:
    first, second = DisposableSound("kick"), DisposableSound("snare")
    engine = AudioEngine(sounds=[first, second])

    engine.dispose_all_sounds()

    assert first.dispose_calls == 1
    assert second.dispose_calls == 1
    assert engine.sounds == [first, second]


def test_dispose_all_sounds_survives_self_unregistering_sounds() -> None:
    engine = AudioEngine()
    sounds = [DisposableSound(name, registry=engine.sounds) for name in ("a", "b", "c")]
    for sound in sounds:
        engine.register_sound(sound)

    engine.dispose_all_sounds()

    assert [sound.dispose_calls for sound in sounds] == [1, 1, 1]
    assert engine.sounds == []


def test_dispose_failure_is_logged_and_remaining_sounds_disposed(caplog) -> None:
    broken = FailingSound("broken")
    healthy = DisposableSound("healthy")
    engine = AudioEngine(sounds=[broken, healthy])

    with caplog.at_level(logging.WARNING, logger="sound_engine.engine"):
        engine.dispose_all_sounds()

    assert healthy.dispose_calls == 1
    assert "Failed disposing sound DisposableSound('broken')" in caplog.text


def test_unregister_unknown_sound_is_ignored() -> None:
    engine = AudioEngine()
    sound = DisposableSound()
    engine.register_sound(sound)

    engine.unregister_sound(sound)
    engine.unregister_sound(sound)

    assert engine.sounds == []
