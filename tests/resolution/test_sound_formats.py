from __future__ import annotations

import pytest

from sound_tools.formats import (
    ALLOWED_EXTENSIONS,
    InvalidFormatError,
    dedupe_formats,
    normalize_format,
    replace_extension,
    trailing_extension,
)


def test_allowed_extensions_are_fixed() -> None:
    assert ALLOWED_EXTENSIONS == {"mp3", "wav", "ogg", "m4a", "aac"}


def test_normalize_format_lowercases_known_formats() -> None:
    assert normalize_format("M4A") == "m4a"


def test_normalize_format_rejects_unknown() -> None:
    with pytest.raises(InvalidFormatError, match="'flac' is not a valid sound format"):
        normalize_format("flac")


@pytest.mark.parametrize(
    "path, expected",
    [
        ("track.mp3", "mp3"),
        ("track.v2.mp3", "mp3"),
        ("track", "track"),
        ("track.", ""),
        ("../sounds/beatbox", "/sounds/beatbox"),
    ],
)
def test_trailing_extension(path, expected) -> None:
    assert trailing_extension(path) == expected


def test_replace_extension_keeps_dotted_stem() -> None:
    assert replace_extension("track.v2.mp3", "ogg") == "track.v2.ogg"
    assert replace_extension("track", "wav") == "track.wav"


def test_dedupe_formats_keeps_first_occurrence() -> None:
    assert dedupe_formats(["ogg", "mp3", "ogg", "wav", "mp3"]) == ["ogg", "mp3", "wav"]
