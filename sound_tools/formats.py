"""Audio container formats accepted when loading sound assets."""

from __future__ import annotations

from typing import Iterable

ALLOWED_EXTENSIONS: frozenset[str] = frozenset({"mp3", "wav", "ogg", "m4a", "aac"})


class InvalidFormatError(ValueError):
    """Raised when a configured sound format is not one we can load."""

    def __init__(self, token: object) -> None:
        super().__init__(f"{token!r} is not a valid sound format")
        self.token = token


def normalize_format(token: object) -> str:
    """Return ``token`` lowercased, raising :class:`InvalidFormatError` if unknown."""

    if not isinstance(token, str):
        raise InvalidFormatError(token)
    extension = token.lower()
    if extension not in ALLOWED_EXTENSIONS:
        raise InvalidFormatError(token)
    return extension


def is_allowed_format(extension: str) -> bool:
    return extension.lower() in ALLOWED_EXTENSIONS


def trailing_extension(path: str) -> str:
    """Return the text after the final ``.`` (the whole path when there is none)."""

    return path.rpartition(".")[2]


def replace_extension(path: str, extension: str) -> str:
    """Swap the trailing extension, keeping every dotted segment before it.

    ``track.v2.mp3`` becomes ``track.v2.ogg`` rather than ``track.ogg``.
    """

    stem, dot, _ = path.rpartition(".")
    if not dot:
        return f"{path}.{extension}"
    return f"{stem}.{extension}"


def dedupe_formats(extensions: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for extension in extensions:
        if extension in seen:
            continue
        seen.add(extension)
        ordered.append(extension)
    return ordered


__all__ = [
    "ALLOWED_EXTENSIONS",
    "InvalidFormatError",
    "dedupe_formats",
    "is_allowed_format",
    "normalize_format",
    "replace_extension",
    "trailing_extension",
]
