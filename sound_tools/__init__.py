from .formats import ALLOWED_EXTENSIONS, InvalidFormatError, normalize_format
from .pitch import frequency_to_midi, midi_to_frequency
from .resolver import (
    FormatResolver,
    NoSupportedFormatError,
    PathResolution,
    ResolutionStrategy,
)

__all__ = [
    "ALLOWED_EXTENSIONS",
    "InvalidFormatError",
    "normalize_format",
    "frequency_to_midi",
    "midi_to_frequency",
    "FormatResolver",
    "NoSupportedFormatError",
    "PathResolution",
    "ResolutionStrategy",
]
