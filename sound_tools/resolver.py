"""Pick the sound asset path the current environment can decode.

Sketches declare the formats they ship (``mp3`` and ``ogg`` for example) and
then ask for ``beatbox.mp3``; the resolver swaps in whichever declared format
the codec oracle reports as playable.  Resolution never performs I/O and never
raises when nothing is playable: the result records that case so callers can
either attempt the load anyway or treat it as fatal.

The preference list follows a single-writer convention.  Configure it during
setup, before assets start loading; concurrent reconfiguration while resolving
is not synchronised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Sequence, Union

from .formats import (
    InvalidFormatError,
    is_allowed_format,
    normalize_format,
    replace_extension,
    trailing_extension,
)

logger = logging.getLogger(__name__)

CodecOracle = Callable[[str], bool]
AssetRequest = Union[str, Sequence[str]]


class ResolutionStrategy(str, Enum):
    """How a :class:`PathResolution` arrived at its path."""

    UNCHANGED = "unchanged"
    SUBSTITUTED = "substituted"
    APPENDED = "appended"
    CANDIDATE = "candidate"
    NO_SUPPORTED_FORMAT = "no_supported_format"


class NoSupportedFormatError(LookupError):
    """Raised when an unresolved :class:`PathResolution` is unwrapped."""

    def __init__(self, request: AssetRequest) -> None:
        super().__init__(f"No supported sound format for {request!r}")
        self.request = request


@dataclass(frozen=True, slots=True)
class PathResolution:
    """Either the playable path or a marker that nothing was playable."""

    request: AssetRequest
    path: Optional[str]
    fallback: str
    extension: Optional[str]
    strategy: ResolutionStrategy

    @classmethod
    def resolved(
        cls,
        request: AssetRequest,
        path: str,
        extension: str,
        strategy: ResolutionStrategy,
    ) -> "PathResolution":
        return cls(request=request, path=path, fallback=path, extension=extension, strategy=strategy)

    @classmethod
    def unresolved(cls, request: AssetRequest, fallback: str) -> "PathResolution":
        return cls(
            request=request,
            path=None,
            fallback=fallback,
            extension=None,
            strategy=ResolutionStrategy.NO_SUPPORTED_FORMAT,
        )

    def is_resolved(self) -> bool:
        return self.path is not None

    def unwrap(self) -> str:
        if self.path is None:
            raise NoSupportedFormatError(self.request)
        return self.path

    def path_or_fallback(self) -> str:
        """Best-effort path: the resolved one, else the original request."""
        return self.path if self.path is not None else self.fallback


class FormatResolver:
    """Resolve asset requests against a preference list and a codec oracle."""

    def __init__(self, is_supported: CodecOracle, preferred: Iterable[str] = ()) -> None:
        self._is_supported = is_supported
        self._preferred: list[str] = []
        if isinstance(preferred, str):
            preferred = (preferred,)
        self.set_preferred_formats(*preferred)

    @property
    def preferred_formats(self) -> tuple[str, ...]:
        return tuple(self._preferred)

    def set_preferred_formats(self, *extensions: str) -> None:
        """Replace the preference list with ``extensions``, highest priority first.

        Tokens are lowercased and validated in order.  The first invalid token
        raises :class:`InvalidFormatError`; tokens before it stay applied.
        """

        self._preferred = []
        for token in extensions:
            extension = normalize_format(token)
            if extension not in self._preferred:
                self._preferred.append(extension)
        logger.debug("Preferred sound formats set to %s", self._preferred)

    def resolve_single_path(self, path: str) -> PathResolution:
        # Declared extensions match case-insensitively: "Track.MP3" counts as mp3.
        declared = trailing_extension(path)
        if is_allowed_format(declared):
            declared = declared.lower()
            if self._is_supported(declared):
                logger.debug("Format %s supported; loading %s as requested", declared, path)
                return PathResolution.resolved(path, path, declared, ResolutionStrategy.UNCHANGED)
            extension = self._first_supported_preference()
            if extension is not None:
                swapped = replace_extension(path, extension)
                logger.debug("Format %s unsupported; substituting %s", declared, swapped)
                return PathResolution.resolved(path, swapped, extension, ResolutionStrategy.SUBSTITUTED)
        else:
            extension = self._first_supported_preference()
            if extension is not None:
                appended = f"{path}.{extension}"
                logger.debug("No format declared for %s; using %s", path, appended)
                return PathResolution.resolved(path, appended, extension, ResolutionStrategy.APPENDED)

        logger.warning(
            "No supported sound format for %s (preferred formats: %s)",
            path,
            ", ".join(self._preferred) or "none",
        )
        return PathResolution.unresolved(path, path)

    def resolve_from_candidates(self, paths: Sequence[str]) -> PathResolution:
        candidates = list(paths)
        if not candidates:
            raise ValueError("At least one candidate path is required")
        for candidate in candidates:
            extension = trailing_extension(candidate).lower()
            if not is_allowed_format(extension):
                logger.debug("Skipping %s: %s is not a sound format", candidate, extension)
                continue
            if self._is_supported(extension):
                logger.debug("Selected candidate %s", candidate)
                return PathResolution.resolved(
                    tuple(candidates), candidate, extension, ResolutionStrategy.CANDIDATE
                )
        logger.warning("None of the candidate sound files are supported: %s", candidates)
        return PathResolution.unresolved(tuple(candidates), candidates[0])

    def resolve(self, request: AssetRequest) -> PathResolution:
        if isinstance(request, str):
            return self.resolve_single_path(request)
        return self.resolve_from_candidates(request)

    def resolve_path(self, request: AssetRequest) -> str:
        """Return the path to load, falling back to the request itself."""
        return self.resolve(request).path_or_fallback()

    def _first_supported_preference(self) -> Optional[str]:
        for extension in self._preferred:
            if self._is_supported(extension):
                return extension
        return None


__all__ = [
    "AssetRequest",
    "CodecOracle",
    "FormatResolver",
    "InvalidFormatError",
    "NoSupportedFormatError",
    "PathResolution",
    "ResolutionStrategy",
]
