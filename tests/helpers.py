from __future__ import annotations

from typing import Iterable


class RecordingOracle:
    """Codec oracle backed by a fixed set that remembers every query."""

    def __init__(self, supported: Iterable[str] = ()) -> None:
        self.supported = set(supported)
        self.queries: list[str] = []

    def __call__(self, extension: str) -> bool:
        self.queries.append(extension)
        return extension in self.supported


class DisposableSound:
    def __init__(self, name: str = "sound", registry: list | None = None) -> None:
        self.name = name
        self.dispose_calls = 0
        self._registry = registry

    def dispose(self) -> None:
        self.dispose_calls += 1
        # Mimic sounds that unregister themselves on disposal.
        if self._registry is not None and self in self._registry:
            self._registry.remove(self)

    def __repr__(self) -> str:
        return f"DisposableSound({self.name!r})"


class FailingSound(DisposableSound):
    def dispose(self) -> None:
        self.dispose_calls += 1
        raise RuntimeError(f"{self.name} could not be released")


__all__ = ["DisposableSound", "FailingSound", "RecordingOracle"]
