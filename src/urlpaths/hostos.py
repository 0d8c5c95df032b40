from __future__ import annotations

import sys
from enum import Enum
from functools import lru_cache


class PlatformFamily(str, Enum):
    WINDOWS = "windows"
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str | None) -> PlatformFamily | None:
        normalized = (name or "").strip().lower()
        if not normalized:
            return None
        if normalized in {"windows", "win", "win32", "nt"}:
            return cls.WINDOWS
        if normalized in {"other", "posix", "unix", "linux", "darwin"}:
            return cls.OTHER
        raise ValueError(f"Unknown platform family: {name}")


def _platform_from_identifier(identifier: str | None) -> PlatformFamily:
    if not identifier:
        return PlatformFamily.OTHER
    if identifier.lower().startswith("win"):
        return PlatformFamily.WINDOWS
    return PlatformFamily.OTHER


@lru_cache(maxsize=1)
def detect_platform() -> PlatformFamily:
    """Host platform family, read once from ``sys.platform``.

    An unreadable identifier falls back to ``OTHER``.
    """
    return _platform_from_identifier(getattr(sys, "platform", None))


def is_windows_family() -> bool:
    return detect_platform() is PlatformFamily.WINDOWS


__all__ = ["PlatformFamily", "detect_platform", "is_windows_family"]
