from __future__ import annotations

from dataclasses import dataclass


class UrlPathsError(Exception):
    """Base class for errors raised by urlpaths."""


class NullArgumentError(UrlPathsError, TypeError):
    def __init__(self, argument_name: str):
        super().__init__(f"Argument '{argument_name}' must not be None")
        self.argument_name = argument_name


class InvalidLocatorError(UrlPathsError, ValueError):
    def __init__(self, locator: str, reason: str):
        super().__init__(f"Invalid locator {locator!r}: {reason}")
        self.locator = locator
        self.reason = reason


class LocatorDecodeError(UrlPathsError, ValueError):
    """Percent-decoding of a ``file`` locator failed.

    The underlying problem (bad escape, invalid UTF-8) is chained as
    ``__cause__`` when there is one.
    """

    def __init__(self, locator: str, reason: str):
        super().__init__(f"Can not decode locator {locator!r}: {reason}")
        self.locator = locator
        self.reason = reason


class UnsupportedSourceError(UrlPathsError, ValueError):
    pass


@dataclass(frozen=True)
class NotApplicable:
    """Returned instead of a path when the locator is not a ``file`` locator."""

    scheme: str


@dataclass(frozen=True)
class ConversionFailed:
    """Returned instead of a locator when a path can not be expressed as one."""

    path: str
    reason: str


__all__ = [
    "ConversionFailed",
    "InvalidLocatorError",
    "LocatorDecodeError",
    "NotApplicable",
    "NullArgumentError",
    "UnsupportedSourceError",
    "UrlPathsError",
]
