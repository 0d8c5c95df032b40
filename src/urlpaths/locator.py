from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from urlpaths.errors import InvalidLocatorError, NullArgumentError

_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")
_FORBIDDEN_CHARS = frozenset({"\x00", "\t", "\r", "\n"})
ARCHIVE_SEPARATOR = "!/"


@dataclass(frozen=True)
class Locator:
    """A well-formed locator kept in its serialized form.

    Construction only checks the little grammar the conversions rely on: a
    scheme, an RFC 3986 split with a valid port, no control characters, and
    the ``!/`` separator for ``jar`` locators. Accessors read the raw text,
    nothing is decoded.
    """

    text: str

    def __post_init__(self) -> None:
        if self.text is None:
            raise NullArgumentError("text")
        if not isinstance(self.text, str):
            raise TypeError(f"Locator text must be str, got {type(self.text).__name__}")
        _validate(self.text)

    @classmethod
    def parse(cls, value: Locator | str) -> Locator:
        if value is None:
            raise NullArgumentError("locator")
        if isinstance(value, Locator):
            return value
        return cls(value)

    def __str__(self) -> str:
        return self.text

    @property
    def scheme(self) -> str:
        return scheme_of(self.text) or ""

    @property
    def _rest(self) -> str:
        return self.text[len(self.scheme) + 1 :]

    @property
    def authority(self) -> str | None:
        if not self._rest.startswith("//"):
            return None
        return urlsplit(self.text).netloc

    @property
    def path(self) -> str:
        return urlsplit(self.text).path

    @property
    def query(self) -> str | None:
        before_fragment = self._rest.split("#", 1)[0]
        if "?" not in before_fragment:
            return None
        return before_fragment.split("?", 1)[1]

    @property
    def fragment(self) -> str | None:
        if "#" not in self._rest:
            return None
        return self._rest.split("#", 1)[1]


def scheme_of(text: str) -> str | None:
    """Lower-cased scheme of ``text``, or ``None`` when it does not start with one."""
    match = _SCHEME_RE.match(text)
    return match.group(1).lower() if match else None


def _validate(text: str) -> None:
    match = _SCHEME_RE.match(text)
    if match is None:
        raise InvalidLocatorError(text, "no scheme")
    bad = sorted(_FORBIDDEN_CHARS.intersection(text))
    if bad:
        raise InvalidLocatorError(text, f"illegal character {bad[0]!r}")
    try:
        parts = urlsplit(text)
        parts.port  # raises on a non-numeric or out of range port
    except ValueError as exc:
        raise InvalidLocatorError(text, str(exc)) from exc
    if match.group(1).lower() == "jar" and ARCHIVE_SEPARATOR not in text:
        raise InvalidLocatorError(text, f"no {ARCHIVE_SEPARATOR} in archive locator")


__all__ = ["ARCHIVE_SEPARATOR", "Locator", "scheme_of"]
