from __future__ import annotations

import logging
import os
import re
from functools import lru_cache
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath
from typing import Protocol
from urllib.parse import quote, unquote_to_bytes

from urlpaths.config import Settings, load_settings
from urlpaths.errors import (
    ConversionFailed,
    InvalidLocatorError,
    LocatorDecodeError,
    NotApplicable,
    NullArgumentError,
)
from urlpaths.hostos import PlatformFamily, detect_platform
from urlpaths.locator import Locator, scheme_of

SIMPLE_PREFIX = "file:/"
STANDARD_PREFIX = "file://"

_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SLASH_BEFORE_DRIVE_RE = re.compile(r"^[/\\](?=[A-Za-z]:)")
# RFC 3986 path characters beyond the unreserved set quote() always keeps.
_PATH_SAFE = "/!$&'()*+,;=:@"

logger = logging.getLogger(__name__)


class PathProbe(Protocol):
    def __call__(self, path: str) -> bool:
        ...


def _local_exists(path: str) -> bool:
    return os.path.exists(path)


def _percent_decode(text: str) -> str:
    bad = _BAD_ESCAPE_RE.search(text)
    if bad is not None:
        raise LocatorDecodeError(text, f"malformed escape at offset {bad.start()}")
    try:
        return unquote_to_bytes(text).decode("utf-8")
    except UnicodeError as exc:
        raise LocatorDecodeError(text, "not valid UTF-8") from exc


class LocatorConverter:
    """Converts ``file`` locators to local paths and back for one platform family.

    The platform and the existence probe used by the Windows UNC branch are
    injected so both branches can be exercised on any host.
    """

    def __init__(
        self,
        platform: PlatformFamily | None = None,
        *,
        exists: PathProbe | None = None,
    ):
        self.platform = platform or detect_platform()
        self._exists = exists or _local_exists

    @classmethod
    def from_settings(cls, settings: Settings, *, exists: PathProbe | None = None) -> LocatorConverter:
        return cls(settings.platform, exists=exists)

    @property
    def is_windows(self) -> bool:
        return self.platform is PlatformFamily.WINDOWS

    @property
    def path_type(self) -> type[PurePath]:
        if self.platform is detect_platform():
            return Path
        return PureWindowsPath if self.is_windows else PurePosixPath

    def to_local_path(self, locator: Locator | str) -> PurePath | NotApplicable:
        """Local path named by a ``file`` locator.

        Any other scheme gives ``NotApplicable`` so callers can try another
        strategy. Undecodable escapes raise ``LocatorDecodeError``.
        """
        if locator is None:
            raise NullArgumentError("locator")
        if isinstance(locator, str):
            scheme = scheme_of(locator)
            if scheme != "file":
                return NotApplicable(scheme=scheme or "")
        locator = Locator.parse(locator)
        if locator.scheme != "file":
            return NotApplicable(scheme=locator.scheme)

        text = str(locator)
        if locator.query is not None:
            text = text[: text.index("?")]
        text = "file" + text[len(locator.scheme) :]
        # A raw "+" is a literal plus, never an encoded space.
        text = text.replace("+", "%2B")
        decoded = _percent_decode(text)

        if self.is_windows and decoded.startswith(STANDARD_PREFIX):
            local = self._host_share_path(decoded)
        elif decoded.startswith(STANDARD_PREFIX):
            local = decoded[len(STANDARD_PREFIX) :]
        elif decoded.startswith(SIMPLE_PREFIX):
            local = decoded[len(SIMPLE_PREFIX) - 1 :]
        else:
            authority = locator.authority
            path = locator.path.replace("%20", " ")
            local = f"//{authority}{path}" if authority else path

        if self.is_windows:
            local = _SLASH_BEFORE_DRIVE_RE.sub("", local)
        return self.path_type(local)

    def _host_share_path(self, decoded: str) -> str:
        candidate = decoded[len(STANDARD_PREFIX) - 2 :]
        if self._probe(candidate):
            return candidate
        logger.debug("No entity at %s, reading %s as a drive-relative path", candidate, decoded)
        return candidate[2:]

    def _probe(self, candidate: str) -> bool:
        try:
            return bool(self._exists(candidate))
        except OSError as exc:
            logger.debug("Existence probe failed for %s: %s", candidate, exc)
            return False

    def from_local_path(self, path: str | os.PathLike[str]) -> Locator | ConversionFailed:
        """``file`` locator for a local path, or ``ConversionFailed``.

        Relative paths are made absolute against the working directory when
        converting for the host platform.
        """
        if path is None:
            raise NullArgumentError("path")
        raw = os.fsdecode(path)
        try:
            natural = self._natural_locator(self._absolute(raw))
        except (OSError, ValueError) as exc:
            return ConversionFailed(path=raw, reason=str(exc))

        repaired = natural.replace("+", "%2B").replace(" ", "%20")
        try:
            return Locator(repaired)
        except InvalidLocatorError as exc:
            return ConversionFailed(path=raw, reason=exc.reason)

    def _absolute(self, raw: str) -> PurePath:
        if "\x00" in raw:
            raise ValueError("embedded null character in path")
        path_type = self.path_type
        if path_type is Path:
            return Path(raw).absolute()
        local = path_type(raw)
        if not local.is_absolute():
            raise ValueError(f"relative path {raw!r} has no locator form")
        return local

    def _natural_locator(self, local: PurePath) -> str:
        if isinstance(local, PureWindowsPath):
            text = local.as_posix()
            if local.drive.startswith("\\\\"):
                return "file:" + quote(text, safe=_PATH_SAFE)
            return "file:///" + quote(text, safe=_PATH_SAFE)
        return "file://" + quote(local.as_posix(), safe=_PATH_SAFE)


@lru_cache(maxsize=1)
def default_converter() -> LocatorConverter:
    return LocatorConverter.from_settings(load_settings(use_dotenv=False))


def to_local_path(locator: Locator | str) -> PurePath | NotApplicable:
    return default_converter().to_local_path(locator)


def from_local_path(path: str | os.PathLike[str]) -> Locator | ConversionFailed:
    return default_converter().from_local_path(path)


__all__ = [
    "LocatorConverter",
    "PathProbe",
    "default_converter",
    "from_local_path",
    "to_local_path",
]
