from __future__ import annotations

import os
from pathlib import PurePath
from typing import Union

from urlpaths.convert import LocatorConverter, default_converter
from urlpaths.errors import NotApplicable, NullArgumentError, UnsupportedSourceError
from urlpaths.locator import Locator, scheme_of

Source = Union[Locator, str, os.PathLike]


def _looks_like_locator(text: str) -> bool:
    scheme = scheme_of(text)
    # One-letter "schemes" are drive letters (C:\data).
    return scheme is not None and len(scheme) > 1


class SourceResolver:
    """Turns whatever a data-source driver was handed into a local path.

    Accepts a ``Locator``, a locator string or a plain path. Locators of any
    scheme other than ``file`` are rejected.
    """

    def __init__(self, converter: LocatorConverter | None = None):
        self._converter = converter

    @property
    def converter(self) -> LocatorConverter:
        return self._converter or default_converter()

    def resolve(self, source: Source) -> PurePath:
        if source is None:
            raise NullArgumentError("source")
        if isinstance(source, str) and _looks_like_locator(source):
            source = Locator.parse(source)
        if isinstance(source, Locator):
            local = self.converter.to_local_path(source)
            if isinstance(local, NotApplicable):
                raise UnsupportedSourceError(f"Unsupported locator scheme for local access: '{local.scheme}'")
            return local
        return self.converter.path_type(os.fsdecode(source))


__all__ = ["Source", "SourceResolver"]
