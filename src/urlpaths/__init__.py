from urlpaths.algebra import change_extension, extend, parent
from urlpaths.config import Settings, load_settings
from urlpaths.convert import LocatorConverter, default_converter, from_local_path, to_local_path
from urlpaths.errors import (
    ConversionFailed,
    InvalidLocatorError,
    LocatorDecodeError,
    NotApplicable,
    NullArgumentError,
    UnsupportedSourceError,
    UrlPathsError,
)
from urlpaths.hostos import PlatformFamily, detect_platform, is_windows_family
from urlpaths.locator import Locator
from urlpaths.sources import SourceResolver

__all__ = [
    "ConversionFailed",
    "InvalidLocatorError",
    "Locator",
    "LocatorConverter",
    "LocatorDecodeError",
    "NotApplicable",
    "NullArgumentError",
    "PlatformFamily",
    "Settings",
    "SourceResolver",
    "UnsupportedSourceError",
    "UrlPathsError",
    "change_extension",
    "default_converter",
    "detect_platform",
    "extend",
    "from_local_path",
    "is_windows_family",
    "load_settings",
    "parent",
    "to_local_path",
]
