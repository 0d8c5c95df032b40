from __future__ import annotations

import unittest
from pathlib import PurePosixPath, PureWindowsPath

from tests.fixtures.probes import RecordingProbe
from urlpaths.convert import LocatorConverter
from urlpaths.errors import NullArgumentError, UnsupportedSourceError
from urlpaths.hostos import PlatformFamily
from urlpaths.locator import Locator
from urlpaths.sources import SourceResolver


class SourceResolverTests(unittest.TestCase):
    def setUp(self) -> None:
        self.resolver = SourceResolver(LocatorConverter(PlatformFamily.OTHER))

    def test_locator_string_and_locator(self) -> None:
        self.assertEqual(self.resolver.resolve("file:/sds/a%20b.bmp"), PurePosixPath("/sds/a b.bmp"))
        self.assertEqual(self.resolver.resolve(Locator("file:///sds/a.bmp")), PurePosixPath("/sds/a.bmp"))

    def test_plain_paths_pass_through(self) -> None:
        self.assertEqual(self.resolver.resolve("/sds/a%20b.bmp"), PurePosixPath("/sds/a%20b.bmp"))
        self.assertEqual(self.resolver.resolve(PurePosixPath("/sds/a.bmp")), PurePosixPath("/sds/a.bmp"))

    def test_non_file_locator_is_unsupported(self) -> None:
        with self.assertRaises(UnsupportedSourceError) as ctx:
            self.resolver.resolve("http://www.some.org/foo/bar.shp")
        self.assertIn("'http'", str(ctx.exception))

    def test_drive_letter_is_not_a_scheme(self) -> None:
        resolver = SourceResolver(LocatorConverter(PlatformFamily.WINDOWS, exists=RecordingProbe()))

        self.assertEqual(resolver.resolve(r"C:\data\a.shp"), PureWindowsPath(r"C:\data\a.shp"))
        self.assertEqual(resolver.resolve("file:/C:/data/a.shp"), PureWindowsPath(r"C:\data\a.shp"))

    def test_none_is_rejected(self) -> None:
        with self.assertRaises(NullArgumentError):
            self.resolver.resolve(None)  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
