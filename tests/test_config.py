from __future__ import annotations

import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from urlpaths.config import load_settings
from urlpaths.convert import LocatorConverter
from urlpaths.hostos import PlatformFamily, detect_platform


def _env_without(*names: str) -> dict[str, str]:
    return {key: value for key, value in os.environ.items() if key not in names}


class SettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        with patch.dict(os.environ, _env_without("URLPATHS_OS_FAMILY", "URLPATHS_LOG_LEVEL"), clear=True):
            settings = load_settings(use_dotenv=False)

        self.assertIs(settings.platform, detect_platform())
        self.assertEqual(settings.log_level, logging.WARNING)

    def test_environment_overrides(self) -> None:
        with patch.dict(os.environ, {"URLPATHS_OS_FAMILY": "Windows", "URLPATHS_LOG_LEVEL": "debug"}):
            settings = load_settings(use_dotenv=False)

        self.assertIs(settings.platform, PlatformFamily.WINDOWS)
        self.assertEqual(settings.log_level, logging.DEBUG)

    def test_unusable_values_fall_back(self) -> None:
        for family, level in (("beos", "loud"), ("${OS_FAMILY}", "${LEVEL}"), ("  ", "")):
            with self.subTest(family=family, level=level):
                with patch.dict(os.environ, {"URLPATHS_OS_FAMILY": family, "URLPATHS_LOG_LEVEL": level}):
                    settings = load_settings(use_dotenv=False)
                self.assertIs(settings.platform, detect_platform())
                self.assertEqual(settings.log_level, logging.WARNING)

    def test_numeric_log_level(self) -> None:
        with patch.dict(os.environ, {"URLPATHS_LOG_LEVEL": "15"}):
            self.assertEqual(load_settings(use_dotenv=False).log_level, 15)

    def test_dotenv_file_is_loaded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            env_file = Path(tmp) / ".env"
            env_file.write_text("URLPATHS_OS_FAMILY=windows\nURLPATHS_LOG_LEVEL=INFO\n", encoding="utf-8")

            with patch.dict(os.environ, _env_without("URLPATHS_OS_FAMILY", "URLPATHS_LOG_LEVEL"), clear=True):
                settings = load_settings(env_file=env_file)

        self.assertIs(settings.platform, PlatformFamily.WINDOWS)
        self.assertEqual(settings.log_level, logging.INFO)

    def test_converter_from_settings(self) -> None:
        with patch.dict(os.environ, {"URLPATHS_OS_FAMILY": "windows"}):
            converter = LocatorConverter.from_settings(load_settings(use_dotenv=False), exists=lambda path: False)

        self.assertTrue(converter.is_windows)
        self.assertEqual(str(converter.to_local_path("file:///C:/data/a.shp")), r"C:\data\a.shp")


if __name__ == "__main__":
    unittest.main()
