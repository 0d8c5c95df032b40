from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from urlpaths.hostos import PlatformFamily, detect_platform


def _clean_env(value: str | None) -> str | None:
    if value is None:
        return None
    if "${" in value:
        return None
    value = value.strip()
    return value or None


def _env_platform(name: str) -> PlatformFamily:
    try:
        family = PlatformFamily.from_name(_clean_env(os.getenv(name)))
    except ValueError:
        family = None
    return family or detect_platform()


def _env_log_level(name: str, default: int = logging.WARNING) -> int:
    value = _clean_env(os.getenv(name))
    if value is None:
        return default
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class Settings:
    platform: PlatformFamily
    log_level: int


def load_settings(*, use_dotenv: bool = True, env_file: str | Path | None = None) -> Settings:
    if use_dotenv:
        load_dotenv(env_file or find_dotenv(usecwd=True))

    return Settings(
        platform=_env_platform("URLPATHS_OS_FAMILY"),
        log_level=_env_log_level("URLPATHS_LOG_LEVEL"),
    )


__all__ = ["Settings", "load_settings"]
