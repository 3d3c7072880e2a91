"""Environment-driven settings for the helena driver."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .constants import (
    BUILD_DIR_ENV_VAR,
    CMAKE_ENV_VAR,
    DEFAULT_BUILD_DIR_NAME,
    LOG_FILE_ENV_VAR,
    SOURCE_DIR_ENV_VAR,
)
from .errors import ConfigError


@dataclass(frozen=True)
class Settings:
    source_dir: Path
    build_dir: Path
    cmake: Optional[str] = None
    log_file: Optional[str] = None


def _read(environ: Mapping[str, str], name: str) -> Optional[str]:
    """Return a stripped value, treating blank values as unset."""
    value = environ.get(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from environment variables.

    Args:
        environ: Variables to read; defaults to os.environ

    Raises:
        ConfigError: If the source directory exists but is not a directory
    """
    if environ is None:
        environ = os.environ

    source_raw = _read(environ, SOURCE_DIR_ENV_VAR)
    source_dir = Path(source_raw).expanduser() if source_raw else Path.cwd()
    source_dir = source_dir.resolve()
    if source_dir.exists() and not source_dir.is_dir():
        raise ConfigError(f"{SOURCE_DIR_ENV_VAR} is not a directory: {source_dir}")

    build_raw = _read(environ, BUILD_DIR_ENV_VAR)
    if build_raw:
        build_dir = Path(build_raw).expanduser()
        if not build_dir.is_absolute():
            build_dir = source_dir / build_dir
    else:
        build_dir = source_dir / DEFAULT_BUILD_DIR_NAME

    return Settings(
        source_dir=source_dir,
        build_dir=build_dir,
        cmake=_read(environ, CMAKE_ENV_VAR),
        log_file=_read(environ, LOG_FILE_ENV_VAR),
    )
