"""Build orchestration through CMake."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from .config import Settings
from .constants import CMAKE_EXECUTABLE
from .errors import BuildError
from .logging_utils import log_event


def resolve_cmake(settings: Settings) -> str:
    """Return the CMake executable to run.

    Raises:
        BuildError: If no CMake is configured or found on PATH
    """
    if settings.cmake:
        return settings.cmake
    found = shutil.which(CMAKE_EXECUTABLE)
    if found is None:
        raise BuildError(f"{CMAKE_EXECUTABLE} not found on PATH")
    return found


def build_commands(source_dir: Path, build_dir: Path, cmake: str) -> list[list[str]]:
    """Configure, then build."""
    return [
        [cmake, "-S", str(source_dir), "-B", str(build_dir)],
        [cmake, "--build", str(build_dir)],
    ]


def run_build(source_dir: Path, build_dir: Path, cmake: str) -> None:
    """Configure and build the project in build_dir.

    Raises:
        BuildError: If a step cannot be launched or exits non-zero
    """
    for command in build_commands(source_dir, build_dir, cmake):
        log_event("build_step_start", command=command)
        try:
            result = subprocess.run(command, check=False)
        except OSError as e:
            log_event("build_step_failed", level=logging.ERROR, command=command, error=str(e))
            raise BuildError(f"Could not run {command[0]}: {e}") from e

        if result.returncode != 0:
            log_event(
                "build_step_failed",
                level=logging.ERROR,
                command=command,
                returncode=result.returncode,
            )
            raise BuildError(
                f"'{' '.join(command)}' exited with code {result.returncode}"
            )
        log_event("build_step_done", command=command)
