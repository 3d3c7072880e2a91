"""CLI entry point for the helena driver."""

from __future__ import annotations

import logging
import sys

from . import build
from .config import Settings, load_settings
from .constants import APP_NAME, APP_OVERVIEW, ERROR_PREFIX
from .errors import HelenaError
from .executor import execute_default
from .logging_utils import log_event, setup_logging
from .models import DefaultExecutionStatus, Subcommand
from .registry import DescriptionRegistry
from .subcommand import subcommand

HELENA_SUBCOMMANDS = (
    Subcommand(name="build", documentation="Builds Helena from source."),
)


def describe_helena(registry: DescriptionRegistry) -> None:
    registry.register(APP_NAME, APP_OVERVIEW, (), HELENA_SUBCOMMANDS)


def _supported_subcommands() -> str:
    return ", ".join(command.name for command in HELENA_SUBCOMMANDS)


def _run_build(settings: Settings) -> int:
    cmake = build.resolve_cmake(settings)
    build.run_build(settings.source_dir, settings.build_dir, cmake)
    print(f"Built into {settings.build_dir}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the helena CLI."""
    args = [APP_NAME, *(sys.argv[1:] if argv is None else argv)]

    try:
        settings = load_settings()
        setup_logging(settings.log_file)

        registry = DescriptionRegistry()
        describe_helena(registry)

        status = execute_default(args, registry)
        if status is DefaultExecutionStatus.EXECUTED:
            print()
            return 0
        if status is DefaultExecutionStatus.UNDESCRIBED:
            print(f"{ERROR_PREFIX} {APP_NAME} was not described before default execution")
            return 1

        command = subcommand(args)
        if command is None:
            print(f"{ERROR_PREFIX} missing subcommand")
            print(f"Supported subcommands: {_supported_subcommands()}")
            print(f"Run '{APP_NAME} -h' for usage.")
            return 1

        if command == "build":
            return _run_build(settings)

        print(f"{ERROR_PREFIX} unknown subcommand '{command}'")
        print(f"Supported subcommands: {_supported_subcommands()}")
        return 1

    except HelenaError as e:
        log_event("app_error", level=logging.ERROR, error_type=type(e).__name__, error=str(e))
        print(f"{ERROR_PREFIX} {e}")
        return 1
