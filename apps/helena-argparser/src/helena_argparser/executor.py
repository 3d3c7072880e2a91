"""Default execution of built-in flags such as help."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, TextIO

from .constants import HELP_DOCUMENTATION, HELP_TEMPLATE
from .logging_utils import log_event
from .models import DefaultExecutionStatus, Description, Option
from .option_adapter import FlagTokenizer, adapt_options
from .registry import DescriptionRegistry


@dataclass(frozen=True)
class BuiltinHandler:
    """A flag the engine handles on its own, and what it does."""

    option: Option
    behavior: Callable[[Description, TextIO], None]


def render_help(description: Description) -> str:
    return HELP_TEMPLATE.format(overview=description.overview, name=description.name)


def _print_help(description: Description, stream: TextIO) -> None:
    stream.write(render_help(description))
    stream.flush()


BUILTIN_HANDLERS: tuple[BuiltinHandler, ...] = (
    BuiltinHandler(
        Option(long_name="help", short_name="h", documentation=HELP_DOCUMENTATION),
        _print_help,
    ),
)
DEFAULT_OPTIONS: tuple[Option, ...] = tuple(handler.option for handler in BUILTIN_HANDLERS)

_DEFAULT_TOKENIZER = FlagTokenizer(adapt_options(DEFAULT_OPTIONS))


def execute_default(
    argv: Sequence[str],
    registry: DescriptionRegistry,
    stream: Optional[TextIO] = None,
) -> DefaultExecutionStatus:
    """Run the built-in behavior for the first built-in flag in argv.

    Call before any program-specific argument handling. argv[0] is the program
    name the description is looked up by.

    Returns:
        EXECUTED if a built-in flag ran; the caller is done with this call.
        UNDESCRIBED if a built-in flag was given but argv[0] was never registered.
        NONE if no built-in flag was given.
    """
    if not argv:
        return DefaultExecutionStatus.NONE

    program_name = argv[0]
    for flag in _DEFAULT_TOKENIZER.flags(argv):
        for handler in BUILTIN_HANDLERS:
            if flag != handler.option.short_name:
                continue

            description = registry.lookup(program_name)
            if description is None:
                log_event(
                    "default_execution_undescribed",
                    level=logging.WARNING,
                    program=program_name,
                    flag=handler.option.long_name,
                )
                return DefaultExecutionStatus.UNDESCRIBED

            handler.behavior(description, stream if stream is not None else sys.stdout)
            log_event(
                "default_execution_done",
                program=program_name,
                flag=handler.option.long_name,
            )
            return DefaultExecutionStatus.EXECUTED

    return DefaultExecutionStatus.NONE
