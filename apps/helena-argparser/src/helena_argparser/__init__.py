"""Argument parsing and subcommand dispatch shared by Helena tooling."""

import logging

from .constants import LOGGER_NAME
from .errors import (
    BuildError,
    ConfigError,
    DescriptionError,
    HelenaError,
    ResourceExhaustedError,
)
from .executor import DEFAULT_OPTIONS, execute_default, render_help
from .models import DefaultExecutionStatus, Description, Option, Subcommand
from .owned_sequence import OwnedSequence
from .registry import DescriptionRegistry
from .subcommand import subcommand

__version__ = "0.1.0"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

__all__ = [
    "BuildError",
    "ConfigError",
    "DEFAULT_OPTIONS",
    "DefaultExecutionStatus",
    "Description",
    "DescriptionError",
    "DescriptionRegistry",
    "HelenaError",
    "Option",
    "OwnedSequence",
    "ResourceExhaustedError",
    "Subcommand",
    "execute_default",
    "render_help",
    "subcommand",
]
