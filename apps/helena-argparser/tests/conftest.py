"""Pytest configuration and fixtures for helena-argparser tests."""

import logging

import pytest

from helena_argparser.constants import LOGGER_NAME
from helena_argparser.models import Option, Subcommand
from helena_argparser.registry import DescriptionRegistry


@pytest.fixture
def registry():
    """Create an empty registry."""
    return DescriptionRegistry()


@pytest.fixture
def sample_options():
    return (
        Option(long_name="output", short_name="o", documentation="Where to write."),
        Option(long_name="verbose", short_name="v", documentation="Talk more."),
    )


@pytest.fixture
def sample_subcommands():
    return (
        Subcommand(name="build", documentation="Builds from source."),
        Subcommand(name="lex", documentation="Runs the lexer only."),
    )


@pytest.fixture
def described_registry(registry, sample_options, sample_subcommands):
    """Create a registry with 'prog' described."""
    registry.register("prog", "Compiles things.", sample_options, sample_subcommands)
    return registry


@pytest.fixture
def debug_logs(caplog):
    """Capture every event emitted on the package logger."""
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    return caplog
