"""Domain models for helena-argparser."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class DefaultExecutionStatus(StrEnum):
    """Result of asking the engine to run a built-in behavior."""

    # A built-in flag was given and its behavior ran; the caller is done.
    EXECUTED = "executed"
    # A built-in flag was given but the program was never described.
    UNDESCRIBED = "undescribed"
    # No built-in flag was given; the caller handles the call itself.
    NONE = "none"


class Option(BaseModel):
    """Flag accepted by a program, spelled ``--long_name`` or ``-short_name``."""

    model_config = ConfigDict(frozen=True)

    long_name: str = Field(min_length=1)
    short_name: str = Field(min_length=1, max_length=1)
    documentation: str = ""


class Subcommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    documentation: str = ""


class Description(BaseModel):
    """Static metadata a program registers about itself."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    overview: str
    options: tuple[Option, ...] = ()
    subcommands: tuple[Subcommand, ...] = ()
