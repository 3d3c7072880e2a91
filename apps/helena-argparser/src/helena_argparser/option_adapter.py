"""Conversion of engine options into flag-tokenizer primitives."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from .logging_utils import log_event
from .models import Option

_FLAGS_DEST = "flags"


class _RaisingArgumentParser(argparse.ArgumentParser):
    """Parser that raises instead of printing usage and exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise argparse.ArgumentError(None, message)


@dataclass(frozen=True)
class FlagSpec:
    """One option as the tokenizer sees it."""

    long_name: str
    short_name: str
    takes_argument: bool = False


@dataclass(frozen=True)
class AdaptedOptions:
    """Flag specs plus every short name concatenated, in option order."""

    specs: tuple[FlagSpec, ...]
    short_flags: str

    @property
    def long_names(self) -> tuple[str, ...]:
        return tuple(spec.long_name for spec in self.specs)


def option_to_flag_spec(option: Option) -> FlagSpec:
    return FlagSpec(long_name=option.long_name, short_name=option.short_name)


def adapt_options(options: Iterable[Option]) -> AdaptedOptions:
    specs = tuple(option_to_flag_spec(option) for option in options)
    short_flags = ""
    for spec in specs:
        short_flags += spec.short_name
    return AdaptedOptions(specs=specs, short_flags=short_flags)


class FlagTokenizer:
    """Pull recognized flags out of an argument vector, GNU style.

    Long names may be abbreviated to any unique prefix. Short flags may be
    clustered (``-vh``). Unknown options and positionals are skipped, and
    nothing after a bare ``--`` is scanned.
    """

    def __init__(self, adapted: AdaptedOptions) -> None:
        self._adapted = adapted
        self._parser = _RaisingArgumentParser(
            add_help=False,
            allow_abbrev=True,
            exit_on_error=False,
        )
        for spec in adapted.specs:
            # No-argument flags only; append_const keeps the order they were given.
            self._parser.add_argument(
                f"-{spec.short_name}",
                f"--{spec.long_name}",
                dest=_FLAGS_DEST,
                action="append_const",
                const=spec.short_name,
            )

    @property
    def adapted(self) -> AdaptedOptions:
        return self._adapted

    def _split_clusters(self, args: Sequence[str]) -> list[str]:
        """Reduce short clusters to known flags and drop ``--name=value``."""
        normalized: list[str] = []
        for index, token in enumerate(args):
            if token == "--":
                normalized.extend(args[index:])
                break
            if token.startswith("--"):
                if "=" not in token:
                    normalized.append(token)
                continue
            if token.startswith("-") and len(token) > 1:
                normalized.extend(
                    f"-{char}" for char in token[1:] if char in self._adapted.short_flags
                )
                continue
            normalized.append(token)
        return normalized

    def flags(self, argv: Sequence[str]) -> Iterator[str]:
        """Yield the short-name code of every recognized flag in argv[1:]."""
        args = self._split_clusters([arg for arg in argv[1:] if arg is not None])
        try:
            namespace, _unknown = self._parser.parse_known_args(args)
        except argparse.ArgumentError as e:
            log_event(
                "flag_tokenizer_error",
                level=logging.WARNING,
                error=str(e),
                args=list(args),
            )
            return
        yield from getattr(namespace, _FLAGS_DEST) or []
