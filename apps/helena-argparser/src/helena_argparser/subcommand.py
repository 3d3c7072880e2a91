"""Extraction of the immediate subcommand from an argument vector."""

from __future__ import annotations

from typing import Optional, Sequence


def subcommand(argv: Sequence[Optional[str]]) -> Optional[str]:
    """Return the immediate subcommand given to the program, if any.

    The immediate subcommand is the first argument after the program name
    that is neither an option nor an option's argument. There is no table of
    which options take arguments, so every option is assumed to consume the
    token right after it when that token is not an option itself.

    Examples:
        ["prog", "build"] → "build"
        ["prog", "-o", "out.txt", "build"] → "build"
        ["prog", "-h"] → None
    """
    last_option_index: Optional[int] = None

    for index in range(1, len(argv)):
        argument = argv[index]
        if argument is None:
            continue
        argument = argument.lstrip()
        if not argument:
            continue

        if argument.startswith("-"):
            last_option_index = index
            continue

        # Argument to the preceding option
        if last_option_index is not None and index == last_option_index + 1:
            last_option_index = None
            continue

        return argument

    return None
