"""Catalog of registered program descriptions."""

from __future__ import annotations

import logging
import threading
from typing import Optional, Sequence

from pydantic import ValidationError

from .errors import DescriptionError
from .logging_utils import log_event
from .models import Description, Option, Subcommand
from .owned_sequence import OwnedSequence


class DescriptionRegistry:
    """Append-only catalog of program descriptions.

    Callers construct one registry and pass it to whatever needs to describe
    or look up programs. Entries are kept in insertion order and looked up by
    name; registering a name twice is allowed.
    """

    def __init__(self) -> None:
        # Allocated on first registration.
        self._descriptions: Optional[OwnedSequence[Description]] = None
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            if self._descriptions is None:
                return 0
            return len(self._descriptions)

    def register(
        self,
        name: str,
        overview: str,
        options: Sequence[Option] = (),
        subcommands: Sequence[Subcommand] = (),
    ) -> None:
        """Describe a program to the engine.

        Should be called before ``execute_default`` for the same program.

        Args:
            name: Name of the caller program, matched against argv[0]
            overview: Detailed explanation of the purpose of the program
            options: Options acceptable by the program
            subcommands: Subcommands available from the program

        Raises:
            DescriptionError: If any field is invalid
        """
        try:
            description = Description(
                name=name,
                overview=overview,
                options=tuple(options),
                subcommands=tuple(subcommands),
            )
        except ValidationError as e:
            raise DescriptionError(f"Invalid description for {name!r}: {e}") from e

        with self._lock:
            if self._descriptions is None:
                self._descriptions = OwnedSequence(Description)
            self._descriptions.append(description)

        log_event(
            "description_registered",
            level=logging.DEBUG,
            program=name,
            option_count=len(description.options),
            subcommand_count=len(description.subcommands),
        )

    def lookup(self, name: str) -> Optional[Description]:
        """Return the description registered under name, if any.

        Every entry is scanned and the last one registered under the name wins.
        """
        with self._lock:
            if self._descriptions is None:
                return None
            found: Optional[Description] = None
            for index in range(self._descriptions.count):
                candidate = self._descriptions.copy_out(index)
                if candidate is not None and candidate.name == name:
                    found = candidate
            return found
