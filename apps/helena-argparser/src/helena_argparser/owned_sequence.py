"""Growable sequence that owns the elements appended to it.

Appending moves an element into the sequence: the sequence keeps its own deep
copy, so whatever the caller does with its object afterwards never reaches the
stored element. Reading works the same way in reverse; ``copy_out`` hands back
a fresh copy and never a reference into the sequence.
"""

from __future__ import annotations

import copy
import logging
from typing import Generic, Iterator, Optional, TypeVar

from .constants import MIN_SEQUENCE_CAPACITY
from .errors import ResourceExhaustedError
from .logging_utils import log_event

T = TypeVar("T")


class OwnedSequence(Generic[T]):
    """Typed, append-only sequence with explicit capacity growth."""

    def __init__(self, element_type: type[T]) -> None:
        self._element_type = element_type
        self._slots: list[Optional[T]] = []
        self._count = 0

    @property
    def element_type(self) -> type[T]:
        return self._element_type

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def count(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        for index in range(self._count):
            yield copy.deepcopy(self._slots[index])

    def append(self, element: T) -> None:
        """Move an element to the end of the sequence.

        Raises:
            ValueError: If element is None
            TypeError: If element is not an instance of the element type
            ResourceExhaustedError: If the sequence could not grow
        """
        if element is None:
            raise ValueError("Cannot append None to an owned sequence")
        if not isinstance(element, self._element_type):
            raise TypeError(
                f"Expected {self._element_type.__name__}, got {type(element).__name__}"
            )

        new_count = self._count + 1
        if new_count > self.capacity:
            self._grow()
        self._slots[self._count] = copy.deepcopy(element)
        self._count = new_count

    def copy_out(self, index: int) -> Optional[T]:
        """Return a copy of the element at index, or None when out of range."""
        if index < 0 or index >= self._count:
            return None
        return copy.deepcopy(self._slots[index])

    def _grow(self) -> None:
        old_capacity = self.capacity
        new_capacity = max(MIN_SEQUENCE_CAPACITY, old_capacity * 2)
        try:
            self._slots.extend([None] * (new_capacity - old_capacity))
        except MemoryError as exc:
            log_event(
                "sequence_growth_failed",
                level=logging.CRITICAL,
                element_type=self._element_type.__name__,
                capacity=old_capacity,
                requested_capacity=new_capacity,
            )
            raise ResourceExhaustedError(
                f"Could not grow sequence of {self._element_type.__name__} "
                f"from {old_capacity} to {new_capacity} slots"
            ) from exc
