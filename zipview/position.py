"""Forward position into a single borrowed sequence."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from zipview.logging import get_logger
from zipview.types.base import SupportsPositions

logger = get_logger(__name__)

T = TypeVar("T")

__all__ = ["Position"]


class Position(Generic[T]):
    """Offset into a sequence that supports dereference and single-step advance.

    Two positions are equal when they refer to the same sequence object at the
    same offset. Positions into different sequences never compare equal.

    Attributes:
        sequence: Borrowed sequence (not copied).
        index: Current zero-based offset; ``len(sequence)`` is the end position.
    """

    __slots__ = ("_sequence", "_index", "_expected_len")

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        sequence: SupportsPositions[T],
        index: int = 0,
        expected_len: Optional[int] = None,
    ) -> None:
        self._sequence = sequence
        self._index = index
        self._expected_len = expected_len

    @classmethod
    def begin(
        cls, sequence: SupportsPositions[T], check_borrows: bool = False
    ) -> "Position[T]":
        """Return the position of the first element of ``sequence``."""
        return cls(sequence, 0, len(sequence) if check_borrows else None)

    @classmethod
    def end(
        cls, sequence: SupportsPositions[T], check_borrows: bool = False
    ) -> "Position[T]":
        """Return the one-past-the-last position of ``sequence``."""
        size = len(sequence)
        return cls(sequence, size, size if check_borrows else None)

    @property
    def sequence(self) -> SupportsPositions[T]:
        return self._sequence

    @property
    def index(self) -> int:
        return self._index

    def get(self) -> T:
        """Read the element at this position.

        Raises whatever the sequence raises for an out-of-range offset
        (``IndexError`` for built-in sequences).
        """
        self._check_borrow()
        return self._sequence[self._index]

    def set(self, value: T) -> None:
        """Write ``value`` into the sequence at this position.

        Raises:
            TypeError: If the sequence does not support item assignment.
        """
        self._check_borrow()
        self._sequence[self._index] = value  # type: ignore[index]

    def advance(self) -> "Position[T]":
        """Move one step forward and return this position."""
        self._check_borrow()
        self._index += 1
        return self

    def copy(self) -> "Position[T]":
        return Position(self._sequence, self._index, self._expected_len)

    def _check_borrow(self) -> None:
        if self._expected_len is None:
            return
        size = len(self._sequence)
        if size != self._expected_len:
            logger.warning(
                "Sequence %s changed size from %d to %d under a live position",
                type(self._sequence).__name__,
                self._expected_len,
                size,
            )
            raise RuntimeError(
                f"sequence changed size during iteration "
                f"(expected {self._expected_len}, found {size})"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._sequence is other._sequence and self._index == other._index

    def __repr__(self) -> str:
        name = type(self._sequence).__name__
        return f"Position({name}@{id(self._sequence):#x}, index={self._index})"
