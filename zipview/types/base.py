"""Access modes and sequence capability protocol."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Protocol, TypeVar, runtime_checkable

#: Element type of the first zipped sequence.
A = TypeVar("A")

#: Element type of the second zipped sequence.
B = TypeVar("B")

T_co = TypeVar("T_co", covariant=True)


class Access(IntEnum):
    """Element access granted by a cursor and the pairs it yields."""

    #: Pairs write through to the underlying sequences.
    MUTABLE = 1
    #: Pairs reject assignment.
    READ_ONLY = 2

    @property
    def writable(self) -> bool:
        return self is Access.MUTABLE

    @classmethod
    def from_string(cls, value: str) -> "Access":
        """Parse a string into an Access enum value.

        Args:
            value: Case-insensitive member name (e.g., "mutable", "READ_ONLY").
                Hyphens are accepted in place of underscores.

        Returns:
            The corresponding Access member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper().replace("-", "_")]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid access '{value}'. Valid values are: {valid}"
            ) from None


@runtime_checkable
class SupportsPositions(Protocol[T_co]):
    """Ordered container addressable by integer offsets from 0 to ``len() - 1``.

    This is the only capability a zipped sequence must provide. Writing
    through a mutable pair additionally requires ``__setitem__``.

    Positions are integer offsets, so plain iterables without indexing (sets,
    generators, dict views) are rejected. Mappings satisfy the protocol
    structurally but are keyed, not offset-addressed; ``ZipView`` rejects
    them explicitly.
    """

    def __len__(self) -> int: ...

    def __getitem__(self, index: Any) -> T_co: ...
