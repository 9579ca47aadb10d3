"""Paired cursor that walks two sequences in lock-step.

A single ``PairedCursor`` class covers both the mutable and the read-only
flavours; the ``Access`` mode it carries decides whether the pairs it yields
write through to the sequences.

Termination relies on an asymmetric comparison. ``==`` holds as soon as
EITHER component position matches, while ``!=`` holds only when BOTH differ.
Comparing a running cursor against ``ZipView.end()`` therefore stops at the
end of the shorter sequence. ``__ne__`` is defined on its own rather than
derived from ``__eq__``.
"""

from __future__ import annotations

from typing import Any, Generic, Iterator, Tuple

from zipview.position import Position
from zipview.types.base import A, Access, B

__all__ = ["PairRef", "PairedCursor"]


class PairRef(Generic[A, B]):
    """Ordered pair referencing one element of each zipped sequence.

    Reading ``first`` / ``second`` always reflects the current contents of the
    sequences. Assigning them writes through when the pair is mutable and
    raises ``AttributeError`` when it is read-only.

    The pair is bound to the offsets it was created at; advancing the cursor
    that produced it does not move it.
    """

    __slots__ = ("_first", "_second", "_access")

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self, first: Position[A], second: Position[B], access: Access
    ) -> None:
        self._first = first
        self._second = second
        self._access = access

    @property
    def access(self) -> Access:
        return self._access

    @property
    def writable(self) -> bool:
        return self._access.writable

    @property
    def first(self) -> A:
        return self._first.get()

    @first.setter
    def first(self, value: A) -> None:
        self._require_writable("first")
        self._first.set(value)

    @property
    def second(self) -> B:
        return self._second.get()

    @second.setter
    def second(self, value: B) -> None:
        self._require_writable("second")
        self._second.set(value)

    def as_tuple(self) -> Tuple[A, B]:
        """Return the current values as a plain tuple."""
        return (self.first, self.second)

    def _require_writable(self, name: str) -> None:
        if not self._access.writable:
            raise AttributeError(f"cannot assign '{name}' through a read-only pair")

    def __getitem__(self, index: int) -> Any:
        return self._component(index).get()

    def __setitem__(self, index: int, value: Any) -> None:
        position = self._component(index)
        self._require_writable("first" if position is self._first else "second")
        position.set(value)

    def _component(self, index: int) -> Position[Any]:
        if index in (0, -2):
            return self._first
        if index in (1, -1):
            return self._second
        raise IndexError("pair index out of range")

    def __len__(self) -> int:
        return 2

    def __iter__(self) -> Iterator[Any]:
        yield self.first
        yield self.second

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PairRef):
            return self.as_tuple() == other.as_tuple()
        if isinstance(other, tuple):
            return self.as_tuple() == other
        return NotImplemented

    def __repr__(self) -> str:
        kind = "PairRef" if self.writable else "ConstPairRef"
        return f"{kind}({self.first!r}, {self.second!r})"


class PairedCursor(Generic[A, B]):
    """Cursor holding one position in each of two sequences.

    Both positions are advanced together and never independently. No bounds
    checking is done: dereferencing at or past the end of either sequence
    raises whatever the underlying sequence raises.

    Example:
        ```python
        view = ZipView(names, scores)
        it, end = view.begin(), view.end()
        while it != end:
            name, score = it.deref()
            it.advance()
        ```
    """

    __slots__ = ("_first", "_second", "_access")

    # Unhashable: OR-equality is not transitive
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        first: Position[A],
        second: Position[B],
        access: Access = Access.MUTABLE,
    ) -> None:
        self._first = first
        self._second = second
        self._access = Access(access)

    @property
    def access(self) -> Access:
        return self._access

    @property
    def positions(self) -> Tuple[Position[A], Position[B]]:
        return (self._first, self._second)

    def deref(self) -> PairRef[A, B]:
        """Return a pair referencing the current element of each sequence."""
        return PairRef(self._first.copy(), self._second.copy(), self._access)

    @property
    def pair(self) -> PairRef[A, B]:
        return self.deref()

    def advance(self) -> "PairedCursor[A, B]":
        """Step both positions forward once (pre-increment).

        Returns:
            This cursor, so calls can be chained.
        """
        self._first.advance()
        self._second.advance()
        return self

    def post_advance(self) -> "PairedCursor[A, B]":
        """Step both positions forward once (post-increment).

        Returns:
            A copy of the cursor as it was before the step.
        """
        prior = self.copy()
        self.advance()
        return prior

    def copy(self) -> "PairedCursor[A, B]":
        return PairedCursor(self._first.copy(), self._second.copy(), self._access)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PairedCursor):
            return NotImplemented
        return self._first == other._first or self._second == other._second

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, PairedCursor):
            return NotImplemented
        return self._first != other._first and self._second != other._second

    def __repr__(self) -> str:
        return (
            f"PairedCursor({self._first.index}, {self._second.index}, "
            f"access={self._access.name})"
        )
