"""ZipView: non-owning lock-step adapter over two sequences."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Generic, Iterator, Optional, Tuple, Union

from zipview.config import ZIP_CONFIG, ZipViewConfig
from zipview.cursor import PairedCursor, PairRef
from zipview.logging import get_logger
from zipview.position import Position
from zipview.types.base import A, Access, B, SupportsPositions

logger = get_logger(__name__)

__all__ = ["ZipView"]


class ZipView(Generic[A, B]):
    """Borrowed view pairing the elements of two sequences by offset.

    The view stores references to both sequences and never copies them or
    changes their size. Each ``begin``/``end`` call builds fresh cursors from
    the sequences' current state. Traversal stops at the end of the shorter
    sequence.

    The caller must keep both sequences alive, and must not resize them, for
    as long as the view or any cursor built from it is in use. Setting
    ``ZipViewConfig.check_borrows`` makes cursors raise ``RuntimeError`` when a
    resize is detected.

    Example:
        ```python
        a, b = [1, 2, 3], [10, 20, 30]
        for pair in ZipView(a, b):
            pair.first += pair.second
        # a == [11, 22, 33]
        ```

    Attributes:
        first: First borrowed sequence.
        second: Second borrowed sequence.
        access: Access mode of cursors returned by ``begin``/``end``.
    """

    def __init__(
        self,
        first: SupportsPositions[A],
        second: SupportsPositions[B],
        access: Union[Access, str, None] = None,
        config: Optional[ZipViewConfig] = None,
    ) -> None:
        for label, sequence in (("first", first), ("second", second)):
            if isinstance(sequence, Mapping) or not isinstance(
                sequence, SupportsPositions
            ):
                raise TypeError(
                    f"ZipView {label} argument must support len() and integer "
                    f"indexing, got {type(sequence).__name__}"
                )

        self._config = config if config is not None else ZIP_CONFIG
        self._first = first
        self._second = second
        self._access = self._config.resolve_access(access)

        logger.debug(
            "Created %s ZipView over %s and %s",
            self._access.name,
            type(first).__name__,
            type(second).__name__,
        )

    @property
    def first(self) -> SupportsPositions[A]:
        return self._first

    @property
    def second(self) -> SupportsPositions[B]:
        return self._second

    @property
    def access(self) -> Access:
        return self._access

    def _cursor(self, at_end: bool, access: Access) -> PairedCursor[A, B]:
        check = self._config.check_borrows
        make = Position.end if at_end else Position.begin
        return PairedCursor(make(self._first, check), make(self._second, check), access)

    def begin(self) -> PairedCursor[A, B]:
        """Return a cursor at the first element of both sequences."""
        return self._cursor(False, self._access)

    def end(self) -> PairedCursor[A, B]:
        """Return a cursor at the end position of both sequences."""
        return self._cursor(True, self._access)

    def cbegin(self) -> PairedCursor[A, B]:
        """Return a read-only cursor at the first element of both sequences."""
        return self._cursor(False, Access.READ_ONLY)

    def cend(self) -> PairedCursor[A, B]:
        """Return a read-only cursor at the end position of both sequences."""
        return self._cursor(True, Access.READ_ONLY)

    def as_const(self) -> "ZipView[A, B]":
        """Return a read-only view over the same sequences."""
        return ZipView(self._first, self._second, Access.READ_ONLY, self._config)

    def __iter__(self) -> Iterator[PairRef[A, B]]:
        it, end = self.begin(), self.end()
        count = 0
        while it != end:
            yield it.deref()
            it.advance()
            count += 1
        logger.debug("ZipView traversal finished after %d pairs", count)

    def items(self) -> Iterator[Tuple[A, B]]:
        """Yield the current ``(first, second)`` values as plain tuples."""
        for pair in self:
            yield pair.as_tuple()

    def __len__(self) -> int:
        return min(len(self._first), len(self._second))

    def __repr__(self) -> str:
        return (
            f"ZipView({type(self._first).__name__}[{len(self._first)}], "
            f"{type(self._second).__name__}[{len(self._second)}], "
            f"access={self._access.name})"
        )
