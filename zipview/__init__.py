"""zipview: lock-step iteration over two sequences without copying.

Primary API:
    ZipView - Borrowed adapter pairing two sequences by offset
    PairedCursor - Cursor advancing one position in each sequence together
    PairRef - Pair yielded by a cursor; writes through when mutable
    Access - MUTABLE or READ_ONLY element access

Example:
    from zipview import ZipView

    a, b = [1, 2, 3], [10, 20, 30]
    view = ZipView(a, b)

    it = view.begin().advance()
    it.deref().first = 99
    # a == [1, 99, 3]

    list(view.as_const().items())  # [(1, 10), (99, 20), (3, 30)]
"""

from __future__ import annotations

from zipview import logging
from zipview._version import __version__
from zipview.config import ZIP_CONFIG, ZipViewConfig
from zipview.cursor import PairedCursor, PairRef
from zipview.position import Position
from zipview.types.base import Access, SupportsPositions
from zipview.view import ZipView

__all__ = [
    # Version
    "__version__",
    # Adapter
    "ZipView",
    "PairedCursor",
    "PairRef",
    "Position",
    # Types
    "Access",
    "SupportsPositions",
    # Configuration
    "ZipViewConfig",
    "ZIP_CONFIG",
    # Utilities
    "logging",
]
