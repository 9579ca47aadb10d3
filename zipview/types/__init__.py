"""Shared typing constructs for zipview.

Defines the access-mode enum, element type variables, and the sequence
capability protocol. Contains no traversal logic.
"""

from zipview.types.base import A, Access, B, SupportsPositions

__all__ = [
    # Enums
    "Access",
    # Protocols
    "SupportsPositions",
    # Type variables
    "A",
    "B",
]
