"""Configuration classes for zipview components."""

from __future__ import annotations

from dataclasses import dataclass

from zipview.types.base import Access


@dataclass
class ZipViewConfig:
    """Configuration for zip views and the cursors they produce."""

    # Access mode used when a view is built without an explicit one
    default_access: Access = Access.MUTABLE

    # Snapshot sequence lengths in positions and verify them on every
    # dereference and advance
    check_borrows: bool = False

    def resolve_access(self, access: Access | str | None) -> Access:
        """Return the effective access mode for a view.

        Args:
            access: Explicit mode, its name as a string, or None for the default.

        Returns:
            The Access member to use.
        """
        if access is None:
            return self.default_access
        if isinstance(access, str):
            return Access.from_string(access)
        return Access(access)


# Global configuration instance
ZIP_CONFIG = ZipViewConfig()
