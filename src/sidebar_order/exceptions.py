"""Custom exceptions for sidebar-order."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sidebar_order.result import Diagnostic


class SidebarOrderError(Exception):
    """Base exception for sidebar-order operations."""


class StructuralError(SidebarOrderError):
    """The documentation tree itself is malformed.

    Raised for duplicate sibling keys, malformed node paths, or documents that
    own children. Always fatal: it points at a defect in the tree loader or a
    corrupted input, not at the ordering configuration.
    """

    def __init__(self, message: str, path: str = ".") -> None:
        super().__init__(f"{message} (at {path!r})")
        self.path = path


class ConfigError(SidebarOrderError):
    """The order configuration could not be loaded or is not well formed."""


class UnknownKeyError(ConfigError):
    """Configured keys matched no child and the policy forbids ignoring them."""

    def __init__(self, diagnostics: Sequence[Diagnostic]) -> None:
        self.diagnostics = tuple(diagnostics)
        lines = "\n".join(f"  {d.message}" for d in self.diagnostics)
        super().__init__(
            f"{len(self.diagnostics)} configured key(s) match no child:\n{lines}"
        )
