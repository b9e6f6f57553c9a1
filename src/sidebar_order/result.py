"""Diagnostic and ResolutionResult dataclasses for resolver output.

This module provides the rich result type returned by OrderResolver.resolve()
and resolve_with_report(): the reordered tree plus every configuration-drift
diagnostic collected during the pass.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum, auto

from sidebar_order.tree.nodes import Node

__all__ = ["Diagnostic", "DiagnosticKind", "ResolutionResult", "Severity"]


class Severity(StrEnum):
    """How loudly a diagnostic is reported.

    - NOTICE  -> "notice"  : informational; logged at INFO
    - WARNING -> "warning" : configuration drift an editor should fix
    """

    NOTICE = auto()
    WARNING = auto()


class DiagnosticKind(StrEnum):
    """What a diagnostic is about.

    - UNKNOWN_KEY        : a configured key matches no child at its path
    - DUPLICATE_KEY      : a key is listed more than once in one order
    - UNCONFIGURED_CHILD : a child was appended after an explicit order
    - UNKNOWN_PATH       : a configured path matches no category in the tree
    """

    UNKNOWN_KEY = auto()
    DUPLICATE_KEY = auto()
    UNCONFIGURED_CHILD = auto()
    UNKNOWN_PATH = auto()


_TEMPLATES: dict[DiagnosticKind, str] = {
    DiagnosticKind.UNKNOWN_KEY: "{path}: configured key {key!r} matches no child",
    DiagnosticKind.DUPLICATE_KEY: "{path}: key {key!r} is listed more than once",
    DiagnosticKind.UNCONFIGURED_CHILD: "{path}: child {key!r} is not in the explicit order; appended",
    DiagnosticKind.UNKNOWN_PATH: "{path}: configured path matches no category",
}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A recoverable configuration issue found during resolution.

    Attributes:
        kind:     What went wrong (see DiagnosticKind).
        severity: NOTICE or WARNING.
        path:     Joined path of the category the issue was found at.
        key:      The offending child key; empty for UNKNOWN_PATH.
    """

    kind: DiagnosticKind
    severity: Severity
    path: str
    key: str = ""

    @property
    def message(self) -> str:
        return _TEMPLATES[self.kind].format(path=self.path, key=self.key)


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Result of a resolution pass.

    Attributes:
        tree:        The resolved tree. Same nodes as the input at every level;
                     only sibling order differs.
        diagnostics: Every diagnostic from the pass, in tree-walk order.
    """

    tree: Node
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.WARNING]

    @property
    def notices(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.NOTICE]

    @property
    def has_warnings(self) -> bool:
        return any(d.severity == Severity.WARNING for d in self.diagnostics)

    def order_at(self, path: tuple[str, ...] | list[str] = ()) -> list[str]:
        """Child keys of the category at *path* in resolved order.

        Raises:
            KeyError: If *path* does not exist in the resolved tree.
        """
        node = self.tree.find(path)
        if node is None:
            raise KeyError(path)
        return node.child_keys()

    def log(self, logger: logging.Logger) -> None:
        """Emit all diagnostics to *logger* in one batch.

        Warnings go out at WARNING level, notices at INFO, each batch preceded
        by a one-line summary so the full list reads as a single report.
        """
        warnings = self.warnings
        notices = self.notices
        if warnings:
            logger.warning(
                "Sidebar order config has %d warning(s):\n%s",
                len(warnings),
                "\n".join(f"  {d.message}" for d in warnings),
            )
        if notices:
            logger.info(
                "Sidebar order appended %d unconfigured child(ren):\n%s",
                len(notices),
                "\n".join(f"  {d.message}" for d in notices),
            )
