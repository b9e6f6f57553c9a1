"""Path strings for addressing categories in the documentation tree.

Node paths are tuples of segments. The order configuration addresses a
category by joining its segments with ``/``:

- Root is ``"."`` (``""`` is accepted as an alias when parsing)
- ``("javascript", "beginners-guide")`` -> ``"javascript/beginners-guide"``

Segments may not be empty, may not contain the separator, and may not be
``"."`` or ``".."``.
"""

from __future__ import annotations

from collections.abc import Iterable

SEPARATOR = "/"
ROOT_KEY = "."

_RESERVED_SEGMENTS = frozenset({".", ".."})


def segment_problem(segment: object) -> str | None:
    """Return a description of what is wrong with *segment*, or None if valid."""
    if not isinstance(segment, str):
        return f"segment must be a string, got {type(segment).__name__}"
    if not segment:
        return "segment is empty"
    if SEPARATOR in segment:
        return f"segment {segment!r} contains {SEPARATOR!r}"
    if segment in _RESERVED_SEGMENTS:
        return f"segment {segment!r} is reserved"
    return None


def join_path(segments: Iterable[str]) -> str:
    """Join path segments into the string form used by the order config.

    Args:
        segments: Path segments from the docs root. Empty for the root.

    Returns:
        ``"."`` for the root, otherwise the ``/``-joined segments.

    Raises:
        ValueError: If any segment is malformed.
    """
    parts = tuple(segments)
    for part in parts:
        problem = segment_problem(part)
        if problem is not None:
            msg = f"Malformed path {parts!r}: {problem}"
            raise ValueError(msg)
    return SEPARATOR.join(parts) if parts else ROOT_KEY


def split_path(text: str) -> tuple[str, ...]:
    """Split a joined path string back into segments.

    ``"."`` and ``""`` both denote the root and yield an empty tuple.

    Raises:
        ValueError: If the string has empty or reserved segments
            (``"a//b"``, ``"/a"``, ``"a/"``, ``"a/../b"``).
    """
    if text in (ROOT_KEY, ""):
        return ()
    parts = tuple(text.split(SEPARATOR))
    for part in parts:
        problem = segment_problem(part)
        if problem is not None:
            msg = f"Malformed path {text!r}: {problem}"
            raise ValueError(msg)
    return parts


def normalize_path(text: str) -> str:
    """Return the canonical form of a path string (root aliases collapse to ``"."``)."""
    return join_path(split_path(text))
