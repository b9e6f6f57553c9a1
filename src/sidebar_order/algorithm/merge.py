"""merge_order: apply one explicit key order to one list of siblings.

Items named by the explicit order come first, in the listed order. Every
other item follows in its original relative order. Nothing is dropped and
nothing is duplicated, so the output is always a permutation of the input.

Runs in ``O(len(items) + len(explicit))``.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class MergeOutcome(Generic[T]):
    """Result of merging one explicit order into one sibling list.

    Attributes:
        ordered:           All input items in their new order.
        unknown_keys:      Explicit keys that matched no item, in listed order.
        duplicate_keys:    Explicit keys listed more than once (reported once each).
        unconfigured_keys: Keys of items not named by the explicit order, in
                           their appended order. Items without a key are
                           appended too but not listed here.
    """

    ordered: tuple[T, ...]
    unknown_keys: tuple[str, ...] = ()
    duplicate_keys: tuple[str, ...] = ()
    unconfigured_keys: tuple[str, ...] = ()


def merge_order(
    items: Iterable[T],
    explicit: Sequence[str],
    key: Callable[[T], Hashable | None],
) -> MergeOutcome[T]:
    """Order *items* by *explicit*, appending everything it does not mention.

    Args:
        items:    Siblings in their default order.
        explicit: Keys in the desired order. May name keys that are not
                  present and may omit keys that are.
        key:      Maps an item to its key. Items mapping to None are never
                  matched. When several items share a key, the first one is
                  the one the explicit order places.

    Returns:
        A MergeOutcome whose ``ordered`` is a permutation of *items*.
    """
    pool = list(items)
    keys = [key(item) for item in pool]

    index_of: dict[Hashable, int] = {}
    for idx, item_key in enumerate(keys):
        if item_key is not None and item_key not in index_of:
            index_of[item_key] = idx

    taken = [False] * len(pool)
    ordered: list[T] = []
    unknown: list[str] = []
    duplicates: list[str] = []
    listed: set[str] = set()
    reported: set[str] = set()

    for wanted in explicit:
        if wanted in listed:
            if wanted not in reported:
                reported.add(wanted)
                duplicates.append(wanted)
            continue
        listed.add(wanted)

        idx = index_of.get(wanted)
        if idx is None:
            unknown.append(wanted)
            continue
        taken[idx] = True
        ordered.append(pool[idx])

    unconfigured: list[str] = []
    for idx, item in enumerate(pool):
        if taken[idx]:
            continue
        ordered.append(item)
        if keys[idx] is not None:
            unconfigured.append(str(keys[idx]))

    return MergeOutcome(
        ordered=tuple(ordered),
        unknown_keys=tuple(unknown),
        duplicate_keys=tuple(duplicates),
        unconfigured_keys=tuple(unconfigured),
    )
