"""Tree subpackage for documentation tree primitives.

Re-exports the public API for the tree module:
- Node: immutable dataclass representing a category or document
- NodeKind: StrEnum of the two node kinds (CATEGORY, DOCUMENT)
- TreeBuilder: builds trees from nested mappings or a docs directory
- join_path / split_path: convert between segment tuples and path strings
"""

from sidebar_order.tree.builder import TreeBuilder
from sidebar_order.tree.nodes import Node, NodeKind
from sidebar_order.tree.paths import ROOT_KEY, SEPARATOR, join_path, split_path

__all__ = [
    "ROOT_KEY",
    "SEPARATOR",
    "Node",
    "NodeKind",
    "TreeBuilder",
    "join_path",
    "split_path",
]
