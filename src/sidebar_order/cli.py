"""Command-line entry point: resolve a docs directory against an order file.

Usage::

    python -m sidebar_order docs/ sidebar-order.yaml
    python -m sidebar_order docs/ sidebar-order.json --json
    python -m sidebar_order docs/ sidebar-order.yaml --strict

Exit codes: 0 on success, 1 on a structural or configuration error, 2 when
``--strict`` is given and warnings were reported.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from sidebar_order.algorithm.config import ResolverConfig, UnknownKeyPolicy
from sidebar_order.api import resolve_with_report
from sidebar_order.exceptions import SidebarOrderError
from sidebar_order.order_config import OrderConfig
from sidebar_order.tree.builder import DEFAULT_EXTENSIONS, TreeBuilder
from sidebar_order.tree.nodes import Node

logger = logging.getLogger("sidebar_order")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_WARNINGS = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sidebar-order",
        description="Resolve documentation sidebar order from a docs directory and an order file.",
    )
    parser.add_argument("docs_dir", help="Documentation root directory")
    parser.add_argument("order_config", help="Order file (.json, .yaml or .yml)")
    parser.add_argument(
        "--extension",
        dest="extensions",
        action="append",
        metavar="EXT",
        help=f"Document file extension (repeatable; default: {' '.join(DEFAULT_EXTENSIONS)})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the resolved tree as JSON instead of an indented outline",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unknown configured keys and exit non-zero on any warning",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show notices and debug output")
    return parser


def format_outline(tree: Node) -> str:
    """Render the tree as an indented outline, categories suffixed with ``/``."""
    base = len(tree.path) + 1
    lines = [
        f"{'  ' * (len(node.path) - base)}{node.key}{'/' if node.is_category else ''}"
        for node in tree.walk()
        if node is not tree
    ]
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    policy = UnknownKeyPolicy.ERROR if args.strict else UnknownKeyPolicy.WARN
    try:
        builder = TreeBuilder(tuple(args.extensions)) if args.extensions else TreeBuilder()
        tree = builder.from_directory(args.docs_dir)
        order_config = OrderConfig.from_file(args.order_config)
        result = resolve_with_report(
            tree, order_config, ResolverConfig(unknown_key_policy=policy)
        )
    except (SidebarOrderError, OSError) as exc:
        logger.error("%s", exc)
        return EXIT_ERROR

    if args.json:
        print(json.dumps(result.tree.to_dict(), indent=2))
    else:
        print(format_outline(result.tree))

    result.log(logger)
    if args.strict and result.has_warnings:
        return EXIT_WARNINGS
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
