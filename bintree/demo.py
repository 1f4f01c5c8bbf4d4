"""Worked examples that build small trees and report on them."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence, TextIO

from bintree.display import print_tree
from bintree.node import Node


def _null(node: Optional[Node]) -> str:
    return "(nil)" if node is None else str(node.n)


def _three_level_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(56, root.left)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def _small_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _family_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def _example_0(out: TextIO) -> None:
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    print_tree(root, out)


def _example_1(out: TextIO) -> None:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    print_tree(root, out)
    print(file=out)
    root.right.insert_left(128)
    root.insert_left(54)
    print_tree(root, out)


def _example_2(out: TextIO) -> None:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    print_tree(root, out)
    print(file=out)
    root.left.insert_right(54)
    root.insert_right(128)
    print_tree(root, out)


def _example_3(out: TextIO) -> None:
    root = _small_tree()
    print_tree(root, out)
    root.delete()


def _report(out: TextIO, template: str, nodes: Sequence[Node],
            measure: Callable[[Node], object]) -> None:
    for node in nodes:
        print(template.format(node.n, measure(node)), file=out)


def _small_tree_report(out: TextIO, template: str,
                       measure: Callable[[Node], object]) -> None:
    root = _small_tree()
    print_tree(root, out)
    _report(out, template, [root, root.right, root.left.right], measure)


def _example_4(out: TextIO) -> None:
    root = _small_tree()
    print_tree(root, out)
    _report(out, "Is {} a leaf: {}", [root, root.right, root.right.right],
            lambda node: int(node.is_leaf()))


def _example_5(out: TextIO) -> None:
    root = _small_tree()
    print_tree(root, out)
    _report(out, "Is {} a root: {}", [root, root.right, root.right.right],
            lambda node: int(node.is_root()))


def _traversal_example(out: TextIO, order: Callable[[Node], object]) -> None:
    root = _three_level_tree()
    print_tree(root, out)
    for value in order(root):
        print(value, file=out)


def _example_6(out: TextIO) -> None:
    _traversal_example(out, Node.preorder)


def _example_7(out: TextIO) -> None:
    _traversal_example(out, Node.inorder)


def _example_8(out: TextIO) -> None:
    _traversal_example(out, Node.postorder)


def _example_9(out: TextIO) -> None:
    _small_tree_report(out, "Height from {}: {}", Node.height)


def _example_10(out: TextIO) -> None:
    _small_tree_report(out, "Depth of {}: {}", Node.depth)


def _example_11(out: TextIO) -> None:
    _small_tree_report(out, "Size of {}: {}", Node.size)


def _example_12(out: TextIO) -> None:
    _small_tree_report(out, "Leaves in {}: {}", Node.leaves)


def _example_13(out: TextIO) -> None:
    _small_tree_report(out, "Nodes in {}: {}", Node.internal_nodes)


def _example_14(out: TextIO) -> None:
    root = _small_tree()
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    print_tree(root, out)
    _report(out, "Balance of {}: {:+d}",
            [root, root.right, root.left.left.right], Node.balance)


def _example_15(out: TextIO) -> None:
    root = _small_tree()
    root.left.left = Node(10, root.left)
    print_tree(root, out)
    _report(out, "Is {} full: {}", [root, root.left, root.right],
            lambda node: int(node.is_full()))


def _example_16(out: TextIO) -> None:
    root = _small_tree()
    root.left.left = Node(10, root.left)
    root.right.left = Node(10, root.right)

    print_tree(root, out)
    print(f"Perfect: {int(root.is_perfect())}\n", file=out)

    root.right.right.left = Node(10, root.right.right)
    print_tree(root, out)
    print(f"Perfect: {int(root.is_perfect())}\n", file=out)

    root.right.right.right = Node(10, root.right.right)
    print_tree(root, out)
    print(f"Perfect: {int(root.is_perfect())}", file=out)


def _example_17(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.left, root.right.left, root.left.right, root):
        print(f"Sibling of {node.n}: {_null(node.sibling())}", file=out)


def _example_18(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.right.left, root.left.right, root.left):
        print(f"Uncle of {node.n}: {_null(node.uncle())}", file=out)


EXAMPLES: dict[int, Callable[[TextIO], None]] = {
    0: _example_0,
    1: _example_1,
    2: _example_2,
    3: _example_3,
    4: _example_4,
    5: _example_5,
    6: _example_6,
    7: _example_7,
    8: _example_8,
    9: _example_9,
    10: _example_10,
    11: _example_11,
    12: _example_12,
    13: _example_13,
    14: _example_14,
    15: _example_15,
    16: _example_16,
    17: _example_17,
    18: _example_18,
}


def run_example(number: int, file: Optional[TextIO] = None) -> None:
    """Run the numbered example, writing its output to ``file``."""
    try:
        example = EXAMPLES[number]
    except KeyError:
        raise ValueError(f"no example numbered {number}") from None
    example(file if file is not None else sys.stdout)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the examples named on the command line, or all of them."""
    parser = argparse.ArgumentParser(
        prog="bintree", description="Run the binary tree examples."
    )
    parser.add_argument(
        "examples", nargs="*", type=int, metavar="N",
        help=f"example numbers from {min(EXAMPLES)} to {max(EXAMPLES)}",
    )
    args = parser.parse_args(argv)
    numbers = args.examples or sorted(EXAMPLES)
    for number in numbers:
        if number not in EXAMPLES:
            parser.error(f"no example numbered {number}")
    for number in numbers:
        run_example(number)
    return 0


if __name__ == "__main__":
    sys.exit(main())