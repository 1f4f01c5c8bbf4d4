# bintree

A small library for building and inspecting binary trees of integers.

Each `bintree.node.Node` holds a value `n` and links to its `parent`, `left`
and `right` nodes. Creating a node with a parent does not attach it to that
parent: assign it to `left` or `right`, or use the insert methods. On top of
that a node offers:

- building: `insert_left`, `insert_right` (the new child takes the old
  child's place and the old child hangs below it on the same side), and
  `delete`, which detaches the subtree from its parent and unlinks every node
  in it
- traversals as generators of values: `preorder`, `inorder`, `postorder`
- measurements: `height` (edges on the longest path down to a leaf), `depth`
  (edges up to the root), `size`, `leaves`, `internal_nodes` (nodes with at
  least one child), `balance` (levels in the left subtree minus levels in the
  right)
- shape checks: `is_leaf`, `is_root`, `is_full`, `is_perfect`
- relatives: `sibling`, `uncle` (each `None` when there is none)

The `bintree.display` module draws a tree sideways as text, with the right
subtree above its parent and the left subtree below it. Each node appears as
`____(nnn)`, with `L--` or `R--` before the value when it is a left or right
child.

## Installation

```
pip install .
```

## Usage

```python
from bintree.node import Node
from bintree.display import render, print_tree

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)

print(list(root.preorder()))  # [98, 12, 54, 128, 402]
print(root.height(), root.size(), root.leaves())

print_tree(root)               # writes to standard output
text = render(root)            # the same drawing as a string
```

`print_tree` also takes a file object to write to instead of standard output.

## Examples

The `bintree.demo` module holds worked examples, numbered 0 to 18. Each one
builds a small tree, draws it and prints what one of the operations reports
about it. Run them from the command line:

```
bintree-demo 14
```

Several numbers may be given at once; with none, every example runs in turn.
From Python, `bintree.demo.run_example(number, file)` runs one example and
raises `ValueError` for a number that has no example.

## Tests

```
pip install .[test]
pytest
```