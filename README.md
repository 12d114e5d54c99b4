# bintree

A small library for building and inspecting binary trees of integers.

## Building a tree

```python
from bintree.node import Node

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)   # the existing right child (402) moves below the new node
```

`Node(value, parent=...)` only records the parent; it does not attach the
new node as a child. To attach, assign it to `parent.left` or `parent.right`,
or use `insert_left` and `insert_right`.

`insert_left` and `insert_right` put a new node between a parent and its
existing child on that side, and return the new node.

Each node can report on where it sits in the tree:

- `is_leaf()`: true when the node has no children
- `is_root()`: true when the node has no parent
- `depth()`: number of edges from the node up to the root
- `sibling()`: the other child of the node's parent, or `None`
- `uncle()`: the sibling of the node's parent, or `None`

`delete(tree)` takes a whole (sub)tree apart, unlinking every node in it and
detaching it from its parent. `delete(None)` does nothing.

## Traversals

```python
from bintree.traversal import preorder, inorder, postorder

list(preorder(root))
list(inorder(root))
list(postorder(root))
```

Each is a generator yielding node values in the given order; an empty tree
(`None`) yields nothing.

## Metrics

`bintree.metrics` provides:

- `height(tree)`: edges on the longest downward path; 0 for a leaf or `None`
- `size(tree)`: number of nodes
- `leaves(tree)`: number of nodes without children
- `internal_nodes(tree)`: number of nodes with at least one child
- `balance(tree)`: height of the left subtree minus height of the right subtree
- `is_full(tree)`: every node has zero or two children (`False` for `None`)
- `is_perfect(tree)`: full, with all leaves on one level (`False` for `None`)

## Printing

```python
from bintree.node import Node
from bintree.printing import render, print_tree

root = Node(98)
root.insert_left(12)
root.insert_right(402)

print(render(root))
print_tree(root)          # writes to standard output
```

```
  .--(098)--.
(012)     (402)
```

Values are drawn as zero-padded `(NNN)` boxes, with a connector line above
each level that leads down to its children. `render` returns the lines joined
by newlines (an empty string for `None`); `print_tree(tree, file)` writes each
line with a trailing newline to `file`, or to standard output when `file` is
omitted, and writes nothing for `None`.

## What it does not do

`bintree` is a library only: it has no command-line tool, and it does not
save or load trees.

## Running the tests

```
pip install -e .[test]
pytest
```