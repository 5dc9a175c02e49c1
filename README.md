# bintrees_kit

A small toolkit for plain binary trees of integers. It builds nodes, inserts
children, walks a tree in pre-, in- and post-order, measures it, and draws it
as ASCII art.

## Installation

```
pip install .
```

## Building a tree

```python
from bintrees_kit.tree import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
root.insert_right(128)   # 128 takes 402's place; 402 becomes its right child
```

A `Node` has four attributes: `value`, `parent`, `left` and `right`.
`Node(value, parent)` creates a node that points to `parent`. It does not
attach itself to that parent. Set `parent.left` or `parent.right` yourself,
or use the insert methods.

`insert_left` and `insert_right` always put the new node directly under the
node they are called on, and they return the new node. If a child is already
in that position, it moves down one level and stays on the same side of the
new node.

`Node.delete()` detaches the node from its parent. It then clears the
`parent`, `left` and `right` links of every node in its subtree.

## Queries and measurements

```python
from bintrees_kit.tree import (
    balance, depth, height, inorder, internal_nodes, is_full, is_leaf,
    is_perfect, is_root, leaves, postorder, preorder, sibling, size, uncle,
)

list(preorder(root))     # node, left subtree, right subtree
list(inorder(root))      # left subtree, node, right subtree
list(postorder(root))    # left subtree, right subtree, node

height(root)             # edges on the longest path down; 0 for a leaf
depth(left)              # edges up to the root; 0 for the root
size(root)               # number of nodes
leaves(root)             # number of nodes with no children
internal_nodes(root)     # number of nodes with at least one child
balance(root)            # levels in the left subtree minus levels in the right
is_full(root)            # every node has zero or two children
is_perfect(root)         # full, with every leaf at the same depth
is_leaf(left), is_root(root)
sibling(left), uncle(left)   # a Node, or None
```

The traversal functions are generators of node values.

An empty tree is `None`. Every function accepts it and returns an empty
result:

- `0` for the counts and measurements
- `False` for the `is_*` checks
- `None` for `sibling` and `uncle`
- no values for the traversals

## Drawing a tree

```python
from bintrees_kit.render import print_tree, render

text = render(root)      # the drawing as a string, each line ending in "\n"
print_tree(root)         # writes the drawing to standard output
print_tree(root, file)   # or to any text file object
```

Each node is drawn as its value, zero-padded to three digits and wrapped in
parentheses. Dots and dashes link each node to its children. Each level of
the tree takes one line:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

`render(None)` returns an empty string.

## What it does not do

- It is a library only. It has no command-line program.
- Trees are not kept ordered or balanced. Values go exactly where
  `insert_left` and `insert_right` put them. There is no search, removal by
  value, or rebalancing.

## Running the tests

```
pip install .[test]
pytest
```