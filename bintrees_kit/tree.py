"""Binary tree nodes and the measurements and traversals defined on them."""

from __future__ import annotations

from collections.abc import Iterator


class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child becomes its left child."""
        new = Node(value, self)
        if self.left is not None:
            new.left = self.left
            self.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child becomes its right child."""
        new = Node(value, self)
        if self.right is not None:
            new.right = self.right
            self.right.parent = new
        self.right = new
        return new

    def delete(self) -> None:
        """Detach this subtree from its parent and break every link inside it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
        for node in list(_walk(self)):
            node.parent = None
            node.left = None
            node.right = None


def _children(node: Node) -> Iterator[Node]:
    if node.left is not None:
        yield node.left
    if node.right is not None:
        yield node.right


def _walk(tree: Node | None) -> Iterator[Node]:
    """Yield the nodes of a tree in pre-order."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _levels(tree: Node | None) -> int:
    """Number of levels in a tree: 0 for an empty tree, 1 for a single node."""
    count = 0
    level = [tree] if tree is not None else []
    while level:
        count += 1
        level = [child for node in level for child in _children(node)]
    return count


def is_leaf(node: Node | None) -> bool:
    """True if the node exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Node | None) -> bool:
    """True if the node exists and has no parent."""
    return node is not None and node.parent is None


def preorder(tree: Node | None) -> Iterator[int]:
    """Yield values in pre-order: node, left subtree, right subtree."""
    for node in _walk(tree):
        yield node.value


def inorder(tree: Node | None) -> Iterator[int]:
    """Yield values in in-order: left subtree, node, right subtree."""
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Node | None) -> Iterator[int]:
    """Yield values in post-order: left subtree, right subtree, node."""
    order: list[int] = []
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        order.append(node.value)
        stack.extend(_children(node))
    yield from reversed(order)


def height(tree: Node | None) -> int:
    """Number of edges on the longest path down from the node; 0 for a leaf or None."""
    return max(_levels(tree) - 1, 0)


def depth(node: Node | None) -> int:
    """Number of edges from the node up to the root; 0 for None."""
    count = 0
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Node | None) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Node | None) -> int:
    """Number of nodes without children."""
    return sum(1 for node in _walk(tree) if is_leaf(node))


def internal_nodes(tree: Node | None) -> int:
    """Number of nodes with at least one child."""
    return sum(1 for node in _walk(tree) if not is_leaf(node))


def balance(tree: Node | None) -> int:
    """Balance factor: levels of the left subtree minus levels of the right."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Node | None) -> bool:
    """True if every node has either zero or two children."""
    if tree is None:
        return False
    return all(
        (node.left is None) == (node.right is None) for node in _walk(tree)
    )


def is_perfect(tree: Node | None) -> bool:
    """True if the tree is full and all its leaves lie at the same depth."""
    if tree is None:
        return False
    return size(tree) == 2 ** (height(tree) + 1) - 1


def sibling(node: Node | None) -> Node | None:
    """The other child of the node's parent, or None."""
    if node is None or node.parent is None:
        return None
    if node is node.parent.left:
        return node.parent.right
    return node.parent.left


def uncle(node: Node | None) -> Node | None:
    """The sibling of the node's parent, or None."""
    if node is None:
        return None
    return sibling(node.parent)