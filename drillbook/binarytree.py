"""Binary trees built from preorder token sequences with null markers."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

DEFAULT_NULL = "#"
DEMO_PREORDER = "ABD##E#H##CF##G##"


@dataclass
class TreeNode:
    """A node holding a value and two optional children."""

    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(tokens: Iterable[Any], null: Any = DEFAULT_NULL) -> Optional[TreeNode]:
    """Build a tree from a preorder sequence where ``null`` marks an empty child.

    Tokens after the tree is complete are ignored. A sequence that ends
    before the tree is complete raises ValueError.
    """
    stream = iter(tokens)

    def build() -> Optional[TreeNode]:
        try:
            token = next(stream)
        except StopIteration:
            raise ValueError("preorder sequence ends before the tree is complete") from None
        if token == null:
            return None
        node = TreeNode(token)
        node.left = build()
        node.right = build()
        return node

    return build()


def tree_size(root: Optional[TreeNode]) -> int:
    """Number of nodes in the tree."""
    if root is None:
        return 0
    return tree_size(root.left) + tree_size(root.right) + 1


def leaf_count(root: Optional[TreeNode]) -> int:
    """Number of nodes without children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return leaf_count(root.left) + leaf_count(root.right)


def level_size(root: Optional[TreeNode], k: int) -> int:
    """Number of nodes on level ``k``, the root being level 1."""
    if root is None or k < 1:
        return 0
    if k == 1:
        return 1
    return level_size(root.left, k - 1) + level_size(root.right, k - 1)


def find(root: Optional[TreeNode], value: Any) -> Optional[TreeNode]:
    """First node in preorder whose data equals ``value``, or None."""
    if root is None:
        return None
    if root.data == value:
        return root
    return find(root.left, value) or find(root.right, value)


def _pre(node: Optional[TreeNode], null: Any) -> Iterator[Any]:
    if node is None:
        if null is not None:
            yield null
        return
    yield node.data
    yield from _pre(node.left, null)
    yield from _pre(node.right, null)


def _in(node: Optional[TreeNode], null: Any) -> Iterator[Any]:
    if node is None:
        if null is not None:
            yield null
        return
    yield from _in(node.left, null)
    yield node.data
    yield from _in(node.right, null)


def _post(node: Optional[TreeNode], null: Any) -> Iterator[Any]:
    if node is None:
        if null is not None:
            yield null
        return
    yield from _post(node.left, null)
    yield from _post(node.right, null)
    yield node.data


def preorder(root: Optional[TreeNode], null: Any = None) -> list:
    """Preorder values; empty children appear as ``null`` unless it is None."""
    return list(_pre(root, null))


def inorder(root: Optional[TreeNode], null: Any = None) -> list:
    """Inorder values; empty children appear as ``null`` unless it is None."""
    return list(_in(root, null))


def postorder(root: Optional[TreeNode], null: Any = None) -> list:
    """Postorder values; empty children appear as ``null`` unless it is None."""
    return list(_post(root, null))


def main(argv: Optional[list] = None) -> int:
    """Build a tree from a preorder string and print its traversals and size."""
    args = sys.argv[1:] if argv is None else list(argv)
    text = args[0] if args else DEMO_PREORDER
    try:
        root = build_tree(text)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    for walk in (preorder, inorder, postorder):
        print("".join(f"{item}->" for item in walk(root, DEFAULT_NULL)))
    print(tree_size(root))
    return 0


if __name__ == "__main__":
    sys.exit(main())