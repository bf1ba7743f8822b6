"""
AVL insertion with balance tags.

Each node stores which of its subtrees is taller instead of a height. The
recursive insert reports back whether the subtree it rebuilt grew by one
level; the parent uses that signal together with its own tag to decide
between re-tagging and rotating. One rotation always absorbs the growth, so
at most one rotation happens per insert.
"""

import logging
from enum import Enum
from typing import Any, Optional, Tuple

from avl_dict.tree import Balance, Comparator, Node, Tree, natural_compare

logger = logging.getLogger(__name__)


class HeightChange(Enum):
    UNCHANGED = 0
    GREW = 1


def insert(tree: Tree, key: Any, value: Any, cmp: Optional[Comparator] = None) -> Node:
    """Return a new tree with key bound to value. The given tree is left untouched."""
    root, _ = _insert(tree, key, value, cmp or natural_compare)
    return root


def _insert(node: Tree, key: Any, value: Any, cmp: Comparator) -> Tuple[Node, HeightChange]:
    if node is None:
        return Node(key, value), HeightChange.GREW

    order = cmp(key, node.key)
    if order == 0:
        return Node(node.key, value, node.left, node.right, node.balance), HeightChange.UNCHANGED

    if order < 0:
        left, change = _insert(node.left, key, value, cmp)
        if change is HeightChange.UNCHANGED:
            return Node(node.key, node.value, left, node.right, node.balance), HeightChange.UNCHANGED
        if node.balance is Balance.RIGHT_HEAVY:
            return Node(node.key, node.value, left, node.right, Balance.BALANCED), HeightChange.UNCHANGED
        if node.balance is Balance.BALANCED:
            return Node(node.key, node.value, left, node.right, Balance.LEFT_HEAVY), HeightChange.GREW
        return _rotate_right(node, left), HeightChange.UNCHANGED

    right, change = _insert(node.right, key, value, cmp)
    if change is HeightChange.UNCHANGED:
        return Node(node.key, node.value, node.left, right, node.balance), HeightChange.UNCHANGED
    if node.balance is Balance.LEFT_HEAVY:
        return Node(node.key, node.value, node.left, right, Balance.BALANCED), HeightChange.UNCHANGED
    if node.balance is Balance.BALANCED:
        return Node(node.key, node.value, node.left, right, Balance.RIGHT_HEAVY), HeightChange.GREW
    return _rotate_left(node, right), HeightChange.UNCHANGED


def _double_rotation_tags(pivot: Balance) -> Tuple[Balance, Balance]:
    """Tags of the (left, right) nodes displaced by a double rotation around pivot."""
    if pivot is Balance.LEFT_HEAVY:
        return Balance.BALANCED, Balance.RIGHT_HEAVY
    if pivot is Balance.RIGHT_HEAVY:
        return Balance.LEFT_HEAVY, Balance.BALANCED
    return Balance.BALANCED, Balance.BALANCED


def _rotate_right(parent: Node, left: Node) -> Node:
    """
    Rebalance parent, already left-heavy, whose left subtree grew into left.

    A left-leaning (or balanced) child is lifted with a single rotation. A
    right-leaning child needs the left-right double rotation, which lifts
    the child's right subtree to the root.
    """
    if left.balance is not Balance.RIGHT_HEAVY:
        # a balanced grown child cannot come out of insertion; it takes the single path
        logger.debug("single right rotation at %r", parent.key)
        lowered = Node(parent.key, parent.value, left.right, parent.right, Balance.BALANCED)
        return Node(left.key, left.value, left.left, lowered, Balance.BALANCED)

    pivot = left.right
    assert pivot is not None, "right-heavy child without a right subtree"
    logger.debug("left-right rotation at %r, pivot %r", parent.key, pivot.key)
    left_tag, right_tag = _double_rotation_tags(pivot.balance)
    new_left = Node(left.key, left.value, left.left, pivot.left, left_tag)
    new_right = Node(parent.key, parent.value, pivot.right, parent.right, right_tag)
    return Node(pivot.key, pivot.value, new_left, new_right, Balance.BALANCED)


def _rotate_left(parent: Node, right: Node) -> Node:
    """Mirror image of _rotate_right for a right-heavy parent whose right subtree grew."""
    if right.balance is not Balance.LEFT_HEAVY:
        logger.debug("single left rotation at %r", parent.key)
        lowered = Node(parent.key, parent.value, parent.left, right.left, Balance.BALANCED)
        return Node(right.key, right.value, lowered, right.right, Balance.BALANCED)

    pivot = right.left
    assert pivot is not None, "left-heavy child without a left subtree"
    logger.debug("right-left rotation at %r, pivot %r", parent.key, pivot.key)
    left_tag, right_tag = _double_rotation_tags(pivot.balance)
    new_left = Node(parent.key, parent.value, parent.left, pivot.left, left_tag)
    new_right = Node(right.key, right.value, pivot.right, right.right, right_tag)
    return Node(pivot.key, pivot.value, new_left, new_right, Balance.BALANCED)
