"""Full-tree verification of the search order and the AVL balance tags."""

import logging
from typing import Any, Optional, Tuple

from avl_dict.tree import Balance, Comparator, Tree, natural_compare

logger = logging.getLogger(__name__)

_NO_BOUND = object()


class InvariantError(AssertionError):
    pass


def check_invariants(tree: Tree, cmp: Optional[Comparator] = None) -> int:
    """
    Walk the whole tree and return its true height.

    Raises InvariantError on the first node that is out of order, whose
    subtree heights differ by more than one, or whose stored tag disagrees
    with the heights actually measured.
    """
    try:
        return _check(tree, cmp or natural_compare, _NO_BOUND, _NO_BOUND)
    except InvariantError as exc:
        logger.debug("invariant check failed: %s", exc)
        raise


def _expected_balance(left_height: int, right_height: int) -> Balance:
    if left_height > right_height:
        return Balance.LEFT_HEAVY
    if right_height > left_height:
        return Balance.RIGHT_HEAVY
    return Balance.BALANCED


def _check(node: Tree, cmp: Comparator, low: Any, high: Any) -> int:
    if node is None:
        return 0
    if low is not _NO_BOUND and cmp(node.key, low) <= 0:
        raise InvariantError(f"key {node.key!r} is not greater than ancestor {low!r}")
    if high is not _NO_BOUND and cmp(node.key, high) >= 0:
        raise InvariantError(f"key {node.key!r} is not less than ancestor {high!r}")

    hl = _check(node.left, cmp, low, node.key)
    hr = _check(node.right, cmp, node.key, high)
    if abs(hl - hr) > 1:
        raise InvariantError(f"node {node.key!r} has subtree heights {hl} and {hr}")
    expected = _expected_balance(hl, hr)
    if node.balance is not expected:
        raise InvariantError(
            f"node {node.key!r} is tagged {node.balance.name} but is {expected.name}")
    return 1 + max(hl, hr)


def is_balanced(tree: Tree) -> bool:
    return _measure(tree)[1]


def _measure(node: Tree) -> Tuple[int, bool]:
    if node is None:
        return 0, True
    hl, ok_left = _measure(node.left)
    hr, ok_right = _measure(node.right)
    ok = ok_left and ok_right and abs(hl - hr) <= 1 and node.balance is _expected_balance(hl, hr)
    return 1 + max(hl, hr), ok


def is_ordered(tree: Tree, cmp: Optional[Comparator] = None) -> bool:
    cmp = cmp or natural_compare
    previous = _NO_BOUND
    stack = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        if previous is not _NO_BOUND and cmp(previous, node.key) >= 0:
            return False
        previous = node.key
        node = node.right
    return True
