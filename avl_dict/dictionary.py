"""
Ordered dictionary operations over AVL trees.

Everything here is read-only descent or path copying; nothing rebalances
except insert (and from_list, which is repeated insert). Trees are passed
and returned as root handles, with None standing for the empty tree.
"""

from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, TypeVar

from avl_dict.balancer import insert
from avl_dict.tree import Comparator, Node, Tree, natural_compare

A = TypeVar('A')

EMPTY: Tree = None


def lookup(tree: Tree, key: Any, default: Any = None, cmp: Optional[Comparator] = None) -> Any:
    """Value bound to key, or default when the key is absent."""
    cmp = cmp or natural_compare
    node = tree
    while node is not None:
        order = cmp(key, node.key)
        if order == 0:
            return node.value
        node = node.left if order < 0 else node.right
    return default


def contains_key(tree: Tree, key: Any, cmp: Optional[Comparator] = None) -> bool:
    cmp = cmp or natural_compare
    node = tree
    while node is not None:
        order = cmp(key, node.key)
        if order == 0:
            return True
        node = node.left if order < 0 else node.right
    return False


def update(tree: Tree, key: Any, f: Callable[[Any], Any], cmp: Optional[Comparator] = None) -> Tree:
    """
    Apply f to the value bound to key, copying only the path down to it.

    Shape and balance tags are kept as they are. If the key is absent the
    very same tree is returned.
    """
    return _update(tree, key, f, cmp or natural_compare)


def _update(node: Tree, key: Any, f: Callable[[Any], Any], cmp: Comparator) -> Tree:
    if node is None:
        return None
    order = cmp(key, node.key)
    if order == 0:
        return Node(node.key, f(node.value), node.left, node.right, node.balance)
    if order < 0:
        left = _update(node.left, key, f, cmp)
        if left is node.left:
            return node
        return Node(node.key, node.value, left, node.right, node.balance)
    right = _update(node.right, key, f, cmp)
    if right is node.right:
        return node
    return Node(node.key, node.value, node.left, right, node.balance)


def fold(tree: Tree, step: Callable[[Any, Any, A], A], init: A) -> A:
    """
    Fold step(key, value, acc) over the tree from the largest key down.

    Visiting right subtree, node, then left subtree means an accumulator
    built by prepending ends up in ascending key order.
    """
    if tree is None:
        return init
    acc = fold(tree.right, step, init)
    acc = step(tree.key, tree.value, acc)
    return fold(tree.left, step, acc)


def items(tree: Tree) -> Iterator[Tuple[Any, Any]]:
    stack: List[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.key, node.value
        node = node.right


def to_list(tree: Tree) -> List[Tuple[Any, Any]]:
    pairs = fold(tree, lambda k, v, acc: acc.append((k, v)) or acc, [])
    pairs.reverse()
    return pairs


def keys(tree: Tree) -> List[Any]:
    return [k for k, _ in to_list(tree)]


def values(tree: Tree) -> List[Any]:
    return [v for _, v in to_list(tree)]


def size(tree: Tree) -> int:
    return fold(tree, lambda k, v, n: n + 1, 0)


def is_empty(tree: Tree) -> bool:
    return tree is None


def contains_value(tree: Tree, value: Any) -> bool:
    return any(v == value for _, v in items(tree))


def find_key_where(tree: Tree, pred: Callable[[Any], bool]) -> Optional[Any]:
    """Smallest key whose value satisfies pred, or None."""
    for k, v in items(tree):
        if pred(v):
            return k
    return None


def all_keys(tree: Tree, pred: Callable[[Any], bool]) -> bool:
    return all(pred(k) for k, _ in items(tree))


def any_key(tree: Tree, pred: Callable[[Any], bool]) -> bool:
    return any(pred(k) for k, _ in items(tree))


def all_values(tree: Tree, pred: Callable[[Any], bool]) -> bool:
    return all(pred(v) for _, v in items(tree))


def any_value(tree: Tree, pred: Callable[[Any], bool]) -> bool:
    return any(pred(v) for _, v in items(tree))


def min_item(tree: Tree) -> Tuple[Any, Any]:
    if tree is None:
        raise ValueError("min from empty tree")
    node = tree
    while node.left is not None:
        node = node.left
    return node.key, node.value


def max_item(tree: Tree) -> Tuple[Any, Any]:
    if tree is None:
        raise ValueError("max from empty tree")
    node = tree
    while node.right is not None:
        node = node.right
    return node.key, node.value


def from_list(pairs: Iterable[Tuple[Any, Any]], cmp: Optional[Comparator] = None) -> Tree:
    """Build a tree by inserting pairs in order; a later duplicate key wins."""
    tree: Tree = EMPTY
    for key, value in pairs:
        tree = insert(tree, key, value, cmp)
    return tree
