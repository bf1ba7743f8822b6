from enum import Enum
from typing import Any, Callable, Optional

Comparator = Callable[[Any, Any], int]


class Balance(Enum):
    LEFT_HEAVY = -1
    BALANCED = 0
    RIGHT_HEAVY = 1


class Node:
    """One AVL node. Never mutated once built; a changed subtree gets a new node."""

    __slots__ = ('key', 'value', 'left', 'right', 'balance')

    def __init__(self, key: Any, value: Any, left: 'Tree' = None, right: 'Tree' = None,
                 balance: Balance = Balance.BALANCED) -> None:
        self.key = key
        self.value = value
        self.left: Tree = left
        self.right: Tree = right
        self.balance: Balance = balance

    def __repr__(self) -> str:
        return f"Node({self.key!r}, {self.value!r}, {self.balance.name})"


Tree = Optional[Node]


def natural_compare(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def height(tree: Tree) -> int:
    # taller branch plus one; the tag says which branch is taller
    h = 0
    node = tree
    while node is not None:
        h += 1
        node = node.right if node.balance is Balance.RIGHT_HEAVY else node.left
    return h
