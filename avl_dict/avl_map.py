from typing import Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from avl_dict import dictionary
from avl_dict.balancer import insert
from avl_dict.invariants import check_invariants, is_balanced
from avl_dict.tree import Comparator, Tree, height

K = TypeVar('K')
V = TypeVar('V')
A = TypeVar('A')


class AVLMap(Generic[K, V]):
    """
    Ordered mapping backed by a persistent AVL tree.

    Writes swap in a new root; the previous root stays valid, so copy() and
    snapshot() cost O(1). Keys cannot be removed.
    """

    def __init__(self, pairs: Optional[Iterable[Tuple[K, V]]] = None, *,
                 cmp: Optional[Comparator] = None, check_invariants: bool = False) -> None:
        self._cmp = cmp
        self._check = check_invariants
        self._root: Tree = None
        self._size: int = 0
        if pairs is not None:
            for key, value in pairs:
                self.insert(key, value)

    def _replace_root(self, root: Tree) -> None:
        if self._check:
            check_invariants(root, self._cmp)
        self._root = root

    def insert(self, key: K, value: V) -> None:
        is_new = not dictionary.contains_key(self._root, key, self._cmp)
        self._replace_root(insert(self._root, key, value, self._cmp))
        if is_new:
            self._size += 1

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return dictionary.lookup(self._root, key, default, self._cmp)

    def update(self, key: K, f: Callable[[V], V]) -> bool:
        """Apply f to the value under key. Returns False when the key is absent."""
        root = dictionary.update(self._root, key, f, self._cmp)
        if root is self._root:
            return False
        self._replace_root(root)
        return True

    def contains(self, key: K) -> bool:
        return dictionary.contains_key(self._root, key, self._cmp)

    def contains_value(self, value: V) -> bool:
        return dictionary.contains_value(self._root, value)

    def find_key_where(self, pred: Callable[[V], bool]) -> Optional[K]:
        return dictionary.find_key_where(self._root, pred)

    def fold(self, step: Callable[[K, V, A], A], init: A) -> A:
        return dictionary.fold(self._root, step, init)

    def min(self) -> Tuple[K, V]:
        return dictionary.min_item(self._root)

    def max(self) -> Tuple[K, V]:
        return dictionary.max_item(self._root)

    def keys(self) -> List[K]:
        return dictionary.keys(self._root)

    def values(self) -> List[V]:
        return dictionary.values(self._root)

    def items(self) -> Iterator[Tuple[K, V]]:
        return dictionary.items(self._root)

    def to_list(self) -> List[Tuple[K, V]]:
        return dictionary.to_list(self._root)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def height(self) -> int:
        return height(self._root)

    def is_balanced(self) -> bool:
        return is_balanced(self._root)

    def snapshot(self) -> Tree:
        """The current root handle; later writes to this map never change it."""
        return self._root

    def copy(self) -> 'AVLMap[K, V]':
        clone: AVLMap[K, V] = AVLMap(cmp=self._cmp, check_invariants=self._check)
        clone._root = self._root
        clone._size = self._size
        return clone

    def __getitem__(self, key: K) -> V:
        missing = object()
        value = dictionary.lookup(self._root, key, missing, self._cmp)
        if value is missing:
            raise KeyError(key)
        return value

    def __setitem__(self, key: K, value: V) -> None:
        self.insert(key, value)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: K) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[K]:
        return (k for k, _ in dictionary.items(self._root))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AVLMap):
            return NotImplemented
        return self.to_list() == other.to_list()

    def __repr__(self) -> str:
        return f"AVLMap({self.to_list()})"

    def __str__(self) -> str:
        return f"AVLMap(size={self._size}, height={self.height()})"
