"""
Ordered key-value dictionary on a persistent AVL tree.

Trees are immutable: insert and update return a new root and share every
untouched subtree with the old one, so earlier roots stay usable. There is
no removal operation.
"""

from avl_dict.avl_map import AVLMap
from avl_dict.balancer import HeightChange, insert
from avl_dict.dictionary import (
    EMPTY,
    all_keys,
    all_values,
    any_key,
    any_value,
    contains_key,
    contains_value,
    find_key_where,
    fold,
    from_list,
    is_empty,
    items,
    keys,
    lookup,
    max_item,
    min_item,
    size,
    to_list,
    update,
    values,
)
from avl_dict.invariants import InvariantError, check_invariants, is_balanced, is_ordered
from avl_dict.tree import Balance, Node, Tree, height, natural_compare
