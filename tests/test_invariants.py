import unittest

from avl_dict.dictionary import from_list
from avl_dict.invariants import InvariantError, check_invariants, is_balanced, is_ordered
from avl_dict.tree import Balance, Node, natural_compare


class TestCheckInvariants(unittest.TestCase):
    def test_empty_tree_has_height_zero(self):
        self.assertEqual(check_invariants(None), 0)

    def test_valid_tree_returns_height(self):
        tree = from_list((k, k) for k in range(1, 8))
        self.assertEqual(check_invariants(tree), 3)

    def test_left_key_out_of_order(self):
        tree = Node(5, None, Node(7, None), None, Balance.LEFT_HEAVY)
        with self.assertRaises(InvariantError):
            check_invariants(tree)

    def test_deep_key_out_of_order(self):
        # 12 is greater than the root yet sits in its left subtree
        tree = Node(10, None,
                    Node(5, None, None, Node(12, None), Balance.RIGHT_HEAVY),
                    Node(15, None, Node(11, None), Node(20, None)),
                    Balance.BALANCED)
        with self.assertRaises(InvariantError):
            check_invariants(tree)

    def test_duplicate_key_is_rejected(self):
        tree = Node(5, None, None, Node(5, None), Balance.RIGHT_HEAVY)
        with self.assertRaises(InvariantError):
            check_invariants(tree)

    def test_height_difference_too_large(self):
        chain = Node(1, None, None,
                     Node(2, None, None, Node(3, None), Balance.RIGHT_HEAVY),
                     Balance.RIGHT_HEAVY)
        with self.assertRaises(InvariantError) as ctx:
            check_invariants(chain)
        self.assertIn("heights", str(ctx.exception))

    def test_stale_tag_is_rejected(self):
        tree = Node(5, None, Node(3, None), None, Balance.BALANCED)
        with self.assertRaises(InvariantError) as ctx:
            check_invariants(tree)
        self.assertIn("LEFT_HEAVY", str(ctx.exception))

    def test_is_assertion_error(self):
        self.assertTrue(issubclass(InvariantError, AssertionError))

    def test_respects_comparator(self):
        def reverse(a, b):
            return natural_compare(b, a)

        tree = from_list(((k, k) for k in range(10)), cmp=reverse)
        check_invariants(tree, reverse)
        with self.assertRaises(InvariantError):
            check_invariants(tree)

    def test_failure_is_logged(self):
        tree = Node(5, None, Node(3, None), None, Balance.BALANCED)
        with self.assertLogs('avl_dict.invariants', level='DEBUG'):
            with self.assertRaises(InvariantError):
                check_invariants(tree)


class TestPredicates(unittest.TestCase):
    def test_is_balanced(self):
        self.assertTrue(is_balanced(None))
        self.assertTrue(is_balanced(from_list((k, k) for k in range(100))))
        self.assertFalse(is_balanced(Node(5, None, Node(3, None), None, Balance.BALANCED)))

    def test_is_ordered(self):
        self.assertTrue(is_ordered(None))
        self.assertTrue(is_ordered(from_list((k, k) for k in range(100))))
        self.assertFalse(is_ordered(Node(5, None, Node(7, None), None, Balance.LEFT_HEAVY)))


if __name__ == '__main__':
    unittest.main()
