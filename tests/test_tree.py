import unittest

from avl_dict.tree import Balance, Node, height, natural_compare


class TestNode(unittest.TestCase):
    def test_new_node_is_balanced_leaf(self):
        node = Node(1, "one")
        self.assertEqual(node.key, 1)
        self.assertEqual(node.value, "one")
        self.assertIsNone(node.left)
        self.assertIsNone(node.right)
        self.assertIs(node.balance, Balance.BALANCED)

    def test_repr_shows_tag(self):
        self.assertEqual(repr(Node(1, "a", balance=Balance.RIGHT_HEAVY)), "Node(1, 'a', RIGHT_HEAVY)")

    def test_node_has_no_instance_dict(self):
        with self.assertRaises(AttributeError):
            Node(1, 1).height = 3


class TestHeight(unittest.TestCase):
    def test_empty_has_height_zero(self):
        self.assertEqual(height(None), 0)

    def test_leaf_has_height_one(self):
        self.assertEqual(height(Node(1, None)), 1)

    def test_follows_left_unless_right_heavy(self):
        tree = Node(2, None, Node(1, None), None, Balance.LEFT_HEAVY)
        self.assertEqual(height(tree), 2)
        tree = Node(2, None, None, Node(3, None), Balance.RIGHT_HEAVY)
        self.assertEqual(height(tree), 2)

    def test_balanced_node_with_deep_subtrees(self):
        left = Node(2, None, Node(1, None), Node(3, None))
        right = Node(6, None, Node(5, None), Node(7, None))
        self.assertEqual(height(Node(4, None, left, right)), 3)


class TestNaturalCompare(unittest.TestCase):
    def test_three_way_result(self):
        self.assertEqual(natural_compare(1, 2), -1)
        self.assertEqual(natural_compare(2, 1), 1)
        self.assertEqual(natural_compare(2, 2), 0)

    def test_incomparable_keys_raise(self):
        with self.assertRaises(TypeError):
            natural_compare(1, "a")


if __name__ == '__main__':
    unittest.main()
