# Tree sort over an unbalanced binary search tree
# Worst: O(n^2) (sorted input), average: O(n log n)
import logging

from toybox.predicates import is_array

logger = logging.getLogger(__name__)


class TreeSort:
    __slots__ = ('value', 'count', 'left', 'right')

    def __init__(self):
        self.value = None
        self.count = 0
        self.left = None
        self.right = None

    @classmethod
    def create(cls):
        return cls()

    def insert(self, value):
        """Insert value and return the node holding it.

        Equal values share one node and bump its count.
        """
        if value is None:
            return None
        node = self
        while True:
            if node.value is None or node.value == value:
                node.value = value
                node.count += 1
                return node
            if value < node.value:
                if node.left is None:
                    node.left = node.create()
                node = node.left
            else:
                if node.right is None:
                    node.right = node.create()
                node = node.right

    def to_list(self):
        result = []
        stack = []
        node = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            if node.value is not None:
                result.append(node.value)
            node = node.right
        return result


def tree_sort(values):
    if not is_array(values):
        logger.debug("tree_sort: %r is not an array", type(values).__name__)
        return values
    root = TreeSort.create()
    for v in values:
        root.insert(v)
    return root.to_list()
