"""Textbook algorithms and small data structures."""
import logging

from toybox.predicates import NAN, is_int, is_positive_int, is_array
from toybox.geometry import distance
from toybox.sequences import (
    fibonacci, fib, factorial, fact, binomial_coefficient, binomial,
)
from toybox.dice import roll_dice, roll
from toybox.sorting import default_comparator, quicksort, qsort, shuffle
from toybox.treesort import TreeSort, tree_sort

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NAN",
    "is_int",
    "is_positive_int",
    "is_array",
    "distance",
    "fibonacci",
    "fib",
    "factorial",
    "fact",
    "binomial_coefficient",
    "binomial",
    "roll_dice",
    "roll",
    "default_comparator",
    "quicksort",
    "qsort",
    "shuffle",
    "TreeSort",
    "tree_sort",
]
