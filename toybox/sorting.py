import logging
import random

from toybox.predicates import is_array

logger = logging.getLogger(__name__)


def default_comparator(a, b):
    if a < b:
        return -1
    elif a == b:
        return 0
    return 1


def quicksort(arr, comparator=None, rng=None):
    """Non-destructive quicksort with a random pivot.

    comparator(a, b) returns a negative number, zero or a positive number.
    The input is left untouched and a new list is returned.
    """
    if not is_array(arr):
        logger.debug("quicksort: %r is not an array", type(arr).__name__)
        return arr
    if not callable(comparator):
        comparator = default_comparator
    if rng is None:
        rng = random
    return _quicksort(list(arr), comparator, rng)


def _quicksort(arr, comparator, rng):
    if len(arr) < 2:
        return arr
    p = rng.randrange(len(arr))
    pivot = arr[p]
    lesser = []
    greater = []
    for i, item in enumerate(arr):
        if i == p:
            continue
        if comparator(item, pivot) <= 0:
            lesser.append(item)
        else:
            greater.append(item)
    return (_quicksort(lesser, comparator, rng) + [pivot]
            + _quicksort(greater, comparator, rng))


# Fisher-Yates, in place, like shuffling a deck of cards
def shuffle(arr, rng=None):
    if not isinstance(arr, list):
        logger.debug("shuffle: %r is not a list", type(arr).__name__)
        return arr
    if rng is None:
        rng = random
    for i in range(len(arr) - 1, 0, -1):
        k = rng.randrange(i + 1)
        arr[i], arr[k] = arr[k], arr[i]
    return arr


qsort = quicksort
