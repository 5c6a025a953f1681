import logging
import math
import numbers

from toybox.predicates import NAN, is_array

logger = logging.getLogger(__name__)


def _is_coordinate(x):
    return isinstance(x, numbers.Real) and not isinstance(x, bool)


def distance(a, b):
    """Euclidean distance between points a and b in 2D or higher.

    Coordinates are ordered x, y, z, ... Returns NaN unless both points are
    arrays of real numbers of the same length with at least two coordinates.
    """
    if not (is_array(a) and is_array(b) and len(a) > 1 and len(a) == len(b)):
        logger.debug("distance: invalid points %r, %r", a, b)
        return NAN
    if not all(_is_coordinate(x) for x in a) or not all(_is_coordinate(x) for x in b):
        logger.debug("distance: non-numeric coordinate in %r, %r", a, b)
        return NAN
    delta = 0
    for i in range(len(a)):
        delta += (b[i] - a[i]) ** 2
    return math.sqrt(delta)
