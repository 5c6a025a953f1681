import logging
import math
import random

from toybox.predicates import is_positive_int

DEFAULT_DICE = 1
DEFAULT_SIDES = 6

logger = logging.getLogger(__name__)


def roll_dice(n=DEFAULT_DICE, sides=DEFAULT_SIDES, per_roll=None, rng=None):
    """Roll n dice numbered 1..sides and return the sum.

    per_roll, when callable, receives (value, index) for every roll, index
    starting at 0. Pass a random.Random as rng for repeatable rolls.
    """
    if not is_positive_int(n):
        logger.debug("roll_dice: bad dice count %r, using %d", n, DEFAULT_DICE)
        n = DEFAULT_DICE
    if not is_positive_int(sides):
        logger.debug("roll_dice: bad side count %r, using %d", sides, DEFAULT_SIDES)
        sides = DEFAULT_SIDES
    if rng is None:
        rng = random
    has_callback = callable(per_roll)

    total = 0
    for i in range(int(n)):
        value = math.floor(rng.random() * sides) + 1
        total += value
        if has_callback:
            per_roll(value, i)
    return total


roll = roll_dice
