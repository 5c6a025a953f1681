# Roll 20000 handfuls of dice into a histogram dict, then sum all counts
# Tests: callbacks, hash map, random number generation
import random

from toybox import roll_dice

histogram = {}


def tally(value, i):
    key = f"face_{value}"
    histogram[key] = histogram.get(key, 0) + 1


rng = random.Random(42)
total = 0
for _ in range(20000):
    total += roll_dice(3, 20, tally, rng=rng)

print(sum(histogram.values()))
