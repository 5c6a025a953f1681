# Quicksort 2000 duplicate-heavy (bucket, id) records by bucket descending, 20 times
# Tests: random pivots, custom comparator calls, list concatenation
import random

from toybox import quicksort

records = []
seed = 42
for i in range(2000):
    seed = (seed * 1103515245 + 12345) % 1000000007
    records.append((seed % 16, i))


def by_bucket_desc(a, b):
    return b[0] - a[0]


rng = random.Random(42)
checksum = 0
for _ in range(20):
    ordered = quicksort(records, by_bucket_desc, rng=rng)
    checksum = ordered[0][0] * 100 + ordered[-1][0]

print(checksum)
