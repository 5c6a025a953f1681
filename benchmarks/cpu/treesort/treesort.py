# Tree sort: insert 100000 pseudo-random keys into a TreeSort, sum the sorted keys
# Tests: allocation pressure, class-based data structure, recursion
import sys
sys.setrecursionlimit(200000)

from toybox import TreeSort

root = TreeSort.create()
seed = 42
for _ in range(100000):
    seed = seed * 1103515245 + 12345
    if seed < 0:
        seed = -seed
    seed = seed % 1000000007
    root.insert(seed % 100000)

print(sum(root.to_list()))
