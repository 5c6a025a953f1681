# Walk a 3D path of N pseudo-random points 200 times, print the path length
# Tests: float arithmetic, small list allocation

from toybox import distance


def build_path(n):
    path = []
    seed = 42
    for _ in range(n):
        point = []
        for _ in range(3):
            seed = (seed * 1103515245 + 12345) % 1000000007
            point.append(seed % 1000)
        path.append(point)
    return path


def path_length(path):
    return sum(distance(path[i], path[i + 1]) for i in range(len(path) - 1))


n = 1000
path = build_path(n)
length = 0.0
for _ in range(200):
    length = path_length(path)
print(round(length, 3))
