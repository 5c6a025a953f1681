# Fibonacci, factorial and n-choose-k over a range of n, print a checksum
# Tests: big-integer arithmetic, loops, shallow recursion
from toybox import binomial_coefficient, factorial, fibonacci

MOD = 1000000007

total = 0
for n in range(2000):
    total = (total + fibonacci(n) + factorial(n % 300)) % MOD
    total = (total + binomial_coefficient(n % 300 + 1, n % 150)) % MOD
for n in range(20):
    total = (total + fibonacci(n, use_recursion=True)) % MOD
print(total)
