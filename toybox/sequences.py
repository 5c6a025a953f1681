# Fibonacci, factorial and binomial coefficient
# 0, 1, 1, 2, 3, 5, 8 ...
# 5! = 5 * 4 * 3 * 2 * 1 = 120
import logging

from toybox.predicates import NAN, is_int, is_positive_int

logger = logging.getLogger(__name__)


def fibonacci(n, use_recursion=False):
    if not is_positive_int(n):
        logger.debug("fibonacci: %r is not a non-negative integer", n)
        return NAN
    n = int(n)
    if n < 2:
        return n
    if use_recursion:
        return fibonacci(n - 1, True) + fibonacci(n - 2, True)
    a = 0
    b = 1
    for _ in range(1, n):
        a, b = b, a + b
    return b


def factorial(n, use_recursion=False):
    if not is_positive_int(n):
        logger.debug("factorial: %r is not a non-negative integer", n)
        return NAN
    n = int(n)
    if n < 2:
        return 1
    if use_recursion:
        return n * factorial(n - 1, True)
    prod = 1
    while n > 1:
        prod *= n
        n -= 1
    return prod


def binomial_coefficient(n, k):
    """n choose k: number of unordered picks of k outcomes from n.

    Defined as n! / ((n - k)! * k!) for 0 <= k < n, 0 otherwise.
    """
    if not is_positive_int(k) or not is_int(n) or not k < n:
        logger.debug("binomial_coefficient: (%r, %r) out of domain", n, k)
        return 0
    n = int(n)
    k = int(k)
    return factorial(n) // (factorial(n - k) * factorial(k))


fib = fibonacci
fact = factorial
binomial = binomial_coefficient
