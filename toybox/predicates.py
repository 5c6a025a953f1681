"""Type checks shared by the rest of the package."""
import math

NAN = float("nan")


def is_int(i):
    """True for an int or a finite, integral float. bool is not an int here."""
    if isinstance(i, bool):
        return False
    if isinstance(i, int):
        return True
    if isinstance(i, float):
        return math.isfinite(i) and i.is_integer()
    return False


def is_positive_int(i):
    """True for a non-negative integer; zero counts."""
    return is_int(i) and i > -1


def is_array(a):
    """True for a list or tuple."""
    return isinstance(a, (list, tuple))
