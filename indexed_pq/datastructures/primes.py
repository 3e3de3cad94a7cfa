from __future__ import annotations
import math


def is_prime(value: int) -> bool:
    """Trial division up to sqrt(value). 0 and 1 are not prime."""
    if value < 2:
        return False
    if value < 4:
        return True
    if value % 2 == 0:
        return False
    for d in range(3, math.isqrt(value) + 1, 2):
        if value % d == 0:
            return False
    return True


def next_prime(value: int) -> int:
    """Return the smallest prime >= value."""
    candidate = max(value, 2)
    while not is_prime(candidate):
        candidate += 1
    return candidate
