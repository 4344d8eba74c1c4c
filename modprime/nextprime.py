# modprime/nextprime.py
# Nearest prime walks over the 6k±1 wheel, bounded to 64 bits

from __future__ import annotations

from .miller_rabin import is_prime
from .modarith import U64_MAX

# largest prime below 2^64
U64_MAX_PRIME = (1 << 64) - 59

_WHEEL_PRIMES = (5, 7, 11, 13, 17, 19, 23, 29, 31, 37)

def _sieved(n: int) -> bool:
    for p in _WHEEL_PRIMES:
        if n % p == 0 and n != p:
            return True
    return False

def next_prime(start: int, *, return_iters=False):
    """Smallest prime >= start. ValueError if there is none below 2^64."""
    if start < 0:
        raise ValueError("start must be non-negative")
    if start > U64_MAX_PRIME:
        raise ValueError(f"no 64-bit prime >= {start}")
    if start <= 2:
        return (2, 0) if return_iters else 2
    if start == 3:
        return (3, 0) if return_iters else 3

    n = start
    r = n % 6
    if   r == 0: n += 1
    elif r == 2: n += 3
    elif r == 3: n += 2
    elif r == 4: n += 1
    step = 4 if (n % 6) == 1 else 2  # 6k±1 alternation

    iters = 0
    while True:
        iters += 1
        if not _sieved(n) and is_prime(n):
            return (n, iters) if return_iters else n
        n += step
        step = 6 - step

def prev_prime(start: int, *, return_iters=False):
    """Largest prime <= start, for 2 <= start < 2^64."""
    if start < 2:
        raise ValueError("no prime <= start for start < 2")
    if start > U64_MAX:
        raise ValueError("start must fit in 64 bits")
    if start < 5:
        p = 2 if start == 2 else 3
        return (p, 0) if return_iters else p

    n = start
    r = n % 6
    if   r == 0: n -= 1
    elif r == 2: n -= 1
    elif r == 3: n -= 2
    elif r == 4: n -= 3
    step = 4 if (n % 6) == 5 else 2

    iters = 0
    while True:
        iters += 1
        if not _sieved(n) and is_prime(n):
            return (n, iters) if return_iters else n
        n -= step
        step = 6 - step
