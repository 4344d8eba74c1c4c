# modprime/miller_rabin.py
# Deterministic Miller–Rabin for unsigned 64-bit n
#
# If n < 2^64, testing a = 2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37 is enough.
# The same 12 bases stay deterministic up to 3,317,044,064,679,887,385,961,981
# (adding 41 extends it further). Re-validate that bound before touching this table.

from __future__ import annotations
from typing import Tuple

from .modarith import mod_mul, mod_pow

WITNESS_BASES: Tuple[int, ...] = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)
BASELEN = len(WITNESS_BASES)

PRIME = 1
COMPOSITE = 0

def decompose(n: int) -> Tuple[int, int]:
    """Write n-1 = d * 2^r with d odd. ValueError for n < 2."""
    if n < 2:
        raise ValueError("decompose needs n >= 2")
    d = n - 1
    r = 0
    while d % 2 == 0:
        d //= 2
        r += 1
    return d, r

def _passes(a: int, d: int, r: int, n: int) -> bool:
    """One strong round for base a; False means a witnesses n composite."""
    x = mod_pow(a, d, n)
    if x == 1 or x == n - 1:
        return True
    for _ in range(r - 1):
        x = mod_mul(x, x, n)
        if x == n - 1:
            return True
    return False

def is_strong_probable_prime(n: int, a: int) -> bool:
    """
    Strong probable-prime test of odd n > 3 to the single base a, 2 <= a <= n-2.
    A composite n that passes is a strong pseudoprime to base a.
    """
    d, r = decompose(n)
    return _passes(a, d, r, n)

def miller_rabin(n: int) -> int:
    """
    Miller–Rabin primality test, deterministic version.
    Returns PRIME if n is prime, COMPOSITE otherwise.
    """
    if n < 2: return COMPOSITE
    if n == 2 or n == 3: return PRIME
    if n % 2 == 0: return COMPOSITE

    d, r = decompose(n)
    for a in WITNESS_BASES:
        # every base below n already tried
        if a > n - 2:
            break
        if not _passes(a, d, r, n):
            return COMPOSITE
    return PRIME

def is_prime(n: int) -> bool:
    return miller_rabin(n) == PRIME

def witnesses(n: int) -> list[int]:
    """Bases from WITNESS_BASES that prove odd n > 3 composite (empty if n is prime)."""
    if n <= 3 or n % 2 == 0:
        return []
    d, r = decompose(n)
    return [a for a in WITNESS_BASES if a <= n - 2 and not _passes(a, d, r, n)]
