# modprime/sieve.py
# Sieve of Eratosthenes; ground truth for exhaustive checks of is_prime

from __future__ import annotations
import math

import numpy as np

def prime_sieve(limit: int) -> np.ndarray:
    """Boolean array s of length limit+1 with s[i] True iff i is prime."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    sieve = np.ones(limit + 1, dtype=bool)
    sieve[:2] = False
    for p in range(2, math.isqrt(limit) + 1):
        if sieve[p]:
            sieve[p*p::p] = False
    return sieve

def primes_upto(limit: int) -> list[int]:
    return [int(p) for p in np.flatnonzero(prime_sieve(limit))]
