# modprime/modarith.py
# Overflow-safe modular arithmetic on unsigned 64-bit values
# - mod_add / mod_sub never form a value >= 2^64 (for a, b < m)
# - mod_mul: double-and-add over mod_add
# - mod_pow: square-and-multiply over mod_mul
#
# Contract: a, b < m for add/sub, m > 0 for mul/pow. Violations are caller
# bugs; the asserts below only run without -O and the results are unspecified.

from __future__ import annotations
from typing import Callable

U64_MAX = (1 << 64) - 1

# ---------- Add / Sub ----------

def mod_add(a: int, b: int, m: int) -> int:
    """a+b mod m, given a < m and b < m."""
    assert a < m and b < m, "mod_add requires a < m and b < m"
    # a+b >= m  <=>  a >= m-b, and m-b cannot wrap since b < m
    if a >= m - b:
        r = a - (m - b)
    else:
        r = a + b
    return r % m

def mod_sub(a: int, b: int, m: int) -> int:
    """a-b mod m, given a < m and b < m."""
    assert a < m and b < m, "mod_sub requires a < m and b < m"
    if a < b:
        return (a + m - b) % m
    return (a - b) % m

# ---------- Binary ladder ----------

def _ladder(combine: Callable[[int, int, int], int], identity: int,
            a: int, b: int, m: int) -> int:
    """
    Scan b from its low bit: fold a into the accumulator on set bits and
    combine a with itself every step. With (mod_add, 0) this is a*b mod m,
    with (mod_mul, 1) it is a^b mod m.
    """
    a %= m
    r = identity % m
    while b > 0:
        if b & 1:
            r = combine(r, a, m)
        b >>= 1
        a = combine(a, a, m)
    return r

def mod_mul(a: int, b: int, m: int) -> int:
    """a*b mod m by double-and-add; at most bit_length(b) rounds."""
    assert m > 0, "mod_mul requires m > 0"
    return _ladder(mod_add, 0, a, b, m)

def mod_pow(a: int, b: int, m: int) -> int:
    """a^b mod m by square-and-multiply; mod_pow(a, 0, m) == 1 % m."""
    assert m > 0, "mod_pow requires m > 0"
    return _ladder(mod_mul, 1, a, b, m)
