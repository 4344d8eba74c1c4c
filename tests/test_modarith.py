import random

import pytest

from modprime import U64_MAX, mod_add, mod_sub, mod_mul, mod_pow

rng = random.Random(20240601)

MODULI = [1, 2, 3, 7, 97, 1 << 32, (1 << 61) - 1, U64_MAX - 58, U64_MAX]

def _pairs(m, k=25):
    edge = [0, m - 1, m // 2]
    vals = edge + [rng.randrange(m) for _ in range(k)]
    return [(a, b) for a in vals for b in vals[:6]]

@pytest.mark.parametrize("m", MODULI)
def test_mod_add_matches_bigint(m):
    for a, b in _pairs(m):
        assert mod_add(a, b, m) == (a + b) % m

@pytest.mark.parametrize("m", MODULI)
def test_mod_add_commutes(m):
    for a, b in _pairs(m):
        assert mod_add(a, b, m) == mod_add(b, a, m)

def test_mod_add_near_64_bit_edge():
    m = U64_MAX
    a = b = m - 1
    assert mod_add(a, b, m) == m - 2
    assert mod_add(m - 1, 1, m) == 0

@pytest.mark.parametrize("m", MODULI)
def test_mod_sub_matches_bigint(m):
    for a, b in _pairs(m):
        assert mod_sub(a, b, m) == (a - b) % m

@pytest.mark.parametrize("m", MODULI)
def test_mod_sub_then_add_restores(m):
    for a, b in _pairs(m):
        assert mod_add(mod_sub(a, b, m), b, m) == a

def test_mod_sub_wraps_negative():
    assert mod_sub(3, 5, 7) == 5
    assert mod_sub(0, U64_MAX - 1, U64_MAX) == 1

def test_mod_mul_full_range():
    for _ in range(200):
        m = rng.randrange(1, 1 << 64)
        a = rng.randrange(1 << 64)
        b = rng.randrange(1 << 64)
        assert mod_mul(a, b, m) == (a * b) % m

def test_mod_mul_edges():
    m = U64_MAX
    assert mod_mul(m - 1, m - 1, m) == 1
    assert mod_mul(U64_MAX, U64_MAX, U64_MAX - 58) == (U64_MAX * U64_MAX) % (U64_MAX - 58)
    assert mod_mul(12345, 0, 97) == 0
    assert mod_mul(0, 12345, 97) == 0
    assert mod_mul(5, 7, 1) == 0

def test_mod_pow_small_exponents_by_repeated_multiplication():
    for m in (2, 97, 1 << 32, (1 << 61) - 1, U64_MAX):
        a = rng.randrange(1 << 64)
        acc = 1 % m
        for b in range(21):
            assert mod_pow(a, b, m) == acc
            acc = (acc * a) % m

def test_mod_pow_zero_exponent_is_one_mod_m():
    for m in (1, 2, 3, 1000, U64_MAX):
        for a in (0, 1, 2, U64_MAX):
            assert mod_pow(a, 0, m) == 1 % m

def test_mod_pow_large_matches_builtin():
    for _ in range(30):
        m = rng.randrange(2, 1 << 64)
        a = rng.randrange(1 << 64)
        b = rng.randrange(1 << 64)
        assert mod_pow(a, b, m) == pow(a, b, m)

def test_fermat_little_theorem():
    p = (1 << 64) - 59
    for a in (2, 3, 10, 123456789):
        assert mod_pow(a, p - 1, p) == 1
