from .modarith import U64_MAX, mod_add, mod_sub, mod_mul, mod_pow
from .miller_rabin import (
    BASELEN,
    COMPOSITE,
    PRIME,
    WITNESS_BASES,
    decompose,
    is_prime,
    is_strong_probable_prime,
    miller_rabin,
    witnesses,
)
from .nextprime import U64_MAX_PRIME, next_prime, prev_prime
__all__ = [
    "U64_MAX", "mod_add", "mod_sub", "mod_mul", "mod_pow",
    "BASELEN", "COMPOSITE", "PRIME", "WITNESS_BASES", "decompose", "is_prime",
    "is_strong_probable_prime", "miller_rabin", "witnesses",
    "U64_MAX_PRIME", "next_prime", "prev_prime",
]
