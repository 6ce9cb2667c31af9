"""Fixed-width integer helpers shared by the PCG streams."""

from typing import Tuple

MASK32 = (1 << 32) - 1
MASK64 = (1 << 64) - 1


def to_uint32(value: int) -> int:
    """Clip an integer to its low 32 bits."""
    return value & MASK32


def to_uint64(value: int) -> int:
    """Clip an integer to its low 64 bits (negative values wrap)."""
    return value & MASK64


def rotr32(value: int, count: int) -> int:
    """Rotate a 32-bit word right by ``count`` bits (0..31)."""
    count &= 31
    return to_uint32((value >> count) | (value << ((32 - count) & 31)))


def xsh_rr(old_state: int) -> int:
    """XSH-RR output permutation of a 64-bit LCG state.

    The xorshift folds the high state bits down into the output word and the
    top five bits of the same state pick the rotation amount.
    """
    xorshifted = to_uint32(((old_state >> 18) ^ old_state) >> 27)
    rotation = old_state >> 59
    return rotr32(xorshifted, rotation)


def jump_coefficients(multiplier: int, increment: int, steps: int) -> Tuple[int, int]:
    """Affine coefficients ``(mult, plus)`` of ``steps`` LCG steps.

    Binary exponentiation of ``x -> multiplier * x + increment`` following
    F. Brown, "Random Number Generation with Arbitrary Stride" (1994).
    ``steps`` is taken modulo 2**64, so negative counts jump backwards.
    """
    cur_mult = to_uint64(multiplier)
    cur_plus = to_uint64(increment)
    acc_mult = 1
    acc_plus = 0

    delta = to_uint64(steps)
    while delta > 0:
        if delta & 1:
            acc_mult = to_uint64(acc_mult * cur_mult)
            acc_plus = to_uint64(acc_plus * cur_mult + cur_plus)
        cur_plus = to_uint64((cur_mult + 1) * cur_plus)
        cur_mult = to_uint64(cur_mult * cur_mult)
        delta >>= 1

    return acc_mult, acc_plus
