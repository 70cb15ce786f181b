"""
Compression Function

Folds one 64-word message schedule into the running digest state with
64 rounds of:

    S1    = (e >>> 6) ^ (e >>> 11) ^ (e >>> 25)
    ch    = (e & f) ^ (~e & g)
    temp1 = h + S1 + ch + k[i] + w[i]

    S0    = (a >>> 2) ^ (a >>> 13) ^ (a >>> 22)
    maj   = (a & b) ^ (a & c) ^ (b & c)
    temp2 = S0 + maj

followed by the shift of the working words. After the last round the
state held before the block is added back in (Davies-Meyer feed-forward).
All additions are modulo 2^32. SHA-224 and SHA-256 share this function;
they differ only in initial values and output length.
"""

from typing import Sequence, Tuple

from .schedule import SCHEDULE_LENGTH
from .state import DigestState
from .words import MASK_32, add32, rotr


# Round constants: first 32 bits of fractional parts of cube roots of first 64 primes
K: Tuple[int, ...] = (
    0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5,
    0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
    0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3,
    0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
    0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc,
    0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
    0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7,
    0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
    0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13,
    0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
    0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3,
    0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
    0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5,
    0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
    0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208,
    0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2,
)


def ch(x: int, y: int, z: int) -> int:
    """Choice function: if x then y else z (bitwise)."""
    return ((x & y) ^ (~x & z)) & MASK_32


def maj(x: int, y: int, z: int) -> int:
    """Majority function: majority vote of bits."""
    return (x & y) ^ (x & z) ^ (y & z)


def big_sigma0(x: int) -> int:
    """Uppercase Sigma 0: used in compression."""
    return rotr(x, 2) ^ rotr(x, 13) ^ rotr(x, 22)


def big_sigma1(x: int) -> int:
    """Uppercase Sigma 1: used in compression."""
    return rotr(x, 6) ^ rotr(x, 11) ^ rotr(x, 25)


def compression_round(state: DigestState, k: int, w: int) -> DigestState:
    """
    Perform one compression round.

    Args:
        state: Working state before the round
        k: Round constant K[i]
        w: Message schedule word W[i]

    Returns:
        Working state after the round
    """
    a, b, c, _, e, f, g, h = state.words

    t1 = add32(h, big_sigma1(e), ch(e, f, g), k, w)
    t2 = add32(big_sigma0(a), maj(a, b, c))

    return state.rotate(t1, t2)


def compress(state: DigestState, schedule: Sequence[int]) -> DigestState:
    """
    Run all 64 rounds for one block and apply the feed-forward.

    Args:
        state: Hash state before this block
        schedule: The block's 64-word message schedule

    Returns:
        Hash state after this block

    Raises:
        ValueError: If schedule does not hold 64 words
    """
    if len(schedule) != SCHEDULE_LENGTH:
        raise ValueError(
            f"Expected {SCHEDULE_LENGTH} message schedule words, got {len(schedule)}"
        )

    working = state
    for k, w in zip(K, schedule):
        working = compression_round(working, k, w)

    return working.accumulate(state.words)
