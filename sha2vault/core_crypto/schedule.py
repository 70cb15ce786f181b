"""
Message Schedule

Expands one 64-byte block into the 64-word schedule consumed by the
compression rounds. Words 0-15 are the block itself read as big-endian
words; words 16-63 depend only on earlier schedule words:

    W[i] = σ1(W[i-2]) + W[i-7] + σ0(W[i-15]) + W[i-16]   (mod 2^32)
"""

from typing import List

from .padding import BLOCK_SIZE
from .words import WORD_SIZE, add32, bytes_to_word, rotr


SCHEDULE_LENGTH = 64


def sigma0(x: int) -> int:
    """Lowercase sigma 0: used in message schedule."""
    return rotr(x, 7) ^ rotr(x, 18) ^ (x >> 3)


def sigma1(x: int) -> int:
    """Lowercase sigma 1: used in message schedule."""
    return rotr(x, 17) ^ rotr(x, 19) ^ (x >> 10)


def message_schedule(block: bytes) -> List[int]:
    """
    Build the 64-word message schedule for one block.

    Args:
        block: A 64-byte block of the padded message

    Returns:
        List of 64 32-bit words

    Raises:
        ValueError: If block is not 64 bytes
    """
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"Expected {BLOCK_SIZE}-byte block, got {len(block)}")

    w = [bytes_to_word(block[i:i + WORD_SIZE])
         for i in range(0, BLOCK_SIZE, WORD_SIZE)]

    for i in range(16, SCHEDULE_LENGTH):
        w.append(add32(w[i - 16], sigma0(w[i - 15]), w[i - 7], sigma1(w[i - 2])))

    return w
