"""
32-bit Word Helpers

SHA-224 and SHA-256 work on 32-bit unsigned words. This module converts
between 4-byte big-endian groups and words, and provides the two word
operations every other stage depends on:

- Big-endian byte <-> word conversion
- Circular right rotation
- Addition modulo 2^32
"""

from typing import Iterable


# Mask for 32-bit arithmetic
MASK_32 = 0xFFFFFFFF

WORD_SIZE = 4


def bytes_to_word(group: bytes) -> int:
    """
    Reconstruct a 32-bit word from 4 big-endian bytes.

    Args:
        group: Exactly 4 bytes

    Returns:
        The word b0<<24 | b1<<16 | b2<<8 | b3

    Raises:
        ValueError: If group is not 4 bytes long
    """
    if len(group) != WORD_SIZE:
        raise ValueError(f"Expected {WORD_SIZE} bytes, got {len(group)}")
    b0, b1, b2, b3 = group
    return (b0 << 24) | (b1 << 16) | (b2 << 8) | b3


def word_to_bytes(word: int) -> bytes:
    """Serialize a 32-bit word as 4 big-endian bytes."""
    return (word & MASK_32).to_bytes(WORD_SIZE, byteorder='big')


def rotr(value: int, amount: int) -> int:
    """Right rotate a 32-bit integer by the specified amount."""
    value &= MASK_32
    return ((value >> amount) | (value << (32 - amount))) & MASK_32


def add32(*values: int) -> int:
    """Add any number of words modulo 2^32."""
    return sum(values) & MASK_32


def words_to_bytes(words: Iterable[int]) -> bytes:
    """Serialize a sequence of words, each big-endian, back to back."""
    return b''.join(word_to_bytes(word) for word in words)
