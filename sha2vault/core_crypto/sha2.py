"""
SHA-224 / SHA-256 Hash Implementation (From Scratch)

Implements the 32-bit word members of the SHA-2 family as defined in
FIPS 180-4. This implementation avoids using hashlib and builds the
algorithm from scratch.

Components:
- Padding: Pads message to multiple of 512 bits
- Message Schedule: Expands 16 words to 64 words
- Compression: 64 rounds of compression function
- Output: 224-bit (28-byte) or 256-bit (32-byte) digest
"""

from typing import Union

from .compression import compress
from .padding import pad_message, split_blocks
from .schedule import message_schedule
from .state import DigestState, Variant

MessageLike = Union[bytes, bytearray, memoryview]
VariantLike = Union[Variant, int, str]


def _as_bytes(message: MessageLike) -> bytes:
    if isinstance(message, str):
        raise TypeError("Strings must be encoded before hashing")
    # bytes() would also take ints and iterables of ints
    try:
        return memoryview(message).tobytes()
    except TypeError:
        raise TypeError(
            f"Expected a bytes-like object, got {type(message).__name__}"
        ) from None


def compute_digest(message: MessageLike, variant: VariantLike = Variant.SHA256) -> bytes:
    """
    Compute the SHA-224 or SHA-256 digest of a message.

    Blocks are processed strictly in order: each block's compression
    starts from the state left by the previous one.

    Args:
        message: Input bytes to hash
        variant: Variant.SHA224 / Variant.SHA256, or 224 / 256

    Returns:
        28-byte (SHA-224) or 32-byte (SHA-256) digest

    Raises:
        UnsupportedVariantError: If variant is not 224 or 256
        TypeError: If message is a str

    Example:
        >>> compute_digest(b"abc", 256).hex()
        'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
    """
    state = DigestState.initial(variant)
    data = _as_bytes(message)

    for block in split_blocks(pad_message(data)):
        state = compress(state, message_schedule(block))

    return state.export()


def hexdigest(message: MessageLike, variant: VariantLike = Variant.SHA256) -> str:
    """Compute the digest and return it as lowercase hexadecimal."""
    return compute_digest(message, variant).hex()


def sha224(data: MessageLike) -> bytes:
    """Compute the SHA-224 hash of the input data (28 bytes)."""
    return compute_digest(data, Variant.SHA224)


def sha256(data: MessageLike) -> bytes:
    """
    Compute the SHA-256 hash of the input data.

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return compute_digest(data, Variant.SHA256)


def sha224_hex(data: MessageLike) -> str:
    """Compute SHA-224 hash and return as a 56-character hex string."""
    return sha224(data).hex()


def sha256_hex(data: MessageLike) -> str:
    """Compute SHA-256 hash and return as a 64-character hex string."""
    return sha256(data).hex()


def sha224_string(text: str, encoding: str = 'utf-8') -> bytes:
    """Compute the SHA-224 hash of a string in the given encoding."""
    return sha224(text.encode(encoding))


def sha256_string(text: str, encoding: str = 'utf-8') -> bytes:
    """
    Compute SHA-256 hash of a string.

    Args:
        text: Input string to hash
        encoding: String encoding (default: utf-8)

    Returns:
        256-bit (32-byte) digest as bytes
    """
    return sha256(text.encode(encoding))
