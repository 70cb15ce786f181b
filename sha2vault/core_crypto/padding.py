"""
Message Padding (FIPS 180-4, 5.1.1)

Padding rules:
1. Append bit '1' to the message (0x80 byte)
2. Append zeros until message length ≡ 448 (mod 512)
3. Append the original bit length as a 64-bit big-endian integer

The padded message is then parsed into 512-bit (64-byte) blocks.
"""

from typing import List


BLOCK_SIZE = 64

# Bytes reserved at the end of the last block for the bit length
LENGTH_FIELD_SIZE = 8

# The length field is 64 bits wide, so the bit length wraps at exactly 2^64
LENGTH_MODULUS = 1 << 64


def padded_length(message_length: int) -> int:
    """
    Length in bytes of the padded form of a message.

    This is the smallest multiple of 64 that holds the message, the 0x80
    marker byte and the 8-byte length field.
    """
    return ((message_length + 1 + LENGTH_FIELD_SIZE + BLOCK_SIZE - 1)
            // BLOCK_SIZE) * BLOCK_SIZE


def pad_message(data: bytes) -> bytes:
    """
    Pad the message according to the SHA-2 (32-bit word) specification.

    Args:
        data: The original message bytes

    Returns:
        Padded message as bytes (length is a positive multiple of 64)
    """
    bit_length = (len(data) * 8) % LENGTH_MODULUS

    padded = bytearray(data)
    total = padded_length(len(padded))
    padded.append(0x80)

    # Zeros up to the length field, i.e. until length ≡ 56 (mod 64)
    padded.extend(b'\x00' * (total - LENGTH_FIELD_SIZE - len(padded)))

    padded.extend(bit_length.to_bytes(LENGTH_FIELD_SIZE, byteorder='big'))
    return bytes(padded)


def split_blocks(padded: bytes) -> List[bytes]:
    """
    Split a padded message into consecutive 64-byte blocks.

    Args:
        padded: Output of pad_message

    Returns:
        List of 64-byte blocks, earliest first

    Raises:
        ValueError: If the length is not a multiple of 64
    """
    if len(padded) % BLOCK_SIZE != 0:
        raise ValueError(
            f"Padded message length must be a multiple of {BLOCK_SIZE} bytes, "
            f"got {len(padded)}"
        )
    return [padded[i:i + BLOCK_SIZE] for i in range(0, len(padded), BLOCK_SIZE)]
