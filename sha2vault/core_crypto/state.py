"""
Digest State

The running hash state of one SHA-224/SHA-256 computation: eight 32-bit
words (a..h) plus the selected variant.

Features:
- Closed Variant enumeration (SHA-224, SHA-256) checked at the boundary
- Initial hash values for each variant (FIPS 180-4, 5.3.2 and 5.3.3)
- Immutable state: every round and every block yields a new value
- Final export with SHA-224 truncation
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple, Union

from .words import add32, words_to_bytes


class ConfigurationError(Exception):
    """Raised when a hash computation or the tool is configured wrongly."""
    pass


class UnsupportedVariantError(ConfigurationError, ValueError):
    """Raised when a digest variant other than 224 or 256 is requested."""

    def __init__(self, variant: object):
        self.variant = variant
        super().__init__(
            f"Unsupported SHA-2 variant {variant!r}; expected 224 or 256"
        )


class Variant(Enum):
    """Supported digest sizes, in bits."""

    SHA224 = 224
    SHA256 = 256

    @property
    def digest_size(self) -> int:
        """Digest length in bytes."""
        return self.value // 8

    @property
    def output_words(self) -> int:
        """Number of state words exported into the digest."""
        return self.value // 32

    @classmethod
    def coerce(cls, value: Union['Variant', int, str]) -> 'Variant':
        """
        Resolve a variant from an enum member, 224/256, or a name.

        Accepted strings: "224", "256", "sha224", "sha-256", ... (case
        insensitive).

        Raises:
            UnsupportedVariantError: For anything else
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise UnsupportedVariantError(value)
        if isinstance(value, str):
            text = value.strip().lower().replace('-', '')
            if text.startswith('sha'):
                text = text[3:]
            if not (text.isascii() and text.isdecimal()):
                raise UnsupportedVariantError(value)
            number = int(text)
        elif isinstance(value, int):
            number = value
        else:
            raise UnsupportedVariantError(value)

        try:
            return cls(number)
        except ValueError:
            raise UnsupportedVariantError(value) from None


# SHA-256 initial hash values: first 32 bits of the fractional parts of the
# square roots of the first 8 primes
H_INITIAL_256 = (
    0x6a09e667, 0xbb67ae85, 0x3c6ef372, 0xa54ff53a,
    0x510e527f, 0x9b05688c, 0x1f83d9ab, 0x5be0cd19,
)

# SHA-224 initial hash values: second 32 bits of the fractional parts of the
# square roots of the 9th through 16th primes
H_INITIAL_224 = (
    0xc1059ed8, 0x367cd507, 0x3070dd17, 0xf70e5939,
    0xffc00b31, 0x68581511, 0x64f98fa7, 0xbefa4fa4,
)

INITIAL_VALUES = {
    Variant.SHA224: H_INITIAL_224,
    Variant.SHA256: H_INITIAL_256,
}

STATE_WORDS = 8


@dataclass(frozen=True)
class DigestState:
    """
    Eight working words (a..h) and the variant they belong to.

    frozen=True means a round never updates words in place; rotate() and
    accumulate() return the next state instead.
    """
    words: Tuple[int, ...]
    variant: Variant

    def __post_init__(self):
        if len(self.words) != STATE_WORDS:
            raise ValueError(
                f"State must hold {STATE_WORDS} words, got {len(self.words)}"
            )

    @classmethod
    def initial(cls, variant: Union[Variant, int, str]) -> 'DigestState':
        """
        Load the initial hash values for a variant.

        Raises:
            UnsupportedVariantError: If variant is not 224 or 256
        """
        variant = Variant.coerce(variant)
        return cls(words=INITIAL_VALUES[variant], variant=variant)

    def rotate(self, t1: int, t2: int) -> 'DigestState':
        """
        Shift the working words by one round.

        h=g, g=f, f=e, e=d+T1, d=c, c=b, b=a, a=T1+T2
        """
        a, b, c, d, e, f, g, _ = self.words
        return DigestState(
            words=(add32(t1, t2), a, b, c, add32(d, t1), e, f, g),
            variant=self.variant,
        )

    def accumulate(self, other: Sequence[int]) -> 'DigestState':
        """Add another 8-word vector element-wise, modulo 2^32."""
        if len(other) != STATE_WORDS:
            raise ValueError(
                f"Expected {STATE_WORDS} words, got {len(other)}"
            )
        return DigestState(
            words=tuple(add32(x, y) for x, y in zip(self.words, other)),
            variant=self.variant,
        )

    def export(self) -> bytes:
        """
        Serialize the state as the final digest.

        Returns:
            28 bytes (words a..g) for SHA-224, 32 bytes (a..h) for SHA-256
        """
        return words_to_bytes(self.words[:self.variant.output_words])
