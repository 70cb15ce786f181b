"""
Self-Test

Checks the from-scratch implementation against:
- NIST known-answer vectors for SHA-224 and SHA-256
- The SHA-2 implementation of the `cryptography` package, on
  deterministic pseudo-random messages around the padding boundaries
"""

import random
from dataclasses import dataclass
from typing import List, Tuple, Union

import structlog
from cryptography.hazmat.primitives import hashes

from .core_crypto.sha2 import compute_digest
from .core_crypto.state import Variant

logger = structlog.get_logger()


# (name, message, variant, expected hex digest)
KNOWN_ANSWERS: Tuple[Tuple[str, bytes, Variant, str], ...] = (
    ("empty", b"", Variant.SHA256,
     "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
    ("abc", b"abc", Variant.SHA256,
     "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
    ("abcde", b"abcde", Variant.SHA256,
     "36bbe50ed96841d10443bcb670d6554f0a34b761be67ec9c4a8ad2c0c44ca42c"),
    ("448-bit", b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
     Variant.SHA256,
     "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"),
    ("quick brown fox", b"The quick brown fox jumps over the lazy dog",
     Variant.SHA256,
     "d7a8fbb307d7809469ca9abcb0082e4f8d5651e46d3cdb762d02d0bf37c9e592"),
    ("empty", b"", Variant.SHA224,
     "d14a028c2a3a2bc9476102bb288234c415a2b01f828ea62ac5b3e42f"),
    ("abc", b"abc", Variant.SHA224,
     "23097d223405d8228642a477bda255b32aadbce4bda0b3f7e36c9da7"),
    ("448-bit", b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
     Variant.SHA224,
     "75388b16512776cc5dba5da1fd890150b0c6455cb4f58b1952522525"),
    ("quick brown fox", b"The quick brown fox jumps over the lazy dog",
     Variant.SHA224,
     "730e109bd7a8a32b1cb9d9a09aa2325d2430587ddbc0c38bad911525"),
)

# Message lengths straddling the 55/56 and 64-byte padding boundaries
REFERENCE_LENGTHS = (0, 1, 3, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000)

REFERENCE_SEED = 1804


@dataclass(frozen=True)
class SelfTestResult:
    """Outcome of one self-test vector."""
    name: str
    variant: Variant
    expected: str
    actual: str

    @property
    def passed(self) -> bool:
        return self.expected == self.actual

    def __str__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        return f"[{status}] SHA-{self.variant.value} {self.name}: {self.actual}"


def reference_digest(message: bytes, variant: Union[Variant, int, str]) -> bytes:
    """Digest computed by the `cryptography` package, for cross-checking."""
    variant = Variant.coerce(variant)
    algorithm = hashes.SHA224() if variant is Variant.SHA224 else hashes.SHA256()
    ctx = hashes.Hash(algorithm)
    ctx.update(message)
    return ctx.finalize()


def reference_messages(seed: int = REFERENCE_SEED) -> List[bytes]:
    """Deterministic pseudo-random messages, one per REFERENCE_LENGTHS entry."""
    rng = random.Random(seed)
    return [rng.randbytes(length) for length in REFERENCE_LENGTHS]


def run_self_test(include_reference: bool = True) -> List[SelfTestResult]:
    """
    Run every known-answer vector and, optionally, the reference cross-check.

    Args:
        include_reference: Also compare against the `cryptography` package

    Returns:
        One SelfTestResult per vector, in run order
    """
    results = []
    for name, message, variant, expected in KNOWN_ANSWERS:
        actual = compute_digest(message, variant).hex()
        results.append(SelfTestResult(name, variant, expected, actual))

    if include_reference:
        for message in reference_messages():
            for variant in Variant:
                results.append(SelfTestResult(
                    name=f"reference len={len(message)}",
                    variant=variant,
                    expected=reference_digest(message, variant).hex(),
                    actual=compute_digest(message, variant).hex(),
                ))

    failed = sum(1 for result in results if not result.passed)
    logger.debug("self_test_complete", total=len(results), failed=failed)
    return results
