"""
Security tests for SHA2Vault.

Tests specifically for security-related scenarios:
- Invalid inputs (unsupported variants, text instead of bytes)
- Avalanche on single-bit flips
- Variant independence
- Agreement with an independent reference implementation
"""

import pytest
from hypothesis import given, settings, strategies as st

from sha2vault import ConfigurationError, UnsupportedVariantError, Variant
from sha2vault.core_crypto.sha2 import compute_digest, sha224, sha256, sha256_hex
from sha2vault.core_crypto.state import DigestState
from sha2vault.selftest import reference_digest


def _bit_difference(left: bytes, right: bytes) -> int:
    return sum(bin(x ^ y).count("1") for x, y in zip(left, right))


class TestVariantValidation:
    """Unsupported variants are rejected at the boundary."""

    @pytest.mark.parametrize("variant", [
        0, 1, 128, 160, 384, 512, -256, "512", "sha384", "abc", "", None, 256.0, True,
        "²", "sha²⁵⁶", "٢٥٦",
    ])
    def test_unsupported_variant_rejected(self, variant):
        """Anything outside {224, 256} raises UnsupportedVariantError."""
        with pytest.raises(UnsupportedVariantError):
            compute_digest(b"abc", variant)

    def test_error_is_configuration_error(self):
        """The error is a ConfigurationError and a ValueError."""
        with pytest.raises(ConfigurationError):
            DigestState.initial(512)
        with pytest.raises(ValueError):
            Variant.coerce(512)

    def test_error_carries_rejected_value(self):
        """The rejected value is available to the caller."""
        with pytest.raises(UnsupportedVariantError) as exc_info:
            Variant.coerce(384)
        assert exc_info.value.variant == 384
        assert "384" in str(exc_info.value)

    def test_failure_is_not_sticky(self):
        """A rejected call leaves later calls unaffected."""
        with pytest.raises(UnsupportedVariantError):
            compute_digest(b"abc", 512)
        assert sha256_hex(b"abc") == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_text_input_rejected(self):
        """Strings must be encoded by the caller."""
        with pytest.raises(TypeError):
            compute_digest("abc", 256)

    @pytest.mark.parametrize("message", [5, 0, [97, 98, 99], (1, 2), None, 3.5])
    def test_non_bytes_input_rejected(self, message):
        """Integers and sequences of ints are not silently turned into bytes."""
        with pytest.raises(TypeError):
            compute_digest(message, 256)

    def test_unicode_digit_variant_is_unsupported(self):
        """Non-ASCII digits raise the variant error, not a bare ValueError."""
        with pytest.raises(ConfigurationError):
            Variant.coerce("²")


class TestDigestProperties:
    """Output properties that must hold for every message."""

    @given(message=st.binary(max_size=300))
    @settings(max_examples=50, deadline=None)
    def test_fixed_output_length(self, message):
        """28 bytes for SHA-224, 32 bytes for SHA-256."""
        assert len(compute_digest(message, 224)) == 28
        assert len(compute_digest(message, 256)) == 32

    @given(message=st.binary(max_size=200))
    @settings(max_examples=30, deadline=None)
    def test_deterministic(self, message):
        """Two calls on the same input agree."""
        assert compute_digest(message, 256) == compute_digest(message, 256)
        assert compute_digest(message, 224) == compute_digest(message, 224)

    @given(message=st.binary(max_size=200))
    @settings(max_examples=50, deadline=None)
    def test_sha224_not_truncated_sha256(self, message):
        """SHA-224 is never a prefix of SHA-256 of the same message."""
        assert sha224(message) != sha256(message)[:28]

    @pytest.mark.parametrize("message", [b"abc", b"hello world", bytes(100)])
    def test_hashing_hex_digest_changes_result(self, message):
        """Hashing the hex text of a digest does not reproduce it."""
        first = sha256(message)
        second = sha256(first.hex().encode())
        assert second != first
        assert sha256(second.hex().encode()) != second


class TestAvalanche:
    """Flipping one input bit changes about half of the output bits."""

    @given(data=st.data())
    @settings(max_examples=40, deadline=None)
    def test_single_bit_flip(self, data):
        """Any single-bit flip changes a large share of the digest bits."""
        message = data.draw(st.binary(min_size=1, max_size=150))
        bit = data.draw(st.integers(min_value=0, max_value=len(message) * 8 - 1))

        flipped = bytearray(message)
        flipped[bit // 8] ^= 1 << (bit % 8)
        flipped = bytes(flipped)

        for variant in Variant:
            original = compute_digest(message, variant)
            changed = compute_digest(flipped, variant)
            assert original != changed
            # ~50% expected; a quarter of the bits is far below any plausible outcome
            assert _bit_difference(original, changed) >= variant.value // 4

    def test_length_extension_by_zero_byte(self):
        """Appending a zero byte changes the digest."""
        assert sha256(b"abc") != sha256(b"abc\x00")
        assert sha224(b"") != sha224(b"\x00")


class TestReferenceAgreement:
    """The from-scratch core agrees with the `cryptography` package."""

    @given(message=st.binary(max_size=400))
    @settings(max_examples=60, deadline=None)
    def test_matches_reference(self, message):
        """Random messages hash identically in both implementations."""
        for variant in Variant:
            assert compute_digest(message, variant) == reference_digest(message, variant)

    @pytest.mark.parametrize("length", [55, 56, 57, 63, 64, 65, 119, 120, 127, 128])
    def test_boundary_lengths(self, length):
        """Lengths around the padding boundaries agree with the reference."""
        message = bytes((i * 7 + 3) & 0xFF for i in range(length))
        for variant in Variant:
            assert compute_digest(message, variant) == reference_digest(message, variant)
