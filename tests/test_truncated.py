"""Tests for sponge digests truncated into the Jubjub scalar field."""

import pytest

from poseidon252.errors import TruncationError
from poseidon252.primitives import sponge, truncated
from poseidon252.primitives.field import (
    BLS_SCALAR_MODULUS,
    FJ,
    JUBJUB_SCALAR_MODULUS,
)
from poseidon252.primitives.truncated import (
    TRUNCATION_BITS,
    TRUNCATION_MASK,
    max_truncation_bits,
    truncation_mask,
)


class TestMask:
    """Mask derivation and validation."""

    def test_configured_mask(self) -> None:
        assert TRUNCATION_BITS == 225
        assert int.from_bytes(TRUNCATION_MASK, byteorder="little") == 2**225 - 1
        assert (TRUNCATION_BITS + 1) % 2 == 0

    def test_mask_below_target_modulus(self) -> None:
        assert int.from_bytes(TRUNCATION_MASK, byteorder="little") < JUBJUB_SCALAR_MODULUS

    def test_max_bits_for_jubjub(self) -> None:
        assert max_truncation_bits(JUBJUB_SCALAR_MODULUS) == 251
        assert TRUNCATION_BITS <= max_truncation_bits(JUBJUB_SCALAR_MODULUS)

    def test_max_bits_for_bls(self) -> None:
        """255-bit modulus: 254 would fit but is even, so 253."""
        assert max_truncation_bits(BLS_SCALAR_MODULUS) == 253

    @pytest.mark.parametrize("modulus", [2**8 + 1, 1000, JUBJUB_SCALAR_MODULUS])
    def test_max_bits_satisfies_constraints(self, modulus: int) -> None:
        bits = max_truncation_bits(modulus)
        assert (1 << bits) - 1 < modulus
        assert (bits + 1) % 2 == 0
        truncation_mask(bits, modulus)

    def test_even_bit_count_rejected(self) -> None:
        with pytest.raises(TruncationError):
            truncation_mask(224, JUBJUB_SCALAR_MODULUS)

    def test_oversized_mask_rejected(self) -> None:
        with pytest.raises(TruncationError):
            truncation_mask(253, JUBJUB_SCALAR_MODULUS)


class TestTruncatedHash:
    """Truncated digests."""

    @pytest.mark.parametrize("length", [0, 1, 4, 7])
    def test_result_in_range(self, random_messages, length: int) -> None:
        result = truncated.hash(random_messages(length))
        assert isinstance(result, FJ)
        assert int(result) < JUBJUB_SCALAR_MODULUS
        assert int(result) < 2**TRUNCATION_BITS

    def test_keeps_low_bits_of_digest(self, random_messages) -> None:
        messages = random_messages(5)
        digest = int(sponge.hash(messages))
        assert int(truncated.hash(messages)) == digest & (2**TRUNCATION_BITS - 1)

    def test_deterministic(self, random_messages) -> None:
        messages = random_messages(3)
        assert truncated.hash(messages) == truncated.hash(messages)
