"""Sponge digests truncated to fit the Jubjub scalar field.

A BLS12-381 scalar does not always fit in the smaller Jubjub scalar field, so
the digest is masked to its low ``TRUNCATION_BITS`` bits before being parsed as
an ``FJ`` element.

Mask constraints, for a target modulus q and ``m`` retained bits:
    - 2^m - 1 < q, so every masked value parses
    - m + 1 is even, as required by the circuit encoding of bitwise AND

For Jubjub (252-bit q) the largest such m is 251; this package keeps 225.
Retargeting to another field means recomputing the mask with
:func:`truncation_mask`, never reusing the literal.
"""

from typing import Sequence

from poseidon252.errors import DecodeError, TruncationError
from poseidon252.primitives import sponge
from poseidon252.primitives.field import (
    FF,
    FJ,
    JUBJUB_SCALAR_MODULUS,
    SCALAR_BYTES,
    from_bytes,
    to_bytes,
)

# --- Mask Derivation ---


def max_truncation_bits(modulus: int) -> int:
    """Largest bit count m with 2^m - 1 < modulus and m + 1 even."""
    bits = modulus.bit_length() - 1
    if bits % 2 == 0:
        bits -= 1
    return bits


def truncation_mask(bits: int, modulus: int) -> bytes:
    """Little-endian bytes of 2^bits - 1, checked against ``modulus``.

    Raises:
        TruncationError: the mask violates either constraint
    """
    if (bits + 1) % 2 != 0:
        raise TruncationError(f"retained bit count plus one must be even, got {bits}")
    mask = (1 << bits) - 1
    if mask >= modulus:
        raise TruncationError(f"{bits}-bit mask does not fit under modulus {modulus:#x}")
    return mask.to_bytes(SCALAR_BYTES, byteorder="little")


TRUNCATION_BITS = 225
TRUNCATION_MASK = truncation_mask(TRUNCATION_BITS, JUBJUB_SCALAR_MODULUS)


# --- Hash ---


def hash(messages: Sequence[FF]) -> FJ:
    """Sponge-hash ``messages`` and return the digest truncated into FJ."""
    digest = to_bytes(sponge.hash(messages))
    masked = bytes(d & m for d, m in zip(digest, TRUNCATION_MASK))
    try:
        return from_bytes(masked, FJ)
    except DecodeError as exc:
        raise TruncationError("masked digest does not fit the Jubjub scalar field") from exc
