"""BLS12-381 scalar field and Jubjub scalar field.

Uses galois library for all field arithmetic. FF is the field every hash and
circuit value lives in; FJ is the smaller field truncated digests are parsed
into.

Both moduli are well above 2^64, so galois stores elements with object dtype
and falls back to Python integer arithmetic. The multiplicative generators are
passed explicitly with ``verify=False`` so construction does not have to
factor p - 1.
"""

from typing import Type

import galois
import numpy as np

from poseidon252.errors import DecodeError

# --- Field Construction ---

BLS_SCALAR_MODULUS = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001
JUBJUB_SCALAR_MODULUS = 0x0E7DB4EA6533AFA906673B0101343B00A6682093CCC81082D0970E5ED6F72CB7

FF = galois.GF(BLS_SCALAR_MODULUS, primitive_element=7, verify=False)
"""Scalar field of BLS12-381 (255-bit modulus)."""

FJ = galois.GF(JUBJUB_SCALAR_MODULUS, primitive_element=6, verify=False)
"""Scalar field of the Jubjub curve embedded in BLS12-381 (252-bit modulus)."""

# Canonical encoding size shared by both fields
SCALAR_BYTES = 32


# --- Encoding ---


def to_bytes(value) -> bytes:
    """Encode a field element as 32 little-endian bytes."""
    return int(value).to_bytes(SCALAR_BYTES, byteorder="little")


def from_bytes(data: bytes, field: Type[galois.FieldArray] = FF):
    """Decode 32 little-endian bytes into an element of ``field``.

    Raises:
        DecodeError: wrong length, or the integer is not below the modulus
    """
    if len(data) != SCALAR_BYTES:
        raise DecodeError(f"expected {SCALAR_BYTES} bytes, got {len(data)}")
    value = int.from_bytes(data, byteorder="little")
    if value >= field.order:
        raise DecodeError(f"value is not a canonical element of GF({field.order:#x})")
    return field(value)


# --- Sampling ---


def random_scalar(rng: np.random.Generator, field: Type[galois.FieldArray] = FF):
    """Draw a uniformly distributed element of ``field`` from ``rng``.

    64 bytes are reduced modulo the order, so the bias is below 2^-256.
    """
    return field(int.from_bytes(rng.bytes(2 * SCALAR_BYTES), byteorder="little") % field.order)
