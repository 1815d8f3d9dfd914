"""Proof container and its binary encoding.

Layout (little-endian):

    u32            number of witness values n
    n x 32 bytes   witness assignment
    32 bytes       blinder
    64 bytes       commitment
"""

import hashlib
import struct
from dataclasses import dataclass
from typing import List, Sequence

from poseidon252.errors import DecodeError
from poseidon252.primitives.field import FF, SCALAR_BYTES, from_bytes, to_bytes

COMMITMENT_BYTES = 64


@dataclass
class Proof:
    """Witness assignment bound to a circuit and its public inputs.

    The proof carries the full assignment: it attests satisfiability but hides
    nothing and is linear in the circuit size.
    """

    witness: List[FF]
    blinder: FF
    commitment: bytes

    def to_bytes(self) -> bytes:
        out = bytearray(struct.pack("<I", len(self.witness)))
        for value in self.witness:
            out += to_bytes(value)
        out += to_bytes(self.blinder)
        out += self.commitment
        return bytes(out)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Proof":
        """Parse the encoding produced by :meth:`to_bytes`.

        Raises:
            DecodeError: truncated or oversized input, or a non-canonical scalar
        """
        if len(data) < 4:
            raise DecodeError("proof too short for its length prefix")
        (n,) = struct.unpack_from("<I", data, 0)
        expected = 4 + (n + 1) * SCALAR_BYTES + COMMITMENT_BYTES
        if len(data) != expected:
            raise DecodeError(f"proof with {n} witness values must be {expected} bytes, got {len(data)}")

        offset = 4
        witness = []
        for _ in range(n):
            witness.append(from_bytes(data[offset:offset + SCALAR_BYTES]))
            offset += SCALAR_BYTES
        blinder = from_bytes(data[offset:offset + SCALAR_BYTES])
        offset += SCALAR_BYTES
        return cls(witness=witness, blinder=blinder, commitment=bytes(data[offset:]))


def commit(
    digest: bytes, public_inputs: Sequence[FF], witness: Sequence[FF], blinder: FF
) -> bytes:
    """BLAKE2b commitment to circuit, statement, assignment and blinder."""
    hasher = hashlib.blake2b(digest_size=COMMITMENT_BYTES, person=b"poseidon252-prf")
    hasher.update(digest)
    hasher.update(struct.pack("<I", len(public_inputs)))
    for value in public_inputs:
        hasher.update(to_bytes(value))
    for value in witness:
        hasher.update(to_bytes(value))
    hasher.update(to_bytes(blinder))
    return hasher.digest()


def challenge(commitment: bytes) -> FF:
    """Batching challenge derived from the commitment."""
    hasher = hashlib.blake2b(commitment, person=b"poseidon252-chl")
    return FF(int.from_bytes(hasher.digest(), byteorder="little") % FF.order)
