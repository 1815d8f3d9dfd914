"""
Poseidon hashing over the BLS12-381 scalar field.

This package provides:
- The Hades permutation (native and as circuit gates)
- A variable-length sponge hash and its circuit gadget
- A fixed one-in, two-out compression
- Sponge digests truncated into the Jubjub scalar field
- A Poseidon Merkle tree and the in-circuit Merkle opening
- A gate composer with a satisfiability prover and verifier

Usage:
    from poseidon252 import FF, sponge_hash, two_outputs

    digest = sponge_hash([FF(1), FF(2), FF(3)])
"""

from poseidon252.errors import (
    CircuitShapeError,
    DecodeError,
    PoseidonError,
    ProvingError,
    TruncationError,
    VerificationError,
)
from poseidon252.primitives.field import FF, FJ
from poseidon252.primitives.compress import two_outputs
from poseidon252.primitives.sponge import hash as sponge_hash
from poseidon252.primitives.truncated import hash as truncated_hash
from poseidon252.constraints.composer import Composer, Constraint, Witness
from poseidon252.constraints.sponge_gadget import gadget
from poseidon252.protocol import Circuit, Compiler, Proof, Prover, Verifier
from poseidon252.tree import (
    PoseidonBranch,
    PoseidonLeaf,
    PoseidonLevel,
    PoseidonTree,
    merkle_opening,
)

__version__ = "0.28.1"
__all__ = [
    # Field
    "FF",
    "FJ",
    # Hashes
    "two_outputs",
    "sponge_hash",
    "truncated_hash",
    "gadget",
    # Circuits
    "Composer",
    "Constraint",
    "Witness",
    "Circuit",
    "Compiler",
    "Proof",
    "Prover",
    "Verifier",
    # Tree
    "PoseidonBranch",
    "PoseidonLevel",
    "PoseidonLeaf",
    "PoseidonTree",
    "merkle_opening",
    # Errors
    "PoseidonError",
    "DecodeError",
    "TruncationError",
    "ProvingError",
    "CircuitShapeError",
    "VerificationError",
]
