"""Protocol - circuit compilation, proving and verification."""

from poseidon252.protocol.circuit import Circuit, CircuitDescription, Compiler
from poseidon252.protocol.proof import Proof
from poseidon252.protocol.prover import Prover
from poseidon252.protocol.verifier import Verifier

__all__ = [
    "Circuit",
    "CircuitDescription",
    "Compiler",
    "Proof",
    "Prover",
    "Verifier",
]
