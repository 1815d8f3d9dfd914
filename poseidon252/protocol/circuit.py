"""Circuits and their compilation into a prover/verifier pair.

A circuit's shape (gate selectors, wiring, witness count, public input
positions) must not depend on the witness values. Compiling runs the circuit
once to record that shape; the prover later re-runs it on the real assignment
and refuses to prove when the shape differs.

Usage:
    prover, verifier = Compiler.compile(MyCircuit.default(), b"label")
    proof, public_inputs = prover.prove(rng, my_circuit)
    verifier.verify(proof, public_inputs)
"""

import hashlib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

import structlog

from poseidon252.constraints.composer import Composer, Gate, GateShape
from poseidon252.primitives.field import SCALAR_BYTES

if TYPE_CHECKING:
    from poseidon252.protocol.prover import Prover
    from poseidon252.protocol.verifier import Verifier

logger = structlog.get_logger(__name__)


class Circuit(ABC):
    """A statement expressed as gates on a composer."""

    @abstractmethod
    def circuit(self, composer: Composer) -> None:
        """Append this circuit's witnesses and gates to ``composer``."""
        pass


def build(circuit: Circuit) -> Composer:
    """Run ``circuit`` on a fresh composer."""
    composer = Composer()
    circuit.circuit(composer)
    return composer


# --- Description ---


def _encode_shape(n_witnesses: int, gates: Tuple[GateShape, ...]) -> bytes:
    out = bytearray(n_witnesses.to_bytes(8, byteorder="little"))
    for shape in gates:
        *selectors, a, b, d, o, pi = shape
        for s in selectors:
            out += s.to_bytes(SCALAR_BYTES, byteorder="little")
        for wire in (a, b, d, o, pi + 1):
            out += wire.to_bytes(8, byteorder="little")
    return bytes(out)


@dataclass(frozen=True)
class CircuitDescription:
    """Compiled, value-independent form of a circuit.

    Attributes:
        label: Domain label binding proofs to this circuit
        n_witnesses: Witness slots the circuit allocates
        n_public: Public inputs the circuit exposes
        gates: Gates recorded at compile time (selectors and wiring only matter)
        digest: BLAKE2b digest of the label and the shape
    """

    label: bytes
    n_witnesses: int
    n_public: int
    gates: Tuple[Gate, ...]
    digest: bytes

    @classmethod
    def from_composer(cls, composer: Composer, label: bytes) -> "CircuitDescription":
        return cls(
            label=label,
            n_witnesses=composer.n_witnesses,
            n_public=len(composer.public_inputs),
            gates=tuple(composer.gates),
            digest=shape_digest(composer, label),
        )


def shape_digest(composer: Composer, label: bytes) -> bytes:
    n_witnesses, gates = composer.shape()
    hasher = hashlib.blake2b(key=label[:64], person=b"poseidon252-circ")
    hasher.update(_encode_shape(n_witnesses, gates))
    return hasher.digest()


# --- Compiler ---


class Compiler:
    """Turns a circuit into a matching prover and verifier."""

    @staticmethod
    def compile(circuit: Circuit, label: bytes) -> Tuple["Prover", "Verifier"]:
        """Record the shape of ``circuit``.

        Any instance with the right shape works; its witness values are ignored.
        """
        from poseidon252.protocol.prover import Prover
        from poseidon252.protocol.verifier import Verifier

        composer = build(circuit)
        description = CircuitDescription.from_composer(composer, label)
        logger.info(
            "circuit compiled",
            circuit=type(circuit).__name__,
            gates=len(description.gates),
            witnesses=description.n_witnesses,
            public_inputs=description.n_public,
        )
        return Prover(description), Verifier(description)
