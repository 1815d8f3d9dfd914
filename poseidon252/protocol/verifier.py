"""Proof verification."""

from typing import Sequence

import structlog

from poseidon252.errors import VerificationError
from poseidon252.primitives.field import FF
from poseidon252.protocol.circuit import CircuitDescription
from poseidon252.protocol.proof import Proof, challenge, commit

logger = structlog.get_logger(__name__)


class Verifier:
    """Checks proofs against one compiled circuit."""

    def __init__(self, description: CircuitDescription) -> None:
        self.description = description

    def verify(self, proof: Proof, public_inputs: Sequence[FF]) -> None:
        """Accept ``proof`` for ``public_inputs`` or raise.

        All gate residuals are folded into one random linear combination with a
        challenge derived from the proof commitment; a nonzero residual survives
        the fold except with probability about (number of gates) / |FF|.

        Raises:
            VerificationError: the proof is malformed, bound to another
                statement, or does not satisfy the circuit
        """
        description = self.description

        if len(public_inputs) != description.n_public:
            raise VerificationError(
                f"expected {description.n_public} public inputs, got {len(public_inputs)}"
            )
        if len(proof.witness) != description.n_witnesses:
            raise VerificationError(
                f"expected {description.n_witnesses} witness values, got {len(proof.witness)}"
            )

        expected = commit(description.digest, public_inputs, proof.witness, proof.blinder)
        if expected != proof.commitment:
            raise VerificationError("proof commitment does not match its contents")

        alpha = challenge(proof.commitment)
        acc = FF(0)
        for gate in reversed(description.gates):
            acc = acc * alpha + gate.residual(proof.witness, public_inputs)

        if acc != 0:
            raise VerificationError("constraint system is not satisfied")

        logger.debug("proof verified", gates=len(description.gates))
