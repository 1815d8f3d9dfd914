"""Proof generation."""

from typing import List, Tuple

import numpy as np
import structlog

from poseidon252.errors import CircuitShapeError, ProvingError
from poseidon252.primitives.field import FF, random_scalar
from poseidon252.protocol.circuit import Circuit, CircuitDescription, build, shape_digest
from poseidon252.protocol.proof import Proof, commit

logger = structlog.get_logger(__name__)


class Prover:
    """Proves instances of one compiled circuit."""

    def __init__(self, description: CircuitDescription) -> None:
        self.description = description

    def prove(self, rng: np.random.Generator, circuit: Circuit) -> Tuple[Proof, List[FF]]:
        """Build ``circuit`` on its real assignment and prove it.

        Args:
            rng: Source of the proof blinder
            circuit: Instance with the compiled shape

        Returns:
            (proof, public_inputs)

        Raises:
            CircuitShapeError: the instance does not match the compiled circuit
            ProvingError: some gate is not satisfied by the assignment
        """
        composer = build(circuit)

        if shape_digest(composer, self.description.label) != self.description.digest:
            raise CircuitShapeError(
                f"{type(circuit).__name__} instance does not match the compiled circuit "
                f"({len(composer.gates)} gates, expected {len(self.description.gates)})"
            )

        failed = composer.check()
        if failed is not None:
            logger.info("unsatisfied constraint", gate=failed, gates=len(composer.gates))
            raise ProvingError(f"gate {failed} is not satisfied by the witness assignment")

        blinder = random_scalar(rng)
        public_inputs = list(composer.public_inputs)
        witness = composer.values
        proof = Proof(
            witness=witness,
            blinder=blinder,
            commitment=commit(self.description.digest, public_inputs, witness, blinder),
        )

        logger.debug("proof generated", gates=len(composer.gates), witnesses=len(witness))
        return proof, public_inputs
