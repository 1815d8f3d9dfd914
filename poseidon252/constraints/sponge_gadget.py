"""Sponge hash inside a circuit.

The circuit is defined by the length of ``messages``: a circuit compiled for one
length does not accept another. The padding constant is part of the circuit
description, not a witness.
"""

from typing import List, Sequence

from poseidon252.constraints.composer import Composer, Constraint, Witness
from poseidon252.constraints.hades_gadget import permute_gadget
from poseidon252.primitives.hades import WIDTH
from poseidon252.primitives.sponge import SpongeContext, absorb


class CircuitSpongeContext(SpongeContext):
    """Witness implementation of the sponge schedule; every step adds gates."""

    def __init__(self, composer: Composer) -> None:
        self.composer = composer

    def new_state(self, capacity: int) -> List[Witness]:
        state = [self.composer.ZERO] * WIDTH
        state[0] = self.composer.append_constant(capacity)
        return state

    def add(self, a: Witness, b: Witness) -> Witness:
        return self.composer.gate_add(Constraint().left(1).a(a).right(1).b(b))

    def add_constant(self, a: Witness, constant: int) -> Witness:
        return self.composer.gate_add(Constraint().left(1).a(a).constant(constant))

    def permute(self, state: List[Witness]) -> None:
        permute_gadget(self.composer, state)


def gadget(composer: Composer, messages: Sequence[Witness]) -> Witness:
    """Mirror :func:`poseidon252.primitives.sponge.hash` inside ``composer``.

    Returns:
        Witness whose value equals the native digest of the messages' values
    """
    return absorb(CircuitSpongeContext(composer), messages)
