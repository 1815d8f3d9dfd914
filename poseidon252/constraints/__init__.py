"""Constraints - composer, permutation gadget and circuit building blocks."""

from poseidon252.constraints.composer import (
    ZERO,
    Composer,
    Constraint,
    Gate,
    Witness,
)
from poseidon252.constraints.hades_gadget import permute_gadget
from poseidon252.constraints.select import assert_selected, decompose_offset
from poseidon252.constraints.sponge_gadget import CircuitSpongeContext, gadget

__all__ = [
    "Composer",
    "Constraint",
    "Gate",
    "Witness",
    "ZERO",
    "permute_gadget",
    "decompose_offset",
    "assert_selected",
    "CircuitSpongeContext",
    "gadget",
]
