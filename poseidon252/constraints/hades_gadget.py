"""In-circuit Hades permutation.

Mirrors :func:`poseidon252.primitives.hades.permute` gate by gate:

    round constants   one addition gate per slot
    x^5 S-box         three multiplication gates (x^2, x^4, x^5)
    MDS row           two addition gates (5 terms over a 4-wire gate)

A permutation with WIDTH 5, 8 full and 59 partial rounds costs 1302 gates.
"""

from typing import List

from poseidon252.constraints.composer import Composer, Constraint, Witness
from poseidon252.primitives.hades import HADES, MDS_MATRIX, ROUND_CONSTANTS, WIDTH


def _sbox(composer: Composer, x: Witness) -> Witness:
    x2 = composer.gate_mul(Constraint().mult(1).a(x).b(x))
    x4 = composer.gate_mul(Constraint().mult(1).a(x2).b(x2))
    return composer.gate_mul(Constraint().mult(1).a(x4).b(x))


def _mds_row(composer: Composer, row, state: List[Witness]) -> Witness:
    head = composer.gate_add(
        Constraint()
        .left(row[0]).a(state[0])
        .right(row[1]).b(state[1])
        .fourth(row[2]).d(state[2])
    )
    return composer.gate_add(
        Constraint()
        .left(1).a(head)
        .right(row[3]).b(state[3])
        .fourth(row[4]).d(state[4])
    )


def permute_gadget(composer: Composer, state: List[Witness]) -> None:
    """Constrain the permutation of ``state`` and write the outputs back in place.

    Args:
        composer: Composer receiving the gates
        state: WIDTH witnesses
    """
    if len(state) != WIDTH:
        raise ValueError(f"state must have {WIDTH} witnesses, got {len(state)}")

    for round_idx in range(HADES.total_rounds):
        constants = ROUND_CONSTANTS[round_idx]
        for i in range(WIDTH):
            state[i] = composer.gate_add(Constraint().left(1).a(state[i]).constant(constants[i]))

        if HADES.is_full_round(round_idx):
            for i in range(WIDTH):
                state[i] = _sbox(composer, state[i])
        else:
            state[-1] = _sbox(composer, state[-1])

        mixed = [_mds_row(composer, MDS_MATRIX[i], state) for i in range(WIDTH)]
        state[:] = mixed
