"""One-hot selection under constraints.

A circuit cannot index an array with a witness, so "the value at position k" is
expressed with one boolean per position: exactly one bit is set, and each
candidate is compared to the target only through products with its bit.
"""

from typing import List, Sequence

from poseidon252.constraints.composer import Composer, Constraint, Witness


def decompose_offset(composer: Composer, offset_flag: int, n_bits: int) -> List[Witness]:
    """Split a one-hot ``offset_flag`` into ``n_bits`` constrained bit witnesses.

    Bit i holds ``min(offset_flag & (1 << i), 1)``. Each bit is constrained to be
    boolean and their sum to equal one. A flag with zero or several bits set in
    the low ``n_bits`` produces an unsatisfiable system rather than an error.
    """
    bits = []
    total = composer.ZERO
    for i in range(n_bits):
        bit = composer.append_witness(min(offset_flag & (1 << i), 1))
        composer.assert_boolean(bit)
        total = composer.gate_add(Constraint().left(1).a(total).right(1).b(bit))
        bits.append(bit)

    composer.assert_equal_constant(total, 1)
    return bits


def assert_selected(
    composer: Composer,
    bits: Sequence[Witness],
    candidates: Sequence[Witness],
    target: Witness,
) -> None:
    """Constrain the candidate under the set bit to equal ``target``.

    For every position, ``bit * candidate == bit * target``. Unselected
    candidates are left free.
    """
    if len(bits) != len(candidates):
        raise ValueError(f"{len(bits)} selection bits for {len(candidates)} candidates")

    for bit, candidate in zip(bits, candidates):
        expected = composer.gate_mul(Constraint().mult(1).a(bit).b(candidate))
        calculated = composer.gate_mul(Constraint().mult(1).a(bit).b(target))
        composer.assert_equal(expected, calculated)
