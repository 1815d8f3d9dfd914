"""Merkle opening inside a circuit."""

from typing import Optional

from poseidon252.constraints.composer import Composer, Witness
from poseidon252.constraints.hades_gadget import permute_gadget
from poseidon252.constraints.select import assert_selected, decompose_offset
from poseidon252.tree.branch import ARITY, PoseidonBranch


def merkle_opening(
    composer: Composer,
    branch: PoseidonBranch,
    leaf: Witness,
    depth: Optional[int] = None,
) -> Witness:
    """Recompute the root of ``branch`` starting from ``leaf`` and return it.

    Per level: the offset flag becomes ARITY one-hot bits, the level's WIDTH
    values are loaded as witnesses, the value under the set bit is constrained
    to equal the hash carried from the level below, and the permutation of the
    loaded level gives the next hash.

    A branch that does not open ``leaf`` still builds; the resulting constraint
    system is unsatisfiable and proving fails. Comparing the returned root with
    a public root is left to the caller.

    Args:
        composer: Composer receiving the gates
        branch: Opening produced by the tree
        leaf: Witness holding the leaf hash
        depth: Expected number of levels, checked before any gate is added
    """
    if depth is not None and branch.depth != depth:
        raise ValueError(f"branch has {branch.depth} levels, circuit expects {depth}")

    root = leaf
    for level in branch.path:
        bits = decompose_offset(composer, level.offset_flag(), ARITY)

        container = [composer.append_witness(value) for value in level.level]
        assert_selected(composer, bits, container[1:], root)

        permute_gadget(composer, container)
        root = container[1]

    return root
