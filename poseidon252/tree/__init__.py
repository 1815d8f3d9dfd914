"""Tree - Poseidon Merkle tree, branches and the opening gadget."""

from poseidon252.tree.branch import ARITY, PoseidonBranch, PoseidonLevel
from poseidon252.tree.leaf import PoseidonLeaf
from poseidon252.tree.tree import PoseidonTree
from poseidon252.tree.zk import merkle_opening

__all__ = [
    "ARITY",
    "PoseidonBranch",
    "PoseidonLevel",
    "PoseidonLeaf",
    "PoseidonTree",
    "merkle_opening",
]
