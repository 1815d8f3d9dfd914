"""In-memory Poseidon tree of fixed depth and arity WIDTH - 1.

Only populated nodes are stored; an empty subtree hashes to zero. A node's hash
is slot 1 of the permutation of ``[flags, c0, c1, c2, c3]`` where ``flags`` has
bit j set when child j is populated.
"""

from typing import Dict, Generic, Optional, Tuple, TypeVar

import structlog

from poseidon252.primitives.field import FF
from poseidon252.primitives.hades import new_state
from poseidon252.tree.branch import ARITY, PoseidonBranch, PoseidonLevel
from poseidon252.tree.leaf import PoseidonLeaf

logger = structlog.get_logger(__name__)

L = TypeVar("L", bound=PoseidonLeaf)

# Bits of a position consumed per level
_LEVEL_BITS = ARITY.bit_length() - 1


class PoseidonTree(Generic[L]):
    """Append-only tree producing :class:`PoseidonBranch` openings.

    Usage:
        tree = PoseidonTree(depth=17)
        pos = tree.push(leaf)
        branch = tree.branch(pos)
        assert branch.root == tree.root()
    """

    def __init__(self, depth: int) -> None:
        if depth < 1:
            raise ValueError(f"depth must be positive, got {depth}")
        self.depth = depth
        self.capacity = ARITY ** depth
        self._leaves: Dict[int, L] = {}
        # (height, index) -> hash; height 0 holds leaf hashes
        self._nodes: Dict[Tuple[int, int], FF] = {}

    def __len__(self) -> int:
        return len(self._leaves)

    # --- Mutation ---

    def push(self, leaf: L) -> int:
        """Append ``leaf`` at the next free position and return the position."""
        pos = len(self._leaves)
        if pos >= self.capacity:
            raise ValueError(f"tree of depth {self.depth} is full ({self.capacity} leaves)")

        leaf.set_pos(pos)
        self._leaves[pos] = leaf
        self._nodes[(0, pos)] = leaf.poseidon_hash()

        index = pos
        for height in range(self.depth):
            index >>= _LEVEL_BITS
            self._nodes[(height + 1, index)] = self._level(height, index).digest()

        logger.debug("leaf pushed", pos=pos, depth=self.depth)
        return pos

    # --- Queries ---

    def get(self, pos: int) -> Optional[L]:
        return self._leaves.get(pos)

    def root(self) -> FF:
        return self._nodes.get((self.depth, 0), FF(0))

    def branch(self, pos: int) -> Optional[PoseidonBranch]:
        """Opening of the leaf at ``pos``, or None if the position is empty."""
        if pos not in self._leaves:
            return None

        path = []
        index = pos
        for height in range(self.depth):
            offset = index % ARITY
            index >>= _LEVEL_BITS
            level = self._level(height, index)
            level.offset = offset
            path.append(level)
        return PoseidonBranch(path, root=self.root())

    def _level(self, height: int, parent: int) -> PoseidonLevel:
        """Children of node ``parent`` at ``height + 1`` as a permutation state."""
        level = new_state(0)
        flags = 0
        for j in range(ARITY):
            child = self._nodes.get((height, parent * ARITY + j))
            if child is not None:
                level[j + 1] = child
                flags |= 1 << j
        level[0] = FF(flags)
        return PoseidonLevel(level=level)
