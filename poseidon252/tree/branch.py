"""Branches: the sibling levels linking a leaf to the tree root."""

from dataclasses import dataclass, field
from typing import List

from poseidon252.primitives.field import FF
from poseidon252.primitives.hades import WIDTH, as_state, new_state, permute

ARITY = WIDTH - 1


@dataclass
class PoseidonLevel:
    """One level of a branch.

    Attributes:
        level: WIDTH elements; slot 0 is the node's child bitmask, slots 1..ARITY
               the child hashes
        offset: Rate slot (0-based) holding the hash the path continues from
    """

    level: FF = field(default_factory=lambda: new_state(0))
    offset: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.offset < ARITY:
            raise ValueError(f"offset must be in [0, {ARITY - 1}], got {self.offset}")
        if len(self.level) != WIDTH:
            raise ValueError(f"level must have {WIDTH} elements, got {len(self.level)}")

    def offset_flag(self) -> int:
        """One-hot bitmask of ``offset``."""
        return 1 << self.offset

    def __getitem__(self, idx: int) -> FF:
        return self.level[idx]

    def digest(self) -> FF:
        """Hash of the node this level describes."""
        state = as_state(self.level)
        permute(state)
        return state[1]


@dataclass
class PoseidonBranch:
    """Levels from the leaf (index 0) to the root (index depth - 1).

    Attributes:
        path: Levels ordered leaf to root
        root: Root of the tree the branch was taken from
    """

    path: List[PoseidonLevel]
    root: FF = field(default_factory=lambda: FF(0))

    @classmethod
    def default(cls, depth: int) -> "PoseidonBranch":
        """All-zero branch of ``depth`` levels, for compiling circuits."""
        return cls([PoseidonLevel() for _ in range(depth)])

    @property
    def depth(self) -> int:
        return len(self.path)

    @property
    def leaf(self) -> FF:
        """Leaf hash the branch opens."""
        first = self.path[0]
        return first[first.offset + 1]

    def compute_root(self) -> FF:
        """Root hash recomputed from the top level."""
        return self.path[-1].digest()

    def verify(self, leaf: FF) -> bool:
        """Native counterpart of the Merkle opening gadget.

        True when every level holds the previous digest at its offset and the
        last digest is the stored root.
        """
        current = leaf
        for level in self.path:
            if level[level.offset + 1] != current:
                return False
            current = level.digest()
        return current == self.root
