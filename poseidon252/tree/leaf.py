"""Leaf interface for Poseidon trees."""

from abc import ABC, abstractmethod

from poseidon252.primitives.field import FF


class PoseidonLeaf(ABC):
    """A value that can be stored in a :class:`PoseidonTree`.

    The tree only reads the leaf's digest; the position is written back by the
    tree when the leaf is pushed.
    """

    @abstractmethod
    def poseidon_hash(self) -> FF:
        """Digest stored at the leaf's position."""
        pass

    @property
    @abstractmethod
    def pos(self) -> int:
        """Position assigned by the tree."""
        pass

    @abstractmethod
    def set_pos(self, pos: int) -> None:
        pass
