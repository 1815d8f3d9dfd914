"""Variable-length sponge hash.

The absorb/pad schedule is written once in :func:`absorb` against the
:class:`SpongeContext` interface. :class:`NativeSpongeContext` runs it on field
elements; ``CircuitSpongeContext`` (in ``poseidon252.constraints.sponge_gadget``)
runs it on composer witnesses, adding one gate per step. Both therefore perform
exactly the same sequence of additions and permutations for a given length.

Schedule for a message of length L, rate r = WIDTH - 1:

    chunks of r elements, each added (not written) into slots 1..r, then permute
    last chunk short  -> add 1 into slot len(chunk) + 1 before its permutation
    last chunk full   -> permute, add 1 into slot 1, permute
    L == 0            -> add 1 into slot 1, permute

The digest is slot 1 of the final state.

Example:
    digest = hash([FF(1), FF(2), FF(3)])
"""

from abc import ABC, abstractmethod
from typing import List, Sequence, TypeVar

from poseidon252.primitives.field import FF
from poseidon252.primitives.hades import WIDTH, new_state, permute

# --- Constants ---

RATE = WIDTH - 1

# Domain tag for the variable-length mode: 2^65
CAPACITY_SPONGE = 1 << 65

# Constant added after the last message element
PADDING = 1

T = TypeVar("T")


# --- Context Interface ---


class SpongeContext(ABC):
    """Operations the absorb schedule needs from its element type."""

    @abstractmethod
    def new_state(self, capacity: int) -> List:
        """Fresh WIDTH-slot state, ``capacity`` in slot 0 and zero elsewhere."""
        pass

    @abstractmethod
    def add(self, a, b):
        """Return a + b."""
        pass

    @abstractmethod
    def add_constant(self, a, constant: int):
        """Return a + constant."""
        pass

    @abstractmethod
    def permute(self, state) -> None:
        """Apply the permutation to ``state`` in place."""
        pass


class NativeSpongeContext(SpongeContext):
    """Field-element implementation backed by :func:`hades.permute`."""

    def new_state(self, capacity: int) -> FF:
        return new_state(capacity)

    def add(self, a: FF, b: FF) -> FF:
        return a + b

    def add_constant(self, a: FF, constant: int) -> FF:
        return a + FF(constant)

    def permute(self, state: FF) -> None:
        permute(state)


# --- Absorb ---


def chunks(messages: Sequence[T]) -> List[Sequence[T]]:
    """Split ``messages`` into consecutive rate-sized chunks."""
    return [messages[i:i + RATE] for i in range(0, len(messages), RATE)]


def absorb(ctx: SpongeContext, messages: Sequence):
    """Run the sponge schedule on ``messages`` and return slot 1.

    Chunks are absorbed strictly in order; each permutation depends on the
    state left by the previous one.
    """
    state = ctx.new_state(CAPACITY_SPONGE)

    blocks = chunks(messages)
    if not blocks:
        state[1] = ctx.add_constant(state[1], PADDING)
        ctx.permute(state)
        return state[1]

    last = len(blocks) - 1
    for i, chunk in enumerate(blocks):
        for j, message in enumerate(chunk):
            state[j + 1] = ctx.add(state[j + 1], message)

        if i == last and len(chunk) < RATE:
            state[len(chunk) + 1] = ctx.add_constant(state[len(chunk) + 1], PADDING)
        elif i == last:
            # Full final block gets its own permutation before the padding
            ctx.permute(state)
            state[1] = ctx.add_constant(state[1], PADDING)

        ctx.permute(state)

    return state[1]


def hash(messages: Sequence[FF]) -> FF:
    """Hash a sequence of field elements of any length to one field element."""
    return absorb(NativeSpongeContext(), messages)
