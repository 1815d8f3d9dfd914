"""Fixed one-in, two-out use of the permutation."""

from typing import List

from poseidon252.primitives.field import FF
from poseidon252.primitives.hades import new_state, permute

# Domain tag for the fixed-length mode: 2^64, distinct from the sponge's
CAPACITY_TWO_OUTPUTS = 1 << 64


def two_outputs(message: FF) -> List[FF]:
    """Map one field element to two.

    The state is ``[CAPACITY_TWO_OUTPUTS, message, 0, 0, 0]``. A single
    permutation fills the whole state, so the result is read straight from
    slots 1 and 2 without any padding.
    """
    state = new_state(CAPACITY_TWO_OUTPUTS)
    state[1] = message

    permute(state)

    return [state[1], state[2]]
