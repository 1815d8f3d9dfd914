"""Tests for the fixed one-in, two-out hash."""

import pytest

from poseidon252.primitives.compress import CAPACITY_TWO_OUTPUTS, two_outputs
from poseidon252.primitives.field import FF, random_scalar
from poseidon252.primitives.hades import new_state, permute
from poseidon252.primitives.sponge import CAPACITY_SPONGE


def test_hash_two_outputs(rng) -> None:
    m = random_scalar(rng)

    h = two_outputs(m)

    assert len(h) == 2
    assert m != FF(0)
    assert h[0] != FF(0)
    assert h[1] != FF(0)


def test_same_result(rng) -> None:
    for _ in range(20):
        m = random_scalar(rng)
        assert two_outputs(m) == two_outputs(m)


def test_matches_single_permutation() -> None:
    state = new_state(CAPACITY_TWO_OUTPUTS)
    state[1] = FF(42)
    permute(state)

    assert two_outputs(FF(42)) == [state[1], state[2]]


def test_capacity_is_distinct_from_sponge() -> None:
    assert CAPACITY_TWO_OUTPUTS == 2**64
    assert CAPACITY_TWO_OUTPUTS != CAPACITY_SPONGE
    assert CAPACITY_TWO_OUTPUTS != 0


@pytest.mark.parametrize("m", [0, 1])
def test_distinct_inputs_distinct_outputs(m: int) -> None:
    assert two_outputs(FF(m)) != two_outputs(FF(m + 2))
