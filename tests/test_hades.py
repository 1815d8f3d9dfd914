"""Tests for the Hades permutation and its circuit gadget."""

import numpy as np
import pytest

from poseidon252.constraints.composer import Composer
from poseidon252.constraints.hades_gadget import permute_gadget
from poseidon252.primitives.field import FF, random_scalar
from poseidon252.primitives.hades import (
    HADES,
    MDS_MATRIX,
    ROUND_CONSTANTS,
    WIDTH,
    as_state,
    mds_matrix,
    new_state,
    permute,
    round_constants,
)


class TestConfig:
    """Permutation parameters and derived constants."""

    def test_default_parameters(self) -> None:
        assert HADES.width == WIDTH == 5
        assert HADES.rate == 4
        assert HADES.total_rounds == 67

    def test_round_split(self) -> None:
        """Four full rounds, then the partial rounds, then four full rounds."""
        full = [r for r in range(HADES.total_rounds) if HADES.is_full_round(r)]
        assert full == [0, 1, 2, 3, 63, 64, 65, 66]

    def test_constants_shape(self) -> None:
        assert ROUND_CONSTANTS.shape == (67, 5)
        assert MDS_MATRIX.shape == (5, 5)

    def test_constants_are_deterministic(self) -> None:
        assert round_constants() == round_constants()
        assert mds_matrix() == mds_matrix()

    def test_mds_is_cauchy(self) -> None:
        for i in range(WIDTH):
            for j in range(WIDTH):
                assert MDS_MATRIX[i, j] * FF(i + j + WIDTH) == FF(1)


class TestPermute:
    """Native permutation."""

    def test_permute_is_deterministic(self) -> None:
        a = as_state([1, 2, 3, 4, 5])
        b = as_state([1, 2, 3, 4, 5])
        permute(a)
        permute(b)
        assert np.array_equal(a, b)

    def test_permute_changes_every_slot(self) -> None:
        state = new_state(0)
        permute(state)
        for i in range(WIDTH):
            assert state[i] != FF(0)

    def test_permute_is_in_place(self) -> None:
        state = new_state(1)
        before = state.copy()
        result = permute(state)
        assert result is None
        assert not np.array_equal(state, before)

    def test_permute_rejects_wrong_width(self) -> None:
        with pytest.raises(ValueError):
            permute(FF.Zeros(4))


class TestPermuteGadget:
    """In-circuit permutation matches the native one."""

    def test_gadget_matches_native(self, rng) -> None:
        values = [random_scalar(rng) for _ in range(WIDTH)]

        native = as_state(values)
        permute(native)

        composer = Composer()
        state = [composer.append_witness(v) for v in values]
        permute_gadget(composer, state)

        assert [composer.value_of(w) for w in state] == list(native)
        assert composer.check() is None

    def test_gadget_gate_count(self) -> None:
        composer = Composer()
        state = [composer.append_witness(i) for i in range(WIDTH)]
        before = len(composer.gates)
        permute_gadget(composer, state)
        assert len(composer.gates) - before == 1302

    def test_gadget_rejects_wrong_width(self) -> None:
        composer = Composer()
        with pytest.raises(ValueError):
            permute_gadget(composer, [composer.ZERO] * (WIDTH - 1))
