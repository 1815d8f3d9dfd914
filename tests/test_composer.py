"""Tests for the gate composer."""

import pytest

from poseidon252.constraints.composer import ZERO, Composer, Constraint, Witness
from poseidon252.primitives.field import FF


class TestGates:
    """Output gates compute their identity."""

    def test_zero_witness(self) -> None:
        composer = Composer()
        assert composer.ZERO == ZERO == Witness(0)
        assert composer.value_of(ZERO) == FF(0)
        assert composer.check() is None

    def test_gate_add(self) -> None:
        composer = Composer()
        a = composer.append_witness(3)
        b = composer.append_witness(4)
        c = composer.gate_add(Constraint().left(2).a(a).right(-1).b(b).constant(10))
        assert composer.value_of(c) == FF(12)
        assert composer.check() is None

    def test_gate_add_fourth_wire(self) -> None:
        composer = Composer()
        a = composer.append_witness(1)
        b = composer.append_witness(2)
        d = composer.append_witness(3)
        o = composer.gate_add(Constraint().left(1).a(a).right(1).b(b).fourth(5).d(d))
        assert composer.value_of(o) == FF(18)

    def test_gate_mul(self) -> None:
        composer = Composer()
        x = composer.append_witness(FF(3))
        y = composer.gate_mul(Constraint().mult(1).a(x).b(x))
        composer.assert_equal_constant(y, 9)
        assert composer.value_of(y) == FF(9)
        assert composer.check() is None

    def test_negative_coefficients_wrap(self) -> None:
        composer = Composer()
        a = composer.append_witness(1)
        o = composer.gate_add(Constraint().left(-1).a(a))
        assert composer.value_of(o) == -FF(1)

    def test_append_constant(self) -> None:
        composer = Composer()
        c = composer.append_constant(2**65)
        assert composer.value_of(c) == FF(2**65)
        assert composer.check() is None


class TestAssertions:
    """Assertion gates and unsatisfiable systems."""

    def test_assert_equal(self) -> None:
        composer = Composer()
        a = composer.append_witness(5)
        b = composer.append_witness(5)
        composer.assert_equal(a, b)
        assert composer.check() is None

    def test_assert_equal_fails(self) -> None:
        composer = Composer()
        a = composer.append_witness(5)
        b = composer.append_witness(6)
        composer.assert_equal(a, b)
        assert composer.check() == len(composer.gates) - 1

    def test_assert_equal_constant_fails(self) -> None:
        composer = Composer()
        a = composer.append_witness(5)
        composer.assert_equal_constant(a, 4)
        assert composer.check() is not None

    @pytest.mark.parametrize("value,ok", [(0, True), (1, True), (2, False), (-1, False)])
    def test_assert_boolean(self, value: int, ok: bool) -> None:
        composer = Composer()
        composer.assert_boolean(composer.append_witness(value))
        assert (composer.check() is None) == ok

    def test_first_failure_reported(self) -> None:
        composer = Composer()
        a = composer.append_witness(1)
        composer.assert_equal_constant(a, 2)
        first = len(composer.gates) - 1
        composer.assert_equal_constant(a, 3)
        assert composer.check() == first


class TestPublicInputs:
    """Public inputs and the circuit shape."""

    def test_append_public(self) -> None:
        composer = Composer()
        p = composer.append_public(FF(77))
        assert composer.public_inputs == [FF(77)]
        assert composer.value_of(p) == FF(77)
        assert composer.check() is None

    def test_public_mismatch_fails(self) -> None:
        composer = Composer()
        composer.append_public(FF(77))
        composer.public_inputs[0] = FF(78)
        assert composer.check() is not None

    def test_shape_ignores_values(self) -> None:
        def build(x: int) -> Composer:
            composer = Composer()
            w = composer.append_witness(x)
            composer.gate_mul(Constraint().mult(1).a(w).b(w))
            composer.append_public(x)
            return composer

        assert build(2).shape() == build(3).shape()
        assert build(2).n_witnesses == 4
