"""Gate-based constraint system.

Every gate relates up to four witnesses through one arithmetic identity:

    q_m*a*b + q_l*a + q_r*b + q_4*d + q_c - PI - q_o*o = 0

where ``PI`` is the gate's public input (zero for private gates). Gates that
produce a value (``gate_add``, ``gate_mul``, ``append_constant``) allocate the
output witness ``o`` with ``q_o = 1``; assertion gates use ``q_o = 0``.

The composer records both the gates and the concrete witness assignment, so the
same object serves as circuit description (``shape``) and as prover input
(``values``). Unsatisfiable assignments are not rejected here; ``check`` and the
prover find them.

Example:
    composer = Composer()
    x = composer.append_witness(FF(3))
    y = composer.gate_mul(Constraint().mult(1).a(x).b(x))   # y = x^2
    composer.assert_equal_constant(y, 9)
    assert composer.check() is None
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from poseidon252.primitives.field import FF

Coefficient = Union[int, FF]


# --- Wires ---


@dataclass(frozen=True)
class Witness:
    """Handle to a witness slot of a composer."""

    index: int


ZERO = Witness(0)
"""Witness 0 of every composer, constrained to zero."""

_FIELD_ZERO = FF(0)
_FIELD_ONE = FF(1)


def _field(value: Coefficient) -> FF:
    if isinstance(value, FF):
        return value
    return FF(int(value) % FF.order)


# --- Gate Builder ---


class Constraint:
    """Chainable builder for one gate.

    Unset selectors are zero and unset wires point at ``ZERO``.
    """

    def __init__(self) -> None:
        self.q_m = _FIELD_ZERO
        self.q_l = _FIELD_ZERO
        self.q_r = _FIELD_ZERO
        self.q_4 = _FIELD_ZERO
        self.q_c = _FIELD_ZERO
        self.w_a = ZERO
        self.w_b = ZERO
        self.w_d = ZERO
        self.public_value: Optional[FF] = None

    def mult(self, coefficient: Coefficient) -> "Constraint":
        self.q_m = _field(coefficient)
        return self

    def left(self, coefficient: Coefficient) -> "Constraint":
        self.q_l = _field(coefficient)
        return self

    def right(self, coefficient: Coefficient) -> "Constraint":
        self.q_r = _field(coefficient)
        return self

    def fourth(self, coefficient: Coefficient) -> "Constraint":
        self.q_4 = _field(coefficient)
        return self

    def constant(self, coefficient: Coefficient) -> "Constraint":
        self.q_c = _field(coefficient)
        return self

    def a(self, witness: Witness) -> "Constraint":
        self.w_a = witness
        return self

    def b(self, witness: Witness) -> "Constraint":
        self.w_b = witness
        return self

    def d(self, witness: Witness) -> "Constraint":
        self.w_d = witness
        return self

    def public(self, value: Coefficient) -> "Constraint":
        """Subtract a public input from the gate identity."""
        self.public_value = _field(value)
        return self


# --- Gates ---


GateShape = Tuple[int, ...]


@dataclass(frozen=True, eq=False)
class Gate:
    """One recorded gate: selectors, wire indices and optional public input index."""

    q_m: FF
    q_l: FF
    q_r: FF
    q_4: FF
    q_c: FF
    q_o: FF
    a: int
    b: int
    d: int
    o: int
    pi: Optional[int] = None

    def residual(self, values: Sequence[FF], public_inputs: Sequence[FF]) -> FF:
        """Left-hand side of the gate identity; zero iff the gate is satisfied."""
        acc = self.q_c
        if self.q_m:
            acc = acc + self.q_m * values[self.a] * values[self.b]
        if self.q_l:
            acc = acc + self.q_l * values[self.a]
        if self.q_r:
            acc = acc + self.q_r * values[self.b]
        if self.q_4:
            acc = acc + self.q_4 * values[self.d]
        if self.pi is not None:
            acc = acc - public_inputs[self.pi]
        if self.q_o:
            acc = acc - self.q_o * values[self.o]
        return acc

    def shape(self) -> GateShape:
        """Value-independent description of the gate."""
        pi = -1 if self.pi is None else self.pi
        return (
            int(self.q_m), int(self.q_l), int(self.q_r), int(self.q_4),
            int(self.q_c), int(self.q_o),
            self.a, self.b, self.d, self.o, pi,
        )


def first_unsatisfied(
    gates: Sequence[Gate], values: Sequence[FF], public_inputs: Sequence[FF]
) -> Optional[int]:
    """Index of the first gate whose residual is nonzero, or None."""
    for idx, gate in enumerate(gates):
        if gate.residual(values, public_inputs) != 0:
            return idx
    return None


# --- Composer ---


class Composer:
    """Collects gates and the witness assignment of one circuit instance."""

    ZERO = ZERO

    def __init__(self) -> None:
        self._values: List[FF] = []
        self.gates: List[Gate] = []
        self.public_inputs: List[FF] = []

        self.append_witness(_FIELD_ZERO)
        self.assert_equal_constant(ZERO, 0)

    # --- Witness Allocation ---

    def append_witness(self, value: Coefficient) -> Witness:
        """Allocate an unconstrained witness holding ``value``."""
        self._values.append(_field(value))
        return Witness(len(self._values) - 1)

    def append_public(self, value: Coefficient) -> Witness:
        """Allocate a witness bound to a new public input equal to ``value``."""
        witness = self.append_witness(value)
        self.append_gate(Constraint().left(1).a(witness).public(value))
        return witness

    def append_constant(self, value: Coefficient) -> Witness:
        """Allocate a witness fixed to a circuit constant."""
        return self.gate_add(Constraint().constant(value))

    # --- Gates ---

    def gate_add(self, constraint: Constraint) -> Witness:
        """Append an addition gate and return its output witness.

        ``o = q_l*a + q_r*b + q_4*d + q_c``
        """
        return self._append(constraint, with_output=True)

    def gate_mul(self, constraint: Constraint) -> Witness:
        """Append a multiplication gate and return its output witness.

        ``o = q_m*a*b + q_4*d + q_c``
        """
        return self._append(constraint, with_output=True)

    def append_gate(self, constraint: Constraint) -> None:
        """Append a gate whose identity must hold without an output wire."""
        self._append(constraint, with_output=False)

    def _append(self, constraint: Constraint, with_output: bool) -> Optional[Witness]:
        pi = None
        if constraint.public_value is not None:
            pi = len(self.public_inputs)
            self.public_inputs.append(constraint.public_value)

        gate = Gate(
            q_m=constraint.q_m,
            q_l=constraint.q_l,
            q_r=constraint.q_r,
            q_4=constraint.q_4,
            q_c=constraint.q_c,
            q_o=_FIELD_ZERO,
            a=constraint.w_a.index,
            b=constraint.w_b.index,
            d=constraint.w_d.index,
            o=ZERO.index,
            pi=pi,
        )
        if not with_output:
            self.gates.append(gate)
            return None

        output = self.append_witness(gate.residual(self._values, self.public_inputs))
        self.gates.append(Gate(
            q_m=gate.q_m,
            q_l=gate.q_l,
            q_r=gate.q_r,
            q_4=gate.q_4,
            q_c=gate.q_c,
            q_o=_FIELD_ONE,
            a=gate.a,
            b=gate.b,
            d=gate.d,
            o=output.index,
            pi=pi,
        ))
        return output

    # --- Assertions ---

    def assert_equal(self, a: Witness, b: Witness) -> None:
        self.append_gate(Constraint().left(1).a(a).right(-1).b(b))

    def assert_equal_constant(self, a: Witness, constant: Coefficient) -> None:
        self.append_gate(Constraint().left(1).a(a).constant(-_field(constant)))

    def assert_boolean(self, a: Witness) -> None:
        """Constrain ``a`` to 0 or 1 via a*a - a = 0."""
        self.append_gate(Constraint().mult(1).a(a).b(a).left(-1))

    # --- Inspection ---

    def value_of(self, witness: Witness) -> FF:
        return self._values[witness.index]

    @property
    def values(self) -> List[FF]:
        return list(self._values)

    @property
    def n_witnesses(self) -> int:
        return len(self._values)

    def shape(self) -> Tuple[int, Tuple[GateShape, ...]]:
        """Witness count and gate layout, independent of the assignment."""
        return self.n_witnesses, tuple(gate.shape() for gate in self.gates)

    def check(self) -> Optional[int]:
        """Index of the first unsatisfied gate, or None if all hold."""
        return first_unsatisfied(self.gates, self._values, self.public_inputs)
