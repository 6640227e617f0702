# Copyright 2026 Xanadu Quantum Technologies Inc.

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
This module contains the :class:`Circuit` container together with the operation
types it schedules. Rotation angles and the global phase are measured in half-turns.
"""
from dataclasses import dataclass
from enum import Enum

import sympy as sp

from paulibox.exceptions import CircuitError
from paulibox.symbolic import equiv_0, free_symbols, substitute, to_expr


class OpType(Enum):
    """Enumeration of the operation types a :class:`Circuit` can hold."""

    H = "H"
    S = "S"
    Sdg = "Sdg"
    V = "V"
    Vdg = "Vdg"
    X = "X"
    Z = "Z"
    CX = "CX"
    Rz = "Rz"
    Rx = "Rx"
    CircBox = "CircBox"
    ConjugationBox = "ConjugationBox"
    PhasePolyBox = "PhasePolyBox"
    PauliExpBox = "PauliExpBox"
    PauliExpPairBox = "PauliExpPairBox"
    PauliExpCommutingSetBox = "PauliExpCommutingSetBox"

    def __repr__(self):
        return f"OpType.{self.name}"


# optype: (number of qubits, number of parameters, optype of the adjoint)
_gate_info = {
    OpType.H: (1, 0, OpType.H),
    OpType.S: (1, 0, OpType.Sdg),
    OpType.Sdg: (1, 0, OpType.S),
    OpType.V: (1, 0, OpType.Vdg),
    OpType.Vdg: (1, 0, OpType.V),
    OpType.X: (1, 0, OpType.X),
    OpType.Z: (1, 0, OpType.Z),
    OpType.CX: (2, 0, OpType.CX),
    OpType.Rz: (1, 1, OpType.Rz),
    OpType.Rx: (1, 1, OpType.Rx),
}


class Op:
    """Base class of everything a :class:`Circuit` can schedule."""

    is_box = False

    @property
    def type(self) -> OpType:
        raise NotImplementedError

    @property
    def n_qubits(self) -> int:
        raise NotImplementedError

    def dagger(self) -> "Op":
        raise NotImplementedError

    def is_clifford(self) -> bool:
        return False

    def free_symbols(self) -> set:
        return set()

    def symbol_substitution(self, sub_map) -> "Op":  # pylint: disable=unused-argument
        return self


class Gate(Op):
    """A primitive gate.

    Args:
        optype (OpType): the gate type
        params (Sequence): rotation angles in half-turns, one for ``Rz`` and ``Rx``

    **Example**

    >>> Gate(OpType.Rz, ["1/4"]).dagger()
    Rz(-1/4)
    """

    def __init__(self, optype, params=()):
        if optype not in _gate_info:
            raise CircuitError(f"{optype} is not a primitive gate.")
        self._type = optype
        self.params = tuple(to_expr(p) for p in params)
        if len(self.params) != _gate_info[optype][1]:
            raise CircuitError(
                f"{optype.name} expects {_gate_info[optype][1]} parameters, got {len(self.params)}."
            )

    @property
    def type(self):
        return self._type

    @property
    def n_qubits(self):
        return _gate_info[self._type][0]

    def dagger(self):
        return Gate(_gate_info[self._type][2], [-p for p in self.params])

    def transpose(self):
        """Every supported gate has a symmetric matrix."""
        return Gate(self._type, self.params)

    def is_clifford(self):
        return all(equiv_0(4 * p) for p in self.params)

    def free_symbols(self):
        return free_symbols(*self.params)

    def symbol_substitution(self, sub_map):
        return Gate(self._type, [substitute(p, sub_map) for p in self.params])

    def __eq__(self, other):
        if not isinstance(other, Gate):
            return NotImplemented
        return self._type == other._type and self.params == other.params

    def __hash__(self):
        return hash((self._type, self.params))

    def __repr__(self):
        if self.params:
            return f"{self._type.name}({', '.join(str(p) for p in self.params)})"
        return self._type.name


@dataclass(frozen=True)
class Command:
    """An operation scheduled on an ordered tuple of qubit indices."""

    op: Op
    qubits: tuple

    def __repr__(self):
        return f"{self.op!r} {list(self.qubits)}"


class Circuit:
    """An ordered list of commands on ``n_qubits`` qubits, indexed ``0 .. n_qubits - 1``,
    and a global phase.

    Args:
        n_qubits (int): the width of the circuit

    **Example**

    >>> circ = Circuit(2).H(0).CX(0, 1).Rz("1/2", 1)
    >>> circ.get_commands()
    [H [0], CX [0, 1], Rz(1/2) [1]]
    """

    def __init__(self, n_qubits=0):
        if n_qubits < 0:
            raise CircuitError("A circuit cannot have a negative number of qubits.")
        self._n_qubits = n_qubits
        self._commands = []
        self.phase = sp.Integer(0)

    @property
    def n_qubits(self) -> int:
        return self._n_qubits

    @property
    def n_gates(self) -> int:
        return len(self._commands)

    def all_qubits(self) -> list:
        """Ordered list of the qubits of the circuit."""
        return list(range(self._n_qubits))

    def get_commands(self) -> list:
        """Copy of the list of scheduled commands."""
        return list(self._commands)

    def __iter__(self):
        return iter(self._commands)

    def _add_op(self, op, qubits):
        qubits = tuple(qubits)
        if len(qubits) != op.n_qubits:
            raise CircuitError(
                f"{op.type.name} acts on {op.n_qubits} qubits, but {len(qubits)} were given."
            )
        if len(set(qubits)) != len(qubits):
            raise CircuitError(f"Repeated qubits {list(qubits)} in a single command.")
        for q in qubits:
            if not isinstance(q, int) or not 0 <= q < self._n_qubits:
                raise CircuitError(f"Qubit {q!r} is not in a circuit of width {self._n_qubits}.")
        self._commands.append(Command(op, qubits))
        return self

    def add_gate(self, optype, qubits, params=()):
        """Append a primitive gate."""
        return self._add_op(Gate(optype, params), qubits)

    def add_box(self, box, qubits):
        """Schedule ``box`` on the listed ``qubits``, in the box's qubit order."""
        return self._add_op(box, qubits)

    def H(self, qubit):
        return self.add_gate(OpType.H, [qubit])

    def S(self, qubit):
        return self.add_gate(OpType.S, [qubit])

    def Sdg(self, qubit):
        return self.add_gate(OpType.Sdg, [qubit])

    def V(self, qubit):
        return self.add_gate(OpType.V, [qubit])

    def Vdg(self, qubit):
        return self.add_gate(OpType.Vdg, [qubit])

    def X(self, qubit):
        return self.add_gate(OpType.X, [qubit])

    def Z(self, qubit):
        return self.add_gate(OpType.Z, [qubit])

    def CX(self, control, target):
        return self.add_gate(OpType.CX, [control, target])

    def Rz(self, angle, qubit):
        return self.add_gate(OpType.Rz, [qubit], [angle])

    def Rx(self, angle, qubit):
        return self.add_gate(OpType.Rx, [qubit], [angle])

    def add_phase(self, phase):
        """Add ``phase`` half-turns to the global phase."""
        self.phase = self.phase + to_expr(phase)
        return self

    def append(self, other):
        """Compose ``other`` after this circuit, matching qubit indices.

        Raises:
            CircuitError: if ``other`` is wider than this circuit
        """
        if other.n_qubits > self._n_qubits:
            raise CircuitError(
                f"Cannot append a circuit of width {other.n_qubits} to one of width {self._n_qubits}."
            )
        self._commands.extend(other.get_commands())
        self.phase = self.phase + other.phase
        return self

    def copy(self):
        new = Circuit(self._n_qubits)
        new._commands = list(self._commands)
        new.phase = self.phase
        return new

    def dagger(self):
        """The adjoint circuit: commands reversed and individually daggered."""
        new = Circuit(self._n_qubits)
        for command in reversed(self._commands):
            new._add_op(command.op.dagger(), command.qubits)
        new.phase = -self.phase
        return new

    def is_clifford(self) -> bool:
        return all(command.op.is_clifford() for command in self._commands)

    def free_symbols(self) -> set:
        symbols = free_symbols(self.phase)
        for command in self._commands:
            symbols |= command.op.free_symbols()
        return symbols

    def symbol_substitution(self, sub_map):
        """Substitute symbols in every operation and in the global phase, in place."""
        self._commands = [
            Command(command.op.symbol_substitution(sub_map), command.qubits)
            for command in self._commands
        ]
        self.phase = substitute(self.phase, sub_map)
        return self

    def decompose_boxes_recursively(self) -> bool:
        """Replace every box by its lowered circuit, recursively, in place.

        Returns:
            bool: whether any box was replaced
        """
        decomposed = False
        commands = []
        for command in self._commands:
            if not command.op.is_box:
                commands.append(command)
                continue
            decomposed = True
            sub_circ = command.op.to_circuit()
            sub_circ.decompose_boxes_recursively()
            for sub_command in sub_circ:
                qubits = tuple(command.qubits[q] for q in sub_command.qubits)
                commands.append(Command(sub_command.op, qubits))
            self.phase = self.phase + sub_circ.phase
        self._commands = commands
        return decomposed

    def __eq__(self, other):
        if not isinstance(other, Circuit):
            return NotImplemented
        return (
            self._n_qubits == other._n_qubits
            and self._commands == other._commands
            and sp.simplify(self.phase - other.phase) == 0
        )

    __hash__ = None

    def __repr__(self):
        return f"<Circuit: qubits={self._n_qubits}, gates={len(self._commands)}>"
