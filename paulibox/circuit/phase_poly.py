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
r"""
This module contains the :class:`PhasePolyBox`, the phase-polynomial representation of
a circuit built from ``CX`` and ``Rz`` gates.

Such a circuit acts on computational basis states as

.. math::

    |x\rangle \mapsto e^{-i\pi/2 \sum_k t_k (-1)^{p_k \cdot x}} |A x\rangle,

where each parity :math:`p_k \in \mathbb{Z}_2^n` carries an angle :math:`t_k` and
:math:`A` is an invertible binary matrix.
"""
import numpy as np

from paulibox.exceptions import CircuitError
from paulibox.symbolic import equiv_0, free_symbols

from .boxes import Box
from .circuit import Circuit, OpType


def _linear_cx_network(matrix):
    """CX gates, as ``(control, target)`` pairs in circuit order, implementing the
    invertible binary ``matrix`` by Gaussian elimination."""
    mat = matrix.copy()
    n = mat.shape[0]
    row_ops = []
    for col in range(n):
        if not mat[col, col]:
            pivot = col + np.nonzero(mat[col:, col])[0][0]
            mat[col] ^= mat[pivot]
            row_ops.append((pivot, col))
        for row in np.nonzero(mat[:, col])[0]:
            if row != col:
                mat[row] ^= mat[col]
                row_ops.append((col, int(row)))
    # the row operations reduce ``matrix`` to the identity, so applying them in
    # reverse order builds ``matrix`` up from the identity
    return [(int(c), int(t)) for c, t in reversed(row_ops)]


class PhasePolyBox(Box):
    r"""Phase-polynomial box.

    The box is built from a circuit containing only ``CX`` and ``Rz`` gates. Its
    phase polynomial merges the angles of repeated parities, and :meth:`to_circuit`
    resynthesises it as one CX ladder per parity followed by a CX network for the
    residual linear map.

    Args:
        circuit (Circuit): a circuit of ``CX`` and ``Rz`` gates

    Raises:
        CircuitError: if the circuit holds any other operation

    **Example**

    >>> circ = Circuit(2).CX(0, 1).Rz(0.25, 1).CX(0, 1).CX(0, 1).Rz(0.5, 1).CX(0, 1)
    >>> box = PhasePolyBox(circ)
    >>> box.phase_polynomial
    {(1, 1): 0.750000000000000}
    >>> box.to_circuit().n_gates
    3
    """

    def __init__(self, circuit):
        super().__init__(circuit.n_qubits)
        self._source = circuit.copy()
        self.phase_polynomial = {}
        n = circuit.n_qubits
        parities = np.eye(n, dtype=np.uint8)
        for command in circuit:
            optype = command.op.type
            if optype == OpType.CX:
                control, target = command.qubits
                parities[target] ^= parities[control]
            elif optype == OpType.Rz:
                key = tuple(int(b) for b in parities[command.qubits[0]])
                angle = command.op.params[0]
                self.phase_polynomial[key] = self.phase_polynomial.get(key, 0) + angle
            else:
                raise CircuitError(
                    f"PhasePolyBox only accepts CX and Rz gates, got {optype.name}."
                )
        self.linear_transformation = parities
        self.global_phase = circuit.phase

    def _build_circuit(self):
        n = self._n_qubits
        circ = Circuit(n)
        circ.add_phase(self.global_phase)
        for parity, angle in self.phase_polynomial.items():
            if equiv_0(angle, 4):
                continue
            support = [q for q in range(n) if parity[q]]
            target = support[-1]
            ladder = [(c, target) for c in support[:-1]]
            for c, t in ladder:
                circ.CX(c, t)
            circ.Rz(angle, target)
            for c, t in reversed(ladder):
                circ.CX(c, t)
        for c, t in _linear_cx_network(self.linear_transformation):
            circ.CX(c, t)
        return circ

    def dagger(self):
        return PhasePolyBox(self._source.dagger())

    def is_clifford(self):
        return all(equiv_0(4 * angle) for angle in self.phase_polynomial.values())

    def free_symbols(self):
        return free_symbols(*self.phase_polynomial.values())

    def symbol_substitution(self, sub_map):
        return PhasePolyBox(self._source.copy().symbol_substitution(sub_map))

    def is_equal(self, other):
        if super().is_equal(other):
            return True
        return (
            np.array_equal(self.linear_transformation, other.linear_transformation)
            and self.phase_polynomial.keys() == other.phase_polynomial.keys()
            and all(
                equiv_0(angle - other.phase_polynomial[k], 4)
                for k, angle in self.phase_polynomial.items()
            )
        )
