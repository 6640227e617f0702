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
Conjugation of sparse Pauli tensors by Clifford gates.

Conjugating :math:`P` by a gate :math:`g` produces :math:`g P g^\dagger`, which is again a
Pauli string up to a sign. The sign is folded into the tensor coefficient, so that
:math:`g\, e^{-i\pi t P/2}\, g^\dagger = e^{-i\pi t' P'/2}`.
"""
from paulibox.circuit.circuit import OpType
from paulibox.exceptions import CircuitError

from .pauli_tensor import I, X, Y, Z, mul_map

# g P g^dagger for the single-qubit Cliffords, as (sign, Pauli)
_single_qubit_images = {
    OpType.H: {X: (1, Z), Y: (-1, Y), Z: (1, X)},
    OpType.S: {X: (1, Y), Y: (-1, X), Z: (1, Z)},
    OpType.Sdg: {X: (-1, Y), Y: (1, X), Z: (1, Z)},
    OpType.V: {X: (1, X), Y: (1, Z), Z: (-1, Y)},
    OpType.Vdg: {X: (1, X), Y: (-1, Z), Z: (1, Y)},
    OpType.X: {X: (1, X), Y: (-1, Y), Z: (-1, Z)},
    OpType.Z: {X: (-1, X), Y: (-1, Y), Z: (1, Z)},
}

# CX P CX^dagger for a single letter on the control or the target,
# as (sign, Pauli on control, Pauli on target)
_cx_control_images = {X: (1, X, X), Y: (1, Y, X), Z: (1, Z, I)}
_cx_target_images = {X: (1, I, X), Y: (1, Z, Y), Z: (1, Z, Z)}


def _conjugate_cx(tensor, control, target):
    string = tensor.string
    sign, c_img, t_img = 1, I, I
    if string[control] != I:
        sign, c_img, t_img = _cx_control_images[string[control]]
    if string[target] != I:
        s2, c2, t2 = _cx_target_images[string[target]]
        ph_c, c_img = mul_map[c_img][c2]
        ph_t, t_img = mul_map[t_img][t2]
        phase = sign * s2 * ph_c * ph_t
        # the image of a Hermitian Pauli is Hermitian, so the phase is real
        sign = 1 if phase.real > 0 else -1
    string[control] = c_img
    string[target] = t_img
    if sign == -1:
        tensor.coeff = -tensor.coeff


def conjugate(tensor, optype, qubits):
    r"""Replace the sparse ``tensor`` by :math:`g P g^\dagger` in place.

    Args:
        tensor (SparsePauliTensor): the tensor to conjugate
        optype (OpType): the Clifford gate :math:`g`
        qubits (Sequence): the qubits :math:`g` acts on

    Raises:
        CircuitError: if ``optype`` is not one of the supported Clifford gates

    **Example**

    >>> t = SparsePauliTensor({0: "X", 1: "Z"}, 0.3)
    >>> conjugate(t, OpType.CX, [0, 1])
    >>> t
    SparsePauliTensor({0: Y, 1: Y}, -0.300000000000000)
    """
    if optype == OpType.CX:
        _conjugate_cx(tensor, *qubits)
        return
    if optype not in _single_qubit_images:
        raise CircuitError(f"Cannot conjugate a Pauli tensor by non-Clifford gate {optype.name}.")
    (qubit,) = qubits
    letter = tensor.string[qubit]
    if letter == I:
        return
    sign, image = _single_qubit_images[optype][letter]
    tensor.string[qubit] = image
    if sign == -1:
        tensor.coeff = -tensor.coeff


def conjugate_by_circuit(tensor, circuit):
    r"""Conjugate ``tensor`` in place by every command of ``circuit``, in order.

    For a circuit :math:`C = g_k \cdots g_1` this produces :math:`C P C^\dagger`.
    """
    for command in circuit.get_commands():
        conjugate(tensor, command.op.type, command.qubits)
