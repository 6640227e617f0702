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
Synthesis of Pauli gadgets, the circuits implementing
:math:`e^{-i\pi t/2 \, P}` for a Pauli string :math:`P`.

A gadget changes the basis of every qubit in the support of :math:`P` to :math:`Z`,
folds the parity of the support onto a single pivot qubit with a ladder of ``CX``
gates, applies :math:`R_Z(t)` on the pivot, and undoes the basis change and the ladder.
The shape of the ladder is selected by a :class:`CXConfigType`.
"""
import logging
from enum import Enum

from paulibox.circuit.circuit import Circuit, Command, Gate, OpType
from paulibox.exceptions import MalformedJsonError
from paulibox.logging import debug_logger
from paulibox.pauli import PauliTensor, X, Y
from paulibox.symbolic import equiv_0

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class CXConfigType(Enum):
    """Shape of the ``CX`` ladder folding the parity of a Pauli string onto one qubit."""

    Snake = "Snake"
    Tree = "Tree"
    Star = "Star"
    MultiQGate = "MultiQGate"

    def __repr__(self):
        return f"CXConfigType.{self.name}"

    def to_json(self):
        return self.name

    @classmethod
    def from_json(cls, data):
        if not isinstance(data, str) or data not in cls.__members__:
            raise MalformedJsonError(f"{data!r} is not a CX configuration.")
        return cls[data]


def _snake_ladder(support):
    return list(zip(support[:-1], support[1:]))


def _star_ladder(support):
    return [(q, support[-1]) for q in support[:-1]]


def _tree_ladder(support):
    ladder = []
    layer = list(support)
    while len(layer) > 1:
        survivors = []
        for i in range(0, len(layer) - 1, 2):
            ladder.append((layer[i], layer[i + 1]))
            survivors.append(layer[i + 1])
        if len(layer) % 2 == 1:
            survivors.append(layer[-1])
        layer = survivors
    return ladder


def _multi_qgate_ladder(support):
    ladder = []
    layer = list(support)
    while len(layer) > 1:
        survivors = []
        for i in range(0, len(layer), 3):
            group = layer[i : i + 3]
            ladder.extend((q, group[-1]) for q in group[:-1])
            survivors.append(group[-1])
        layer = survivors
    return ladder


_ladders = {
    CXConfigType.Snake: _snake_ladder,
    CXConfigType.Star: _star_ladder,
    CXConfigType.Tree: _tree_ladder,
    CXConfigType.MultiQGate: _multi_qgate_ladder,
}


def cx_ladder(support, cx_config):
    """The ``CX`` gates, as ``(control, target)`` pairs in circuit order, folding the
    parity of the ``support`` qubits onto a single pivot.

    Args:
        support (Sequence): the qubits to fold, in order
        cx_config (CXConfigType): the shape of the ladder

    Returns:
        tuple[list[tuple], Any]: the ladder and the pivot qubit, ``None`` for an empty support

    **Example**

    >>> cx_ladder([0, 1, 2, 3], CXConfigType.Tree)
    ([(0, 1), (2, 3), (1, 3)], 3)
    >>> cx_ladder([0, 1, 2, 3], CXConfigType.Snake)
    ([(0, 1), (1, 2), (2, 3)], 3)
    """
    support = list(support)
    if not support:
        return [], None
    ladder = _ladders[cx_config](support)
    pivot = ladder[-1][1] if ladder else support[0]
    return ladder, pivot


def _basis_change(circ, qubit, letter):
    if letter == X:
        circ.H(qubit)
    elif letter == Y:
        circ.V(qubit)


@debug_logger
def pauli_gadget(tensor, cx_config=CXConfigType.Tree, n_qubits=None):
    r"""Synthesise the circuit implementing :math:`e^{-i\pi t/2 \, P}` for a Pauli tensor.

    Args:
        tensor (PauliTensor or SparsePauliTensor): the Pauli string :math:`P` and the
            coefficient :math:`t`; sparse tensors must be keyed by integer qubits
        cx_config (CXConfigType): the shape of the ``CX`` ladder
        n_qubits (int): width of the returned circuit; defaults to the smallest width
            holding the string

    Returns:
        Circuit: the gadget; an all-identity string only contributes the global phase
        :math:`-t/2`

    **Example**

    >>> circ = pauli_gadget(PauliTensor("XZ", 0.3), CXConfigType.Snake)
    >>> circ.get_commands()
    [H [0], CX [0, 1], Rz(0.300000000000000) [1], CX [0, 1], H [0]]
    """
    if isinstance(tensor, PauliTensor):
        n_qubits = tensor.size() if n_qubits is None else n_qubits
        tensor = tensor.to_sparse()
    support = sorted(tensor.string)
    if n_qubits is None:
        n_qubits = support[-1] + 1 if support else 0
    circ = Circuit(n_qubits)
    if not support:
        return circ.add_phase(-tensor.coeff / 2)

    prefix = Circuit(n_qubits)
    for q in support:
        _basis_change(prefix, q, tensor.string[q])
    ladder, pivot = cx_ladder(support, cx_config)
    for control, target in ladder:
        prefix.CX(control, target)

    circ.append(prefix)
    circ.Rz(tensor.coeff, pivot)
    circ.append(prefix.dagger())
    return circ


def _push(commands, command):
    """Push ``command`` onto the end of ``commands``, cancelling it against the last
    command when they are inverse and merging consecutive ``Rz`` on the same qubit."""
    if commands and commands[-1].qubits == command.qubits:
        last = commands[-1].op
        if last.type == OpType.Rz and command.op.type == OpType.Rz:
            commands.pop()
            angle = last.params[0] + command.op.params[0]
            if not equiv_0(angle, 4):
                commands.append(Command(Gate(OpType.Rz, [angle]), command.qubits))
            return
        if last.dagger() == command.op:
            commands.pop()
            return
    commands.append(command)


@debug_logger
def pauli_gadget_pair(tensor0, tensor1, cx_config=CXConfigType.Tree, n_qubits=None):
    r"""Synthesise :math:`e^{-i\pi t_1/2 \, P_1} e^{-i\pi t_0/2 \, P_0}`, the gadget of
    ``tensor0`` followed by the gadget of ``tensor1``.

    Gates at the junction of the two gadgets that undo each other are removed, so
    strings sharing letters share basis changes and ``CX`` ladders.

    Args:
        tensor0 (PauliTensor or SparsePauliTensor): the first exponential in time
        tensor1 (PauliTensor or SparsePauliTensor): the second exponential in time
        cx_config (CXConfigType): the shape of the ``CX`` ladders
        n_qubits (int): width of the returned circuit

    Returns:
        Circuit: the synthesised pair
    """
    if isinstance(tensor0, PauliTensor):
        n_qubits = tensor0.size() if n_qubits is None else n_qubits
        tensor0 = tensor0.to_sparse()
    if isinstance(tensor1, PauliTensor):
        tensor1 = tensor1.to_sparse()
    if n_qubits is None:
        n_qubits = max(list(tensor0.string) + list(tensor1.string), default=-1) + 1

    first = pauli_gadget(tensor0, cx_config, n_qubits)
    second = pauli_gadget(tensor1, cx_config, n_qubits)

    commands = first.get_commands()
    n_before = len(commands) + second.n_gates
    for command in second:
        _push(commands, command)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Gadget pair junction removed %d gates", n_before - len(commands))

    circ = Circuit(n_qubits)
    for command in commands:
        circ.add_gate(command.op.type, command.qubits, command.op.params)
    return circ.add_phase(first.phase + second.phase)


__all__ = [
    "CXConfigType",
    "cx_ladder",
    "pauli_gadget",
    "pauli_gadget_pair",
]
