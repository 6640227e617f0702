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
Simultaneous diagonalisation of mutually commuting Pauli gadgets by a Clifford circuit.
"""
import logging

from paulibox.circuit.circuit import Circuit, OpType
from paulibox.exceptions import InvalidPauliExpError
from paulibox.logging import TRACE, debug_logger
from paulibox.pauli import I, X, Y, Z
from paulibox.pauli.conjugation import conjugate

from .gadgets import CXConfigType, cx_ladder

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

_to_z = {X: OpType.H, Y: OpType.V}


class _CliffordBuilder:
    """Appends Clifford gates to a circuit while conjugating the gadgets by them."""

    def __init__(self, gadgets, qubits):
        self.gadgets = gadgets
        self.index = {q: i for i, q in enumerate(qubits)}
        self.circuit = Circuit(len(qubits))

    def apply(self, optype, qubits):
        self.circuit.add_gate(optype, [self.index[q] for q in qubits])
        for g in self.gadgets:
            conjugate(g, optype, qubits)


@debug_logger
def mutual_diagonalise(gadgets, qubits, cx_config=CXConfigType.Snake):
    r"""Find a Clifford circuit :math:`C` such that :math:`C P C^\dagger` only holds
    ``Z`` and ``I`` letters for every gadget :math:`P`.

    The gadgets are rewritten **in place** to :math:`C P C^\dagger`, signs folded into
    their coefficients, so that

    .. math::

        \prod_k e^{-i\pi t_k/2 \, P_k} = C^\dagger \left(\prod_k e^{-i\pi t'_k/2 \, P'_k}\right) C.

    The search is greedy. Qubits on which every gadget holds the same non-``Z``
    letter are rotated individually; otherwise the first non-diagonal gadget is rotated
    to ``Z`` on its support and its parity is folded onto a pivot qubit by a ``CX``
    ladder. Once a gadget is diagonal on a pivot, every other gadget commuting with it
    is too, so the pivot is frozen and never touched again.

    Args:
        gadgets (list[SparsePauliTensor]): mutually commuting Pauli gadgets
        qubits (Sequence): the qubits the gadgets act on; the circuit acts on their
            positions in this sequence
        cx_config (CXConfigType): the shape of the ``CX`` ladders

    Returns:
        Circuit: the Clifford circuit :math:`C`

    Raises:
        InvalidPauliExpError: if two gadgets anticommute, or a gadget acts outside ``qubits``

    **Example**

    >>> gadgets = [SparsePauliTensor({0: "X", 1: "X"}, 0.3), SparsePauliTensor({0: "Y", 1: "Y"}, 0.2)]
    >>> circ = mutual_diagonalise(gadgets, [0, 1])
    >>> all(g.is_diagonal() for g in gadgets)
    True
    """
    qubits = list(qubits)
    for i, g in enumerate(gadgets):
        if not set(g.string).issubset(qubits):
            raise InvalidPauliExpError(f"Gadget {g} acts outside the qubits {qubits}.")
        for other in gadgets[i + 1 :]:
            if not g.commutes_with(other):
                raise InvalidPauliExpError(f"Gadgets {g} and {other} do not commute.")

    builder = _CliffordBuilder(gadgets, qubits)
    frozen = set()

    while True:
        for q in qubits:
            if q in frozen:
                continue
            letters = {g.string[q] for g in gadgets} - {I}
            if len(letters) == 1 and letters != {Z}:
                builder.apply(_to_z[letters.pop()], [q])

        target = next((g for g in gadgets if not g.is_diagonal()), None)
        if target is None:
            break

        support = [q for q in qubits if q not in frozen and target.string[q] != I]
        for q in support:
            letter = target.string[q]
            if letter != Z:
                builder.apply(_to_z[letter], [q])
        ladder, pivot = cx_ladder(support, cx_config)
        for control, t in ladder:
            builder.apply(OpType.CX, [control, t])
        frozen.add(pivot)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Froze pivot qubit %s after folding support %s", pivot, support)
        if logger.isEnabledFor(TRACE):
            logger.log(TRACE, "Gadgets after folding: %s", gadgets)

    return builder.circuit
