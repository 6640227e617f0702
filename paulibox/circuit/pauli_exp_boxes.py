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
This module contains the boxes implementing exponentials of Pauli strings,

.. math::

    U = e^{-i \pi t / 2 \, P},

with :math:`t` in half-turns, together with their JSON codecs and helpers that add
them to a :class:`~.Circuit` from sparse tensors.

.. currentmodule:: paulibox.circuit.pauli_exp_boxes

.. autosummary::
    :toctree: api

    PauliExpBox
    PauliExpPairBox
    PauliExpCommutingSetBox
    append_single_pauli_gadget_as_pauli_exp_box
    append_pauli_gadget_pair_as_box
    append_commuting_pauli_gadget_set_as_box
"""
# pylint:disable=protected-access
import itertools
import logging
import uuid
from collections.abc import Mapping

from paulibox.exceptions import InvalidPauliExpError, MalformedJsonError
from paulibox.logging import debug_logger_init
from paulibox.pauli import Pauli, PauliTensor
from paulibox.symbolic import equiv_0, expr_from_json, expr_to_json, free_symbols
from paulibox.synthesis.diagonalisation import mutual_diagonalise
from paulibox.synthesis.gadgets import CXConfigType, pauli_gadget, pauli_gadget_pair

from .boxes import Box, CircBox, ConjugationBox
from .circuit import Circuit
from .op_json_factory import register_op_factory
from .phase_poly import PhasePolyBox

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def _is_clifford_tensor(tensor):
    return tensor.is_identity() or equiv_0(4 * tensor.coeff, 2)


def _field(data, key):
    if not isinstance(data, Mapping):
        raise MalformedJsonError(f"Expected a JSON object, got {data!r}.")
    try:
        return data[key]
    except KeyError as e:
        raise MalformedJsonError(f"Missing field {key!r} in {data!r}.") from e


def _paulis_from_json(data):
    if not isinstance(data, list):
        raise MalformedJsonError(f"Expected a list of Pauli letters, got {data!r}.")
    return [Pauli.from_json(p) for p in data]


def _paulis_to_json(tensor):
    return [p.to_json() for p in tensor.string]


def _id_from_json(data):
    try:
        return uuid.UUID(str(_field(data, "id")))
    except ValueError as e:
        raise MalformedJsonError(f"{data['id']!r} is not a valid UUID.") from e


class _PauliBoxBase(Box):
    """Behaviour shared by the Pauli-exponential boxes, which store their exponentials
    as a list of dense tensors of equal length."""

    def __init__(self, tensors, cx_config):
        n_qubits = tensors[0].size() if tensors else 0
        super().__init__(n_qubits)
        self._tensors = [t.copy() for t in tensors]
        self._cx_config = cx_config

    @property
    def cx_config(self) -> CXConfigType:
        """The shape of the ``CX`` ladders used when lowering the box."""
        return self._cx_config

    def is_clifford(self):
        return all(_is_clifford_tensor(t) for t in self._tensors)

    def free_symbols(self):
        return free_symbols(*(t.coeff for t in self._tensors))

    def is_equal(self, other):
        if self._id == other.id:
            return True
        if type(other) is not type(self):
            return False
        return (
            self._cx_config == other._cx_config
            and len(self._tensors) == len(other._tensors)
            and all(a.equiv_mod(b, 4) for a, b in zip(self._tensors, other._tensors))
        )

    def __hash__(self):
        strings = tuple(tuple(t.string) for t in self._tensors)
        return hash((self.type, self._cx_config, strings))


class PauliExpBox(_PauliBoxBase):
    r"""Box implementing the exponential of a single Pauli string,
    :math:`e^{-i \pi t / 2 \, P}`.

    Args:
        tensor (PauliTensor): the string :math:`P` and the coefficient :math:`t`;
            defaults to the empty string with coefficient 0
        cx_config (CXConfigType): the shape of the ``CX`` ladder in the lowered circuit

    **Example**

    >>> box = PauliExpBox(PauliTensor("ZZ", 0.5))
    >>> box.is_clifford()
    True
    >>> box.dagger().phase
    -0.500000000000000
    >>> box.to_circuit().get_commands()
    [CX [0, 1], Rz(0.500000000000000) [1], CX [0, 1]]
    """

    @debug_logger_init
    def __init__(self, tensor=None, cx_config=CXConfigType.Tree):
        tensor = PauliTensor() if tensor is None else tensor
        super().__init__([tensor], cx_config)

    @property
    def tensor(self) -> PauliTensor:
        return self._tensors[0].copy()

    @property
    def paulis(self) -> list:
        return list(self._tensors[0].string)

    @property
    def phase(self):
        return self._tensors[0].coeff

    def _build_circuit(self):
        circ = Circuit(self._n_qubits)
        circ.append(pauli_gadget(self._tensors[0], self._cx_config, self._n_qubits))
        return circ

    def dagger(self):
        return PauliExpBox(self._tensors[0].dagger(), self._cx_config)

    def transpose(self):
        tensor = self.tensor
        tensor.transpose()
        return PauliExpBox(tensor, self._cx_config)

    def symbol_substitution(self, sub_map):
        return PauliExpBox(self._tensors[0].symbol_substitution(sub_map), self._cx_config)

    def to_json(self) -> dict:
        return {
            "id": str(self._id),
            "type": self.type.name,
            "paulis": _paulis_to_json(self._tensors[0]),
            "phase": expr_to_json(self.phase),
            "cx_config": self._cx_config.to_json(),
        }

    @classmethod
    def from_json(cls, data):
        tensor = PauliTensor(
            _paulis_from_json(_field(data, "paulis")), expr_from_json(_field(data, "phase"))
        )
        box = cls(tensor, CXConfigType.from_json(_field(data, "cx_config")))
        return box.with_id(_id_from_json(data))

    def __repr__(self):
        return f"PauliExpBox({self._tensors[0]!r}, {self._cx_config!r})"


class PauliExpPairBox(_PauliBoxBase):
    r"""Box implementing the product of two Pauli exponentials,
    :math:`e^{-i \pi t_1 / 2 \, P_1} e^{-i \pi t_0 / 2 \, P_0}`, where :math:`P_0` is
    applied first.

    The strings need not commute. Lowering synthesises both gadgets and cancels the
    gates they share at the junction.

    Args:
        tensor0 (PauliTensor): the first exponential in time
        tensor1 (PauliTensor): the second exponential in time
        cx_config (CXConfigType): the shape of the ``CX`` ladders

    Raises:
        InvalidPauliExpError: if the two strings have different lengths
    """

    @debug_logger_init
    def __init__(self, tensor0=None, tensor1=None, cx_config=CXConfigType.Tree):
        tensor0 = PauliTensor() if tensor0 is None else tensor0
        tensor1 = PauliTensor() if tensor1 is None else tensor1
        if tensor0.size() != tensor1.size():
            raise InvalidPauliExpError(
                f"Pauli strings of a pair must have the same length, got {tensor0.size()} "
                f"and {tensor1.size()}."
            )
        super().__init__([tensor0, tensor1], cx_config)

    @property
    def paulis_pair(self) -> tuple:
        return tuple(list(t.string) for t in self._tensors)

    @property
    def phase_pair(self) -> tuple:
        return tuple(t.coeff for t in self._tensors)

    def _build_circuit(self):
        t0, t1 = self._tensors
        return pauli_gadget_pair(t0, t1, self._cx_config, self._n_qubits)

    def dagger(self):
        t0, t1 = self._tensors
        return PauliExpPairBox(t1.dagger(), t0.dagger(), self._cx_config)

    def transpose(self):
        t0, t1 = (t.copy() for t in self._tensors)
        t0.transpose()
        t1.transpose()
        return PauliExpPairBox(t1, t0, self._cx_config)

    def symbol_substitution(self, sub_map):
        t0, t1 = (t.symbol_substitution(sub_map) for t in self._tensors)
        return PauliExpPairBox(t0, t1, self._cx_config)

    def to_json(self) -> dict:
        return {
            "id": str(self._id),
            "type": self.type.name,
            "paulis_pair": [_paulis_to_json(t) for t in self._tensors],
            "phase_pair": [expr_to_json(t.coeff) for t in self._tensors],
            "cx_config": self._cx_config.to_json(),
        }

    @classmethod
    def from_json(cls, data):
        paulis = _field(data, "paulis_pair")
        phases = _field(data, "phase_pair")
        if not (isinstance(paulis, list) and isinstance(phases, list)):
            raise MalformedJsonError("'paulis_pair' and 'phase_pair' must be lists.")
        if len(paulis) != 2 or len(phases) != 2:
            raise MalformedJsonError("'paulis_pair' and 'phase_pair' must have two entries.")
        t0, t1 = (
            PauliTensor(_paulis_from_json(p), expr_from_json(c)) for p, c in zip(paulis, phases)
        )
        box = cls(t0, t1, CXConfigType.from_json(_field(data, "cx_config")))
        return box.with_id(_id_from_json(data))

    def __repr__(self):
        t0, t1 = self._tensors
        return f"PauliExpPairBox({t0!r}, {t1!r}, {self._cx_config!r})"


class PauliExpCommutingSetBox(_PauliBoxBase):
    r"""Box implementing the product of mutually commuting Pauli exponentials,
    :math:`\prod_k e^{-i \pi t_k / 2 \, P_k}`.

    Lowering diagonalises every string simultaneously with a Clifford circuit
    :math:`C`, synthesises the diagonal gadgets as a phase polynomial :math:`D`, and
    returns the conjugation :math:`C^\dagger D C`.

    Args:
        pauli_gadgets (list[PauliTensor]): the exponentials; defaults to a single empty string
        cx_config (CXConfigType): the shape of the ``CX`` ladders used by the diagonalisation

    Raises:
        InvalidPauliExpError: if the list is empty, the strings have different lengths,
            or two strings anticommute

    **Example**

    >>> box = PauliExpCommutingSetBox([PauliTensor("XX", 0.3), PauliTensor("YY", 0.2)])
    >>> box.paulis_commute()
    True
    >>> PauliExpCommutingSetBox([PauliTensor("X", 0.1), PauliTensor("Z", 0.1)])
    Traceback (most recent call last):
        ...
    paulibox.exceptions.InvalidPauliExpError: Pauli gadgets 0 and 1 do not commute.
    """

    @debug_logger_init
    def __init__(self, pauli_gadgets=None, cx_config=CXConfigType.Tree):
        pauli_gadgets = [PauliTensor()] if pauli_gadgets is None else list(pauli_gadgets)
        if not pauli_gadgets:
            raise InvalidPauliExpError("A commuting set needs at least one Pauli gadget.")
        n_qubits = pauli_gadgets[0].size()
        if any(g.size() != n_qubits for g in pauli_gadgets):
            raise InvalidPauliExpError("Pauli gadgets of a commuting set must have the same length.")
        super().__init__(pauli_gadgets, cx_config)
        for (i, a), (j, b) in itertools.combinations(enumerate(self._tensors), 2):
            if not a.commutes_with(b):
                raise InvalidPauliExpError(f"Pauli gadgets {i} and {j} do not commute.")

    @property
    def pauli_gadgets(self) -> list:
        return [t.copy() for t in self._tensors]

    def paulis_commute(self) -> bool:
        """Whether every pair of strings commutes. Always true for a constructed box."""
        return all(a.commutes_with(b) for a, b in itertools.combinations(self._tensors, 2))

    def _build_circuit(self):
        n = self._n_qubits
        gadgets = [t.to_sparse() for t in self._tensors]
        clifford = mutual_diagonalise(gadgets, range(n), self._cx_config)

        body = Circuit(n)
        for g in gadgets:
            body.append(pauli_gadget(g, CXConfigType.Snake, n))
        body.decompose_boxes_recursively()
        phase_poly = PhasePolyBox(body).to_circuit()

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Commuting set of %d gadgets: %d Clifford gates, %d phase-polynomial gates",
                len(gadgets),
                clifford.n_gates,
                phase_poly.n_gates,
            )

        circ = Circuit(n)
        circ.add_box(ConjugationBox(CircBox(clifford), CircBox(phase_poly)), circ.all_qubits())
        return circ

    def dagger(self):
        return PauliExpCommutingSetBox([t.dagger() for t in self._tensors], self._cx_config)

    def transpose(self):
        tensors = self.pauli_gadgets
        for t in tensors:
            t.transpose()
        return PauliExpCommutingSetBox(tensors, self._cx_config)

    def symbol_substitution(self, sub_map):
        return PauliExpCommutingSetBox(
            [t.symbol_substitution(sub_map) for t in self._tensors], self._cx_config
        )

    def to_json(self) -> dict:
        return {
            "id": str(self._id),
            "type": self.type.name,
            "pauli_gadgets": [[_paulis_to_json(t), expr_to_json(t.coeff)] for t in self._tensors],
            "cx_config": self._cx_config.to_json(),
        }

    @classmethod
    def from_json(cls, data):
        gadgets = _field(data, "pauli_gadgets")
        if not isinstance(gadgets, list) or any(
            not isinstance(g, list) or len(g) != 2 for g in gadgets
        ):
            raise MalformedJsonError("'pauli_gadgets' must be a list of [paulis, phase] pairs.")
        tensors = [PauliTensor(_paulis_from_json(p), expr_from_json(c)) for p, c in gadgets]
        box = cls(tensors, CXConfigType.from_json(_field(data, "cx_config")))
        return box.with_id(_id_from_json(data))

    def __repr__(self):
        return f"PauliExpCommutingSetBox({self._tensors!r}, {self._cx_config!r})"


for _box_type in (PauliExpBox, PauliExpPairBox, PauliExpCommutingSetBox):
    register_op_factory(_box_type.__name__, _box_type.to_json, _box_type.from_json)


def append_single_pauli_gadget_as_pauli_exp_box(circ, tensor, cx_config=CXConfigType.Tree):
    """Add a :class:`PauliExpBox` for a sparse tensor, acting on the tensor's qubits in
    the order they appear in its string.

    Returns:
        Circuit: ``circ``, modified in place
    """
    qubits = list(tensor.string)
    return circ.add_box(PauliExpBox(tensor.to_dense(qubits), cx_config), qubits)


def append_pauli_gadget_pair_as_box(circ, tensor0, tensor1, cx_config=CXConfigType.Tree):
    """Add a :class:`PauliExpPairBox` for two sparse tensors. The box acts on the qubits
    of ``tensor0`` followed by the remaining qubits of ``tensor1``; each string is
    padded with identities over that order.

    Returns:
        Circuit: ``circ``, modified in place
    """
    qubits = list(tensor0.string)
    qubits += [q for q in tensor1.string if q not in tensor0.string]
    box = PauliExpPairBox(tensor0.to_dense(qubits), tensor1.to_dense(qubits), cx_config)
    return circ.add_box(box, qubits)


def append_commuting_pauli_gadget_set_as_box(circ, tensors, cx_config=CXConfigType.Tree):
    """Add a :class:`PauliExpCommutingSetBox` for mutually commuting sparse tensors,
    acting on the sorted union of their qubits.

    Returns:
        Circuit: ``circ``, modified in place
    """
    qubits = sorted(set().union(*(t.string for t in tensors)))
    box = PauliExpCommutingSetBox([t.to_dense(qubits) for t in tensors], cx_config)
    return circ.add_box(box, qubits)
