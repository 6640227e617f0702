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
This module contains the abstract :class:`Box` operation, a high-level operation that
lowers itself to a :class:`~.Circuit` on demand, and the generic boxes built on it.
"""
import abc
import logging
import uuid

from paulibox.exceptions import CircuitError

from .circuit import Circuit, Op, OpType

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class Box(Op, abc.ABC):
    r"""Base class for boxes.

    A box carries a UUID assigned at construction, which is preserved by
    serialization and gives a cheap identity check in :meth:`is_equal`. Boxes are
    immutable after construction except for the lowered circuit, which is produced by
    :meth:`generate_circuit` at most once and cached.

    .. note::

        Boxes take no locks. When sharing a box between threads, either lower it
        before sharing or give each thread its own copy.

    Args:
        n_qubits (int): the number of qubits the box acts on
    """

    is_box = True

    def __init__(self, n_qubits):
        self._n_qubits = n_qubits
        self._id = uuid.uuid4()
        self._circ = None

    @property
    def id(self) -> uuid.UUID:
        """The unique identifier of the box."""
        return self._id

    def with_id(self, box_id):
        """Set the identifier of the box, as done when deserializing. Returns the box."""
        self._id = box_id if isinstance(box_id, uuid.UUID) else uuid.UUID(str(box_id))
        return self

    @property
    def type(self) -> OpType:
        return OpType[type(self).__name__]

    @property
    def n_qubits(self) -> int:
        return self._n_qubits

    @abc.abstractmethod
    def _build_circuit(self) -> Circuit:
        """Synthesise the circuit implementing the box."""

    def generate_circuit(self):
        """Lower the box and cache the result. Later calls are no-ops."""
        if self._circ is None:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Generating circuit for %s %s", self.type.name, self._id)
            self._circ = self._build_circuit()

    def to_circuit(self) -> Circuit:
        """A copy of the circuit implementing the box."""
        self.generate_circuit()
        return self._circ.copy()

    @abc.abstractmethod
    def dagger(self) -> "Box":
        """The box implementing the adjoint unitary."""

    def transpose(self) -> "Box":
        """The box implementing the transposed unitary."""
        raise NotImplementedError(f"{self.type.name} does not define its transpose.")

    def is_clifford(self) -> bool:
        return self.to_circuit().is_clifford()

    def free_symbols(self) -> set:
        return self.to_circuit().free_symbols()

    def is_equal(self, other) -> bool:
        """Whether ``other`` is the same box. The base implementation compares identifiers."""
        return self._id == other.id

    def __eq__(self, other):
        if type(self) is not type(other):
            return False
        return self.is_equal(other)

    def __hash__(self):
        return hash((self.type, self._n_qubits))

    def __repr__(self):
        return f"{type(self).__name__}(n_qubits={self._n_qubits})"


class CircBox(Box):
    """Wraps a :class:`~.Circuit` as a single operation.

    Args:
        circuit (Circuit): the wrapped circuit; a copy is stored
    """

    def __init__(self, circuit):
        super().__init__(circuit.n_qubits)
        self._circuit = circuit.copy()

    def _build_circuit(self):
        return self._circuit.copy()

    def dagger(self):
        return CircBox(self._circuit.dagger())

    def symbol_substitution(self, sub_map):
        return CircBox(self._circuit.copy().symbol_substitution(sub_map))

    def is_equal(self, other):
        if super().is_equal(other):
            return True
        return type(other) is type(self) and self._circuit == other._circuit


class ConjugationBox(Box):
    r"""A box implementing :math:`A \cdot B \cdot A^\dagger`.

    In circuit order, the ``compute`` stage is applied first, then the ``action``
    stage, then the inverse of ``compute``.

    Args:
        compute (Op): the conjugating operation :math:`A`
        action (Op): the conjugated operation :math:`B`

    Raises:
        CircuitError: if the two operations act on different numbers of qubits
    """

    def __init__(self, compute, action):
        if compute.n_qubits != action.n_qubits:
            raise CircuitError(
                "The compute and action stages of a ConjugationBox must have the same width."
            )
        super().__init__(compute.n_qubits)
        self.compute = compute
        self.action = action

    def _build_circuit(self):
        circ = Circuit(self._n_qubits)
        qubits = circ.all_qubits()
        circ.add_box(self.compute, qubits)
        circ.add_box(self.action, qubits)
        circ.add_box(self.compute.dagger(), qubits)
        return circ

    def dagger(self):
        return ConjugationBox(self.compute, self.action.dagger())

    def symbol_substitution(self, sub_map):
        return ConjugationBox(
            self.compute.symbol_substitution(sub_map), self.action.symbol_substitution(sub_map)
        )

    def is_equal(self, other):
        if super().is_equal(other):
            return True
        return (
            type(other) is type(self)
            and self.compute == other.compute
            and self.action == other.action
        )
