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
This module contains predicates, checks that a :class:`~.Circuit` satisfies a
property required before it can run on a device.

.. currentmodule:: paulibox.predicates

.. autosummary::
    :toctree: api

    Predicate
    ConnectivityPredicate
    CliffordCircuitPredicate
    MaxNQubitsPredicate
    NoSymbolsPredicate
"""
import abc
import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class Predicate(abc.ABC):
    """Base class for circuit predicates."""

    @abc.abstractmethod
    def verify(self, circuit) -> bool:
        """Whether ``circuit`` satisfies the predicate."""

    def __repr__(self):
        return f"{type(self).__name__}()"


class ConnectivityPredicate(Predicate):
    """Every multi-qubit operation acts on two nodes connected in the architecture.

    Args:
        architecture (Architecture): the device connectivity
        placement (dict): maps each circuit qubit to a :class:`~.Node`; by default
            qubit ``i`` is placed on the ``i``-th node of the architecture

    **Example**

    >>> arc = RingArch(3)
    >>> ConnectivityPredicate(arc).verify(Circuit(3).CX(0, 1).CX(2, 0))
    True
    >>> ConnectivityPredicate(Architecture([(Node(0), Node(1)), (Node(1), Node(2))])).verify(
    ...     Circuit(3).CX(0, 2)
    ... )
    False
    """

    def __init__(self, architecture, placement=None):
        self.architecture = architecture
        if placement is None:
            placement = dict(enumerate(architecture.get_all_uids()))
        self.placement = dict(placement)

    def verify(self, circuit):
        for command in circuit:
            if any(q not in self.placement for q in command.qubits):
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("Qubits %s of %r are not placed", command.qubits, command.op)
                return False
            nodes = [self.placement[q] for q in command.qubits]
            if len(nodes) > 1 and not self.architecture.valid_operation(nodes):
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("%r acts on unconnected nodes %s", command.op, nodes)
                return False
        return True


class CliffordCircuitPredicate(Predicate):
    """Every gate and box of the circuit is Clifford."""

    def verify(self, circuit):
        return circuit.is_clifford()


class MaxNQubitsPredicate(Predicate):
    """The circuit has at most ``n_qubits`` qubits."""

    def __init__(self, n_qubits):
        self.n_qubits = n_qubits

    def verify(self, circuit):
        return circuit.n_qubits <= self.n_qubits

    def __repr__(self):
        return f"MaxNQubitsPredicate({self.n_qubits})"


class NoSymbolsPredicate(Predicate):
    """The circuit has no free symbols, neither in its operations nor in its phase."""

    def verify(self, circuit):
        return not circuit.free_symbols()
