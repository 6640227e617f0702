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
Unit tests for the circuit predicates.
"""
import pytest

from paulibox.architecture import Architecture, Node, RingArch
from paulibox.circuit import Circuit, PauliExpBox
from paulibox.pauli import PauliTensor
from paulibox.predicates import (
    CliffordCircuitPredicate,
    ConnectivityPredicate,
    MaxNQubitsPredicate,
    NoSymbolsPredicate,
)


class TestConnectivityPredicate:
    """Tests for :class:`ConnectivityPredicate`."""

    def test_default_placement(self, path_arch):
        """Test that qubit i is placed on the i-th node by default."""
        pred = ConnectivityPredicate(path_arch)
        assert pred.placement == dict(enumerate(path_arch.get_all_uids()))
        assert pred.verify(Circuit(5).CX(0, 1).CX(3, 2).H(4))
        assert not pred.verify(Circuit(5).CX(0, 2))

    def test_custom_placement(self, path_arch):
        """Test verification through a custom placement."""
        a, b, c = (Node(name, 0) for name in "abc")
        pred = ConnectivityPredicate(path_arch, {0: c, 1: a, 2: b})
        assert pred.verify(Circuit(3).CX(0, 2).CX(1, 2))
        assert not pred.verify(Circuit(3).CX(0, 1))

    def test_unplaced_qubit(self):
        """Test that a circuit wider than the placement fails."""
        pred = ConnectivityPredicate(RingArch(3))
        assert not pred.verify(Circuit(4).H(3))

    def test_single_qubit_gates(self):
        """Test that single-qubit gates only need a placed qubit."""
        arc = Architecture(nodes=[Node(0), Node(1)])
        assert ConnectivityPredicate(arc).verify(Circuit(2).H(0).Rz(0.3, 1))

    def test_wide_boxes_rejected(self):
        """Test that boxes on more than two qubits are not supported."""
        circ = Circuit(3).add_box(PauliExpBox(PauliTensor("XYZ", 0.1)), [0, 1, 2])
        assert not ConnectivityPredicate(RingArch(3)).verify(circ)

    def test_empty_circuit(self):
        """Test that an empty circuit satisfies any connectivity."""
        assert ConnectivityPredicate(Architecture()).verify(Circuit(0))


class TestCircuitPredicates:
    """Tests for the predicates on circuit content."""

    @pytest.mark.parametrize(
        "circuit, expected",
        [
            (Circuit(2).H(0).CX(0, 1).S(1).V(0), True),
            (Circuit(1).Rz(0.5, 0).Rx(1.5, 0), True),
            (Circuit(1).Rz(0.25, 0), False),
            (Circuit(2).add_box(PauliExpBox(PauliTensor("XY", 1)), [0, 1]), True),
            (Circuit(2).add_box(PauliExpBox(PauliTensor("XY", 0.3)), [0, 1]), False),
        ],
    )
    def test_clifford(self, circuit, expected):
        """Test the Clifford predicate on gates and boxes."""
        assert CliffordCircuitPredicate().verify(circuit) is expected

    @pytest.mark.parametrize("n_qubits, expected", [(2, True), (3, True), (1, False)])
    def test_max_n_qubits(self, n_qubits, expected):
        """Test the width predicate."""
        assert MaxNQubitsPredicate(n_qubits).verify(Circuit(2)) is expected

    def test_no_symbols(self):
        """Test that free symbols in gates, boxes or the phase fail the predicate."""
        pred = NoSymbolsPredicate()
        assert pred.verify(Circuit(1).Rz(0.3, 0))
        assert not pred.verify(Circuit(1).Rz("a", 0))
        assert not pred.verify(Circuit(1).add_phase("b"))
        assert not pred.verify(Circuit(1).add_box(PauliExpBox(PauliTensor("X", "a")), [0]))

    def test_repr(self):
        """Test the representations."""
        assert repr(NoSymbolsPredicate()) == "NoSymbolsPredicate()"
        assert repr(MaxNQubitsPredicate(4)) == "MaxNQubitsPredicate(4)"
