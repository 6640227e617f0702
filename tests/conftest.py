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
Pytest configuration file for paulibox test suite.
"""
import copy
import os
from functools import reduce

import numpy as np
import pytest
import sympy as sp

import paulibox as pb
from paulibox.architecture import Architecture, Node
from paulibox.circuit import OpType
from paulibox.pauli import Pauli

# defaults
TOL = 1e-9


@pytest.fixture(scope="session")
def tol():
    """Numerical tolerance for equality tests."""
    return float(os.environ.get("TOL", TOL))


@pytest.fixture(scope="function")
def symbols():
    """Free symbols used in symbolic phases."""
    return sp.symbols("a b")


@pytest.fixture(scope="function", name="path_arch")
def path_arch_fixture():
    """Path graph a - b - c - d - e."""
    nodes = [Node(name, 0) for name in "abcde"]
    return Architecture(list(zip(nodes[:-1], nodes[1:])))


@pytest.fixture(autouse=True)
def restore_default_config():
    """Protect the package-wide configuration from modifications made by a test."""
    saved = copy.deepcopy(pb.default_config._config)  # pylint: disable=protected-access
    yield
    pb.default_config._config = saved  # pylint: disable=protected-access


_single_qubit_matrices = {
    OpType.H: np.array([[1, 1], [1, -1]]) / np.sqrt(2),
    OpType.S: np.diag([1, 1j]),
    OpType.Sdg: np.diag([1, -1j]),
    OpType.V: np.array([[1, -1j], [-1j, 1]]) / np.sqrt(2),
    OpType.Vdg: np.array([[1, 1j], [1j, 1]]) / np.sqrt(2),
    OpType.X: np.array([[0, 1], [1, 0]]),
    OpType.Z: np.diag([1, -1]),
}

_pauli_matrices = {
    Pauli.I: np.eye(2),
    Pauli.X: np.array([[0, 1], [1, 0]]),
    Pauli.Y: np.array([[0, -1j], [1j, 0]]),
    Pauli.Z: np.diag([1, -1]),
}


def _embed(factors, n_qubits):
    """Kronecker product over all qubits, qubit 0 most significant."""
    return reduce(np.kron, [factors.get(q, np.eye(2)) for q in range(n_qubits)], np.eye(1))


def _gate_matrix(op, qubits, n_qubits):
    optype = op.type
    if optype == OpType.CX:
        control, target = qubits
        p0, p1 = np.diag([1, 0]), np.diag([0, 1])
        return _embed({control: p0}, n_qubits) + _embed(
            {control: p1, target: _single_qubit_matrices[OpType.X]}, n_qubits
        )
    if optype == OpType.Rz:
        t = float(op.params[0])
        mat = np.diag([np.exp(-1j * np.pi * t / 2), np.exp(1j * np.pi * t / 2)])
    elif optype == OpType.Rx:
        t = float(op.params[0])
        mat = np.cos(np.pi * t / 2) * np.eye(2) - 1j * np.sin(np.pi * t / 2) * _pauli_matrices[
            Pauli.X
        ]
    else:
        mat = _single_qubit_matrices[optype]
    return _embed({qubits[0]: mat}, n_qubits)


def circuit_unitary(circuit):
    """Dense unitary of a circuit of primitive gates and boxes, qubit 0 most significant."""
    circ = circuit.copy()
    circ.decompose_boxes_recursively()
    n = circ.n_qubits
    unitary = np.eye(2**n, dtype=complex)
    for command in circ:
        unitary = _gate_matrix(command.op, command.qubits, n) @ unitary
    return np.exp(1j * np.pi * float(circ.phase)) * unitary


def pauli_exp_unitary(*tensors):
    """Dense unitary of the product of exponentials of dense tensors, the first applied first."""
    n = tensors[0].size()
    unitary = np.eye(2**n, dtype=complex)
    for tensor in tensors:
        string = _embed({q: _pauli_matrices[p] for q, p in enumerate(tensor.string)}, n)
        angle = np.pi * float(tensor.coeff) / 2
        unitary = (np.cos(angle) * np.eye(2**n) - 1j * np.sin(angle) * string) @ unitary
    return unitary


@pytest.fixture(scope="session", name="unitary")
def unitary_fixture():
    """Dense unitary of a circuit."""
    return circuit_unitary


@pytest.fixture(scope="session", name="pauli_exp")
def pauli_exp_fixture():
    """Dense unitary of a product of Pauli exponentials."""
    return pauli_exp_unitary
