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
This is the top level module from which all basic functions and classes of
paulibox can be directly imported.
"""
from paulibox.configuration import Configuration

default_config = Configuration("config.toml")

from paulibox import exceptions
from paulibox import logging
from paulibox import symbolic
from paulibox import pauli
from paulibox.pauli import Pauli, PauliTensor, SparsePauliTensor, QubitPauliMap
from paulibox import circuit
from paulibox.circuit import (
    Circuit,
    OpType,
    CircBox,
    ConjugationBox,
    PhasePolyBox,
    PauliExpBox,
    PauliExpPairBox,
    PauliExpCommutingSetBox,
)
from paulibox import synthesis
from paulibox.synthesis import CXConfigType, mutual_diagonalise, pauli_gadget, pauli_gadget_pair
from paulibox import architecture
from paulibox.architecture import Architecture, FullyConnected, Node, RingArch, SquareGrid
from paulibox import predicates
from paulibox._version import __version__
