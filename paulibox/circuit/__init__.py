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
This subpackage contains the circuit container and the boxes that can be scheduled on it.
"""
from .circuit import Circuit, Command, Gate, Op, OpType
from .boxes import Box, CircBox, ConjugationBox
from .phase_poly import PhasePolyBox
from .op_json_factory import op_from_json, op_to_json, register_op_factory
from .pauli_exp_boxes import (
    PauliExpBox,
    PauliExpCommutingSetBox,
    PauliExpPairBox,
    append_commuting_pauli_gadget_set_as_box,
    append_pauli_gadget_pair_as_box,
    append_single_pauli_gadget_as_pauli_exp_box,
)
