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
This module contains the :class:`Node` identifier of a physical qubit in an
:class:`~.Architecture`.
"""
import re
from dataclasses import dataclass, field

from paulibox.exceptions import MalformedJsonError, NodeError

_reg_name_regex = re.compile(r"^[a-z][A-Za-z0-9_]*$")

DEFAULT_REGISTER = "node"


@dataclass(frozen=True, order=True, init=False)
class Node:
    """Identifier of a physical qubit: a register name and a tuple of indices.

    Nodes are immutable, hashable and ordered by register name, then by index.

    Args:
        *args: either the indices alone, placed in the default ``"node"`` register,
            or a register name followed by the indices

    Raises:
        NodeError: if the register name is not a lowercase letter followed by letters,
            digits or underscores, or an index is not a non-negative integer

    **Example**

    >>> Node(3)
    Node('node', 3)
    >>> Node("gridNode", 1, 2, 0)
    Node('gridNode', 1, 2, 0)
    >>> Node(3) < Node(4) < Node("ring", 0)
    True
    """

    reg_name: str
    index: tuple = field(default=())

    def __init__(self, *args):
        if args and isinstance(args[0], str):
            reg_name, index = args[0], args[1:]
        else:
            reg_name, index = DEFAULT_REGISTER, args
        if not _reg_name_regex.match(reg_name):
            raise NodeError(f"{reg_name!r} is not a valid register name.")
        for i in index:
            if isinstance(i, bool) or not isinstance(i, int) or i < 0:
                raise NodeError(f"Node indices must be non-negative integers, got {i!r}.")
        object.__setattr__(self, "reg_name", reg_name)
        object.__setattr__(self, "index", tuple(index))

    def to_list(self) -> list:
        """JSON form ``[reg_name, [indices...]]``."""
        return [self.reg_name, list(self.index)]

    @classmethod
    def from_list(cls, data):
        """Inverse of :meth:`to_list`.

        Raises:
            MalformedJsonError: if ``data`` does not have the JSON form of a node
        """
        if (
            not isinstance(data, list)
            or len(data) != 2
            or not isinstance(data[0], str)
            or not isinstance(data[1], list)
        ):
            raise MalformedJsonError(f"{data!r} is not a serialized node.")
        try:
            return cls(data[0], *data[1])
        except NodeError as e:
            raise MalformedJsonError(f"{data!r} is not a serialized node.") from e

    def __repr__(self):
        args = ", ".join([repr(self.reg_name)] + [str(i) for i in self.index])
        return f"Node({args})"

    def __str__(self):
        return f"{self.reg_name}[{', '.join(str(i) for i in self.index)}]"
