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
Unit tests for the :class:`~.Node` qubit identifier.
"""
import dataclasses

import pytest

from paulibox.architecture import Node
from paulibox.exceptions import MalformedJsonError, NodeError


class TestConstruction:
    """Tests for building nodes."""

    def test_default_register(self):
        """Test that bare indices go to the default register."""
        node = Node(3)
        assert node.reg_name == "node"
        assert node.index == (3,)

    def test_named_register(self):
        """Test a register name followed by several indices."""
        node = Node("gridNode", 1, 2, 0)
        assert node.reg_name == "gridNode"
        assert node.index == (1, 2, 0)

    def test_no_index(self):
        """Test that a node may carry no index at all."""
        assert Node("anc").index == ()

    @pytest.mark.parametrize("reg_name", ["Node", "1q", "_q", "q-1", ""])
    def test_invalid_register(self, reg_name):
        """Test that register names must start with a lowercase letter."""
        with pytest.raises(NodeError, match="is not a valid register name"):
            Node(reg_name, 0)

    @pytest.mark.parametrize("index", [-1, 1.5, True, "0"])
    def test_invalid_index(self, index):
        """Test that indices must be non-negative integers."""
        with pytest.raises(NodeError, match="non-negative integers"):
            Node("q", index)

    def test_frozen(self):
        """Test that nodes cannot be modified."""
        node = Node(0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.reg_name = "other"


class TestComparison:
    """Tests for equality, hashing and ordering."""

    def test_equality_and_hash(self):
        """Test that nodes with the same register and indices are interchangeable."""
        assert Node("q", 1) == Node("q", 1)
        assert Node("q", 1) != Node("q", 2)
        assert Node(1) != Node("q", 1)
        assert len({Node("q", 1), Node("q", 1), Node("q", 2)}) == 2

    def test_ordering(self):
        """Test that nodes are ordered by register, then by index."""
        nodes = [Node("b", 0), Node("a", 2), Node("a", 1, 5), Node("a", 1)]
        assert sorted(nodes) == [Node("a", 1), Node("a", 1, 5), Node("a", 2), Node("b", 0)]


class TestRepresentation:
    """Tests for the string forms and JSON form."""

    def test_repr(self):
        """Test the representation."""
        assert repr(Node(3)) == "Node('node', 3)"
        assert repr(Node("gridNode", 1, 2, 0)) == "Node('gridNode', 1, 2, 0)"

    def test_str(self):
        """Test the readable form."""
        assert str(Node(3)) == "node[3]"
        assert str(Node("gridNode", 1, 2, 0)) == "gridNode[1, 2, 0]"

    def test_to_list(self):
        """Test the JSON form."""
        assert Node("ringNode", 4).to_list() == ["ringNode", [4]]

    @pytest.mark.parametrize("node", [Node(0), Node("gridNode", 1, 2, 3), Node("anc")])
    def test_from_list(self, node):
        """Test that the JSON form restores the node."""
        assert Node.from_list(node.to_list()) == node

    @pytest.mark.parametrize(
        "data", ["node", ["node", 1], ["node", [-1]], ["Bad", [0]], [0, [0]], ["q", [0], 1]]
    )
    def test_from_list_malformed(self, data):
        """Test that malformed node data is rejected."""
        with pytest.raises(MalformedJsonError, match="is not a serialized node"):
            Node.from_list(data)
