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
This module contains the :class:`Architecture` class, an undirected graph of
physical qubits (:class:`~.Node`) describing which pairs can interact, together
with the canonical device topologies.

Distances are unweighted: every connection counts as one hop regardless of its
stored weight. Nodes and connections are reported in insertion order.
"""
# pylint:disable=protected-access
import copy
import logging
import numbers

import networkx as nx
import numpy as np

from paulibox.exceptions import (
    InvalidArchitectureError,
    MalformedJsonError,
    NodesNotConnectedError,
)
from paulibox.logging import debug_logger

from .graphs import get_subgraph_aps, longest_simple_path, tri_lexicographical_comparison
from .node import Node

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class Architecture:
    r"""Connectivity graph of a device.

    Args:
        connections (Iterable[tuple]): ``(u, v)`` or ``(u, v, weight)`` tuples added in
            order with :meth:`add_connection`
        nodes (Iterable[Node]): nodes added before any connection, in order

    **Example**

    >>> arc = Architecture([(Node(0), Node(1)), (Node(1), Node(2))])
    >>> arc.get_distance(Node(0), Node(2))
    2
    >>> arc.get_articulation_points()
    {Node('node', 1)}
    """

    def __init__(self, connections=None, nodes=None):
        self._graph = nx.Graph()
        self._n_links_added = 0
        for node in nodes or ():
            self.add_node(node)
        for connection in connections or ():
            self.add_connection(*connection)

    @property
    def graph(self) -> nx.Graph:
        """A copy of the underlying networkx graph."""
        return self._graph.copy()

    # =========================================================================
    # Construction
    # =========================================================================

    def add_node(self, node):
        """Add an isolated node.

        Raises:
            InvalidArchitectureError: if the node already exists
        """
        if node in self._graph:
            raise InvalidArchitectureError(f"Node {node} already exists in the architecture.")
        self._graph.add_node(node)

    def add_connection(self, u, v, weight=1.0):
        """Connect ``u`` and ``v``, adding either node if missing. Adding an existing
        connection again updates its weight and keeps its position.

        Raises:
            InvalidArchitectureError: for a self-loop or a non-positive weight
        """
        if u == v:
            raise InvalidArchitectureError(f"Cannot connect node {u} to itself.")
        if weight <= 0:
            raise InvalidArchitectureError(f"Connection weights must be positive, got {weight}.")
        if self._graph.has_edge(u, v):
            self._graph.edges[u, v]["weight"] = float(weight)
            return
        self._graph.add_edge(u, v, weight=float(weight), order=self._n_links_added, link=(u, v))
        self._n_links_added += 1

    def remove_uid(self, node):
        """Remove a node and all of its connections."""
        self._check_node(node)
        self._graph.remove_node(node)

    def remove_connection(self, u, v):
        """Remove the connection between ``u`` and ``v``, keeping both nodes."""
        if not self._graph.has_edge(u, v):
            raise InvalidArchitectureError(f"No connection between {u} and {v}.")
        self._graph.remove_edge(u, v)

    def _check_node(self, node):
        if node not in self._graph:
            raise InvalidArchitectureError(f"Node {node} is not in the architecture.")

    # =========================================================================
    # Queries
    # =========================================================================

    def uid_exists(self, node) -> bool:
        return node in self._graph

    def n_uids(self) -> int:
        return self._graph.number_of_nodes()

    def n_connections(self) -> int:
        return self._graph.number_of_edges()

    def get_all_uids(self) -> list:
        """Nodes in insertion order."""
        return list(self._graph.nodes)

    def get_connections_vec(self) -> list:
        """Connections as ``(u, v)`` pairs in insertion order, oriented as first added."""
        links = sorted(self._graph.edges(data=True), key=lambda e: e[2]["order"])
        return [data["link"] for _, _, data in links]

    def connection_exists(self, u, v) -> bool:
        return self._graph.has_edge(u, v)

    def get_connection_weight(self, u, v) -> float:
        if not self._graph.has_edge(u, v):
            raise InvalidArchitectureError(f"No connection between {u} and {v}.")
        return self._graph.edges[u, v]["weight"]

    def get_neighbour_uids(self, node) -> list:
        """Neighbours of ``node`` in the order their connections were added."""
        self._check_node(node)
        return list(self._graph.adj[node])

    def min_degree_uids(self) -> set:
        """The nodes of minimum degree."""
        if not self.n_uids():
            return set()
        degrees = dict(self._graph.degree)
        least = min(degrees.values())
        return {node for node, d in degrees.items() if d == least}

    def max_degree_uids(self) -> set:
        """The nodes of maximum degree."""
        if not self.n_uids():
            return set()
        degrees = dict(self._graph.degree)
        most = max(degrees.values())
        return {node for node, d in degrees.items() if d == most}

    def valid_operation(self, nodes) -> bool:
        """Whether an operation on ``nodes`` is supported: a single existing node, or two
        connected nodes."""
        nodes = list(nodes)
        if len(nodes) == 1:
            return self.uid_exists(nodes[0])
        if len(nodes) == 2:
            return self.connection_exists(*nodes)
        return False

    def get_distance(self, u, v) -> int:
        """Number of connections on a shortest path between ``u`` and ``v``.

        Raises:
            InvalidArchitectureError: if either node is missing
            NodesNotConnectedError: if no path joins them
        """
        self._check_node(u)
        self._check_node(v)
        try:
            return nx.shortest_path_length(self._graph, u, v)
        except nx.NetworkXNoPath as e:
            raise NodesNotConnectedError(f"Nodes {u} and {v} are not connected.") from e

    def get_distances(self, node) -> list:
        """Distances from ``node`` to every node, indexed by insertion order.

        Raises:
            NodesNotConnectedError: if some node cannot be reached
        """
        self._check_node(node)
        lengths = nx.single_source_shortest_path_length(self._graph, node)
        if len(lengths) != self.n_uids():
            raise NodesNotConnectedError(f"Some nodes cannot be reached from {node}.")
        return [lengths[v] for v in self._graph.nodes]

    def get_diameter(self) -> int:
        """The largest distance between two nodes.

        Raises:
            InvalidArchitectureError: if the architecture has no nodes
            NodesNotConnectedError: if the architecture is disconnected
        """
        if not self.n_uids():
            raise InvalidArchitectureError("No nodes in architecture.")
        return max(max(self.get_distances(node)) for node in self._graph.nodes)

    def get_connectivity(self) -> np.ndarray:
        """Boolean adjacency matrix over the nodes in insertion order."""
        index = {node: i for i, node in enumerate(self._graph.nodes)}
        connectivity = np.zeros((len(index), len(index)), dtype=bool)
        for u, v in self._graph.edges:
            connectivity[index[u], index[v]] = connectivity[index[v], index[u]] = True
        return connectivity

    def get_articulation_points(self, subarc=None) -> set:
        """Nodes whose removal disconnects the architecture.

        Args:
            subarc (Architecture): if given, the nodes of ``subarc`` whose removal from
                this architecture splits the remaining nodes of ``subarc`` across more
                connected components

        Returns:
            set[Node]: the articulation points
        """
        if subarc is None:
            return set(nx.articulation_points(self._graph))
        for node in subarc.get_all_uids():
            self._check_node(node)
        return get_subgraph_aps(self._graph, subarc.get_all_uids())

    def create_subarch(self, nodes):
        """The architecture induced by ``nodes``, with their connections and weights."""
        nodes = list(nodes)
        for node in nodes:
            self._check_node(node)
        subarc = Architecture(nodes=nodes)
        keep = set(nodes)
        for u, v in self.get_connections_vec():
            if u in keep and v in keep:
                subarc.add_connection(u, v, self.get_connection_weight(u, v))
        return subarc

    # =========================================================================
    # Line finding and pruning
    # =========================================================================

    @debug_logger
    def get_lines(self, required_lengths) -> list:
        """Find vertex-disjoint simple paths of the requested numbers of nodes.

        Longer lines are searched for first. A request that cannot be satisfied in the
        remaining graph is skipped.

        Args:
            required_lengths (Sequence[int]): number of nodes of each line

        Returns:
            list[list[Node]]: the lines found, in the order they were requested

        Raises:
            InvalidArchitectureError: if the lengths sum to more than the number of nodes
        """
        required_lengths = list(required_lengths)
        if sum(required_lengths) > self.n_uids():
            raise InvalidArchitectureError("Not enough nodes to satisfy required lengths.")

        working = self._graph.copy()
        found = {}
        order = sorted(range(len(required_lengths)), key=lambda i: -required_lengths[i])
        for i in order:
            length = required_lengths[i]
            line = longest_simple_path(working, length)
            if len(line) < length:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("No line of %d nodes left, skipping request %d", length, i)
                continue
            found[i] = line
            working.remove_nodes_from(line)
        return [found[i] for i in sorted(found)]

    def _distance_profile(self, node):
        # unreachable nodes count as distance 0
        lengths = nx.single_source_shortest_path_length(self._graph, node)
        return sorted(lengths.get(v, 0) for v in self._graph.nodes)

    def _find_worst_node(self, original):
        candidates = sorted(self.min_degree_uids() - self.get_articulation_points())
        if len(candidates) <= 1:
            return candidates[0] if candidates else None

        worst = candidates[0]
        worst_distances = self._distance_profile(worst)
        for node in candidates[1:]:
            distances = self._distance_profile(node)
            comparison = tri_lexicographical_comparison(distances, worst_distances)
            if comparison == 1:
                worst, worst_distances = node, distances
            elif comparison == -1:
                if original._distance_profile(node) < original._distance_profile(worst):
                    worst, worst_distances = node, distances
        return worst

    @debug_logger
    def remove_worst_nodes(self, num) -> set:
        """Remove up to ``num`` poorly connected nodes, never splitting a connected component.

        In each round the candidates are the nodes of minimum degree that are not
        articulation points. The candidate whose ascending-sorted distance vector is
        lexicographically smallest is removed; ties are broken on the distance vectors
        of the architecture before any removal. Pruning stops early when no candidate
        remains.

        Args:
            num (int): the maximal number of nodes to remove

        Returns:
            set[Node]: the removed nodes
        """
        original = self.copy()
        removed = set()
        for _ in range(num):
            node = self._find_worst_node(original)
            if node is None:
                break
            self.remove_uid(node)
            removed.add(node)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Removed worst node %s", node)
        return removed

    # =========================================================================
    # Serialization and comparison
    # =========================================================================

    def to_dict(self) -> dict:
        """JSON form ``{"nodes": [...], "links": [{"link": [u, v], "weight": w}, ...]}``."""
        return {
            "nodes": [node.to_list() for node in self._graph.nodes],
            "links": [
                {"link": [u.to_list(), v.to_list()], "weight": self.get_connection_weight(u, v)}
                for u, v in self.get_connections_vec()
            ],
        }

    @classmethod
    def from_dict(cls, data):
        """Inverse of :meth:`to_dict`.

        Raises:
            MalformedJsonError: if ``data`` does not have the JSON form of an architecture
        """
        if not isinstance(data, dict) or "nodes" not in data or "links" not in data:
            raise MalformedJsonError("An architecture needs 'nodes' and 'links' fields.")
        if not isinstance(data["nodes"], list) or not isinstance(data["links"], list):
            raise MalformedJsonError("Architecture 'nodes' and 'links' must be lists.")

        arc = Architecture()
        for entry in data["nodes"]:
            try:
                arc.add_node(Node.from_list(entry))
            except InvalidArchitectureError as e:
                raise MalformedJsonError(f"Node {entry!r} is listed more than once.") from e

        for link in data["links"]:
            if not isinstance(link, dict) or "link" not in link or "weight" not in link:
                raise MalformedJsonError(f"{link!r} is not a serialized connection.")
            pair, weight = link["link"], link["weight"]
            if not isinstance(pair, list) or len(pair) != 2:
                raise MalformedJsonError(f"{pair!r} is not a pair of nodes.")
            if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
                raise MalformedJsonError(f"Connection weight {weight!r} is not a number.")
            u, v = (Node.from_list(n) for n in pair)
            try:
                arc.add_connection(u, v, weight)
            except InvalidArchitectureError as e:
                raise MalformedJsonError(f"{link!r} is not a valid connection.") from e
        return arc

    def copy(self):
        new = copy.copy(self)
        new._graph = self._graph.copy()
        return new

    def __eq__(self, other):
        if not isinstance(other, Architecture):
            return NotImplemented
        if set(self._graph.nodes) != set(other._graph.nodes):
            return False
        if self.n_connections() != other.n_connections():
            return False
        return all(
            other.connection_exists(u, v)
            and self.get_connection_weight(u, v) == other.get_connection_weight(u, v)
            for u, v in self._graph.edges
        )

    __hash__ = None

    def __repr__(self):
        return f"<{type(self).__name__}: nodes={self.n_uids()}, connections={self.n_connections()}>"


class FullyConnected(Architecture):
    """Complete graph on ``n`` nodes ``Node("fcNode", i)``."""

    def __init__(self, n, label="fcNode"):
        nodes = [Node(label, i) for i in range(n)]
        super().__init__(nodes=nodes)
        for u in nodes:
            for v in nodes:
                if u != v:
                    self.add_connection(u, v)


class RingArch(Architecture):
    """Cycle on ``n`` nodes ``Node("ringNode", i)``, each connected to the next."""

    def __init__(self, n, label="ringNode"):
        nodes = [Node(label, i) for i in range(n)]
        super().__init__(nodes=nodes)
        for i, u in enumerate(nodes):
            v = nodes[(i + 1) % n]
            if u != v and not self.connection_exists(u, v):
                self.add_connection(u, v)


class SquareGrid(Architecture):
    r"""Grid of ``n_rows`` :math:`\times` ``n_columns`` nodes, stacked in ``n_layers``
    layers, named ``Node("gridNode", row, column, layer)``.

    Nodes are added layer by layer, then row by row. Each node connects to its right
    neighbour, its neighbour in the next row and its neighbour in the next layer.

    **Example**

    >>> grid = SquareGrid(2, 3)
    >>> grid.get_lines([3, 3])
    [[Node('gridNode', 0, 0, 0), Node('gridNode', 0, 1, 0), Node('gridNode', 0, 2, 0)],
     [Node('gridNode', 1, 0, 0), Node('gridNode', 1, 1, 0), Node('gridNode', 1, 2, 0)]]
    """

    def __init__(self, n_rows, n_columns, n_layers=1, label="gridNode"):
        nodes = [
            Node(label, row, col, layer)
            for layer in range(n_layers)
            for row in range(n_rows)
            for col in range(n_columns)
        ]
        super().__init__(nodes=nodes)
        self.n_rows = n_rows
        self.n_columns = n_columns
        self.n_layers = n_layers
        for node in nodes:
            row, col, layer = node.index
            for neighbour in ((row, col + 1, layer), (row + 1, col, layer), (row, col, layer + 1)):
                r, c, lay = neighbour
                if r < n_rows and c < n_columns and lay < n_layers:
                    self.add_connection(node, Node(label, r, c, lay))
