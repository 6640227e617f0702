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
Graph routines used by :class:`~.Architecture` that networkx does not provide directly.
"""
import networkx as nx


def _path_length_bounds(graph, component):
    """Upper bounds on the number of vertices of a simple path starting at each vertex
    of a connected ``component``.

    Paths in a bipartite component alternate sides, so a path never holds more
    vertices of its starting side than of the other side plus one, nor more vertices
    of the other side than of its starting side.
    """
    sub = graph.subgraph(component)
    if not nx.is_bipartite(sub):
        return dict.fromkeys(component, len(component))
    left, right = nx.bipartite.sets(sub)
    bounds = {}
    for own, other in ((left, right), (right, left)):
        n_own = min(len(own), len(other) + 1)
        bounds.update(dict.fromkeys(own, n_own + min(len(other), n_own)))
    return bounds


def longest_simple_path(graph, cutoff=None):
    """Find a longest simple path by depth-first search.

    Start vertices and their neighbours are visited in insertion order, and the
    search stops as soon as a path of ``cutoff`` vertices is found. The search from a
    start vertex ends once a path reaches the size of its connected component, or the
    alternation bound of its side when the component is bipartite. Otherwise the search
    is exhaustive, and its running time grows exponentially with the number of vertices
    when no path of ``cutoff`` vertices exists.

    Args:
        graph (networkx.Graph): the graph to search
        cutoff (int): the number of vertices after which the search stops

    Returns:
        list: the vertices of the path, at most ``cutoff`` of them

    **Example**

    >>> g = nx.path_graph(5)
    >>> longest_simple_path(g)
    [0, 1, 2, 3, 4]
    >>> longest_simple_path(g, cutoff=3)
    [0, 1, 2]
    """
    if cutoff is None:
        cutoff = graph.number_of_nodes()
    best = []
    if cutoff <= 0:
        return best

    bound_of = {}
    for component in nx.connected_components(graph):
        bound_of.update(_path_length_bounds(graph, component))

    for start in graph.nodes:
        bound = min(cutoff, bound_of[start])
        if len(best) >= bound:
            continue
        path = [start]
        on_path = {start}
        stack = [iter(graph.adj[start])]
        if len(path) > len(best):
            best = list(path)
        while stack and len(best) < bound:
            nxt = next((u for u in stack[-1] if u not in on_path), None)
            if nxt is None:
                stack.pop()
                on_path.discard(path.pop())
                continue
            path.append(nxt)
            on_path.add(nxt)
            stack.append(iter(graph.adj[nxt]))
            if len(path) > len(best):
                best = list(path)
        if len(best) >= cutoff:
            break
    return best[:cutoff]


def _n_components_spanned(graph, vertices):
    """Number of connected components of ``graph`` holding at least one of ``vertices``."""
    seen = set()
    count = 0
    for v in vertices:
        if v in seen:
            continue
        count += 1
        seen |= nx.node_connected_component(graph, v)
    return count


def get_subgraph_aps(graph, sub_vertices):
    """Vertices of ``sub_vertices`` whose removal from ``graph`` splits the remaining
    vertices of ``sub_vertices`` across more connected components.

    Args:
        graph (networkx.Graph): the full graph
        sub_vertices (Iterable): the vertices of the subgraph, all present in ``graph``

    Returns:
        set: the articulation points of the subgraph within ``graph``
    """
    sub_vertices = list(sub_vertices)
    before = _n_components_spanned(graph, sub_vertices)
    aps = set()
    for v in sub_vertices:
        rest = [u for u in sub_vertices if u != v]
        if not rest:
            continue
        reduced = graph.subgraph(u for u in graph if u != v)
        if _n_components_spanned(reduced, rest) > before:
            aps.add(v)
    return aps


def tri_lexicographical_comparison(dist1, dist2):
    """Three-way lexicographic comparison of two distance vectors.

    Returns:
        int: ``1`` if ``dist1`` is smaller, ``0`` if ``dist2`` is smaller, ``-1`` on a tie

    **Example**

    >>> tri_lexicographical_comparison([1, 1, 2], [1, 2, 2])
    1
    >>> tri_lexicographical_comparison([1, 2], [1, 2])
    -1
    """
    for a, b in zip(dist1, dist2):
        if a < b:
            return 1
        if b < a:
            return 0
    if len(dist1) < len(dist2):
        return 1
    if len(dist2) < len(dist1):
        return 0
    return -1
