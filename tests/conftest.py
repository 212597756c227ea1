"""Pytest configuration and fixtures for indexgraph tests."""

import pytest

from indexgraph import UnweightedGraph, WeightedGraph


LETTER_WEIGHTS = {
    ('a', 'b'): 9.0,
    ('a', 'd'): 8.0,
    ('b', 'c'): 1.0,
    ('b', 'e'): 3.0,
    ('c', 'e'): 1.0,
    ('c', 'd'): 5.0,
    ('d', 'f'): 8.0,
    ('e', 'f'): 6.0,
}

PATH_EDGES = [
    ('f', 'd'), ('d', 'h'), ('c', 'g'), ('c', 'a'), ('b', 'f'), ('b', 'e'),
    ('a', 'b'), ('e', 'h'), ('d', 'g'), ('d', 'e'), ('e', 'c'),
]


@pytest.fixture
def weighted_letters():
    """Weighted graph on a..f.

    Graph structure:
        a -> b, a -> d, b -> c, b -> e, c -> e, c -> d, d -> f, e -> f
    """
    graph = WeightedGraph.from_values('abcdef')
    graph.construct_edges_from(lambda u, v: LETTER_WEIGHTS.get((u, v)))
    return graph


@pytest.fixture
def path_graph():
    """Unweighted graph on a..h with the directed edges in PATH_EDGES."""
    graph = UnweightedGraph.from_values('abcdefgh')
    for from_value, to_value in PATH_EDGES:
        graph.add_edge(graph.get_vertex(from_value), graph.get_vertex(to_value))
    return graph


@pytest.fixture
def handle_of():
    """Look up a vertex by value, failing the test if it is missing."""
    def lookup(graph, value):
        handle = graph.get_vertex(value)
        assert handle is not None, f"{value!r} is not in the graph"
        return handle
    return lookup
