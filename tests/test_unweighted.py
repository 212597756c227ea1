"""Tests for the unweighted edge variant."""

import pytest

from indexgraph import AdjacencyGraph, EdgeNotFoundError, Handle, UnweightedGraph


@pytest.fixture
def numbers():
    """Vertices 1..10 with u -> v whenever v is a proper multiple of u."""
    graph = UnweightedGraph.from_values(range(1, 11))
    graph.construct_edges_from(lambda u, v: v != u and v % u == 0)
    return graph


class TestConstruction:

    def test_construct_edges_from_condition(self, numbers, handle_of):
        two = handle_of(numbers, 2)
        six = handle_of(numbers, 6)
        seven = handle_of(numbers, 7)

        assert numbers.edge_exists(two, six)
        assert not numbers.edge_exists(two, seven)
        assert not numbers.edge_exists(six, two)

    def test_condition_sees_every_ordered_pair(self):
        graph = UnweightedGraph.from_values('abc')
        seen = []
        graph.construct_edges_from(lambda u, v: seen.append((u, v)))
        assert len(seen) == 9
        assert ('b', 'b') in seen
        assert graph.num_edges() == 0

    def test_self_loops_allowed(self):
        graph = UnweightedGraph.from_values('ab')
        graph.construct_edges_from(lambda u, v: u == v)
        a, b = graph.handles()
        assert graph.edge_exists(a, a)
        assert graph.edge_exists(b, b)
        assert graph.num_edges() == 2

    def test_parallel_edges_counted(self):
        graph = UnweightedGraph.from_values('ab')
        a, b = graph.handles()
        graph.add_edge(a, b)
        graph.add_edge(a, b)
        assert graph.num_edges() == 2
        assert graph.neighbors(a) == [b, b]


class TestNeighbors:

    def test_insertion_order(self):
        graph = UnweightedGraph.from_values('abcd')
        a, b, c, d = graph.handles()
        graph.add_edge(a, d)
        graph.add_edge(a, b)
        graph.add_edge(a, c)
        assert graph.neighbors(a) == [d, b, c]

    def test_connected_neighbors_is_fresh_each_call(self):
        graph = UnweightedGraph.from_values('ab')
        a, b = graph.handles()
        graph.add_edge(a, b)
        first = graph.connected_neighbors(a)
        assert list(first) == [b]
        assert list(first) == []
        assert list(graph.connected_neighbors(a)) == [b]

    def test_connected_neighbors_survives_mutation(self):
        graph = UnweightedGraph.from_values('abc')
        a, b, c = graph.handles()
        graph.add_edge(a, b)
        neighbors = graph.connected_neighbors(a)
        graph.add_edge(a, c)
        graph.remove_edge(a, b)
        assert list(neighbors) == [b]

    def test_satisfies_adjacency_protocol(self):
        graph = UnweightedGraph()
        assert isinstance(graph, AdjacencyGraph)


class TestRemoveEdge:

    def test_remove_swaps_last_into_place(self):
        graph = UnweightedGraph.from_values('abcd')
        a, b, c, d = graph.handles()
        graph.add_edge(a, b)
        graph.add_edge(a, c)
        graph.add_edge(a, d)

        graph.remove_edge(a, b)

        assert graph.neighbors(a) == [d, c]
        assert graph.num_edges() == 2

    def test_remove_only_one_parallel_edge(self):
        graph = UnweightedGraph.from_values('ab')
        a, b = graph.handles()
        graph.add_edge(a, b)
        graph.add_edge(a, b)
        graph.remove_edge(a, b)
        assert graph.edge_exists(a, b)
        assert graph.num_edges() == 1

    def test_remove_missing_edge_raises(self):
        graph = UnweightedGraph.from_values('ab')
        a, b = graph.handles()
        graph.add_edge(b, a)
        with pytest.raises(EdgeNotFoundError, match="edge does not exist"):
            graph.remove_edge(a, b)
        assert graph.num_edges() == 1

    def test_remove_from_vertex_without_edges_raises(self):
        graph = UnweightedGraph.from_values('a')
        with pytest.raises(EdgeNotFoundError):
            graph.remove_edge(Handle(0), Handle(0))
