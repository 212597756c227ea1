"""Tests for weak connectivity via component compression."""

import pytest

from indexgraph import ConnectivityAnalyzer, UnweightedGraph, WeightedGraph, is_connected


class TestTrivialGraphs:

    def test_empty_graph_is_connected(self):
        assert UnweightedGraph().is_connected()
        assert WeightedGraph().is_connected()

    def test_single_vertex_is_connected(self):
        graph = UnweightedGraph.from_values(['alone'])
        assert graph.is_connected()

    def test_two_isolated_vertices(self):
        graph = UnweightedGraph.from_values('ab')
        assert not graph.is_connected()


class TestLetterGraph:

    def test_connected(self, weighted_letters):
        assert weighted_letters.is_connected()

    def test_removing_source_edges_disconnects(self, weighted_letters, handle_of):
        a = handle_of(weighted_letters, 'a')
        assert weighted_letters.is_connected()

        weighted_letters.remove_edge(a, handle_of(weighted_letters, 'b'))
        weighted_letters.remove_edge(a, handle_of(weighted_letters, 'd'))

        assert not weighted_letters.is_connected()
        assert not weighted_letters.is_connected()

    def test_unweighted_copy_agrees(self, weighted_letters):
        assert weighted_letters.to_unweighted().is_connected()


class TestDirectionality:

    def test_sink_vertex_connected_to_sources(self):
        graph = UnweightedGraph.from_values('abc')
        graph.construct_edges_from(lambda u, v: (u, v) in {('b', 'a'), ('c', 'a')})
        assert graph.is_connected()

    def test_chain_pointing_backwards(self):
        graph = UnweightedGraph.from_values('abcd')
        graph.construct_edges_from(lambda u, v: ord(u) == ord(v) + 1)
        assert graph.is_connected()

    def test_two_islands(self):
        graph = UnweightedGraph.from_values('abcd')
        graph.construct_edges_from(lambda u, v: (u, v) in {('a', 'b'), ('c', 'd')})
        assert not graph.is_connected()

    def test_components_joined_through_third(self):
        graph = UnweightedGraph.from_values('abc')
        graph.construct_edges_from(lambda u, v: (u, v) in {('b', 'a'), ('b', 'c')})
        assert graph.is_connected()


class TestAnalyzer:

    def test_component_labels(self):
        graph = UnweightedGraph.from_values('abc')
        graph.construct_edges_from(lambda u, v: (u, v) in {('b', 'a'), ('c', 'a')})
        assert ConnectivityAnalyzer(graph).component_labels() == [1, 2, 3]

    def test_labels_follow_outgoing_edges(self, weighted_letters):
        assert ConnectivityAnalyzer(weighted_letters).component_labels() == [1] * 6

    def test_function_matches_method(self, weighted_letters):
        assert is_connected(weighted_letters) == weighted_letters.is_connected()

    @pytest.mark.parametrize("size", [2, 5, 20])
    def test_cycle_is_connected(self, size):
        graph = UnweightedGraph.from_values(range(size))
        graph.construct_edges_from(lambda u, v: v == (u + 1) % size)
        assert graph.is_connected()
