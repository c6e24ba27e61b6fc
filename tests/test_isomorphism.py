"""
Tests for the bounded isomorphism check.
"""

import copy

import pytest

from dnagraph.definitions import Graph, SearchSpaceExceeded
from dnagraph.isomorphism import enumerate_assignments, is_isomorphic
from dnagraph.models import SumCodec


def _cycle(num_nodes, reverse=False):
    edges = [(i, (i + 1) % num_nodes) for i in range(num_nodes)]
    if reverse:
        edges = [(t, s) for s, t in edges]
    return Graph(vertices=list(range(num_nodes)), edge_list=edges)


class TestIsIsomorphic:
    """Test cases for is_isomorphic."""

    def test_identical_graphs(self, triangle_loops):
        assert is_isomorphic(triangle_loops, copy.deepcopy(triangle_loops))

    def test_different_sizes(self):
        g1 = Graph(vertices=[0, 1], edge_list=[(0, 1)])
        assert not is_isomorphic(g1, Graph(vertices=[0, 1, 2], edge_list=[(0, 1)]))
        assert not is_isomorphic(g1, Graph(vertices=[0, 1], edge_list=[(0, 1), (1, 0)]))

    def test_relabeled_path(self):
        g1 = Graph(vertices=[0, 1, 2], edge_list=[(0, 1), (1, 2)])
        g2 = Graph(vertices=[0, 1, 2], edge_list=[(2, 1), (1, 0)])
        assert is_isomorphic(g1, g2)

    def test_different_degrees(self):
        g1 = Graph(vertices=[0, 1], edge_list=[(0, 0)])
        g2 = Graph(vertices=[0, 1], edge_list=[(0, 1)])
        assert not is_isomorphic(g1, g2)

    def test_edge_order_is_significant(self):
        """Same edge set, different edge sequence: the check compares positions."""
        g1 = Graph(vertices=[0, 1, 2], edge_list=[(0, 1), (1, 2)])
        g2 = Graph(vertices=[0, 1, 2], edge_list=[(1, 2), (0, 1)])
        assert not is_isomorphic(g1, g2)

    def test_second_graph_untouched(self):
        g1 = Graph(vertices=[0, 1, 2, 3], edge_list=[(0, 1), (2, 3), (3, 3)])
        g2 = Graph(vertices=[0, 1, 2, 3], edge_list=[(3, 2), (1, 0), (0, 0)])
        before = copy.deepcopy(g2)
        assert is_isomorphic(g1, g2)
        assert g2 == before

    def test_sum_codec_scenario(self, triangle_loops):
        codec = SumCodec()
        decoded = codec.deserialize(codec.serialize(triangle_loops, True))
        assert is_isomorphic(triangle_loops, decoded)

    def test_search_space_exceeded(self):
        """Ten vertices of equal degree allow 10!/4! partial assignments after six steps."""
        with pytest.raises(SearchSpaceExceeded) as excinfo:
            is_isomorphic(_cycle(10), _cycle(10, reverse=True))
        assert excinfo.value.num_assignments > excinfo.value.limit


class TestEnumerateAssignments:
    """Test cases for the injective assignment enumeration."""

    def test_injective(self):
        assignments = enumerate_assignments([[0, 1], [0, 1], [2]])
        assert assignments == [[0, 1, 2], [1, 0, 2]]

    def test_no_assignment(self):
        assert enumerate_assignments([[0], [0]]) == []

    def test_limit(self):
        with pytest.raises(SearchSpaceExceeded):
            enumerate_assignments([list(range(5))] * 5, limit=50)
