"""Tests for capability protocols and entry-time capability checks."""

from __future__ import annotations

import pytest

from graphwalk import (
    BidirectionalStoredGraph,
    CapabilityMissingError,
    RingGraph,
    StoredGraph,
    UndirectedStoredGraph,
    Visitor,
    breadth_first_search,
    dijkstra_shortest_paths,
    hawick_circuits,
    level_schedule,
    topological_sort,
)
from graphwalk.graph.property_maps import IdentityPropertyMap
from graphwalk.graph.protocols import (
    Graph,
    SupportsAdjacency,
    SupportsAdjacencyMatrix,
    SupportsBidirectional,
    SupportsEdgeList,
    SupportsEdgeWeight,
    SupportsIncidence,
    SupportsVertexList,
    require,
)

# ======================================================================
# Minimal representations implementing part of the protocol
# ======================================================================


class VertexOnlyGraph:
    """Enumerates vertices but cannot say anything about edges."""

    is_directed = True

    def __init__(self, n: int) -> None:
        self._n = n

    def source(self, edge: tuple[int, int]) -> int:
        return edge[0]

    def target(self, edge: tuple[int, int]) -> int:
        return edge[1]

    def vertex_index_map(self) -> IdentityPropertyMap:
        return IdentityPropertyMap()

    def num_vertices(self) -> int:
        return self._n

    def vertices(self) -> range:
        return range(self._n)


class ChainGraph(VertexOnlyGraph):
    """``0 -> 1 -> ... -> n-1`` with incidence only, computed on demand."""

    def out_edges(self, u: int):
        if u + 1 < self._n:
            yield (u, u + 1)

    def out_degree(self, u: int) -> int:
        return 1 if u + 1 < self._n else 0


# ======================================================================
# Protocol membership
# ======================================================================


class TestProtocolMembership:
    @pytest.mark.parametrize(
        "protocol",
        [
            Graph,
            SupportsVertexList,
            SupportsEdgeList,
            SupportsIncidence,
            SupportsAdjacency,
            SupportsAdjacencyMatrix,
            SupportsEdgeWeight,
        ],
    )
    def test_every_stored_graph_satisfies_core_capabilities(self, protocol: type) -> None:
        for g in (StoredGraph(), BidirectionalStoredGraph(), UndirectedStoredGraph()):
            assert isinstance(g, protocol)

    def test_plain_directed_graph_is_not_bidirectional(self) -> None:
        assert not isinstance(StoredGraph(), SupportsBidirectional)

    def test_bidirectional_and_undirected_graphs_have_in_edges(self) -> None:
        assert isinstance(BidirectionalStoredGraph(), SupportsBidirectional)
        assert isinstance(UndirectedStoredGraph(), SupportsBidirectional)

    @pytest.mark.parametrize(
        "protocol",
        [
            Graph,
            SupportsVertexList,
            SupportsEdgeList,
            SupportsIncidence,
            SupportsBidirectional,
            SupportsAdjacency,
            SupportsAdjacencyMatrix,
            SupportsEdgeWeight,
        ],
    )
    def test_ring_graph_satisfies_full_protocol(self, protocol: type) -> None:
        assert isinstance(RingGraph(4), protocol)

    def test_plain_object_satisfies_nothing(self) -> None:
        assert not isinstance(object(), Graph)
        assert not isinstance(object(), SupportsIncidence)


# ======================================================================
# require()
# ======================================================================


class TestRequire:
    def test_passes_when_all_present(self) -> None:
        require(RingGraph(3), SupportsVertexList, SupportsIncidence, algorithm="x")

    def test_names_missing_capabilities(self) -> None:
        with pytest.raises(CapabilityMissingError, match="SupportsIncidence"):
            require(VertexOnlyGraph(3), SupportsVertexList, SupportsIncidence, algorithm="bfs")

    def test_core_protocol_always_required(self) -> None:
        with pytest.raises(CapabilityMissingError, match="Graph"):
            require(object(), algorithm="anything")


# ======================================================================
# Algorithms reject missing capabilities before doing any work
# ======================================================================


class _Recorder(Visitor):
    def __init__(self) -> None:
        self.events: list[str] = []

    def initialize_vertex(self, graph, v) -> None:
        self.events.append("initialize_vertex")


class TestAlgorithmsCheckAtEntry:
    def test_bfs_needs_incidence(self) -> None:
        rec = _Recorder()
        with pytest.raises(CapabilityMissingError):
            breadth_first_search(VertexOnlyGraph(3), 0, visitor=rec)
        assert rec.events == []

    def test_level_schedule_needs_in_edges(self) -> None:
        g = StoredGraph(2)
        g.add_edge(0, 1)
        with pytest.raises(CapabilityMissingError, match="SupportsBidirectional"):
            level_schedule(g)

    def test_topological_sort_rejects_undirected(self) -> None:
        with pytest.raises(CapabilityMissingError, match="directed"):
            topological_sort(RingGraph(3))

    def test_dijkstra_without_weight_map_needs_edge_weights(self) -> None:
        with pytest.raises(CapabilityMissingError, match="SupportsEdgeWeight"):
            dijkstra_shortest_paths(ChainGraph(3), 0)

    def test_dijkstra_with_explicit_weights_runs_on_minimal_graph(self) -> None:
        result = dijkstra_shortest_paths(ChainGraph(3), 0, weight={(0, 1): 2.0, (1, 2): 3.0})
        assert result.distance.tolist() == [0.0, 2.0, 5.0]

    def test_circuits_need_adjacency(self) -> None:
        with pytest.raises(CapabilityMissingError, match="SupportsAdjacency"):
            hawick_circuits(ChainGraph(3), lambda c: None)

    def test_custom_incidence_graph_runs_bfs(self) -> None:
        order: list[int] = []

        class Collect(Visitor):
            def discover_vertex(self, graph, v) -> None:
                order.append(v)

        breadth_first_search(ChainGraph(4), 1, visitor=Collect())
        assert order == [1, 2, 3]
