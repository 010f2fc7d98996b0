"""Tests for depth-first search, cycle detection and topological sorting."""

from __future__ import annotations

import pytest

from graphwalk import (
    CapabilityMissingError,
    CycleDetectedError,
    Directedness,
    RingGraph,
    StaleDescriptorError,
    StopTraversal,
    UndirectedStoredGraph,
    Visitor,
    depth_first_search,
    find_back_edge,
    from_edge_list,
    has_cycle,
    make_visitor,
    topological_sort,
)

# ======================================================================
# Helpers
# ======================================================================


class EdgeKinds(Visitor):
    """Collects ``(source, target)`` per DFS edge classification."""

    def __init__(self) -> None:
        self.kinds: dict[str, list[tuple[int, int]]] = {
            "tree": [],
            "back": [],
            "forward": [],
            "cross": [],
        }
        self.discovered: list[int] = []
        self.finished: list[int] = []
        self.roots: list[int] = []

    def _add(self, kind: str, graph, e) -> None:
        self.kinds[kind].append((graph.source(e), graph.target(e)))

    def start_vertex(self, graph, v) -> None:
        self.roots.append(v)

    def discover_vertex(self, graph, v) -> None:
        self.discovered.append(v)

    def finish_vertex(self, graph, v) -> None:
        self.finished.append(v)

    def tree_edge(self, graph, e) -> None:
        self._add("tree", graph, e)

    def back_edge(self, graph, e) -> None:
        self._add("back", graph, e)

    def forward_edge(self, graph, e) -> None:
        self._add("forward", graph, e)

    def cross_edge(self, graph, e) -> None:
        self._add("cross", graph, e)


def _assert_topological(graph, order: list[int]) -> None:
    position = {v: i for i, v in enumerate(order)}
    assert sorted(order) == list(graph.vertices())
    for e in graph.edges():
        assert position[graph.source(e)] < position[graph.target(e)]


# ======================================================================
# TestDepthFirstSearch
# ======================================================================


class TestDepthFirstSearch:
    def test_directed_edge_classification(self) -> None:
        g = from_edge_list([(0, 1), (1, 2), (0, 2), (3, 2), (2, 0)], 4)
        kinds = EdgeKinds()
        depth_first_search(g, visitor=kinds)
        assert kinds.kinds == {
            "tree": [(0, 1), (1, 2)],
            "back": [(2, 0)],
            "forward": [(0, 2)],
            "cross": [(3, 2)],
        }
        assert kinds.roots == [0, 3]

    def test_discover_and_finish_order(self) -> None:
        g = from_edge_list([(0, 1), (1, 2), (0, 3)], 4)
        kinds = EdgeKinds()
        depth_first_search(g, visitor=kinds)
        assert kinds.discovered == [0, 1, 2, 3]
        assert kinds.finished == [2, 1, 3, 0]

    def test_root_searched_first(self) -> None:
        g = from_edge_list([(0, 1), (2, 0)], 3)
        kinds = EdgeKinds()
        depth_first_search(g, visitor=kinds, root=2)
        assert kinds.roots == [2]
        assert kinds.discovered == [2, 0, 1]

    def test_unknown_root(self) -> None:
        with pytest.raises(StaleDescriptorError):
            depth_first_search(RingGraph(3), root=3)

    def test_undirected_tree_has_no_back_edges(self) -> None:
        g = UndirectedStoredGraph(4)
        for u, v in [(0, 1), (0, 2), (2, 3)]:
            g.add_edge(u, v)
        kinds = EdgeKinds()
        depth_first_search(g, visitor=kinds)
        assert kinds.kinds["back"] == []
        assert len(kinds.kinds["tree"]) == 3

    def test_undirected_triangle_reports_one_back_edge(self) -> None:
        g = UndirectedStoredGraph(3)
        for u, v in [(0, 1), (1, 2), (2, 0)]:
            g.add_edge(u, v)
        kinds = EdgeKinds()
        depth_first_search(g, visitor=kinds)
        assert kinds.kinds["back"] == [(2, 0)]
        assert kinds.kinds["forward"] == kinds.kinds["cross"] == []

    def test_deep_chain_does_not_recurse(self) -> None:
        n = 5000
        g = from_edge_list([(i, i + 1) for i in range(n - 1)], n)
        kinds = EdgeKinds()
        depth_first_search(g, visitor=kinds)
        assert kinds.finished[0] == n - 1

    def test_stop_traversal_propagates(self) -> None:
        def stop(graph, v) -> None:
            if v == 2:
                raise StopTraversal

        with pytest.raises(StopTraversal):
            depth_first_search(RingGraph(5), visitor=make_visitor(discover_vertex=stop))


# ======================================================================
# TestCycleDetection
# ======================================================================


class TestCycleDetection:
    def test_dag_has_no_cycle(self, deps) -> None:
        assert has_cycle(deps) is False
        assert find_back_edge(deps) is None

    def test_added_edge_closes_cycle(self, deps, file_id) -> None:
        e, _ = deps.add_edge(file_id["bar.cpp"], file_id["dax.h"])
        assert has_cycle(deps) is True
        assert find_back_edge(deps) == e

    def test_directed_self_loop(self) -> None:
        assert has_cycle(from_edge_list([(0, 0)], 1)) is True

    def test_directed_two_cycle(self) -> None:
        assert has_cycle(from_edge_list([(0, 1), (1, 0)], 2)) is True

    def test_ring_is_cyclic(self, ring5: RingGraph) -> None:
        assert has_cycle(ring5) is True

    def test_two_ring_is_a_single_edge(self) -> None:
        assert has_cycle(RingGraph(2)) is False

    def test_one_ring_self_loop(self) -> None:
        assert has_cycle(RingGraph(1)) is True

    def test_undirected_path_is_acyclic(self) -> None:
        g = from_edge_list([(0, 1), (1, 2)], 3, directedness=Directedness.UNDIRECTED)
        assert has_cycle(g) is False

    def test_undirected_parallel_edges_form_cycle(self) -> None:
        g = UndirectedStoredGraph(2)
        g.add_edge(0, 1)
        g.add_edge(0, 1)
        assert has_cycle(g) is True


# ======================================================================
# TestTopologicalSort
# ======================================================================


class TestTopologicalSort:
    def test_orders_every_edge(self, deps) -> None:
        _assert_topological(deps, topological_sort(deps))

    def test_sources_before_sinks(self, deps, file_id) -> None:
        order = topological_sort(deps)
        assert order.index(file_id["dax.h"]) < order.index(file_id["killerapp"])
        assert order[-1] == file_id["killerapp"]

    def test_reversed_post_order(self) -> None:
        g = from_edge_list([(0, 1), (1, 2), (0, 3)], 4)
        assert topological_sort(g) == [0, 3, 1, 2]

    def test_empty_graph(self) -> None:
        assert topological_sort(from_edge_list([], 0)) == []

    def test_cycle_raises_with_edge(self, deps, file_id) -> None:
        e, _ = deps.add_edge(file_id["bar.cpp"], file_id["dax.h"])
        with pytest.raises(CycleDetectedError) as exc_info:
            topological_sort(deps)
        assert exc_info.value.edge == e

    def test_undirected_rejected(self) -> None:
        g = UndirectedStoredGraph(2)
        with pytest.raises(CapabilityMissingError):
            topological_sort(g)

    def test_extra_visitor_chained(self, deps) -> None:
        finished: list[int] = []
        collect = make_visitor(finish_vertex=lambda graph, v: finished.append(v))
        order = topological_sort(deps, visitor=collect)
        assert order == finished[::-1]
