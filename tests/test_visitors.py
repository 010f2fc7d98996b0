"""Tests for visitor composition helpers."""

from __future__ import annotations

import pytest

from graphwalk import (
    DistanceRecorder,
    PredecessorRecorder,
    RingGraph,
    Visitor,
    VisitorChain,
    breadth_first_search,
    chain,
    make_visitor,
)


class Tagger(Visitor):
    def __init__(self, tag: str, log: list[str]) -> None:
        self.tag = tag
        self.log = log

    def discover_vertex(self, graph, v) -> None:
        self.log.append(f"{self.tag}:{v}")


class TestBaseVisitor:
    def test_every_event_is_a_no_op(self) -> None:
        vis = Visitor()
        ring = RingGraph(3)
        vis.discover_vertex(ring, 0)
        vis.tree_edge(ring, (0, 1))
        vis.cycle(ring, (0, 1, 2))


class TestMakeVisitor:
    def test_callbacks_bound_to_events(self) -> None:
        seen: list[int] = []
        vis = make_visitor(finish_vertex=lambda graph, v: seen.append(v))
        breadth_first_search(RingGraph(3), 0, visitor=vis)
        assert seen == [0, 1, 2]

    def test_unknown_event_rejected(self) -> None:
        with pytest.raises(TypeError, match="discover_vertx"):
            make_visitor(discover_vertx=lambda graph, v: None)

    def test_unset_events_stay_no_ops(self) -> None:
        vis = make_visitor(discover_vertex=lambda graph, v: None)
        vis.tree_edge(RingGraph(3), (0, 1))


class TestChain:
    def test_none_dropped(self) -> None:
        vis = Visitor()
        assert chain(None, vis, None) is vis

    def test_empty_chain_is_no_op_visitor(self) -> None:
        assert type(chain()) is Visitor

    def test_fan_out_in_order(self) -> None:
        log: list[str] = []
        combined = chain(Tagger("a", log), Tagger("b", log))
        assert isinstance(combined, VisitorChain)
        breadth_first_search(RingGraph(3), 0, visitor=combined)
        assert log[:4] == ["a:0", "b:0", "a:1", "b:1"]

    def test_visitors_property(self) -> None:
        a, b = Visitor(), Visitor()
        assert VisitorChain(a, b).visitors == (a, b)

    def test_nested_chains(self) -> None:
        log: list[str] = []
        inner = chain(Tagger("a", log), Tagger("b", log))
        outer = chain(inner, Tagger("c", log))
        outer.discover_vertex(RingGraph(1), 0)
        assert log == ["a:0", "b:0", "c:0"]

    def test_exception_stops_remaining_visitors(self) -> None:
        log: list[str] = []

        class Boom(Visitor):
            def discover_vertex(self, graph, v) -> None:
                raise RuntimeError("boom")

        combined = chain(Boom(), Tagger("late", log))
        with pytest.raises(RuntimeError, match="boom"):
            combined.discover_vertex(RingGraph(1), 0)
        assert log == []


class TestRecorders:
    def test_distance_and_predecessor_recorders(self) -> None:
        ring = RingGraph(6)
        distance = [0] * 6
        predecessor = [None] * 6
        predecessor[0] = 0
        breadth_first_search(
            ring,
            0,
            visitor=chain(DistanceRecorder(distance), PredecessorRecorder(predecessor)),
        )
        assert distance == [0, 1, 2, 3, 2, 1]
        assert predecessor == [0, 0, 1, 2, 5, 0]
