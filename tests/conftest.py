"""Shared fixtures for graphwalk tests."""

from __future__ import annotations

import pytest

from graphwalk import (
    BidirectionalStoredGraph,
    Directedness,
    RingGraph,
    from_edge_list,
)

FILES = [
    "dax.h", "yow.h", "boz.h", "zow.h", "foo.cpp",
    "foo.o", "bar.cpp", "bar.o", "libfoobar.a",
    "zig.cpp", "zig.o", "zag.cpp", "zag.o",
    "libzigzag.a", "killerapp",
]  # fmt: skip
F = {name: i for i, name in enumerate(FILES)}

USED_BY = [
    ("dax.h", "foo.cpp"), ("dax.h", "bar.cpp"), ("dax.h", "yow.h"),
    ("yow.h", "bar.cpp"), ("yow.h", "zag.cpp"),
    ("boz.h", "bar.cpp"), ("boz.h", "zig.cpp"), ("boz.h", "zag.cpp"),
    ("zow.h", "foo.cpp"),
    ("foo.cpp", "foo.o"),
    ("foo.o", "libfoobar.a"),
    ("bar.cpp", "bar.o"),
    ("bar.o", "libfoobar.a"),
    ("libfoobar.a", "libzigzag.a"),
    ("zig.cpp", "zig.o"),
    ("zig.o", "libzigzag.a"),
    ("zag.cpp", "zag.o"),
    ("zag.o", "libzigzag.a"),
    ("libzigzag.a", "killerapp"),
]  # fmt: skip


@pytest.fixture
def deps() -> BidirectionalStoredGraph:
    """File dependency DAG: an edge ``a -> b`` means *b* is built from *a*."""
    graph = from_edge_list(
        [(F[a], F[b]) for a, b in USED_BY],
        len(FILES),
        directedness=Directedness.BIDIRECTIONAL,
    )
    name = graph.vertex_property("name")
    for i, file_name in enumerate(FILES):
        name[i] = file_name
    assert isinstance(graph, BidirectionalStoredGraph)
    return graph


@pytest.fixture
def file_id() -> dict[str, int]:
    """Vertex index of each file in the ``deps`` graph."""
    return dict(F)


@pytest.fixture
def ring5() -> RingGraph:
    return RingGraph(5)
