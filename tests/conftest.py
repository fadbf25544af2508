"""Shared pytest fixtures for adjgraph tests."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator

import pytest

from adjgraph.graph import Graph, create_graph


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def graph() -> Graph[str]:
    return create_graph()


@pytest.fixture
def abc_graph() -> Graph[str]:
    """The graph with edges (A,A), (A,B), (C,A), (C,B)."""
    g: Graph[str] = create_graph()
    for src, dst in [("A", "A"), ("A", "B"), ("C", "A"), ("C", "B")]:
        g.add_edge(src, dst)
    return g


@pytest.fixture
def write_graph(tmp_path: Path) -> Callable[..., Path]:
    """Write a graph file into tmp_path and return its path."""

    def write(content: str, name: str = "graph.yml") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return write
