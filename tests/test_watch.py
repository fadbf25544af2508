"""Tests for graph file watching."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, List

from watchdog.events import (
    DirModifiedEvent,
    FileClosedEvent,
    FileCreatedEvent,
    FileModifiedEvent,
    FileMovedEvent,
)

from adjgraph.graph import Graph
from adjgraph.watch import Handler


def make_handler(path: Path) -> tuple:
    loaded: List[Graph[Any]] = []
    return Handler(path, loaded.append), loaded


def test_modified_reloads(write_graph: Callable[..., Path]) -> None:
    path = write_graph("edges: [[A, B]]")
    handler, loaded = make_handler(path)
    handler.on_any_event(FileModifiedEvent(str(path)))
    assert len(loaded) == 1
    assert str(loaded[0]) == "A: B\nB:"


def test_created_and_moved_reload(write_graph: Callable[..., Path]) -> None:
    path = write_graph("edges: [[A, B]]")
    handler, loaded = make_handler(path)
    handler.on_any_event(FileCreatedEvent(str(path)))
    handler.on_any_event(FileMovedEvent(str(path.with_suffix(".tmp")), str(path)))
    assert len(loaded) == 2


def test_ignores_other_files(write_graph: Callable[..., Path]) -> None:
    path = write_graph("edges: []")
    other = write_graph("edges: []", "other.yml")
    handler, loaded = make_handler(path)
    handler.on_any_event(FileModifiedEvent(str(other)))
    handler.on_any_event(DirModifiedEvent(str(path.parent)))
    assert loaded == []


def test_ignores_close_events(write_graph: Callable[..., Path]) -> None:
    path = write_graph("edges: []")
    handler, loaded = make_handler(path)
    handler.on_any_event(FileClosedEvent(str(path)))
    assert loaded == []


def test_deleted_file_is_not_loaded(write_graph: Callable[..., Path]) -> None:
    path = write_graph("edges: []")
    handler, loaded = make_handler(path)
    path.unlink()
    handler.on_any_event(FileModifiedEvent(str(path)))
    assert loaded == []


def test_relative_event_paths(
    write_graph: Callable[..., Path], monkeypatch: Any
) -> None:
    path = write_graph("edges: [[A, B]]")
    monkeypatch.chdir(path.parent)
    handler, loaded = make_handler(Path(path.name))
    handler.on_any_event(FileModifiedEvent(str(path)))
    assert len(loaded) == 1


def test_unreadable_file_is_reported(
    write_graph: Callable[..., Path], caplog: Any
) -> None:
    path = write_graph("")
    path.write_bytes(b"edges: [[A, \xff\xfe]]\n")
    handler, loaded = make_handler(path)
    handler.on_any_event(FileModifiedEvent(str(path)))
    assert f"cannot read {path}" in caplog.text
    assert len(loaded) == 1
    assert loaded[0].num_vertices() == 0


def test_file_removed_before_reload(
    write_graph: Callable[..., Path], caplog: Any
) -> None:
    path = write_graph("edges: [[A, B]]")
    handler, loaded = make_handler(path)
    path.unlink()
    handler.reload()
    assert "cannot read" in caplog.text
    assert loaded[0].num_edges() == 0
