"""Adjacency record for a single vertex."""

from __future__ import annotations

from typing import Generic, Hashable, List, Set, Tuple, TypeVar

V = TypeVar("V", bound=Hashable)


class Vertex(Generic[V]):

    """A vertex and the targets of its outgoing edges.

    Targets are kept in insertion order without duplicates. Records are owned
    by a Graph; callers only ever see snapshots of the targets.
    """

    def __init__(self, source: V):
        self._source = source
        self._targets: List[V] = []
        self._target_set: Set[V] = set()

    def __repr__(self) -> str:
        return f"Vertex(source={self._source!r}, targets={self._targets!r})"

    def __str__(self) -> str:
        if not self._targets:
            return f"{self._source}:"
        targets = ", ".join(str(t) for t in self._targets)
        return f"{self._source}: {targets}"

    @property
    def source(self) -> V:
        return self._source

    @property
    def degree(self) -> int:
        return len(self._targets)

    def add_edge(self, target: V) -> bool:
        """Add an edge to target. Returns False if it already existed."""
        if self.has_edge(target):
            return False
        self._targets.append(target)
        self._target_set.add(target)
        return True

    def has_edge(self, target: V) -> bool:
        return target in self._target_set

    def is_adjacent(self, target: V) -> bool:
        """Same as has_edge: True if there is an edge to target."""
        return self.has_edge(target)

    def edges(self) -> Tuple[V, ...]:
        return tuple(self._targets)
