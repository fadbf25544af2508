"""Graph files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Hashable

import yaml

from adjgraph.config import Config
from adjgraph.graph import Graph, create_graph


class GraphConfig(Config):

    """A graph described in YAML.

    Example:

        name: example
        vertices: [D]
        edges:
          - [A, B]
          - [B, C]
    """

    required = {
        "edges": [],
    }

    optional = {
        "name": None,
        "vertices": [],
        "capacity": None,
    }

    @property
    def name(self) -> str:
        return self.get("name") or self.path.stem


def load_config(path: Path) -> GraphConfig:
    """Load and validate a graph file."""
    logging.info("loading graph %s", path)
    cfg = GraphConfig.load(path)
    cfg.validate()
    return cfg


def load_graph(path: Path) -> Graph[Any]:
    """Load a graph file and build the graph it describes."""
    return build_graph(load_config(path))


def build_graph(cfg: GraphConfig) -> Graph[Any]:
    """Build a graph from a validated GraphConfig.

    Malformed entries are logged as errors and skipped.
    """
    graph: Graph[Any] = create_graph()
    capacity = cfg["capacity"]
    if capacity is not None:
        if isinstance(capacity, int) and not isinstance(capacity, bool):
            graph.ensure_capacity(capacity)
        else:
            logging.error("%s: capacity must be an integer: %r", cfg.path, capacity)
    vertices = cfg["vertices"] or []
    if not isinstance(vertices, list):
        logging.error("%s: vertices must be a list", cfg.path)
        vertices = []
    for vertex in vertices:
        if is_vertex(vertex):
            graph.add_vertex(vertex)
        else:
            logging.error("%s: invalid vertex %r", cfg.path, vertex)
    edges = cfg["edges"] or []
    if not isinstance(edges, list):
        logging.error("%s: edges must be a list", cfg.path)
        edges = []
    for edge in edges:
        if not (isinstance(edge, list) and len(edge) == 2):
            logging.error("%s: invalid edge %r", cfg.path, edge)
            continue
        src, dst = edge
        if not (is_vertex(src) and is_vertex(dst)):
            logging.error("%s: invalid edge %r", cfg.path, edge)
            continue
        graph.add_edge(src, dst)
    logging.debug(
        "%s: %d vertices, %d edges", cfg.path, graph.num_vertices(), graph.num_edges()
    )
    return graph


def is_vertex(value: Any) -> bool:
    """Return True if value can be used as a vertex."""
    if value is None or isinstance(value, (list, dict)):
        return False
    return isinstance(value, Hashable)


def parse_vertex(text: str) -> Any:
    """Parse a command-line vertex the same way as in graph files."""
    try:
        value = yaml.safe_load(text)
    except yaml.YAMLError:
        return text
    if not is_vertex(value):
        return text
    return value
