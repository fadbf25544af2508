"""Graphviz export."""

from typing import Any

from jinja2 import Environment, PackageLoader

from adjgraph.graph import Graph


def dot_id(value: Any) -> str:
    """Quote value as a DOT identifier."""
    s = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{s}"'


class DotExporter:

    """Renders graphs in the Graphviz DOT language."""

    def __init__(self):
        self.env = Environment(
            loader=PackageLoader("adjgraph", "templates"), autoescape=False,
        )
        self.env.filters["dot_id"] = dot_id
        self.template = self.env.get_template("graph.dot.jinja")

    def render(self, graph: Graph[Any], name: str = "G") -> str:
        """Render graph as a DOT digraph.

        All vertices are declared before the edges so that vertices without
        edges still appear.
        """
        return self.template.render(
            name=name, vertices=graph.vertices(), edges=list(graph.edges()),
        )
