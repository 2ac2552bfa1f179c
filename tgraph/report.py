"""Text reports about graphs."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from jinja2 import Environment, PackageLoader

from tgraph.graph import Graph


class Reporter:

    """Renders graph reports from the package templates."""

    def __init__(self):
        self.env = Environment(
            loader=PackageLoader("tgraph", "templates"),
            autoescape=False,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self.show_template = self.env.get_template("show.txt.jinja")
        self.check_template = self.env.get_template("check.txt.jinja")

    def show(self, graph: Graph) -> str:
        """Describe each vertex and its neighbours, in breadth-first order."""
        vertices: List[Dict[str, Any]] = []
        for vid in graph.traverse_bfs():
            adjacents = []
            for adj in graph.get_adjacents(vid) or []:
                if adj not in graph:
                    logging.warning("vertex %d has an edge to unknown vertex %d", vid, adj)
                adjacents.append({"id": adj, "value": graph.get_vertex_value(adj)})
            vertices.append(
                {"id": vid, "value": graph.get_vertex_value(vid), "adjacents": adjacents}
            )
        return self.show_template.render(vertices=vertices)

    def check(self, graph: Graph, path: Union[str, Path]) -> str:
        """Summarize vertex and edge counts."""
        edges = list(graph.edge_items())
        dangling = [str(edge) for edge, _ in edges if edge.dst not in graph]
        return self.check_template.render(
            path=path,
            vertex_count=len(graph),
            edge_count=len(edges),
            dangling=dangling,
        )
