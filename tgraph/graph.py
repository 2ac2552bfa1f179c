"""Generic directed graph structure."""

from __future__ import annotations

import logging
import sys
from collections import deque
from pathlib import Path
from typing import (
    Callable,
    Deque,
    Dict,
    Generic,
    Iterator,
    List,
    Optional,
    Set,
    TextIO,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from tgraph import tgf
from tgraph.edge import MAX_VERTEX_ID, OrientedEdge, VertexId
from tgraph.errors import FileIOError

__all__ = ["Graph", "MAX_VERTEX_ID", "OrientedEdge", "VertexId"]

V = TypeVar("V")
E = TypeVar("E")
G = TypeVar("G", bound="Graph")


class Graph(Generic[V, E]):

    """A directed graph.

    Vertices are identified by caller-supplied ids and hold values of type V.
    Edges hold values of type E. Both value types must render to text with
    str() and parse from text with a callable, for serialization.

    Every vertex id has an entry in both the vertices and adjacency mappings.
    An edge only requires its source to be a vertex: edges pointing to unknown
    ids are allowed, and are only removed when that id is removed as a vertex.

    Lookups of unknown ids return None rather than raising.
    """

    def __init__(self):
        self.vertices: Dict[VertexId, V] = {}
        self.adjacency: Dict[VertexId, Dict[VertexId, E]] = {}

    def __repr__(self) -> str:
        edges = sum(len(row) for row in self.adjacency.values())
        return f"Graph(V={len(self.vertices)}, E={edges})"

    def __len__(self) -> int:
        return len(self.vertices)

    def __contains__(self, vid: object) -> bool:
        return vid in self.vertices

    def insert_node(self, vid: VertexId, value: V) -> Optional[V]:
        """Insert or overwrite a vertex, returning its previous value."""
        self.adjacency.setdefault(vid, {})
        previous = self.vertices.get(vid)
        self.vertices[vid] = value
        return previous

    def remove_node(self, vid: VertexId) -> Optional[V]:
        """Remove a vertex with its outgoing and incoming edges.

        Returns the removed value, or None if there was no such vertex. This
        scans every adjacency row.
        """
        for row in self.adjacency.values():
            row.pop(vid, None)
        self.adjacency.pop(vid, None)
        return self.vertices.pop(vid, None)

    def insert_edge(self, edge: OrientedEdge, value: E) -> Optional[E]:
        """Insert or overwrite an edge, returning its previous value.

        Does nothing and returns None if edge.src is not a vertex. The
        destination is not checked.
        """
        row = self.adjacency.get(edge.src)
        if row is None:
            logging.debug("edge %s ignored: no vertex %d", edge, edge.src)
            return None
        previous = row.get(edge.dst)
        row[edge.dst] = value
        return previous

    def remove_edge(self, edge: OrientedEdge) -> Optional[E]:
        """Remove an edge, returning its value, or None if it did not exist."""
        row = self.adjacency.get(edge.src)
        if row is None:
            return None
        return row.pop(edge.dst, None)

    def get_adjacents(self, vid: VertexId) -> Optional[List[VertexId]]:
        """Return the destinations of vid's outgoing edges.

        The order is unspecified. Returns None if vid is not a vertex.
        """
        row = self.adjacency.get(vid)
        if row is None:
            return None
        return list(row)

    def get_vertex_value(self, vid: VertexId) -> Optional[V]:
        return self.vertices.get(vid)

    def get_edge_value(self, edge: OrientedEdge) -> Optional[E]:
        row = self.adjacency.get(edge.src)
        if row is None:
            return None
        return row.get(edge.dst)

    def vertex_ids(self) -> Iterator[VertexId]:
        return iter(self.vertices)

    def vertex_items(self) -> Iterator[Tuple[VertexId, V]]:
        return iter(self.vertices.items())

    def edge_items(self) -> Iterator[Tuple[OrientedEdge, E]]:
        """Iterate over all edges and their values."""
        for src, row in self.adjacency.items():
            for dst, value in row.items():
                yield OrientedEdge(src, dst), value

    def traverse_bfs(self) -> List[VertexId]:
        """Return every vertex id once, in breadth-first order.

        Each unvisited vertex starts a new search, so all components are
        covered. Component order and sibling order follow dict iteration order
        and should not be relied on. Edges to unknown ids are not followed.
        """
        order: List[VertexId] = []
        visited: Set[VertexId] = set()
        queue: Deque[VertexId] = deque()
        for start in self.vertices:
            if start in visited:
                continue
            visited.add(start)
            queue.append(start)
            while queue:
                current = queue.popleft()
                order.append(current)
                for adjacent in self.adjacency[current]:
                    if adjacent not in visited and adjacent in self.vertices:
                        visited.add(adjacent)
                        queue.append(adjacent)
        return order

    def dumps(self) -> str:
        """Return the TGF text for this graph."""
        return tgf.render(self.vertex_items(), self.edge_items())

    def dump(self, out: Optional[TextIO] = None):
        """Dump a textual representation of this graph to out (default stdout)."""
        out = out or sys.stdout
        out.write(self.dumps())

    def serialize_to(self, path: Union[str, Path]):
        """Write the graph to path in TGF, replacing any existing content.

        Raises FormatError if a value cannot be rendered (the file is left
        untouched in that case) and FileIOError if the write fails.
        """
        text = self.dumps()
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as ex:
            raise FileIOError(path, ex.strerror or str(ex)) from ex
        logging.info("wrote %r to %s", self, path)

    @classmethod
    def loads(
        cls: Type[G],
        text: str,
        vertex_type: Callable[[str], V] = str,
        edge_type: Callable[[str], E] = str,
    ) -> G:
        """Build a graph from TGF text.

        Edges whose source was not declared as a vertex are dropped.
        """
        vertices, edges = tgf.parse(text, vertex_type, edge_type)
        graph = cls()
        for vid, value in vertices:
            graph.insert_node(vid, value)
        for edge, value in edges:
            graph.insert_edge(edge, value)
        return graph

    @classmethod
    def deserialize_from(
        cls: Type[G],
        path: Union[str, Path],
        vertex_type: Callable[[str], V] = str,
        edge_type: Callable[[str], E] = str,
    ) -> G:
        """Read a graph from a TGF file.

        Raises FileIOError, FormatError, or ParseError. Nothing is returned
        unless the whole file is valid.
        """
        try:
            with open(path, encoding="utf-8") as f:
                text = f.read()
        except OSError as ex:
            raise FileIOError(path, ex.strerror or str(ex)) from ex
        except UnicodeDecodeError as ex:
            raise FileIOError(path, f"not valid text: {ex.reason}") from ex
        graph = cls.loads(text, vertex_type, edge_type)
        logging.info("read %r from %s", graph, path)
        return graph
