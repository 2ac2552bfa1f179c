"""Vertex identifiers and directed edge addresses."""

from typing import NamedTuple

VertexId = int

# Vertex ids are unsigned 32-bit integers in the file format.
MAX_VERTEX_ID = 2 ** 32 - 1


class OrientedEdge(NamedTuple):

    """A directed edge slot from src to dst.

    Edges are not stored as OrientedEdge objects. This only addresses an entry
    in the adjacency of a graph.
    """

    src: VertexId
    dst: VertexId

    def __str__(self) -> str:
        return f"{self.src}->{self.dst}"
