"""Generic directed graph with a plain-text file format."""

from tgraph.errors import FileIOError, FormatError, GraphFileError, ParseError
from tgraph.graph import MAX_VERTEX_ID, Graph, OrientedEdge, VertexId

__all__ = [
    "FileIOError",
    "FormatError",
    "Graph",
    "GraphFileError",
    "MAX_VERTEX_ID",
    "OrientedEdge",
    "ParseError",
    "VertexId",
]
