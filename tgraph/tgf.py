"""Trivial graph format (TGF) codec.

The format is line oriented:

    <id> <vertex value>
    ...
    #
    <src> <dst> <edge value>
    ...

The first "#" in the text separates the vertex section from the edge section.
Values are everything after the last delimiter on a line, so they may contain
spaces, but ids may not.
"""

import logging
import re
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, TypeVar

from tgraph.edge import MAX_VERTEX_ID, OrientedEdge, VertexId
from tgraph.errors import FormatError, ParseError

V = TypeVar("V")
E = TypeVar("E")

SEPARATOR = "#"
DELIMITER = " "

VertexRecord = Tuple[VertexId, Any]
EdgeRecord = Tuple[OrientedEdge, Any]

_ID_RE = re.compile(r"\+?[0-9]+")


def render(vertices: Iterable[VertexRecord], edges: Iterable[EdgeRecord]) -> str:
    """Render vertex and edge records to TGF text.

    Raises FormatError if a value cannot be rendered, or if its rendering
    could not be parsed back (empty or whitespace-padded values, line breaks
    anywhere, "#" in vertex values).
    """
    lines: List[str] = []
    for vid, value in vertices:
        text = _render_value(value, f"vertex {vid}")
        if SEPARATOR in text:
            raise FormatError(f"vertex {vid}: value {text!r} contains {SEPARATOR!r}")
        lines.append(f"{vid}{DELIMITER}{text}\n")
    lines.append(f"{SEPARATOR}\n")
    for edge, value in edges:
        text = _render_value(value, f"edge {edge}")
        lines.append(f"{edge.src}{DELIMITER}{edge.dst}{DELIMITER}{text}\n")
    return "".join(lines)


def _render_value(value: Any, what: str) -> str:
    try:
        text = str(value)
    except Exception as ex:
        raise FormatError(f"{what}: cannot render value: {ex}") from ex
    if "\n" in text or "\r" in text:
        raise FormatError(f"{what}: value {text!r} contains a line break")
    if not text or text != text.strip():
        # Values are trimmed when parsed.
        raise FormatError(f"{what}: value {text!r} is empty or padded with whitespace")
    return text


def parse(
    text: str, vertex_type: Callable[[str], V], edge_type: Callable[[str], E],
) -> Tuple[List[Tuple[VertexId, V]], List[Tuple[OrientedEdge, E]]]:
    """Parse TGF text into vertex and edge records.

    Records are returned in file order. Stops at the first error, raising
    FormatError or ParseError.
    """
    head, sep, tail = text.partition(SEPARATOR)
    if not sep:
        raise FormatError(f"{SEPARATOR!r} separator is missing")

    vertices = []
    for lineno, line in _section_lines(head, 0):
        id_token, sep, value_token = line.partition(DELIMITER)
        if not sep:
            raise FormatError("value for each vertex is required", lineno)
        vid = parse_vertex_id(id_token, lineno)
        value = _parse_value(value_token, vertex_type, lineno)
        vertices.append((vid, value))

    # The edge section starts on the separator's line.
    edges = []
    for lineno, line in _section_lines(tail, head.count("\n")):
        src_token, sep, rest = line.partition(DELIMITER)
        if not sep:
            raise FormatError("destination vertex is missing", lineno)
        dst_token, sep, value_token = rest.partition(DELIMITER)
        if not sep:
            raise FormatError("edge value is missing", lineno)
        edge = OrientedEdge(
            parse_vertex_id(src_token, lineno), parse_vertex_id(dst_token, lineno)
        )
        value = _parse_value(value_token, edge_type, lineno)
        edges.append((edge, value))

    logging.debug("parsed %d vertices and %d edges", len(vertices), len(edges))
    return vertices, edges


def _section_lines(section: str, offset: int) -> Iterator[Tuple[int, str]]:
    """Yield (line number, line) for non-blank lines of a trimmed section.

    The offset is the number of newlines preceding the section in the text.
    """
    stripped = section.lstrip()
    offset += section[: len(section) - len(stripped)].count("\n")
    for i, line in enumerate(stripped.rstrip().split("\n")):
        if line.strip():
            yield offset + i + 1, line.rstrip("\r")


def parse_vertex_id(token: str, line: Optional[int] = None) -> VertexId:
    """Parse a decimal unsigned 32-bit vertex id."""
    token = token.strip()
    if not _ID_RE.fullmatch(token):
        raise ParseError(token, "vertex id", line) from ValueError(
            "expected decimal digits"
        )
    vid = int(token)
    if vid > MAX_VERTEX_ID:
        raise ParseError(token, "vertex id", line) from OverflowError(
            f"vertex id exceeds {MAX_VERTEX_ID}"
        )
    return vid


def _parse_value(token: str, value_type: Callable[[str], V], line: int) -> V:
    token = token.strip()
    try:
        return value_type(token)
    except (ValueError, TypeError, ArithmeticError) as ex:
        name = getattr(value_type, "__name__", repr(value_type))
        raise ParseError(token, name, line) from ex
