"""
Edge notation parser.

Turns free text such as ``"1-2:5, 2->3; A<->B"`` into edge records. The
notation is the one textual format graphkit defines:

- ``1-2``     undirected edge
- ``1->2``    directed edge
- ``1<->2``   bidirectional edge (read as undirected)
- ``1-2:5``   weighted edge (``=`` works as separator too)

Segments are separated by commas, semicolons or newlines. A malformed
segment is reported and skipped; it never aborts the rest of the input.
"""

import logging
import math
import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from ..classes.edge import Edge
from ..classes.node import NodeId, format_node_id
from ..config import (
    BIDIRECTIONAL_OPERATOR,
    DEFAULT_WEIGHT,
    DIRECTED_OPERATOR,
    SEGMENT_SEPARATORS,
    UNDIRECTED_OPERATOR,
    WEIGHT_SEPARATORS,
)

logger = logging.getLogger(__name__)

_SEGMENT_SPLIT = re.compile("[" + re.escape(SEGMENT_SEPARATORS) + "]+")
_WEIGHT_SPLIT = re.compile(r"^(.+?)[" + re.escape(WEIGHT_SEPARATORS) + r"](.*)$", re.DOTALL)
# Left-most operator wins; at one position "<->" is tried before "->" before "-"
_EDGE_PATTERN = re.compile(
    r"^(.+?)("
    + "|".join(re.escape(op) for op in (BIDIRECTIONAL_OPERATOR, DIRECTED_OPERATOR, UNDIRECTED_OPERATOR))
    + r")(.+)$",
    re.DOTALL,
)
_NUMBER_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

MIXED_NOTATION_WARNING = (
    "Mixed directed (->) and undirected (-) notation detected. Treating all as undirected"
)


@dataclass
class ParserOptions:
    """
    Options for edge parsing.

    Attributes:
        assume_directed: Caller builds a directed graph; suppresses the
            mixed-notation warning
        default_weight: Weight given to segments without one
    """

    assume_directed: bool = False
    default_weight: float = DEFAULT_WEIGHT


@dataclass
class ParseResult:
    edges: List[Edge] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class SegmentError(ValueError):
    """A single segment could not be parsed."""
    pass


def parse_number(text: str) -> Optional[Union[int, float]]:
    """
    Parse text that is entirely a decimal number.

    Args:
        text: Candidate token, already stripped

    Returns:
        int for integral literals, float for fractional or exponent forms,
        None if the text is not a number
    """
    match = _NUMBER_PATTERN.match(text)
    if match is None:
        return None
    if match.group(2) is None and match.group(3) is None and "." not in text:
        return int(text)
    return float(text)


def parse_node_id(text: str) -> NodeId:
    """
    Convert a node token to a node id.

    Raises:
        SegmentError: If the token is empty
    """
    text = text.strip()
    if not text:
        raise SegmentError("Empty node ID")

    number = parse_number(text)
    if number is not None:
        return number
    return text


class EdgeParser:
    """
    Parser for the textual edge notation.

    Segment results are independent: errors are collected per segment with
    their 1-based position, and successfully parsed segments are kept.
    """

    def __init__(self, options: Optional[ParserOptions] = None):
        """
        Initialize the parser.

        Args:
            options: Parsing options, defaults to undirected with weight 1
        """
        self.options = options if options is not None else ParserOptions()

    def parse(self, text: str) -> ParseResult:
        """
        Parse edge notation.

        Args:
            text: Free-text edge list

        Returns:
            ParseResult with edges, per-segment errors and warnings
        """
        result = ParseResult()
        segments = [segment.strip() for segment in _SEGMENT_SPLIT.split(text or "")]
        segments = [segment for segment in segments if segment]

        if not segments:
            result.errors.append("No edges provided")
            return result

        has_directed = False
        has_undirected = False

        for position, segment in enumerate(segments, start=1):
            try:
                edge, directed = self._parse_segment(segment)
            except SegmentError as e:
                result.errors.append(f"Line {position}: {e}")
                continue

            if directed:
                has_directed = True
            else:
                has_undirected = True
            result.edges.append(edge)

        if has_directed and has_undirected and not self.options.assume_directed:
            result.warnings.append(MIXED_NOTATION_WARNING)

        logger.debug(f"Parsed {len(result.edges)} edges from {len(segments)} segments "
                     f"({len(result.errors)} errors, {len(result.warnings)} warnings)")
        return result

    def _parse_segment(self, segment: str) -> Tuple[Edge, bool]:
        """
        Parse one segment.

        Returns:
            The edge and whether the segment used directed notation
        """
        weight = None
        edge_part = segment

        weight_match = _WEIGHT_SPLIT.match(segment)
        if weight_match:
            edge_part = weight_match.group(1).strip()
            weight_text = weight_match.group(2).strip()
            weight = parse_number(weight_text)
            if weight is None or not math.isfinite(weight):
                raise SegmentError(f'Invalid weight: "{weight_text}"')

        edge_match = _EDGE_PATTERN.match(edge_part)
        if edge_match is None:
            raise SegmentError(
                f'Invalid edge format: "{segment}". Use formats like "1-2", "1->2", or "1-2:5"'
            )

        source = parse_node_id(edge_match.group(1))
        operator = edge_match.group(2)
        target = parse_node_id(edge_match.group(3))

        if weight is None and self.options.default_weight != DEFAULT_WEIGHT:
            weight = self.options.default_weight

        return Edge(source, target, weight), operator == DIRECTED_OPERATOR


def parse_edge_input(text: str, options: Optional[ParserOptions] = None) -> ParseResult:
    """Parse edge notation with the given options."""
    return EdgeParser(options).parse(text)


def format_edges(edges: Sequence[Edge], directed: bool = False) -> str:
    """
    Render edges back to edge notation.

    Args:
        edges: Edges to render
        directed: Use ``->`` instead of ``-``

    Returns:
        Comma-separated notation, e.g. ``"1-2:5, 2-3"``
    """
    operator = DIRECTED_OPERATOR if directed else UNDIRECTED_OPERATOR
    parts = []
    for edge in edges:
        text = f"{format_node_id(edge.source)}{operator}{format_node_id(edge.target)}"
        if edge.weight is not None:
            text += f":{format_node_id(edge.weight)}"
        parts.append(text)
    return ", ".join(parts)
