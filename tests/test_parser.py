"""
Unit tests for the edge notation parser.
"""

import pytest

from graphkit.classes.edge import Edge
from graphkit.formats.parser import (
    MIXED_NOTATION_WARNING,
    EdgeParser,
    ParserOptions,
    format_edges,
    parse_edge_input,
    parse_node_id,
    parse_number,
    SegmentError,
)


class TestNumbers:
    """Test number and node id conversion."""

    def test_integer(self):
        assert parse_number("42") == 42
        assert isinstance(parse_number("42"), int)

    def test_float(self):
        assert parse_number("2.5") == 2.5
        assert parse_number("1e3") == 1000.0

    def test_negative(self):
        assert parse_number("-5") == -5

    def test_not_a_number(self):
        assert parse_number("abc") is None
        assert parse_number("1a") is None

    def test_node_id_string_and_number(self):
        assert parse_node_id(" A ") == "A"
        assert parse_node_id("7") == 7

    def test_empty_node_id_raises(self):
        with pytest.raises(SegmentError, match="Empty node ID"):
            parse_node_id("  ")


class TestEdgeParsing:
    """Test parsing of full inputs."""

    def test_undirected_edges(self):
        result = parse_edge_input("1-2, 2-3")
        assert result.ok
        assert result.edges == [Edge(1, 2), Edge(2, 3)]
        assert result.warnings == []

    def test_all_separators(self):
        result = parse_edge_input("1-2;2-3\n3-4")
        assert [(e.source, e.target) for e in result.edges] == [(1, 2), (2, 3), (3, 4)]

    def test_weights_with_colon_and_equals(self):
        result = parse_edge_input("A-B:5, B-C=2.5")
        assert result.edges == [Edge("A", "B", 5), Edge("B", "C", 2.5)]

    def test_negative_weight(self):
        result = parse_edge_input("1->2:-5", ParserOptions(assume_directed=True))
        assert result.edges == [Edge(1, 2, -5)]

    def test_bidirectional_operator(self):
        result = parse_edge_input("A<->B")
        assert result.edges == [Edge("A", "B")]
        assert result.warnings == []

    def test_string_node_ids(self):
        result = parse_edge_input("Paris - London")
        assert result.edges == [Edge("Paris", "London")]

    def test_empty_input(self):
        result = parse_edge_input("")
        assert result.errors == ["No edges provided"]
        assert result.edges == []

    def test_whitespace_only_input(self):
        assert parse_edge_input(" ,, ;\n").errors == ["No edges provided"]

    def test_invalid_segment_is_reported_and_skipped(self):
        result = parse_edge_input("1-2, nonsense, 3-4")
        assert len(result.edges) == 2
        assert len(result.errors) == 1
        assert result.errors[0].startswith('Line 2: Invalid edge format: "nonsense"')

    def test_invalid_weight(self):
        result = parse_edge_input("1-2:abc")
        assert result.errors == ['Line 1: Invalid weight: "abc"']
        assert not result.ok

    def test_mixed_notation_warning(self):
        result = parse_edge_input("1->2, 2-3")
        assert len(result.edges) == 2
        assert result.warnings == [MIXED_NOTATION_WARNING]

    def test_mixed_notation_suppressed_for_directed(self):
        result = parse_edge_input("1->2, 2-3", ParserOptions(assume_directed=True))
        assert result.warnings == []

    def test_default_weight_applied(self):
        parser = EdgeParser(ParserOptions(default_weight=3))
        result = parser.parse("1-2, 2-3:7")
        assert result.edges == [Edge(1, 2, 3), Edge(2, 3, 7)]


class TestFormatting:
    """Test rendering edges back to notation."""

    def test_format_undirected(self):
        assert format_edges([Edge(1, 2, 5), Edge(2, 3)]) == "1-2:5, 2-3"

    def test_format_directed(self):
        assert format_edges([Edge("A", "B")], directed=True) == "A->B"

    def test_format_parses_back(self):
        edges = [Edge(1, 2, 5), Edge("x", 3)]
        assert parse_edge_input(format_edges(edges)).edges == edges
