"""
Text formats read and written by graphkit.

This module contains the edge notation parser and the DOT generator.
"""

from .parser import EdgeParser, ParserOptions, ParseResult, parse_edge_input, format_edges
from .dot import generate_dot, step_node_colors

__all__ = [
    'EdgeParser',
    'ParserOptions',
    'ParseResult',
    'parse_edge_input',
    'format_edges',
    'generate_dot',
    'step_node_colors',
]
