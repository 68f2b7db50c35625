"""
DOT output for the rendering collaborator.

graphkit never renders images. It hands a layout engine the topology as DOT
text plus per-node colors derived from algorithm steps.
"""

import logging
from typing import Dict, Iterable, Optional, Set, Tuple, Union

from ..classes.node import NodeId, canonical_pair, format_node_id
from ..classes.steps import (
    ComponentStep,
    DijkstraStep,
    FloydWarshallStep,
    SpanningTreeStep,
    StepKind,
    TraversalStep,
)
from ..config import (
    COLOR_CURRENT,
    COLOR_NEUTRAL,
    COLOR_UNVISITED,
    COLOR_VISITED,
    DEFAULT_WEIGHT,
    DOT_DEFAULT_EDGE,
    DOT_DEFAULT_FILL,
    DOT_FONT,
    DOT_HIGHLIGHT_EDGE,
    DOT_HIGHLIGHT_FILL,
)
from ..core.graph import Graph

logger = logging.getLogger(__name__)

AnyStep = Union[TraversalStep, DijkstraStep, FloydWarshallStep, ComponentStep, SpanningTreeStep]


def _quote(node: NodeId) -> str:
    text = format_node_id(node).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def generate_dot(graph: Graph,
                 highlight_nodes: Iterable[NodeId] = (),
                 highlight_edges: Iterable[Tuple[NodeId, NodeId]] = (),
                 node_colors: Optional[Dict[NodeId, str]] = None,
                 show_weights: Optional[bool] = None,
                 rankdir: str = "TB") -> str:
    """
    Generate a DOT description of a graph.

    Args:
        graph: Graph to describe
        highlight_nodes: Nodes filled with the highlight color
        highlight_edges: Edges drawn in the highlight color; for undirected
            graphs either orientation matches
        node_colors: Explicit fill colors, taking precedence over highlights
        show_weights: Label edges with weights other than 1, defaults to the
            graph's weighted flag
        rankdir: Layout direction (TB, LR, BT, RL)

    Returns:
        DOT source text
    """
    if show_weights is None:
        show_weights = graph.is_weighted
    node_colors = node_colors or {}
    highlighted_nodes = set(highlight_nodes)

    highlighted_edges: Set[Tuple[NodeId, NodeId]] = set()
    for source, target in highlight_edges:
        highlighted_edges.add(canonical_pair(source, target) if not graph.is_directed else (source, target))

    graph_type = "digraph" if graph.is_directed else "graph"
    edge_op = "->" if graph.is_directed else "--"

    lines = [
        f"{graph_type} G {{",
        f"  rankdir={rankdir};",
        f'  node [shape=circle, style=filled, fillcolor={DOT_DEFAULT_FILL}, fontname="{DOT_FONT}"];',
        f'  edge [fontname="{DOT_FONT}"];',
        "",
    ]

    for node in graph.get_nodes():
        fill = node_colors.get(node)
        if fill is None:
            fill = DOT_HIGHLIGHT_FILL if node in highlighted_nodes else DOT_DEFAULT_FILL
        lines.append(f'  {_quote(node)} [fillcolor="{fill}"];')

    lines.append("")

    for edge in graph.get_edges():
        key = (edge.source, edge.target) if graph.is_directed else canonical_pair(edge.source, edge.target)
        is_highlighted = key in highlighted_edges

        attrs = [
            f'color="{DOT_HIGHLIGHT_EDGE if is_highlighted else DOT_DEFAULT_EDGE}"',
            f"penwidth={'2.0' if is_highlighted else '1.0'}",
        ]
        if show_weights and edge.effective_weight != DEFAULT_WEIGHT:
            attrs.append(f'label="{format_node_id(edge.effective_weight)}"')

        lines.append(f"  {_quote(edge.source)} {edge_op} {_quote(edge.target)} [{', '.join(attrs)}];")

    lines.append("}")
    return "\n".join(lines) + "\n"


def step_node_colors(graph: Graph, step: AnyStep) -> Dict[NodeId, str]:
    """
    Color every node for one step of an algorithm trace.

    The step's current node is highlighted, visited nodes are marked and the
    rest are greyed out. Spanning tree and Floyd-Warshall steps have no
    current node, so every node gets the neutral color.

    Args:
        graph: Graph the trace was recorded on
        step: Step record

    Returns:
        Node -> color name
    """
    if step.kind is StepKind.TRAVERSAL or step.kind is StepKind.COMPONENT:
        current = step.node
        visited = set(step.visited)
    elif step.kind is StepKind.DIJKSTRA:
        current = step.current_node
        visited = set(step.visited)
    else:
        return {node: COLOR_NEUTRAL for node in graph.get_nodes()}

    colors: Dict[NodeId, str] = {}
    for node in graph.get_nodes():
        if node == current:
            colors[node] = COLOR_CURRENT
        elif node in visited:
            colors[node] = COLOR_VISITED
        else:
            colors[node] = COLOR_UNVISITED
    return colors
