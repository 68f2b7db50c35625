"""
Conversion between graphs and serializable graph records.

The record is what a storage collaborator keeps; graphkit defines its shape
but not where or how it is stored.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, NamedTuple, Optional

from ..classes.edge import Edge, GraphConfig
from ..classes.node import NodeId
from ..core.graph import Graph
from ..formats.parser import ParserOptions, parse_edge_input

logger = logging.getLogger(__name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class GraphData:
    """
    Serializable description of a graph.

    Attributes:
        id: Identifier assigned by the storage collaborator
        name: Display name
        nodes: Node ids in insertion order (isolated nodes included)
        edges: Logical edges as returned by ``Graph.get_edges``
        config: Graph configuration
        created_at: ISO-8601 creation time
        updated_at: ISO-8601 last update time
        description: Optional free text
    """

    id: str
    name: str
    nodes: List[NodeId] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    config: GraphConfig = field(default_factory=GraphConfig)
    created_at: str = field(default_factory=_timestamp)
    updated_at: str = field(default_factory=_timestamp)
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the plain record handed to storage."""
        record: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "nodes": [{"id": node} for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
            "config": self.config.to_dict(),
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        if self.description is not None:
            record["description"] = self.description
        return record

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "GraphData":
        """
        Build from a plain record.

        Raises:
            KeyError: If ``id`` or ``name`` is missing
        """
        return cls(
            id=record["id"],
            name=record["name"],
            nodes=[node["id"] for node in record.get("nodes", [])],
            edges=[Edge.from_dict(edge) for edge in record.get("edges", [])],
            config=GraphConfig.from_dict(record.get("config")),
            created_at=record.get("createdAt") or _timestamp(),
            updated_at=record.get("updatedAt") or _timestamp(),
            description=record.get("description"),
        )


class BuildResult(NamedTuple):
    graph: Graph
    errors: List[str]
    warnings: List[str]


def build_graph_from_data(data: GraphData) -> Graph:
    """
    Build a live graph from a record.

    Args:
        data: Graph record

    Returns:
        Graph with the record's configuration, nodes and edges
    """
    graph = Graph(data.config)

    for node in data.nodes:
        graph.add_node(node)
    graph.add_edges(data.edges)

    logger.debug(f"Built graph {data.id!r} with {graph.node_count} nodes and {graph.total_edge_count} edges")
    return graph


def graph_to_data(graph: Graph, graph_id: str, name: str, description: Optional[str] = None,
                  created_at: Optional[str] = None) -> GraphData:
    """
    Convert a graph into a record.

    Args:
        graph: Graph to convert
        graph_id: Identifier for the record
        name: Display name
        description: Optional free text
        created_at: Creation time to keep, defaults to now

    Returns:
        GraphData snapshot of the graph
    """
    now = _timestamp()
    return GraphData(
        id=graph_id,
        name=name,
        nodes=graph.get_nodes(),
        edges=graph.get_edges(),
        config=graph.configuration,
        created_at=created_at or now,
        updated_at=now,
        description=description,
    )


def build_graph_from_edges(text: str, directed: bool = False, weighted: bool = False) -> BuildResult:
    """
    Parse edge notation and build a graph from it.

    Args:
        text: Edge notation
        directed: Build a directed graph
        weighted: Mark the graph as weighted

    Returns:
        BuildResult; when the input has errors the graph is empty and the
        errors are returned
    """
    parsed = parse_edge_input(text, ParserOptions(assume_directed=directed))
    graph = Graph(GraphConfig(directed=directed, weighted=weighted))

    if parsed.errors:
        logger.debug(f"Edge input rejected with {len(parsed.errors)} errors")
        return BuildResult(graph, parsed.errors, parsed.warnings)

    graph.add_edges(parsed.edges)
    return BuildResult(graph, [], parsed.warnings)
