"""
Node identity helpers.

A node is identified by a number or a string. Python value equality already
gives the identity semantics we want (``1 == 1.0``, ``"1" != 1``); what it
does not give is an ordering across the two cases, which is needed for
canonical undirected edge keys and for deterministic display.
"""

from numbers import Real
from typing import Tuple, Union

NodeId = Union[int, float, str]


def is_numeric_id(node: NodeId) -> bool:
    """Return True if the node id is a number rather than a string."""
    return isinstance(node, Real) and not isinstance(node, bool)


def node_sort_key(node: NodeId) -> Tuple[int, Union[float, str]]:
    """
    Total ordering key for node ids.

    Numbers sort before strings, numbers compare numerically and strings
    lexically.

    Args:
        node: Node id to order

    Returns:
        Tuple usable as a ``sorted`` key
    """
    if is_numeric_id(node):
        return (0, node)
    return (1, str(node))


def canonical_pair(u: NodeId, v: NodeId) -> Tuple[NodeId, NodeId]:
    """Return the two endpoints ordered by ``node_sort_key``."""
    if node_sort_key(v) < node_sort_key(u):
        return (v, u)
    return (u, v)


def format_node_id(node: NodeId) -> str:
    """Render a node id the way the edge notation writes it (``2.0`` -> ``2``)."""
    if isinstance(node, float) and node.is_integer():
        return str(int(node))
    return str(node)
