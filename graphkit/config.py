"""
Configuration constants for graphkit.

Tunable defaults shared across the package live here. The library never
configures logging on import; call ``configure_logging`` from an application
or a script if log output is wanted.
"""

import logging
import os
from typing import Optional, Union

# =============================================================================
# Graph Configuration
# =============================================================================

# Weight assumed for edges that carry no explicit weight
DEFAULT_WEIGHT = 1

# =============================================================================
# Edge Notation
# =============================================================================

# Characters separating edge segments in free-text input
SEGMENT_SEPARATORS = ",;\n"

# Characters separating an edge from its weight ("1-2:5", "1-2=5")
WEIGHT_SEPARATORS = ":="

# Edge operators in precedence order
DIRECTED_OPERATOR = "->"
BIDIRECTIONAL_OPERATOR = "<->"
UNDIRECTED_OPERATOR = "-"

# =============================================================================
# Visualization Configuration
# =============================================================================

# Node colors derived from algorithm steps
COLOR_CURRENT = "orange"
COLOR_VISITED = "lightgreen"
COLOR_UNVISITED = "lightgray"
COLOR_NEUTRAL = "lightblue"

# DOT output defaults
DOT_DEFAULT_FILL = "lightblue"
DOT_HIGHLIGHT_FILL = "yellow"
DOT_DEFAULT_EDGE = "black"
DOT_HIGHLIGHT_EDGE = "red"
DOT_FONT = "Arial"

# =============================================================================
# Template Configuration
# =============================================================================

# Inclusive range of random weights for weighted templates
TEMPLATE_WEIGHT_MIN = 1
TEMPLATE_WEIGHT_MAX = 10

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("GRAPHKIT_LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Args:
        level: Log level name or number, defaults to ``LOG_LEVEL``

    Returns:
        The configured ``graphkit`` logger
    """
    logger = logging.getLogger("graphkit")
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
