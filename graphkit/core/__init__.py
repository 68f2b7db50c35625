"""
Core graph data structures and management.

This module contains the fundamental graph representation. The GraphKit
facade lives in ``graphkit.core.graphkit`` and is exported from the top-level
package.
"""

from .graph import Graph

__all__ = ['Graph']
