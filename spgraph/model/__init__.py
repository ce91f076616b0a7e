"""Graph model classes."""

from __future__ import annotations

from spgraph.model.graph import Edge, Node
from spgraph.model.path import PathResult

__all__ = ["Edge", "Node", "PathResult"]
