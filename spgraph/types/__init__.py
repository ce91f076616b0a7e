"""Shared type aliases and enums."""

from __future__ import annotations

from spgraph.types.base import INF, Cost, PathStatus

__all__ = ["Cost", "INF", "PathStatus"]
