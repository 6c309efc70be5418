"""Disjoint Labels library initialization."""

from .structures import DisjointSet, LabelOutOfRangeError
from .components import (
    ComponentLabeler,
    ComponentsConfig,
    ComponentsResult,
    ComponentsStats,
    connected_components,
)

__all__ = [
    "DisjointSet",
    "LabelOutOfRangeError",
    "ComponentLabeler",
    "ComponentsConfig",
    "ComponentsResult",
    "ComponentsStats",
    "connected_components",
]
