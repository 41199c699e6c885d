"""Fabric sizing calculators."""

from .clos import ClosSizer, max_users_three_tier, size_clos, three_tier_avg_hops
from .mesh import MESH_SEARCH_LIMIT, MESH_SEARCH_START, MeshSizer, find_mesh, min_fabric_ports, size_mesh

__all__ = [
    "ClosSizer",
    "MESH_SEARCH_LIMIT",
    "MESH_SEARCH_START",
    "MeshSizer",
    "find_mesh",
    "max_users_three_tier",
    "min_fabric_ports",
    "size_clos",
    "size_mesh",
    "three_tier_avg_hops",
]
