from __future__ import annotations

import logging

from closmesh_core.models.comparison import DesignComparison
from closmesh_core.models.config import NetworkConfig
from closmesh_core.models.metrics import TopologyMetrics
from closmesh_tools.sizing.clos import size_clos
from closmesh_tools.sizing.mesh import size_mesh

logger = logging.getLogger("closmesh.compare")


def power_per_port(metrics: TopologyMetrics) -> float:
    """Watts per achieved user port, 0 when the design carries no users."""
    if metrics.user_capacity <= 0:
        return 0.0
    return metrics.total_power / metrics.user_capacity


def compare_designs(config: NetworkConfig) -> DesignComparison:
    """Size the Clos fabric, then the mesh at the capacity the Clos achieved."""
    clos = size_clos(config)
    mesh_target = clos.user_capacity if clos.possible else config.num_users
    mesh = size_mesh(config, mesh_target)

    logger.debug(
        "compare %d users: clos %s (%d switches), mesh %s (%d switches)",
        config.num_users,
        clos.possible,
        clos.total_switches,
        mesh.possible,
        mesh.total_switches,
    )

    return DesignComparison(
        config=config,
        clos=clos,
        mesh=mesh,
        mesh_target=mesh_target,
        clos_power_per_port=power_per_port(clos),
        mesh_power_per_port=power_per_port(mesh),
    )
