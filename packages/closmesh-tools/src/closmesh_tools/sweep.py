"""Capacity sweep across a range of requested user ports."""

from __future__ import annotations

import logging

from closmesh_core.models.comparison import SweepPoint
from closmesh_core.models.config import NetworkConfig
from closmesh_tools.compare import compare_designs
from closmesh_tools.sizing.common import round_half_up

logger = logging.getLogger("closmesh.sweep")

DEFAULT_SWEEP_START = 128
DEFAULT_SWEEP_STOP = 1024
DEFAULT_SWEEP_STEP = 128


def sweep_capacity(
    config: NetworkConfig,
    *,
    start: int = DEFAULT_SWEEP_START,
    stop: int = DEFAULT_SWEEP_STOP,
    step: int = DEFAULT_SWEEP_STEP,
) -> list[SweepPoint]:
    """Compare both designs for every user count in ``start..stop`` (inclusive).

    Only points where both designs are feasible are returned. Every other
    configuration field is taken from ``config``.
    """
    if step <= 0:
        raise ValueError(f"step must be positive (got {step})")
    if start > stop:
        raise ValueError(f"start ({start}) must not exceed stop ({stop})")

    points: list[SweepPoint] = []
    for num_users in range(start, stop + 1, step):
        result = compare_designs(config.model_copy(update={"num_users": num_users}))
        if not result.both_possible:
            logger.debug("sweep skips %d users: a design is infeasible", num_users)
            continue

        points.append(
            SweepPoint(
                num_users=num_users,
                clos_switches=result.clos.total_switches,
                mesh_switches=result.mesh.total_switches,
                clos_cables=result.clos.total_cables,
                mesh_cables=result.mesh.total_cables,
                clos_power=result.clos.total_power,
                mesh_power=result.mesh.total_power,
                clos_power_per_port=round_half_up(result.clos_power_per_port),
                mesh_power_per_port=round_half_up(result.mesh_power_per_port),
            )
        )

    return points
