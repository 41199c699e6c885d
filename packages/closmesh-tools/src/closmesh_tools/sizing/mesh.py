"""
Direct-connect full-mesh sizing.

Every switch peers with every other switch over ``links_per_peer`` parallel
links (a LAG), so fabric ports per switch are a multiple of ``S - 1``. The
fabric share of each switch must satisfy

    fabric_ports / (radix - fabric_ports) >= mesh_fabric_ratio

which gives the minimum fabric port budget

    min_fabric_ports = ceil(ratio * radix / (1 + ratio)).

The smallest switch count meeting the capacity target is found by a linear
search bounded by MESH_SEARCH_LIMIT.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from closmesh_core.codebase.debug import spy_trace
from closmesh_core.models.config import NetworkConfig
from closmesh_core.models.metrics import MeshSwitchConfig, TopologyMetrics
from closmesh_core.validation.config import format_issues, mesh_config_issues
from closmesh_tools.sizing.common import fabric_power, round_hops

logger = logging.getLogger("closmesh.sizing.mesh")

MESH_NAME = "Full Mesh"
# a mesh needs at least one peer, so S - 1 is never zero
MESH_SEARCH_START = 2
MESH_SEARCH_LIMIT = 500
MESH_MAX_HOPS = 2


@dataclass(frozen=True)
class MeshCandidate:
    switches: int
    links_per_peer: int
    fabric_ports: int
    user_ports: int

    @property
    def capacity(self) -> int:
        return self.switches * self.user_ports

    @property
    def cables(self) -> int:
        return self.switches * (self.switches - 1) // 2 * self.links_per_peer


def min_fabric_ports(radix: int, ratio: float) -> int:
    """Smallest fabric port count whose fabric:user ratio reaches ``ratio``."""
    share = ratio * radix / (1 + ratio)
    if not math.isfinite(share):
        # a ratio this large leaves no port for users
        return radix
    return math.ceil(share)


def mesh_candidate(switches: int, radix: int, fabric_floor: int) -> MeshCandidate:
    """Port partition of one switch in an ``switches``-wide mesh."""
    if switches < 2:
        raise ValueError(f"a mesh needs at least two switches (got {switches})")
    links_per_peer = max(1, math.ceil(fabric_floor / (switches - 1)))
    fabric_ports = links_per_peer * (switches - 1)
    return MeshCandidate(
        switches=switches,
        links_per_peer=links_per_peer,
        fabric_ports=fabric_ports,
        user_ports=radix - fabric_ports,
    )


def find_mesh(radix: int, ratio: float, target_capacity: int) -> MeshCandidate | None:
    """Return the smallest mesh reaching ``target_capacity``, or None."""
    fabric_floor = min_fabric_ports(radix, ratio)

    for switches in range(MESH_SEARCH_START, MESH_SEARCH_LIMIT + 1):
        candidate = mesh_candidate(switches, radix, fabric_floor)

        if candidate.user_ports <= 0:
            # a single link per peer is the loosest grouping; more peers only need more ports
            if candidate.links_per_peer == 1:
                logger.debug("mesh search stopped at %d switches: no user ports left", switches)
                return None
            continue

        if candidate.capacity >= target_capacity:
            return candidate

    logger.debug("mesh search exhausted at %d switches", MESH_SEARCH_LIMIT)
    return None


def mesh_avg_hops(one_hop_percent: float) -> float:
    """Blend of direct (1 hop) and relayed (2 hop) traffic."""
    one_hop_ratio = one_hop_percent / 100
    return one_hop_ratio * 1 + (1 - one_hop_ratio) * 2


@spy_trace
def size_mesh(config: NetworkConfig, target_capacity: int | None = None) -> TopologyMetrics:
    """Size the smallest full mesh carrying ``target_capacity`` user ports.

    ``target_capacity`` defaults to ``config.num_users``; pass the Clos achieved
    capacity to compare both designs at equal scale.
    """
    target = config.num_users if target_capacity is None else target_capacity
    radix = config.radix
    ratio = config.mesh_fabric_ratio

    if radix < 2:
        logger.info("radix %d cannot form a mesh", radix)
        return TopologyMetrics.infeasible(MESH_NAME, f"Radix too small ({radix}).")

    issues = mesh_config_issues(config, target_capacity)
    if issues:
        logger.info("mesh config rejected: %s", issues)
        return TopologyMetrics.infeasible(MESH_NAME, format_issues(issues))

    found = find_mesh(radix, ratio, target)
    if found is None:
        logger.info("no mesh supports %d users at radix %d, ratio %s", target, radix, ratio)
        return TopologyMetrics.infeasible(
            MESH_NAME,
            f"Cannot support {target} users with Radix {radix} & Ratio {ratio}.",
        )

    cables = found.cables
    total_power = fabric_power(found.switches, cables, config.power_per_switch, config.cable_power_mesh)

    logger.debug(
        "mesh: %d switches, %dx LAG, %d cables, capacity %d",
        found.switches,
        found.links_per_peer,
        cables,
        found.capacity,
    )

    return TopologyMetrics(
        name=MESH_NAME,
        total_switches=found.switches,
        total_cables=cables,
        avg_hops=round_hops(mesh_avg_hops(config.mesh_one_hop_traffic)),
        max_hops=MESH_MAX_HOPS,
        total_power=total_power,
        user_capacity=found.capacity,
        details=(
            f"{found.switches} Switches, {found.links_per_peer}x LAG. "
            f"(U:{found.user_ports}/F:{found.fabric_ports})"
        ),
        possible=True,
        switch_config=MeshSwitchConfig(
            mesh_switches=found.switches,
            user_ports_per_switch=found.user_ports,
            links_per_peer=found.links_per_peer,
            fabric_ports_per_switch=found.fabric_ports,
        ),
    )


class MeshSizer:
    """Stateless wrapper so callers can hold a sizer object."""

    def size(self, config: NetworkConfig, target_capacity: int | None = None) -> TopologyMetrics:
        return size_mesh(config, target_capacity)
