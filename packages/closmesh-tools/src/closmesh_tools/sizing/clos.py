"""
Folded Clos (fat-tree) sizing.

Sizes a non-blocking leaf-spine (2-tier) or leaf-aggregation-core (3-tier)
fabric for a requested number of user ports and a fixed switch radix.

Port budget per leaf:
    half of the radix faces users, half faces the tier above (1:1).

Tier selection:
    one spine can terminate an uplink from at most ``radix`` leaves, so
    ``num_leafs <= radix`` stays at two tiers; anything larger moves to three.

Three-tier ceiling:
    (radix / 2)^2 * radix users. Beyond that a fourth tier would be needed,
    which is reported as infeasible.
"""

from __future__ import annotations

import logging

from closmesh_core.codebase.debug import spy_trace
from closmesh_core.models.config import NetworkConfig
from closmesh_core.models.metrics import ThreeTierClosConfig, TopologyMetrics, TwoTierClosConfig
from closmesh_core.validation.config import clos_config_issues, format_issues
from closmesh_tools.sizing.common import ceil_div, fabric_power, is_integral, round_hops

logger = logging.getLogger("closmesh.sizing.clos")

CLOS_NAME = "Folded Clos"
TWO_TIER_HOPS = 2
THREE_TIER_INTRA_POD_HOPS = 2
THREE_TIER_INTER_POD_HOPS = 4


# ---------------------------
# TIER MATH
# ---------------------------


def max_users_three_tier(radix: int) -> float:
    """Largest user count a 3-tier fabric of this radix can carry."""
    return (radix / 2) * (radix / 2) * radix


def three_tier_avg_hops(num_leafs: int, leaves_per_pod: int) -> float:
    """
    Average fabric hops with traffic spread uniformly over all other leaves.

    Same-pod leaves are 2 hops away (leaf -> agg -> leaf), other pods 4 hops
    (leaf -> agg -> core -> agg -> leaf). Local traffic is excluded, so a
    single leaf has no remote destinations and averages 0.
    """
    if num_leafs <= 1:
        return 0.0

    remote = num_leafs - 1
    intra_pod = max(0, min(leaves_per_pod, num_leafs) - 1)
    inter_pod = max(0, num_leafs - leaves_per_pod)

    return (intra_pod / remote) * THREE_TIER_INTRA_POD_HOPS + (inter_pod / remote) * THREE_TIER_INTER_POD_HOPS


def _format_count(value: float) -> str:
    return str(int(value)) if is_integral(value) else f"{value:g}"


# ---------------------------
# SIZING
# ---------------------------


@spy_trace
def size_clos(config: NetworkConfig) -> TopologyMetrics:
    """Size a non-blocking folded Clos fabric for ``config.num_users`` ports."""
    radix = config.radix
    user_ports_per_leaf = radix // 2

    if user_ports_per_leaf <= 0:
        logger.info("radix %d leaves no user ports per leaf", radix)
        return TopologyMetrics.infeasible(CLOS_NAME, f"Radix too small ({radix}).")

    issues = clos_config_issues(config)
    if issues:
        logger.info("clos config rejected: %s", issues)
        return TopologyMetrics.infeasible(CLOS_NAME, format_issues(issues))

    num_leafs = ceil_div(config.num_users, user_ports_per_leaf)
    user_capacity = num_leafs * user_ports_per_leaf

    if num_leafs <= radix:
        tiers = 2
        # non blocking: one uplink per user port
        total_uplinks = num_leafs * user_ports_per_leaf
        num_spines = ceil_div(total_uplinks, radix)

        total_switches = num_leafs + num_spines
        fabric_cables = total_uplinks
        details = f"2-Tier: {num_leafs} Leafs, {num_spines} Spines"
        switch_config = TwoTierClosConfig(
            leafs=num_leafs,
            spines=num_spines,
            user_ports_per_switch=user_ports_per_leaf,
        )
        avg_hops = float(TWO_TIER_HOPS)
        max_hops = TWO_TIER_HOPS
    else:
        tiers = 3
        max_users = max_users_three_tier(radix)
        if config.num_users > max_users:
            logger.info("%d users exceed the 3-tier ceiling %s", config.num_users, max_users)
            return TopologyMetrics.infeasible(
                f"{CLOS_NAME} (3-Tier)",
                f"Requires more than 3 tiers. Max users {_format_count(max_users)}.",
            )

        num_agg = num_leafs
        # aggregation switches split their ports half down, half up
        total_agg_uplinks = num_agg * (radix // 2)
        num_core = ceil_div(total_agg_uplinks, radix)

        total_switches = num_leafs + num_agg + num_core
        fabric_cables = num_leafs * user_ports_per_leaf + total_agg_uplinks
        details = f"3-Tier: {num_leafs} Leafs, {num_agg} Agg, {num_core} Core"
        switch_config = ThreeTierClosConfig(
            leafs=num_leafs,
            spines=num_agg,
            core=num_core,
            user_ports_per_switch=user_ports_per_leaf,
        )
        avg_hops = three_tier_avg_hops(num_leafs, radix // 2)
        max_hops = THREE_TIER_INTER_POD_HOPS

    total_power = fabric_power(total_switches, fabric_cables, config.power_per_switch, config.cable_power_clos)

    logger.debug(
        "clos %d-tier: %d switches, %d cables, capacity %d",
        tiers,
        total_switches,
        fabric_cables,
        user_capacity,
    )

    return TopologyMetrics(
        name=f"{CLOS_NAME} ({tiers}-Tier)",
        total_switches=total_switches,
        total_cables=fabric_cables,
        avg_hops=round_hops(avg_hops),
        max_hops=max_hops,
        total_power=total_power,
        user_capacity=user_capacity,
        details=details,
        possible=True,
        switch_config=switch_config,
    )


class ClosSizer:
    """Stateless wrapper so callers can hold a sizer object."""

    def size(self, config: NetworkConfig) -> TopologyMetrics:
        return size_clos(config)
