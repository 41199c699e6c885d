"""
Configuration sanity checks for the sizers.

Each check returns a list of human readable issues instead of raising, so a
sizer can turn a bad configuration into an infeasible result. Radix is not
checked here: both sizers have their own "radix too small" outcome.
"""

from __future__ import annotations

import math

from closmesh_core.models.config import NetworkConfig


def _power_issue(name: str, value: float) -> str | None:
    if not math.isfinite(value) or value < 0:
        return f"{name} must be a finite value >= 0 (got {value})"
    return None


def _common_issues(config: NetworkConfig) -> list[str]:
    issues: list[str] = []
    if config.num_users < 1:
        issues.append(f"num_users must be >= 1 (got {config.num_users})")
    if issue := _power_issue("power_per_switch", config.power_per_switch):
        issues.append(issue)
    return issues


def clos_config_issues(config: NetworkConfig) -> list[str]:
    """Issues with the fields the Clos sizer consumes."""
    issues = _common_issues(config)
    if issue := _power_issue("cable_power_clos", config.cable_power_clos):
        issues.append(issue)
    return issues


def mesh_config_issues(config: NetworkConfig, target_capacity: int | None = None) -> list[str]:
    """Issues with the fields the mesh sizer consumes."""
    issues = _common_issues(config)
    if issue := _power_issue("cable_power_mesh", config.cable_power_mesh):
        issues.append(issue)
    ratio = config.mesh_fabric_ratio
    if not math.isfinite(ratio) or ratio <= 0:
        issues.append(f"mesh_fabric_ratio must be a finite value > 0 (got {ratio})")
    # NaN fails both comparisons
    if not 0 <= config.mesh_one_hop_traffic <= 100:
        issues.append(f"mesh_one_hop_traffic must be within 0..100 (got {config.mesh_one_hop_traffic})")
    if target_capacity is not None and target_capacity < 1:
        issues.append(f"target capacity must be >= 1 (got {target_capacity})")
    return issues


def format_issues(issues: list[str]) -> str:
    return "Invalid configuration: " + "; ".join(issues) + "."
