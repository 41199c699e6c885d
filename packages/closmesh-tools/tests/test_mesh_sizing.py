"""
Tests for full-mesh sizing.

Covers the fabric port floor, the bounded minimal search, LAG grouping,
cables, power, the hop blend and infeasible outcomes.
"""

import math

import pytest

from closmesh_core.models.config import NetworkConfig
from closmesh_core.models.metrics import MeshSwitchConfig
from closmesh_tools.sizing.mesh import (
    MESH_SEARCH_LIMIT,
    MeshSizer,
    find_mesh,
    mesh_avg_hops,
    mesh_candidate,
    min_fabric_ports,
    size_mesh,
)


class TestFabricFloor:
    def test_non_blocking_takes_half(self):
        assert min_fabric_ports(64, 1.0) == 32

    def test_default_ratio(self):
        # 1.2 * 64 / 2.2 = 34.9
        assert min_fabric_ports(64, 1.2) == 35

    def test_low_ratio(self):
        assert min_fabric_ports(1024, 0.01) == 11

    def test_huge_ratio_takes_every_port(self):
        """Test that an overflowing ratio product claims the whole radix."""
        assert min_fabric_ports(64, 1e308) == 64


class TestMeshCandidate:
    def test_lag_fills_floor(self):
        candidate = mesh_candidate(3, 64, 32)
        assert candidate.links_per_peer == 16
        assert candidate.fabric_ports == 32
        assert candidate.user_ports == 32
        assert candidate.capacity == 96
        assert candidate.cables == 48

    def test_rounding_up_links_costs_user_ports(self):
        candidate = mesh_candidate(18, 64, 32)
        assert candidate.links_per_peer == 2
        assert candidate.fabric_ports == 34
        assert candidate.user_ports == 30

    def test_single_link_minimum(self):
        candidate = mesh_candidate(40, 64, 5)
        assert candidate.links_per_peer == 1
        assert candidate.fabric_ports == 39

    def test_needs_two_switches(self):
        with pytest.raises(ValueError, match="at least two switches"):
            mesh_candidate(1, 64, 32)


class TestSizeMesh:
    """End-to-end mesh sizing."""

    def test_radix_64_ratio_1_target_1024(self):
        """Test the minimal mesh for the canonical example."""
        config = NetworkConfig(radix=64, mesh_fabric_ratio=1.0, power_per_switch=1700, cable_power_mesh=27.5)
        result = size_mesh(config, 1024)

        assert result.possible is True
        assert result.name == "Full Mesh"
        assert result.total_switches == 33
        assert result.user_capacity == 1056
        assert result.total_cables == 33 * 32 // 2
        assert result.max_hops == 2
        assert result.details == "33 Switches, 1x LAG. (U:32/F:32)"
        assert result.switch_config == MeshSwitchConfig(
            mesh_switches=33,
            user_ports_per_switch=32,
            links_per_peer=1,
            fabric_ports_per_switch=32,
        )
        assert result.total_power == 33 * 1700 + 528 * 27.5 * 2

    def test_no_smaller_mesh_reaches_target(self):
        """Test minimality of the accepted switch count."""
        floor = min_fabric_ports(64, 1.0)
        for switches in range(2, 33):
            candidate = mesh_candidate(switches, 64, floor)
            assert candidate.user_ports <= 0 or candidate.capacity < 1024

    def test_default_config(self):
        """Test the default 1.2 ratio against 1024 ports."""
        result = size_mesh(NetworkConfig(), 1024)

        assert result.total_switches == 36
        assert result.user_capacity == 1044
        assert result.total_cables == 630
        assert result.total_power == 36 * 1700 + 630 * 27.5 * 2
        assert result.switch_config.user_ports_per_switch == 29
        assert result.switch_config.fabric_ports_per_switch == 35

    def test_small_target_uses_lag(self):
        result = size_mesh(NetworkConfig(num_users=128))

        assert result.total_switches == 5
        assert result.switch_config.links_per_peer == 9
        assert result.total_cables == 10 * 9

    def test_target_defaults_to_num_users(self):
        config = NetworkConfig(num_users=1024, radix=64, mesh_fabric_ratio=1.0)
        assert size_mesh(config) == size_mesh(config, 1024)

    def test_target_overrides_num_users(self):
        config = NetworkConfig(num_users=10, radix=64, mesh_fabric_ratio=1.0)
        assert size_mesh(config, 1024).total_switches == 33

    @pytest.mark.parametrize(
        "one_hop, expected",
        [(80, 1.2), (100, 1.0), (0, 2.0), (50, 1.5), (33.3, 1.67)],
    )
    def test_hop_blend(self, one_hop, expected):
        result = size_mesh(NetworkConfig(mesh_one_hop_traffic=one_hop))
        assert result.avg_hops == expected

    def test_hop_blend_helper(self):
        assert mesh_avg_hops(80) == pytest.approx(1.2)


class TestSearchBound:
    """The search stops at MESH_SEARCH_LIMIT switches."""

    def test_limit_value(self):
        assert MESH_SEARCH_LIMIT == 500

    def test_last_switch_count_is_searched(self):
        """S * (1025 - S) first reaches 262500 at S = 500."""
        result = size_mesh(NetworkConfig(radix=1024, mesh_fabric_ratio=0.01), 262_500)

        assert result.possible is True
        assert result.total_switches == 500
        assert result.user_capacity == 262_500

    def test_beyond_limit_is_infeasible(self):
        result = size_mesh(NetworkConfig(radix=1024, mesh_fabric_ratio=0.01), 262_501)

        assert result.possible is False
        assert "Cannot support 262501 users" in result.details

    def test_find_mesh_returns_none_when_exhausted(self):
        assert find_mesh(1024, 0.01, 10**7) is None


class TestInfeasible:
    def test_ratio_consumes_switch(self):
        """Test early stop once a single link per peer leaves no user ports."""
        result = size_mesh(NetworkConfig(radix=8, mesh_fabric_ratio=1.0), 10_000)

        assert result.possible is False
        assert result.details == "Cannot support 10000 users with Radix 8 & Ratio 1.0."
        assert result.total_switches == 0
        assert result.total_cables == 0
        assert result.avg_hops == 0
        assert result.max_hops == 0
        assert result.total_power == 0
        assert result.user_capacity == 0
        assert result.switch_config is None

    def test_radix_too_small(self):
        result = size_mesh(NetworkConfig(radix=1))
        assert result.possible is False
        assert "radix too small" in result.details.lower()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"mesh_fabric_ratio": 0},
            {"mesh_fabric_ratio": -1},
            {"mesh_one_hop_traffic": 120},
            {"cable_power_mesh": -1},
            {"num_users": 0},
        ],
    )
    def test_invalid_configuration(self, overrides):
        result = size_mesh(NetworkConfig(**overrides))

        assert result.possible is False
        assert result.details.startswith("Invalid configuration")
        assert result.switch_config is None

    @pytest.mark.parametrize("ratio", [math.inf, math.nan])
    def test_non_finite_ratio(self, ratio):
        result = size_mesh(NetworkConfig(mesh_fabric_ratio=ratio))

        assert result.possible is False
        assert result.details.startswith("Invalid configuration")

    def test_huge_ratio(self):
        """Test that a finite ratio too large for any user port is infeasible."""
        result = size_mesh(NetworkConfig(mesh_fabric_ratio=1e308))

        assert result.possible is False
        assert result.details.startswith("Cannot support 1024 users")

    def test_nan_power(self):
        result = size_mesh(NetworkConfig(cable_power_mesh=math.nan))
        assert result.possible is False
        assert "cable_power_mesh" in result.details

    def test_invalid_target(self):
        result = size_mesh(NetworkConfig(), 0)
        assert result.possible is False
        assert "target capacity" in result.details


class TestProperties:
    @pytest.mark.parametrize("radix", [16, 32, 64, 128])
    @pytest.mark.parametrize("ratio", [0.5, 1.0, 1.2, 2.0, 3.0])
    @pytest.mark.parametrize("target", [16, 100, 1024, 5000])
    def test_ratio_and_capacity(self, radix, ratio, target):
        """Test fabric:user ratio floor and capacity for every feasible mesh."""
        result = size_mesh(NetworkConfig(radix=radix, mesh_fabric_ratio=ratio), target)
        if not result.possible:
            return

        sc = result.switch_config
        assert sc.user_ports_per_switch + sc.fabric_ports_per_switch == radix
        assert sc.fabric_ports_per_switch / sc.user_ports_per_switch >= ratio - 1e-9
        assert sc.fabric_ports_per_switch == sc.links_per_peer * (sc.mesh_switches - 1)
        assert result.user_capacity >= target
        assert result.total_switches > 0

    def test_deterministic(self):
        config = NetworkConfig(radix=48, mesh_fabric_ratio=1.5)
        assert size_mesh(config, 400).model_dump_json() == size_mesh(config, 400).model_dump_json()

    def test_sizer_object_matches_function(self):
        config = NetworkConfig()
        assert MeshSizer().size(config, 512) == size_mesh(config, 512)
