"""
Sizing result model shared by both fabric designs.

switch_config is a tagged union keyed on ``kind``; callers match on the
concrete class (or the kind string) instead of probing optional fields.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class TwoTierClosConfig(BaseModel):
    """Leaf-spine switch breakdown."""

    model_config = ConfigDict(extra="ignore", frozen=True)
    kind: Literal["clos-2-tier"] = "clos-2-tier"
    leafs: int
    spines: int
    user_ports_per_switch: int


class ThreeTierClosConfig(BaseModel):
    """Leaf-aggregation-core switch breakdown. ``spines`` counts aggregation switches."""

    model_config = ConfigDict(extra="ignore", frozen=True)
    kind: Literal["clos-3-tier"] = "clos-3-tier"
    leafs: int
    spines: int
    core: int
    user_ports_per_switch: int


class MeshSwitchConfig(BaseModel):
    """Full-mesh switch breakdown."""

    model_config = ConfigDict(extra="ignore", frozen=True)
    kind: Literal["full-mesh"] = "full-mesh"
    mesh_switches: int
    user_ports_per_switch: int
    links_per_peer: int
    fabric_ports_per_switch: int


SwitchConfig = Annotated[
    Union[TwoTierClosConfig, ThreeTierClosConfig, MeshSwitchConfig],
    Field(discriminator="kind"),
]


class TopologyMetrics(BaseModel):
    """Sizing outcome for one design.

    total_cables counts fabric (inter-switch) cables only. When ``possible`` is
    False every numeric field is zero, ``details`` holds the reason and
    ``switch_config`` is None.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    total_switches: int
    total_cables: int
    avg_hops: float
    max_hops: int
    total_power: float
    user_capacity: int
    details: str
    possible: bool
    switch_config: SwitchConfig | None = None

    @classmethod
    def infeasible(cls, name: str, reason: str) -> "TopologyMetrics":
        return cls(
            name=name,
            total_switches=0,
            total_cables=0,
            avg_hops=0.0,
            max_hops=0,
            total_power=0.0,
            user_capacity=0,
            details=reason,
            possible=False,
            switch_config=None,
        )
