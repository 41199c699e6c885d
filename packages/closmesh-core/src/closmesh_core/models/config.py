# closmesh_core/models/config.py
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class NetworkConfig(BaseModel):
    """Sizing input shared by the Clos and mesh calculators.

    Values are not range-checked here; the sizers report out-of-range values as
    infeasible results instead of raising.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    num_users: int = Field(
        default=1024,
        validation_alias=AliasChoices("num_users", "numUsers"),
    )
    radix: int = 64
    # watts per switch chassis
    power_per_switch: float = Field(
        default=1700.0,
        validation_alias=AliasChoices("power_per_switch", "powerPerSwitch"),
    )
    # watts per optical plug; every fabric cable has two
    cable_power_clos: float = Field(
        default=25.0,
        validation_alias=AliasChoices("cable_power_clos", "cablePowerClos"),
    )
    cable_power_mesh: float = Field(
        default=27.5,
        validation_alias=AliasChoices("cable_power_mesh", "cablePowerMesh"),
    )
    # fabric ports : user ports per mesh switch (1.0 = non-blocking)
    mesh_fabric_ratio: float = Field(
        default=1.2,
        validation_alias=AliasChoices("mesh_fabric_ratio", "meshFabricRatio"),
    )
    # percent of mesh traffic on a direct peer link
    mesh_one_hop_traffic: float = Field(
        default=80.0,
        validation_alias=AliasChoices("mesh_one_hop_traffic", "meshOneHopTraffic"),
    )

    @field_validator("num_users", "radix", mode="before")
    @classmethod
    def _coerce_int(cls, v):
        try:
            return int(v)
        except TypeError as e:
            raise ValueError(f"expected an integer, got {v!r}") from e
