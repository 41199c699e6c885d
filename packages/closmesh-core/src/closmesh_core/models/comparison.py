from pydantic import BaseModel, ConfigDict

from closmesh_core.models.config import NetworkConfig
from closmesh_core.models.metrics import TopologyMetrics


class DesignComparison(BaseModel):
    """Both designs sized at equal scale for one configuration."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    config: NetworkConfig
    clos: TopologyMetrics
    mesh: TopologyMetrics
    # capacity the mesh was asked to match
    mesh_target: int
    clos_power_per_port: float
    mesh_power_per_port: float

    @property
    def both_possible(self) -> bool:
        return self.clos.possible and self.mesh.possible


class SweepPoint(BaseModel):
    """One user-count sample of a capacity sweep (both designs feasible)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    num_users: int
    clos_switches: int
    mesh_switches: int
    clos_cables: int
    mesh_cables: int
    clos_power: float
    mesh_power: float
    clos_power_per_port: int
    mesh_power_per_port: int
