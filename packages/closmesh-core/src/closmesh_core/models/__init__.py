from .comparison import DesignComparison, SweepPoint
from .config import NetworkConfig
from .metrics import (
    MeshSwitchConfig,
    SwitchConfig,
    ThreeTierClosConfig,
    TopologyMetrics,
    TwoTierClosConfig,
)

__all__ = [
    "DesignComparison",
    "MeshSwitchConfig",
    "NetworkConfig",
    "SweepPoint",
    "SwitchConfig",
    "ThreeTierClosConfig",
    "TopologyMetrics",
    "TwoTierClosConfig",
]
