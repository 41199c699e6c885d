# closmesh_core/data/network_config.py
from __future__ import annotations

from pathlib import Path

from closmesh_core.data.loader import load_yaml_list, load_yaml_typed
from closmesh_core.models.config import NetworkConfig

DEFAULT_CONFIG_PATH = Path("doctrine/network/fabric.yaml")


def load_network_config(path: str | Path = DEFAULT_CONFIG_PATH) -> NetworkConfig:
    """Load a single sizing configuration (snake_case or camelCase keys)."""
    return load_yaml_typed(Path(path), model=NetworkConfig)


def load_network_scenarios(path: str | Path) -> list[NetworkConfig]:
    """Load a YAML list of sizing configurations."""
    return load_yaml_list(Path(path), NetworkConfig)
