from .network_config import DEFAULT_CONFIG_PATH, load_network_config, load_network_scenarios

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "load_network_config",
    "load_network_scenarios",
]
