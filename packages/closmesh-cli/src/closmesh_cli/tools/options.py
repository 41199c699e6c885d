"""Shared click options for commands that take a NetworkConfig."""

from __future__ import annotations

import sys
from functools import wraps
from typing import Any, Callable, Optional

import click
import yaml
from rich.console import Console
from rich.markup import escape

from closmesh_core.data.network_config import load_network_config
from closmesh_core.models.config import NetworkConfig

console = Console()

# option name -> NetworkConfig field
_CONFIG_FIELDS = {
    "users": "num_users",
    "radix": "radix",
    "switch_power": "power_per_switch",
    "clos_plug_power": "cable_power_clos",
    "mesh_plug_power": "cable_power_mesh",
    "mesh_ratio": "mesh_fabric_ratio",
    "one_hop": "mesh_one_hop_traffic",
}

_DEFAULTS = NetworkConfig()


def config_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach --config plus one override option per NetworkConfig field.

    The wrapped command receives a ready ``config`` keyword instead of the raw
    options.
    """

    @click.option(
        "--config",
        "config_path",
        type=click.Path(path_type=str, dir_okay=False, exists=False),
        default=None,
        help="Sizing config YAML; options below override its values.",
    )
    @click.option("--users", type=int, default=None, help=f"User-facing ports required [default: {_DEFAULTS.num_users}].")
    @click.option("--radix", type=int, default=None, help=f"Ports per switch ASIC [default: {_DEFAULTS.radix}].")
    @click.option(
        "--switch-power",
        type=float,
        default=None,
        help=f"Watts per switch [default: {_DEFAULTS.power_per_switch:g}].",
    )
    @click.option(
        "--clos-plug-power",
        type=float,
        default=None,
        help=f"Watts per optical plug in the Clos fabric [default: {_DEFAULTS.cable_power_clos:g}].",
    )
    @click.option(
        "--mesh-plug-power",
        type=float,
        default=None,
        help=f"Watts per optical plug in the mesh fabric [default: {_DEFAULTS.cable_power_mesh:g}].",
    )
    @click.option(
        "--mesh-ratio",
        type=float,
        default=None,
        help=f"Minimum fabric:user port ratio per mesh switch [default: {_DEFAULTS.mesh_fabric_ratio:g}].",
    )
    @click.option(
        "--one-hop",
        type=float,
        default=None,
        help=f"Percent of mesh traffic on a direct path [default: {_DEFAULTS.mesh_one_hop_traffic:g}].",
    )
    @wraps(func)
    def wrapper(config_path: Optional[str], **kwargs: Any) -> Any:
        overrides = {field: kwargs.pop(opt) for opt, field in _CONFIG_FIELDS.items()}
        kwargs["config"] = build_config(config_path, overrides)
        return func(**kwargs)

    return wrapper


def build_config(config_path: Optional[str], overrides: dict[str, Any]) -> NetworkConfig:
    """Load the config file (or defaults) and apply explicitly given options."""
    try:
        base = load_network_config(config_path) if config_path else NetworkConfig()
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error loading config: {escape(str(e))}[/red]")
        sys.exit(1)

    given = {k: v for k, v in overrides.items() if v is not None}
    if not given:
        return base
    return NetworkConfig.model_validate({**base.model_dump(), **given})


def export_yaml(path: str, payload: Any) -> None:
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(payload, f, default_flow_style=False, sort_keys=True)
    console.print(f"[green]✓[/green] Exported to {path}")


export_option = click.option(
    "--export",
    type=click.Path(path_type=str, dir_okay=False),
    default=None,
    help="Write the result to this YAML file.",
)

strict_option = click.option(
    "--strict",
    is_flag=True,
    help="Exit with code 2 when a design is infeasible.",
)
