import sys
from typing import Optional

import click
from closmesh_core.models.config import NetworkConfig
from closmesh_core.models.metrics import TopologyMetrics
from closmesh_tools.report import print_metrics
from closmesh_tools.sizing import size_clos, size_mesh

from .options import config_options, console, export_option, export_yaml, strict_option


@click.group()
def size() -> None:
    """Size a single fabric design."""
    pass


def _finish(metrics: TopologyMetrics, export: Optional[str], strict: bool) -> None:
    print_metrics(metrics)
    if export:
        export_yaml(export, metrics.model_dump(mode="json"))
    if not metrics.possible:
        console.print(f"[red]✗[/red] {metrics.name} infeasible: {metrics.details}")
        if strict:
            sys.exit(2)


@size.command("clos")
@config_options
@export_option
@strict_option
def clos(config: NetworkConfig, export: Optional[str], strict: bool) -> None:
    """Folded Clos: 2-tier leaf-spine or 3-tier leaf-agg-core."""
    _finish(size_clos(config), export, strict)


@size.command("mesh")
@config_options
@click.option(
    "--target",
    type=int,
    default=None,
    help="User ports the mesh must carry (defaults to --users).",
)
@export_option
@strict_option
def mesh(config: NetworkConfig, target: Optional[int], export: Optional[str], strict: bool) -> None:
    """Direct-connect full mesh with optional LAG per peer."""
    _finish(size_mesh(config, target), export, strict)
