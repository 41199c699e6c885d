import sys
from typing import Optional

import click
from closmesh_core.models.config import NetworkConfig
from closmesh_tools.compare import compare_designs
from closmesh_tools.report import print_comparison

from .options import config_options, console, export_option, export_yaml, strict_option


@click.command()
@config_options
@export_option
@strict_option
def compare(config: NetworkConfig, export: Optional[str], strict: bool) -> None:
    """Size both designs at equal user capacity and compare them."""
    result = compare_designs(config)
    print_comparison(result)

    if export:
        export_yaml(export, result.model_dump(mode="json"))

    if not result.both_possible:
        for metrics in (result.clos, result.mesh):
            if not metrics.possible:
                console.print(f"[red]✗[/red] {metrics.name} infeasible: {metrics.details}")
        if strict:
            sys.exit(2)
