import sys
from typing import Optional

import click
from closmesh_core.models.config import NetworkConfig
from closmesh_tools.report import print_sweep
from closmesh_tools.sweep import (
    DEFAULT_SWEEP_START,
    DEFAULT_SWEEP_STEP,
    DEFAULT_SWEEP_STOP,
    sweep_capacity,
)

from .options import config_options, console, export_option, export_yaml


@click.command()
@config_options
@click.option("--start", type=int, default=DEFAULT_SWEEP_START, show_default=True, help="First user count.")
@click.option("--stop", type=int, default=DEFAULT_SWEEP_STOP, show_default=True, help="Last user count (inclusive).")
@click.option("--step", type=int, default=DEFAULT_SWEEP_STEP, show_default=True, help="User count increment.")
@export_option
def sweep(config: NetworkConfig, start: int, stop: int, step: int, export: Optional[str]) -> None:
    """Compare both designs across a range of user counts."""
    try:
        points = sweep_capacity(config, start=start, stop=stop, step=step)
    except ValueError as e:
        console.print(f"[red]Invalid sweep range: {e}[/red]")
        sys.exit(1)

    print_sweep(points)

    if export:
        export_yaml(export, [p.model_dump(mode="json") for p in points])
