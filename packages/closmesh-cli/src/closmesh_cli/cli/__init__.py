import logging

import click
from closmesh_cli.tools.tools import tools
from closmesh_core.codebase.debug import configure_logger


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log sizing decisions at DEBUG level.")
def cli(verbose: bool) -> None:
    configure_logger(logging.DEBUG if verbose else logging.WARNING)


# add cli groups here

cli.add_command(tools)
