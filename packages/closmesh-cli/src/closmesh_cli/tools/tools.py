import click

from .compare import compare
from .size import size
from .sweep import sweep


@click.group()
def tools() -> None:
    """Fabric sizing commands for folded Clos and full mesh."""
    pass


tools.add_command(size)
tools.add_command(compare)
tools.add_command(sweep)
