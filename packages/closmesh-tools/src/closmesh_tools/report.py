from __future__ import annotations

from rich.console import Console
from rich.table import Table

from closmesh_core.models.comparison import DesignComparison, SweepPoint
from closmesh_core.models.metrics import (
    MeshSwitchConfig,
    ThreeTierClosConfig,
    TopologyMetrics,
    TwoTierClosConfig,
)

console = Console()


# ----------------------------
# Formatting helpers
# ----------------------------


def describe_switch_config(metrics: TopologyMetrics) -> str:
    """One-line switch breakdown for a sizing result."""
    match metrics.switch_config:
        case TwoTierClosConfig(leafs=leafs, spines=spines, user_ports_per_switch=ports):
            return f"{leafs} leaf / {spines} spine, {ports} user ports per leaf"
        case ThreeTierClosConfig(leafs=leafs, spines=agg, core=core, user_ports_per_switch=ports):
            return f"{leafs} leaf / {agg} agg / {core} core, {ports} user ports per leaf"
        case MeshSwitchConfig(
            mesh_switches=switches,
            user_ports_per_switch=ports,
            links_per_peer=lag,
            fabric_ports_per_switch=fabric,
        ):
            return f"{switches} mesh switches, {lag}x LAG, {ports} user / {fabric} fabric ports"
        case None:
            return "-"


def _metric_rows(metrics: TopologyMetrics) -> list[tuple[str, str]]:
    return [
        ("Feasible", "yes" if metrics.possible else "no"),
        ("Switches", f"{metrics.total_switches:,}"),
        ("Fabric cables", f"{metrics.total_cables:,}"),
        ("Avg hops", f"{metrics.avg_hops:.2f}"),
        ("Max hops", str(metrics.max_hops)),
        ("Total power", f"{metrics.total_power:,.0f} W"),
        ("User capacity", f"{metrics.user_capacity:,}"),
        ("Layout", describe_switch_config(metrics)),
        ("Details", metrics.details),
    ]


# ----------------------------
# Tables
# ----------------------------


def render_metrics(metrics: TopologyMetrics) -> Table:
    table = Table(title=metrics.name)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    for label, value in _metric_rows(metrics):
        table.add_row(label, value)

    if not metrics.possible:
        table.caption = f"[red]{metrics.details}[/red]"
    return table


def render_comparison(result: DesignComparison) -> Table:
    table = Table(title=f"Clos vs Mesh @ {result.config.num_users:,} users (radix {result.config.radix})")
    table.add_column("Metric", style="cyan")
    table.add_column(result.clos.name, justify="right")
    table.add_column(result.mesh.name, justify="right")

    for (label, clos_value), (_, mesh_value) in zip(_metric_rows(result.clos), _metric_rows(result.mesh)):
        table.add_row(label, clos_value, mesh_value)

    table.add_row(
        "Power / port",
        f"{result.clos_power_per_port:,.1f} W",
        f"{result.mesh_power_per_port:,.1f} W",
        style="magenta",
    )
    table.caption = f"Mesh sized to match {result.mesh_target:,} user ports"
    return table


def render_sweep(points: list[SweepPoint]) -> Table:
    table = Table(title="Capacity Sweep")
    table.add_column("Users", justify="right", style="cyan")
    table.add_column("Clos sw", justify="right")
    table.add_column("Mesh sw", justify="right")
    table.add_column("Clos cables", justify="right")
    table.add_column("Mesh cables", justify="right")
    table.add_column("Clos W", justify="right")
    table.add_column("Mesh W", justify="right")
    table.add_column("Clos W/port", justify="right", style="magenta")
    table.add_column("Mesh W/port", justify="right", style="magenta")

    for p in points:
        table.add_row(
            f"{p.num_users:,}",
            str(p.clos_switches),
            str(p.mesh_switches),
            f"{p.clos_cables:,}",
            f"{p.mesh_cables:,}",
            f"{p.clos_power:,.0f}",
            f"{p.mesh_power:,.0f}",
            str(p.clos_power_per_port),
            str(p.mesh_power_per_port),
        )

    if not points:
        table.caption = "[yellow]No user count in range is feasible for both designs.[/yellow]"
    return table


def print_metrics(metrics: TopologyMetrics) -> None:
    console.print(render_metrics(metrics))


def print_comparison(result: DesignComparison) -> None:
    console.print(render_comparison(result))


def print_sweep(points: list[SweepPoint]) -> None:
    console.print(render_sweep(points))
