"""Command-line interface for catpoint."""

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

try:
    import click
    from rich.console import Console
    from rich.table import Table
except ImportError:
    print("CLI dependencies not installed. Install with: pip install catpoint[cli]")
    sys.exit(1)

from . import __version__
from .config import Scenario, load_config
from .const.defaults import DEFAULT_CONFIG_FILE
from .const.states import AlarmStatus, ArmingStatus
from .exceptions import CatpointError
from .sensor import Sensor
from .simulator import Notification, run_scenario

console = Console()

_ALARM_STYLE = {
    AlarmStatus.NO_ALARM: "green",
    AlarmStatus.PENDING_ALARM: "yellow",
    AlarmStatus.ALARM: "red",
}


def _fail(as_json: bool, error: Exception) -> NoReturn:
    if as_json:
        click.echo(json.dumps({"ok": False, "error": str(error)}))
    else:
        console.print(f"[red]Error: {error}[/red]")
    raise SystemExit(1)


def _sensor_table(sensors: list[Sensor]) -> Table:
    table = Table(title="Sensors")
    table.add_column("Name", style="magenta")
    table.add_column("Type", style="cyan")
    table.add_column("State", style="yellow")
    for sensor in sorted(sensors):
        state_style = "red" if sensor.active else "green"
        state_text = "Active" if sensor.active else "Inactive"
        table.add_row(sensor.name, sensor.sensor_type.value, f"[{state_style}]{state_text}[/{state_style}]")
    return table


def _print_system(arming_status: ArmingStatus, alarm_status: AlarmStatus) -> None:
    style = _ALARM_STYLE[alarm_status]
    console.print(f"Arming: [cyan]{arming_status.description}[/cyan]")
    console.print(f"Alarm:  [{style}]{alarm_status.description}[/{style}]")


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "-c",
    type=click.Path(path_type=Path),
    default=DEFAULT_CONFIG_FILE,
    help="Scenario file path",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config: Path, debug: bool) -> None:
    """catpoint - Home security alarm simulator."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["debug"] = debug


def _load(ctx: click.Context, as_json: bool) -> Scenario:
    try:
        return load_config(ctx.obj["config_path"])
    except CatpointError as e:
        _fail(as_json, e)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Output status as JSON")
@click.pass_context
def status(ctx: click.Context, as_json: bool) -> None:
    """Show the initial system state and sensors of a scenario."""
    scenario = _load(ctx, as_json)

    if as_json:
        payload = {
            "ok": True,
            "arming_status": scenario.arming_status.value,
            "alarm_status": scenario.alarm_status.value,
            "sensors": [s.to_dict() for s in sorted(scenario.sensors)],
            "events": len(scenario.events),
        }
        click.echo(json.dumps(payload))
        return

    _print_system(scenario.arming_status, scenario.alarm_status)
    console.print()
    if scenario.sensors:
        console.print(_sensor_table(scenario.sensors))
    console.print(f"{len(scenario.events)} events scripted")


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Output result as JSON")
@click.pass_context
def simulate(ctx: click.Context, as_json: bool) -> None:
    """Replay the scenario events and show every notification."""
    scenario = _load(ctx, as_json)

    def on_notification(n: Notification) -> None:
        if n.kind == "alarm":
            style = _ALARM_STYLE[n.value]
            console.print(f"[{style}]Alarm status: {n.value.description}[/{style}]")
        elif n.kind == "cat":
            text = "Cat detected!" if n.value else "No cats here"
            console.print(f"[blue]{text}[/blue]")
        else:
            console.print("[dim]Sensor status changed[/dim]")

    try:
        result = run_scenario(scenario, None if as_json else on_notification)
    except Exception as e:
        _fail(as_json, e)

    if as_json:
        click.echo(json.dumps({"ok": True, **result.to_dict()}))
        return

    console.print()
    _print_system(result.repository.get_arming_status(), result.repository.get_alarm_status())
    console.print()
    console.print(_sensor_table(list(result.repository.get_sensors())))


def main() -> None:
    """CLI entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
