from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import typer

from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_sensors
from logging_config import configure_logging

ALL_TYPES = "todos"


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Utilities for interacting with the sensor registry service.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1, message="CLI state is uninitialized.")
    return state


def _reload_after_mutation(state: CLIState) -> None:
    """Refetch and render the full list so the view reflects the latest write."""
    render_sensors(state.client.list_sensors())


def _require_text(value: str, field: str) -> str:
    candidate = value.strip()
    if not candidate:
        raise typer.BadParameter(f"{field} must not be blank.", param_hint=field)
    return candidate


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Sensor API base URL (defaults to API_BASE_URL env or http://localhost:8000).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for each HTTP request.",
    ),
) -> None:
    """Entry point for the CLI."""
    configure_logging()
    config = load_config(base_url=base_url, timeout=timeout)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("list")
def list_command(
    ctx: typer.Context,
    tipo: Optional[str] = typer.Option(
        None,
        "--type",
        "-t",
        help=f"Only show sensors of this type ('{ALL_TYPES}' shows every sensor).",
    ),
) -> None:
    """List registered sensors."""
    state = _get_state(ctx)
    if tipo == ALL_TYPES:
        tipo = None
    render_sensors(state.client.list_sensors(tipo), tipo=tipo)


@app.command("add", context_settings={"ignore_unknown_options": True})
def add_command(
    ctx: typer.Context,
    nombre: str = typer.Argument(..., help="Sensor label, e.g. 'Sensor Sala'."),
    tipo: str = typer.Argument(..., help="Sensor type, e.g. Temperatura, Humedad or Luz."),
    valor: float = typer.Argument(..., help="Numeric reading; negative values such as -5 are accepted."),
) -> None:
    """Register a sensor and show the refreshed list."""
    state = _get_state(ctx)
    nombre = _require_text(nombre, "nombre")
    tipo = _require_text(tipo, "tipo")
    if not math.isfinite(valor):
        raise typer.BadParameter("valor must be a finite number.", param_hint="valor")
    created = state.client.create_sensor(nombre, tipo, valor)
    typer.secho(f"Sensor created. id={created.get('id')}", fg=typer.colors.GREEN)
    typer.echo()
    _reload_after_mutation(state)


@app.command("remove")
def remove_command(
    ctx: typer.Context,
    sensor_id: int = typer.Argument(..., help="Identifier of the sensor to delete."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
) -> None:
    """Delete a sensor and show the refreshed list."""
    state = _get_state(ctx)
    if not yes:
        label = next(
            (
                sensor.get("nombre")
                for sensor in state.client.list_sensors()
                if sensor.get("id") == sensor_id
            ),
            f"sensor {sensor_id}",
        )
        if not typer.confirm(f"Delete {label}?"):
            typer.echo("Nothing deleted.")
            return
    ack = state.client.delete_sensor(sensor_id)
    typer.secho(f"{ack.get('mensaje')} (id={ack.get('id')})", fg=typer.colors.GREEN)
    typer.echo()
    _reload_after_mutation(state)
