from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

import typer

_UNITS = {"Temperatura": "°C", "Humedad": "%"}
_DEFAULT_UNIT = "lux"


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def unit_for(tipo: Optional[str]) -> str:
    return _UNITS.get(tipo or "", _DEFAULT_UNIT)


def format_value(valor: Any) -> str:
    if isinstance(valor, float) and valor.is_integer():
        return str(int(valor))
    return str(valor)


def render_sensor(sensor: Dict[str, Any]) -> None:
    tipo = sensor.get("tipo")
    typer.secho(f"[{sensor.get('id')}] {sensor.get('nombre')}", fg=typer.colors.CYAN)
    typer.echo(f"  tipo: {tipo}")
    typer.echo(f"  valor: {format_value(sensor.get('valor'))} {unit_for(tipo)}")


def render_sensors(sensors: Iterable[Dict[str, Any]], tipo: Optional[str] = None) -> None:
    echo_heading("Sensors" if tipo is None else f"Sensors ({tipo})")
    rendered = 0
    for sensor in sensors:
        render_sensor(sensor)
        rendered += 1
    if rendered:
        return
    if tipo is None:
        typer.echo("No sensors registered. Add one!")
    else:
        typer.echo(f'No sensors of type "{tipo}".')
