"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field

from models.records import Sensor


class SensorCreate(BaseModel):
    """Request body for registering a new sensor."""

    nombre: str = Field(..., description="Free-form label for the sensor.")
    tipo: str = Field(..., description="Sensor category, e.g. Temperatura, Humedad or Luz.")
    valor: float = Field(
        ...,
        allow_inf_nan=False,
        description="Numeric reading; numeric strings are coerced.",
    )


def _as_number(value: float) -> Union[int, float]:
    """Whole readings are reported as integers, e.g. 24 rather than 24.0."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class SensorOut(BaseModel):
    """A sensor record as exposed over the API."""

    id: int
    nombre: str
    tipo: str
    valor: Union[int, float]

    @classmethod
    def from_record(cls, sensor: Sensor) -> "SensorOut":
        return cls(
            id=sensor.id,
            nombre=sensor.name,
            tipo=sensor.type,
            valor=_as_number(sensor.value),
        )


class DeleteResponse(BaseModel):
    """Acknowledgement returned for every delete, whether or not the id existed."""

    mensaje: str
    id: int
