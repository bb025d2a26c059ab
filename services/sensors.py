"""Sensor registry operations exposed to the HTTP layer."""

from __future__ import annotations

import logging
from functools import lru_cache

from app.schemas import DeleteResponse, SensorCreate, SensorOut
from datastore.sensor_registry import SensorRegistry, build_default_registry

logger = logging.getLogger(__name__)

DELETE_MESSAGE = "Sensor eliminado correctamente"


class SensorService:
    """Maps API schemas onto the registry and records mutations in the log."""

    def __init__(self, registry: SensorRegistry) -> None:
        self.registry = registry

    def list_sensors(self) -> list[SensorOut]:
        return [SensorOut.from_record(sensor) for sensor in self.registry.list_sensors()]

    def list_by_type(self, tipo: str) -> list[SensorOut]:
        return [SensorOut.from_record(sensor) for sensor in self.registry.list_by_type(tipo)]

    def create_sensor(self, payload: SensorCreate) -> SensorOut:
        sensor = self.registry.create(
            name=payload.nombre,
            sensor_type=payload.tipo,
            value=payload.valor,
        )
        logger.info(
            "Sensor created",
            extra={"sensor_id": sensor.id, "sensor_type": sensor.type},
        )
        return SensorOut.from_record(sensor)

    def delete_sensor(self, sensor_id: int) -> DeleteResponse:
        removed = self.registry.delete(sensor_id)
        if removed:
            logger.info(
                "Sensor deleted",
                extra={"sensor_id": sensor_id, "sensor_count": len(self.registry)},
            )
        else:
            logger.debug("Delete requested for unknown sensor", extra={"sensor_id": sensor_id})
        return DeleteResponse(mensaje=DELETE_MESSAGE, id=sensor_id)


@lru_cache
def build_default_service() -> SensorService:
    """Factory that wires the service to the process-wide registry."""
    return SensorService(registry=build_default_registry())
