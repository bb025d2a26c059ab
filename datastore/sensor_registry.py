from __future__ import annotations
from functools import lru_cache
from itertools import count
from threading import Lock
from typing import Iterable, List, Optional

from models.records import Sensor
from settings import get_settings


SEED_SENSORS: tuple[Sensor, ...] = (
    Sensor(id=1, name="Sensor Sala", type="Temperatura", value=24),
    Sensor(id=2, name="Sensor Cocina", type="Humedad", value=60),
    Sensor(id=3, name="Sensor Jardín", type="Luz", value=85),
)


class SensorRegistry:
    """In-memory, insertion-ordered collection of sensors."""

    def __init__(self, seed: Optional[Iterable[Sensor]] = None) -> None:
        self._sensors: List[Sensor] = list(seed or ())
        ids = [sensor.id for sensor in self._sensors]
        if len(ids) != len(set(ids)):
            raise ValueError("Seed sensors must have unique ids.")
        self._ids = count(max(ids, default=0) + 1)
        self._lock = Lock()

    def list_sensors(self) -> list[Sensor]:
        with self._lock:
            return list(self._sensors)

    def list_by_type(self, sensor_type: str) -> list[Sensor]:
        with self._lock:
            return [sensor for sensor in self._sensors if sensor.type == sensor_type]

    def create(self, name: str, sensor_type: str, value: float) -> Sensor:
        with self._lock:
            sensor = Sensor(id=next(self._ids), name=name, type=sensor_type, value=value)
            self._sensors.append(sensor)
            return sensor

    def delete(self, sensor_id: int) -> bool:
        """Remove the sensor if present; returns whether anything was removed."""

        with self._lock:
            remaining = [sensor for sensor in self._sensors if sensor.id != sensor_id]
            removed = len(remaining) != len(self._sensors)
            self._sensors = remaining
            return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._sensors)


@lru_cache
def build_default_registry() -> SensorRegistry:
    settings = get_settings()
    seed = SEED_SENSORS if settings.seed_registry else ()
    return SensorRegistry(seed=seed)
