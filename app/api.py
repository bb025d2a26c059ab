"""HTTP route definitions for the service."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from app.schemas import DeleteResponse, SensorCreate, SensorOut
from services.sensors import SensorService, build_default_service

router = APIRouter()


def get_service() -> SensorService:
    return build_default_service()


@router.get(
    "/api/sensores",
    response_model=List[SensorOut],
    summary="List every registered sensor in insertion order.",
)
async def list_sensors(
    service: SensorService = Depends(get_service),
) -> List[SensorOut]:
    return service.list_sensors()


@router.post(
    "/api/sensores",
    status_code=status.HTTP_201_CREATED,
    response_model=SensorOut,
    summary="Register a new sensor.",
)
async def create_sensor(
    payload: SensorCreate,
    service: SensorService = Depends(get_service),
) -> SensorOut:
    return service.create_sensor(payload)


@router.delete(
    "/api/sensores/{sensor_id}",
    response_model=DeleteResponse,
    summary="Delete a sensor by id; unknown ids are acknowledged as well.",
)
async def delete_sensor(
    sensor_id: int,
    service: SensorService = Depends(get_service),
) -> DeleteResponse:
    return service.delete_sensor(sensor_id)


@router.get(
    "/api/sensores/tipo/{tipo:path}",
    response_model=List[SensorOut],
    summary="List sensors whose type matches exactly.",
)
async def list_sensors_by_type(
    tipo: str,
    service: SensorService = Depends(get_service),
) -> List[SensorOut]:
    return service.list_by_type(tipo)


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /health for service status."}
