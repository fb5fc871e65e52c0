# server/bloommap/api/locations.py

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from bloommap.core.errors import LocationError, MalformedRequestError, MissingIdError
from bloommap.models.response import ApiResponse
from bloommap.services.location_store import LocationStore

logger = logging.getLogger(__name__)
router = APIRouter()


def get_location_store(request: Request) -> LocationStore:
    """El almacén vive en app.state (uno por aplicación)."""
    return request.app.state.location_store


def envelope(success: bool, data: Any, message: str, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    body = ApiResponse(success=success, data=data, message=message)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def error_envelope(error: LocationError, data: Any = None) -> JSONResponse:
    return envelope(False, data, error.message, error.status_code)


async def read_json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        raise MalformedRequestError() from None


# -------------------------------------------------------
# GET: todas las ubicaciones o filtradas por especie
# -------------------------------------------------------
@router.get(
    "",
    response_model=ApiResponse,
    summary="Listar ubicaciones (filtro opcional ?speciesId=)"
)
async def list_locations(
    speciesId: Optional[str] = None,
    store: LocationStore = Depends(get_location_store),
):
    try:
        locations = store.list(speciesId)
    except Exception:
        logger.exception("Error al listar ubicaciones")
        return envelope(False, [], "Failed to fetch locations", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return envelope(True, locations, "Locations retrieved successfully")


@router.get(
    "/all",
    response_model=ApiResponse,
    summary="Listar todas las ubicaciones"
)
async def list_all_locations(store: LocationStore = Depends(get_location_store)):
    return await list_locations(None, store)


@router.get(
    "/{species_id}",
    response_model=ApiResponse,
    summary="Listar las ubicaciones de una especie"
)
async def list_species_locations(species_id: str, store: LocationStore = Depends(get_location_store)):
    return await list_locations(species_id, store)


# -------------------------------------------------------
# POST: crear ubicación
# -------------------------------------------------------
@router.post(
    "",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Crear una ubicación (valida campos, coordenadas y fechas)"
)
async def create_location(request: Request, store: LocationStore = Depends(get_location_store)):
    try:
        payload = await read_json_body(request)
        location = store.create(payload)
    except LocationError as e:
        logger.info(f"Ubicación rechazada ({e.code}): {e.message}")
        return error_envelope(e)
    except Exception:
        logger.exception("Error al crear la ubicación")
        return envelope(False, None, "Failed to create location", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return envelope(True, location, "Location created successfully", status.HTTP_201_CREATED)


# -------------------------------------------------------
# PUT: actualizar ubicación existente ({id, ...campos})
# -------------------------------------------------------
@router.put(
    "",
    response_model=ApiResponse,
    summary="Actualizar una ubicación (mezcla parcial de campos)"
)
async def update_location(request: Request, store: LocationStore = Depends(get_location_store)):
    try:
        body = await read_json_body(request)
        if not isinstance(body, dict):
            raise MalformedRequestError()
        update_data = dict(body)
        location_id = update_data.pop("id", None)
        location = store.update(location_id, update_data)
    except LocationError as e:
        logger.info(f"Actualización rechazada ({e.code}): {e.message}")
        return error_envelope(e)
    except Exception:
        logger.exception("Error al actualizar la ubicación")
        return envelope(False, None, "Failed to update location", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return envelope(True, location, "Location updated successfully")


# -------------------------------------------------------
# DELETE: eliminar ubicación (?id=)
# -------------------------------------------------------
@router.delete(
    "",
    response_model=ApiResponse,
    summary="Eliminar una ubicación por ID"
)
async def delete_location(
    location_id: Optional[str] = Query(None, alias="id"),
    store: LocationStore = Depends(get_location_store),
):
    try:
        if not location_id:
            raise MissingIdError()
        location = store.delete(location_id)
    except LocationError as e:
        return error_envelope(e)
    except Exception:
        logger.exception("Error al eliminar la ubicación")
        return envelope(False, None, "Failed to delete location", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return envelope(True, location, "Location deleted successfully")
