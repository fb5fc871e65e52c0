# server/bloommap/models/location.py

from pydantic import BaseModel, Field
from typing import List


class BloomingPeriod(BaseModel):
    """
    Ventana de floración de una ubicación.
    Las fechas se guardan tal cual llegan (ISO, YYYY-MM-DD).
    """
    start: str = Field(..., description="Inicio de la floración")
    peak: str = Field(..., description="Pico de la floración")
    end: str = Field(..., description="Fin de la floración")


class LocationCreate(BaseModel):
    """
    Ubicación ya validada y normalizada, todavía sin ID.
    """
    speciesId: int = Field(..., description="ID de la especie (sin clave foránea)")
    locationName: str = Field(..., description="Nombre del lugar, sin espacios sobrantes")
    coordinates: List[float] = Field(
        ..., min_length=2, max_length=2, description="[longitud, latitud]"
    )
    bloomingPeriod: BloomingPeriod


class Location(LocationCreate):
    id: int = Field(..., description="ID asignado por el almacén")


# Campos que acepta una actualización parcial (PUT)
UPDATABLE_FIELDS = ("speciesId", "locationName", "coordinates", "bloomingPeriod")
