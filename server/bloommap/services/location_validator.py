# server/bloommap/services/location_validator.py

import math
import re
from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from bloommap.core.errors import (
    InvalidBloomingPeriodError,
    InvalidCoordinatesError,
    InvalidDateOrderError,
    InvalidSpeciesIdError,
    MissingFieldError,
)
from bloommap.models.location import BloomingPeriod, LocationCreate

REQUIRED_FIELDS = ("speciesId", "locationName", "coordinates", "bloomingPeriod")
PERIOD_FIELDS = ("start", "peak", "end")

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


# -------------------------------------------------------
# Funciones de apoyo
# -------------------------------------------------------
def _is_blank(value: Any) -> bool:
    """
    Valor ausente o "falsy" al estilo del frontend: None, False, 0, "" y NaN.
    Una lista o un dict vacíos sí cuentan como presentes.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    return False


def parse_int(value: Any) -> Optional[int]:
    """
    Convierte a entero tomando el prefijo numérico ("12abc" -> 12, 2.7 -> 2).
    Devuelve None si no hay número.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return None


def _parse_coordinate(value: Any) -> float:
    if isinstance(value, bool):
        raise InvalidCoordinatesError()
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidCoordinatesError() from None
    if not math.isfinite(number):
        raise InvalidCoordinatesError()
    return number


def _parse_date(value: Any) -> date:
    if not isinstance(value, str):
        raise InvalidBloomingPeriodError()
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise InvalidBloomingPeriodError(
            "Blooming period dates must be ISO calendar dates (YYYY-MM-DD)"
        ) from None


# -------------------------------------------------------
# Validación principal
# -------------------------------------------------------
def validate_location(payload: Any) -> LocationCreate:
    """
    Valida y normaliza una ubicación sin ID.
    El orden de las comprobaciones es fijo y corta en el primer fallo:
      1) campos obligatorios
      2) forma de las coordenadas
      3) fechas del periodo de floración
      4) orden de las fechas (start <= peak <= end)
    Lanza una subclase de LocationError; no modifica nada.
    """
    if not isinstance(payload, Mapping):
        raise MissingFieldError()

    # 1) Campos obligatorios
    if any(_is_blank(payload.get(field)) for field in REQUIRED_FIELDS):
        raise MissingFieldError()
    name = payload["locationName"]
    if isinstance(name, str) and not name.strip():
        raise MissingFieldError()

    # 2) Coordenadas [lon, lat]
    coordinates = payload["coordinates"]
    if not isinstance(coordinates, (list, tuple)) or len(coordinates) != 2:
        raise InvalidCoordinatesError()

    # 3) Periodo de floración
    period = payload["bloomingPeriod"]
    if not isinstance(period, Mapping) or any(
        _is_blank(period.get(field)) for field in PERIOD_FIELDS
    ):
        raise InvalidBloomingPeriodError()
    start, peak, end = (_parse_date(period[field]) for field in PERIOD_FIELDS)

    # 4) Orden cronológico (se permiten fechas iguales)
    if peak < start or end < peak:
        raise InvalidDateOrderError()

    # Normalización
    species_id = parse_int(payload["speciesId"])
    if species_id is None or species_id <= 0:
        raise InvalidSpeciesIdError()

    lon_lat: List[float] = [_parse_coordinate(c) for c in coordinates]

    return LocationCreate(
        speciesId=species_id,
        locationName=str(name).strip(),
        coordinates=lon_lat,
        bloomingPeriod=BloomingPeriod(
            start=period["start"],
            peak=period["peak"],
            end=period["end"],
        ),
    )


def location_to_payload(record: Any) -> Dict[str, Any]:
    """Pasa un modelo pydantic (o un dict) a dict plano para volver a validarlo."""
    if hasattr(record, "model_dump"):
        return record.model_dump()
    return dict(record)
