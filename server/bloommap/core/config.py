# server/bloommap/core/config.py

import os
from typing import List

# -------------------------------------------------------------------
# CONFIGURACIÓN (variables de entorno con valores por defecto)
# -------------------------------------------------------------------


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: List[str]) -> List[str]:
    value = os.getenv(name)
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


# URL base de la API que consume la capa de servicios
API_BASE_URL = os.getenv("BLOOMMAP_API_URL", "http://localhost:8000")
API_PREFIX = "/api/v1"

# Si es True, la capa de servicios devuelve los datos de prueba sin llamar a la API
USE_MOCK = _env_bool("BLOOMMAP_USE_MOCK", True)

# Datos iniciales del almacén: "default" (3 ubicaciones), "mock" (27) o "empty"
LOCATION_SEED = os.getenv("BLOOMMAP_SEED", "default")

HTTP_TIMEOUT = float(os.getenv("BLOOMMAP_HTTP_TIMEOUT", "30"))

LOG_LEVEL = os.getenv("BLOOMMAP_LOG_LEVEL", "INFO").upper()

# Orígenes permitidos para el frontend (Next.js en desarrollo)
CORS_ORIGINS = _env_list(
    "BLOOMMAP_CORS_ORIGINS",
    [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
)

# Endpoints que usa SpeciesApiClient en modo remoto
API_ENDPOINTS = {
    "species": f"{API_PREFIX}/species/all",
    "locations_all": f"{API_PREFIX}/locations/all",
    "locations": f"{API_PREFIX}/locations",
    "species_detail": f"{API_PREFIX}/species",
    "species_locations": f"{API_PREFIX}/locations",
    "overlays": f"{API_PREFIX}/overlays",
    "overlay_stats": f"{API_PREFIX}/overlays/stats",
}
