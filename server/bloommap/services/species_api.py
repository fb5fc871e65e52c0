# server/bloommap/services/species_api.py

import logging
from typing import Any, Dict, List, Optional

import requests

from bloommap.core import config
from bloommap.core.errors import ApiError, LocationError
from bloommap.models.location import Location
from bloommap.models.overlay import MapOverlay, MapOverlayWithStats
from bloommap.models.species import Species, SpeciesWithLocations
from bloommap.services.http import create_session
from bloommap.services.location_store import LocationStore
from bloommap.services.overlay_service import build_overlay_stats
from bloommap.utils.mock_data import MOCK_LOCATIONS, MOCK_OVERLAYS, MOCK_SPECIES

logger = logging.getLogger(__name__)


class SpeciesApiClient:
    """
    Capa de servicios del visor: especies, ubicaciones y overlays.

    - use_mock=True: sirve los datos de prueba; las ubicaciones creadas se
      guardan en un LocationStore propio sembrado con MOCK_LOCATIONS.
    - use_mock=False: llama a la API REST (`base_url`) y desenvuelve el
      sobre {success, data, message}.

    Las lecturas registran el error y devuelven un resultado vacío.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        use_mock: Optional[bool] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or config.API_BASE_URL).rstrip("/")
        self.use_mock = config.USE_MOCK if use_mock is None else use_mock
        self.session = session or create_session()
        self._mock_store = LocationStore(MOCK_LOCATIONS)

    # -------------------------------------------------------
    # Funciones de apoyo HTTP
    # -------------------------------------------------------
    def _url(self, endpoint: str, *parts: Any) -> str:
        path = config.API_ENDPOINTS[endpoint]
        suffix = "".join(f"/{p}" for p in parts)
        return f"{self.base_url}{path}{suffix}"

    def _get_data(self, url: str, params: Optional[Dict] = None) -> Any:
        resp = self.session.get(url, params=params)
        resp.raise_for_status()
        body = resp.json()
        if not isinstance(body, dict):
            raise ApiError(f"Respuesta sin sobre {{success, data, message}}: {url}")
        if not body.get("success"):
            raise ApiError(body.get("message") or f"Petición fallida: {url}")
        return body.get("data")

    def _get_list(self, url: str, params: Optional[Dict] = None) -> List[Any]:
        """Como _get_data, pero `data: null` cuenta como lista vacía."""
        data = self._get_data(url, params)
        if data is None:
            return []
        if not isinstance(data, list):
            raise ApiError(f"Se esperaba una lista en `data`: {url}")
        return data

    # -------------------------------------------------------
    # 1) Especies
    # -------------------------------------------------------
    def get_all_species(self) -> List[Species]:
        if self.use_mock:
            return [Species.model_validate(s) for s in MOCK_SPECIES]
        try:
            data = self._get_list(self._url("species"))
            logger.debug(f"Especies recibidas: {len(data)}")
            return [Species.model_validate(s) for s in data]
        except (requests.RequestException, ApiError, ValueError) as e:
            logger.error(f"Error obteniendo especies: {e}")
            return []

    def get_species_by_id(self, species_id: int) -> Optional[Species]:
        if self.use_mock:
            return next(
                (s for s in self.get_all_species() if s.speciesId == species_id), None
            )
        try:
            data = self._get_data(self._url("species_detail", species_id))
            return Species.model_validate(data) if data else None
        except (requests.RequestException, ApiError, ValueError) as e:
            logger.error(f"Error obteniendo especie {species_id}: {e}")
            return None

    # -------------------------------------------------------
    # 2) Ubicaciones
    # -------------------------------------------------------
    def get_all_locations(self) -> List[Location]:
        if self.use_mock:
            return self._mock_store.list()
        try:
            data = self._get_list(self._url("locations_all"))
            return [Location.model_validate(loc) for loc in data]
        except (requests.RequestException, ApiError, ValueError) as e:
            logger.error(f"Error obteniendo ubicaciones: {e}")
            return []

    def get_locations_by_species(self, species_id: int) -> List[Location]:
        if self.use_mock:
            return self._mock_store.list(species_id)
        try:
            data = self._get_list(self._url("species_locations", species_id))
            return [Location.model_validate(loc) for loc in data]
        except (requests.RequestException, ApiError, ValueError) as e:
            logger.error(f"Error obteniendo ubicaciones de la especie {species_id}: {e}")
            return []

    def get_species_with_locations(self, species_id: int) -> Optional[SpeciesWithLocations]:
        species = self.get_species_by_id(species_id)
        if species is None:
            return None
        return SpeciesWithLocations(
            species=species,
            locations=self.get_locations_by_species(species_id),
        )

    def get_all_species_and_locations(self) -> Dict[str, List]:
        """Especies y ubicaciones juntas, para la vista del mapa."""
        return {
            "species": self.get_all_species(),
            "locations": self.get_all_locations(),
        }

    def create_location(self, location_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Crea una ubicación y devuelve el sobre {success, data, message}.
        Los errores de validación vuelven con su mensaje, sin lanzar.
        """
        if self.use_mock:
            try:
                location = self._mock_store.create(location_data)
            except LocationError as e:
                logger.info(f"Ubicación rechazada ({e.code}): {e.message}")
                return {"success": False, "data": None, "message": e.message}
            return {
                "success": True,
                "data": location,
                "message": "Location created successfully",
            }

        failed = {"success": False, "data": None, "message": "Failed to create location"}
        try:
            resp = self.session.post(self._url("locations"), json=location_data)
            body = resp.json()
            if not isinstance(body, dict):
                raise ApiError(f"Respuesta sin sobre al crear ubicación (status {resp.status_code})")
            if not resp.ok or not body.get("success"):
                return {
                    "success": False,
                    "data": None,
                    "message": body.get("message") or f"HTTP error! status: {resp.status_code}",
                }
            location = Location.model_validate(body.get("data"))
        except (requests.RequestException, ApiError, ValueError) as e:
            logger.error(f"Error creando ubicación: {e}")
            return failed
        return {
            "success": True,
            "data": location,
            "message": body.get("message") or "Location created successfully",
        }

    # -------------------------------------------------------
    # 3) Overlays del mapa
    # -------------------------------------------------------
    def get_map_overlays(self) -> List[MapOverlay]:
        if self.use_mock:
            return [MapOverlay.model_validate(o) for o in MOCK_OVERLAYS]
        try:
            data = self._get_list(self._url("overlays"))
            return [MapOverlay.model_validate(o) for o in data]
        except (requests.RequestException, ApiError, ValueError) as e:
            logger.error(f"Error obteniendo overlays: {e}")
            return []

    def get_overlay_stats(self) -> List[MapOverlayWithStats]:
        """
        Overlays con sus conteos. En modo mock se calculan aquí sobre las
        ubicaciones actuales; en modo remoto los calcula la API.
        """
        if self.use_mock:
            return build_overlay_stats(self.get_map_overlays(), self.get_all_locations())
        try:
            data = self._get_list(self._url("overlay_stats"))
            return [MapOverlayWithStats.model_validate(o) for o in data]
        except (requests.RequestException, ApiError, ValueError) as e:
            logger.error(f"Error obteniendo estadísticas de overlays: {e}")
            return []
