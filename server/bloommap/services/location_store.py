# server/bloommap/services/location_store.py

import logging
import threading
from typing import Any, Iterable, List, Mapping, Optional

from bloommap.core.errors import MissingIdError, NotFoundError
from bloommap.models.location import UPDATABLE_FIELDS, Location
from bloommap.services.location_validator import (
    location_to_payload,
    parse_int,
    validate_location,
)

logger = logging.getLogger(__name__)


class LocationStore:
    """
    Colección en memoria de ubicaciones, en orden de inserción.
    Se reinicia con la semilla en cada arranque (no hay persistencia).

    Los IDs crecen siempre: un ID borrado no se vuelve a asignar.
    Las operaciones que modifican la colección se serializan con un lock.
    """

    def __init__(self, seed: Iterable[Any] = ()):
        self._lock = threading.Lock()
        self._locations: List[Location] = [
            s if isinstance(s, Location) else Location.model_validate(s) for s in seed
        ]
        self._last_id = max((loc.id for loc in self._locations), default=0)

    def __len__(self) -> int:
        return len(self._locations)

    # -------------------------------------------------------
    # Lectura
    # -------------------------------------------------------
    def list(self, species_id: Any = None) -> List[Location]:
        """
        Todas las ubicaciones o solo las de `species_id`, en orden de inserción.
        """
        with self._lock:
            locations = list(self._locations)
        if species_id is None or species_id == "":
            return locations
        wanted = parse_int(species_id)
        if wanted is None:
            return []
        return [loc for loc in locations if loc.speciesId == wanted]

    def get(self, location_id: Any) -> Location:
        with self._lock:
            return self._locations[self._index_of(location_id)]

    # -------------------------------------------------------
    # Escritura
    # -------------------------------------------------------
    def create(self, payload: Any) -> Location:
        """
        Valida el payload, asigna el siguiente ID y lo añade al final.
        Si la validación falla, la colección no cambia.
        """
        data = validate_location(payload)
        with self._lock:
            new_id = max(self._last_id, *(loc.id for loc in self._locations), 0) + 1
            location = Location(id=new_id, **data.model_dump())
            self._locations.append(location)
            self._last_id = new_id
        logger.info(f"Ubicación {new_id} creada ({location.locationName})")
        return location

    def update(self, location_id: Any, patch: Mapping[str, Any]) -> Location:
        """
        Mezcla los campos conocidos de `patch` sobre el registro existente.
        El `id` no cambia. El registro mezclado se vuelve a validar; si no
        es válido, se lanza el error y el registro queda como estaba.
        """
        if _is_missing_id(location_id):
            raise MissingIdError()
        with self._lock:
            index = self._index_of(location_id)
            current = self._locations[index]
            merged = location_to_payload(current)
            merged.update({k: v for k, v in patch.items() if k in UPDATABLE_FIELDS})
            data = validate_location(merged)
            updated = Location(id=current.id, **data.model_dump())
            self._locations[index] = updated
        logger.info(f"Ubicación {updated.id} actualizada")
        return updated

    def delete(self, location_id: Any) -> Location:
        if _is_missing_id(location_id):
            raise MissingIdError()
        with self._lock:
            removed = self._locations.pop(self._index_of(location_id))
        logger.info(f"Ubicación {removed.id} eliminada")
        return removed

    # -------------------------------------------------------
    # Interno
    # -------------------------------------------------------
    def _index_of(self, location_id: Any) -> int:
        wanted = parse_int(location_id)
        if wanted is not None:
            for index, loc in enumerate(self._locations):
                if loc.id == wanted:
                    return index
        raise NotFoundError()


def _is_missing_id(location_id: Optional[Any]) -> bool:
    return location_id is None or location_id == "" or location_id == 0 or location_id is False
