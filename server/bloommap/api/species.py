# server/bloommap/api/species.py

from typing import List

from fastapi import APIRouter, Depends, Request, status

from bloommap.api.locations import envelope, get_location_store
from bloommap.models.response import ApiResponse
from bloommap.models.species import Species, SpeciesWithLocations
from bloommap.services.location_store import LocationStore

router = APIRouter()


def get_species_catalog(request: Request) -> List[Species]:
    """Catálogo de especies de solo lectura (cargado al crear la app)."""
    return request.app.state.species_catalog


def _find_species(catalog: List[Species], species_id: int):
    return next((s for s in catalog if s.speciesId == species_id), None)


@router.get(
    "/all",
    response_model=ApiResponse,
    summary="Obtiene la información de todas las especies"
)
async def list_species(catalog: List[Species] = Depends(get_species_catalog)):
    return envelope(True, catalog, "Species retrieved successfully")


@router.get(
    "/{species_id}",
    response_model=ApiResponse,
    summary="Obtiene la información de una especie"
)
async def read_species(species_id: int, catalog: List[Species] = Depends(get_species_catalog)):
    species = _find_species(catalog, species_id)
    if species is None:
        return envelope(False, None, "Species not found", status.HTTP_404_NOT_FOUND)
    return envelope(True, species, "Species retrieved successfully")


@router.get(
    "/{species_id}/locations",
    response_model=ApiResponse,
    summary="Especie junto con sus ubicaciones"
)
async def read_species_with_locations(
    species_id: int,
    catalog: List[Species] = Depends(get_species_catalog),
    store: LocationStore = Depends(get_location_store),
):
    species = _find_species(catalog, species_id)
    if species is None:
        return envelope(False, None, "Species not found", status.HTTP_404_NOT_FOUND)
    data = SpeciesWithLocations(species=species, locations=store.list(species_id))
    return envelope(True, data, "Species retrieved successfully")
