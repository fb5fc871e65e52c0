# server/bloommap/api/overlays.py

from typing import List

from fastapi import APIRouter, Depends, Query, Request

from bloommap.api.locations import envelope, get_location_store
from bloommap.models.overlay import MapOverlay
from bloommap.models.response import ApiResponse
from bloommap.services.location_store import LocationStore
from bloommap.services.overlay_filter import OverlayFilterSelection
from bloommap.services.overlay_service import build_overlay_stats, overlay_feature_collection

router = APIRouter()


def get_overlays(request: Request) -> List[MapOverlay]:
    return request.app.state.overlays


@router.get(
    "",
    response_model=ApiResponse,
    summary="Lista los overlays del mapa"
)
async def list_overlays(overlays: List[MapOverlay] = Depends(get_overlays)):
    return envelope(True, overlays, "Overlays retrieved successfully")


@router.get(
    "/stats",
    response_model=ApiResponse,
    summary="Overlays con el número de ubicaciones que contienen"
)
async def list_overlay_stats(
    overlays: List[MapOverlay] = Depends(get_overlays),
    store: LocationStore = Depends(get_location_store),
):
    # Se recalcula en cada petición con el estado actual del almacén
    stats = build_overlay_stats(overlays, store.list())
    return envelope(True, stats, "Overlay statistics computed successfully")


@router.get(
    "/geojson",
    summary="Overlays como FeatureCollection GeoJSON"
)
async def read_overlay_geojson(
    overlays: List[MapOverlay] = Depends(get_overlays),
    store: LocationStore = Depends(get_location_store),
):
    return overlay_feature_collection(overlays, store.list())


@router.get(
    "/summary",
    response_model=ApiResponse,
    summary="Resumen del filtro por región (?selected=1&selected=2&q=...)"
)
async def read_selection_summary(
    selected: List[int] = Query(default=[]),
    q: str = "",
    overlays: List[MapOverlay] = Depends(get_overlays),
    store: LocationStore = Depends(get_location_store),
):
    selection = OverlayFilterSelection(build_overlay_stats(overlays, store.list()), selected)
    selection.search(q)
    return envelope(True, selection.summary(), "Overlay selection summarized successfully")
