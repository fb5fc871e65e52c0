# server/bloommap/services/overlay_service.py

from typing import Dict, Iterable, List

from shapely.geometry import mapping

from bloommap.models.location import Location
from bloommap.models.overlay import MapOverlay, MapOverlayWithStats
from bloommap.services.geometry import contains


# -------------------------------------------------------
# Estadísticas por overlay
# -------------------------------------------------------
def build_overlay_stats(
    overlays: Iterable[MapOverlay], locations: Iterable[Location]
) -> List[MapOverlayWithStats]:
    """
    Para cada overlay filtra las ubicaciones contenidas en su `bounds`
    y adjunta la lista y su longitud.
    El orden de salida respeta el de entrada (overlays y ubicaciones).
    """
    locations = list(locations)
    result = []
    for overlay in overlays:
        inside = [loc for loc in locations if contains(loc.coordinates, overlay.bounds)]
        result.append(
            MapOverlayWithStats(
                **overlay.model_dump(),
                locationCount=len(inside),
                locations=inside,
            )
        )
    return result


# -------------------------------------------------------
# GeoJSON para la capa de overlays del mapa
# -------------------------------------------------------
def overlay_feature_collection(
    overlays: Iterable[MapOverlay], locations: Iterable[Location]
) -> Dict:
    """
    Devuelve un FeatureCollection con un polígono por overlay.
    Las propiedades incluyen `locationCount` y los IDs contenidos, no las
    ubicaciones completas.
    """
    features = []
    for stats in build_overlay_stats(overlays, locations):
        features.append({
            "type": "Feature",
            "id": stats.id,
            "geometry": mapping(stats.bounds.to_polygon()),
            "properties": {
                "name": stats.name,
                "address": stats.address,
                "startDate": stats.startDate,
                "endDate": stats.endDate,
                "imageUrl": stats.imageUrl,
                "locationCount": stats.locationCount,
                "locationIds": [loc.id for loc in stats.locations],
            },
        })
    return {"type": "FeatureCollection", "features": features}
