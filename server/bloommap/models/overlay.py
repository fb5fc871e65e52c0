# server/bloommap/models/overlay.py

from pydantic import BaseModel, Field
from typing import List, Optional

from shapely.geometry import Polygon

from bloommap.models.location import Location


class Bounds(BaseModel):
    """
    Rectángulo en grados geográficos (sin corrección geodésica).
    """
    minLon: float = Field(..., description="Longitud mínima")
    maxLon: float = Field(..., description="Longitud máxima")
    minLat: float = Field(..., description="Latitud mínima")
    maxLat: float = Field(..., description="Latitud máxima")

    def to_polygon(self) -> Polygon:
        """
        Polígono cerrado en EPSG:4326 con los cuatro vértices del rectángulo.
        No reordena min/max: un rectángulo mal formado queda tal cual.
        """
        coords = [
            (self.minLon, self.minLat),
            (self.minLon, self.maxLat),
            (self.maxLon, self.maxLat),
            (self.maxLon, self.minLat),
            (self.minLon, self.minLat),
        ]
        return Polygon(coords)


class MapOverlay(BaseModel):
    """
    Región con nombre que agrupa ubicaciones en el mapa.
    startDate/endDate son solo para mostrar; no intervienen en la contención.
    """
    id: int
    name: str
    address: str = ""
    bounds: Bounds
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    imageUrl: Optional[str] = None
    reportUrl: Optional[str] = None
    chartUrls: List[str] = Field(default_factory=list)


class MapOverlayWithStats(MapOverlay):
    """
    Vista derivada: se recalcula en cada consulta, nunca se guarda.
    """
    locationCount: int = Field(..., description="Número de ubicaciones dentro de bounds")
    locations: List[Location] = Field(
        default_factory=list, description="Ubicaciones contenidas, en el orden de entrada"
    )


class OverlaySelectionSummary(BaseModel):
    selectedIds: List[int]
    query: str = ""
    selectedCount: int
    totalCount: int
    totalLocationsInSelected: int
    results: List[MapOverlayWithStats]
