# server/bloommap/services/geometry.py

from typing import Mapping, Sequence, Union

from bloommap.models.overlay import Bounds

BoundsLike = Union[Bounds, Mapping[str, float]]


def _bound(bounds: BoundsLike, key: str) -> float:
    if isinstance(bounds, Bounds):
        return getattr(bounds, key)
    return bounds[key]


def contains(point: Sequence[float], bounds: BoundsLike) -> bool:
    """
    True si el punto (lon, lat) cae dentro del rectángulo, bordes incluidos.
    Prueba plana en grados: sin antimeridiano ni corrección geodésica.
    Un rectángulo con min > max no contiene nada.
    """
    lon, lat = point[0], point[1]
    return (
        _bound(bounds, "minLon") <= lon <= _bound(bounds, "maxLon")
        and _bound(bounds, "minLat") <= lat <= _bound(bounds, "maxLat")
    )
