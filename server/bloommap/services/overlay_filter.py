# server/bloommap/services/overlay_filter.py

from typing import Iterable, List, Optional, Set

from bloommap.models.overlay import MapOverlayWithStats, OverlaySelectionSummary


class OverlayFilterSelection:
    """
    Estado del filtro por región: IDs seleccionados + texto de búsqueda.
    Trabaja sobre la salida de build_overlay_stats; todo lo derivado
    (conteos, suma de ubicaciones) se calcula al vuelo.
    """

    def __init__(
        self,
        overlays: Iterable[MapOverlayWithStats],
        selected_ids: Optional[Iterable[int]] = None,
        query: str = "",
    ):
        self.overlays: List[MapOverlayWithStats] = list(overlays)
        self.selected_ids: Set[int] = set(selected_ids or ())
        self.query = query

    # -------------------------------------------------------
    # Transiciones
    # -------------------------------------------------------
    def toggle(self, overlay_id: int) -> None:
        if overlay_id in self.selected_ids:
            self.selected_ids.remove(overlay_id)
        else:
            self.selected_ids.add(overlay_id)

    def search(self, query: str) -> List[MapOverlayWithStats]:
        self.query = query or ""
        return self.results

    def select_all(self) -> None:
        """
        Si ya están todos seleccionados, deselecciona todo; si no,
        selecciona todos los resultados de la búsqueda actual.
        """
        if len(self.selected_ids) == self.total_count:
            self.selected_ids.clear()
        else:
            self.selected_ids = {overlay.id for overlay in self.results}

    def clear(self) -> None:
        self.selected_ids.clear()
        self.query = ""

    # -------------------------------------------------------
    # Derivados
    # -------------------------------------------------------
    @property
    def results(self) -> List[MapOverlayWithStats]:
        if not self.query.strip():
            return list(self.overlays)
        query = self.query.lower()
        return [o for o in self.overlays if query in o.name.lower()]

    @property
    def total_count(self) -> int:
        return len(self.overlays)

    @property
    def selected_count(self) -> int:
        return len(self.selected_ids)

    @property
    def total_locations_in_selected(self) -> int:
        return sum(o.locationCount for o in self.overlays if o.id in self.selected_ids)

    def is_selected(self, overlay_id: int) -> bool:
        return overlay_id in self.selected_ids

    def summary(self) -> OverlaySelectionSummary:
        return OverlaySelectionSummary(
            selectedIds=sorted(self.selected_ids),
            query=self.query,
            selectedCount=self.selected_count,
            totalCount=self.total_count,
            totalLocationsInSelected=self.total_locations_in_selected,
            results=self.results,
        )
