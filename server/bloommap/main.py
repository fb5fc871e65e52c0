from typing import Iterable, Optional

from fastapi import FastAPI
from bloommap.api import locations, species, overlays
from bloommap.core import config
from bloommap.models.overlay import MapOverlay
from bloommap.models.species import Species
from bloommap.services.location_store import LocationStore
from bloommap.utils.mock_data import MOCK_OVERLAYS, MOCK_SPECIES, seed_for
import logging
from fastapi.middleware.cors import CORSMiddleware

# Descripciones para agrupar en Swagger UI
tags_metadata = [
    {
        "name": "Locations",
        "description": "CRUD de ubicaciones de floración (crear, listar, actualizar, eliminar)."
    },
    {
        "name": "Species",
        "description": "Catálogo de especies (solo lectura)."
    },
    {
        "name": "Overlays",
        "description": "Regiones del mapa y estadísticas de ubicaciones por región."
    },
]

# Configuración del logger
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logging.getLogger("uvicorn.error").setLevel(config.LOG_LEVEL)
logging.getLogger("uvicorn.access").setLevel(logging.INFO)
logging.getLogger("urllib3.connectionpool").disabled = True

logger = logging.getLogger(__name__)


def create_app(
    store: Optional[LocationStore] = None,
    species_catalog: Optional[Iterable] = None,
    map_overlays: Optional[Iterable] = None,
) -> FastAPI:
    """
    Crea la aplicación con su propio almacén de ubicaciones.
    Sin argumentos usa la semilla de BLOOMMAP_SEED y los datos de prueba.
    """
    app = FastAPI(
        title="Bloom Map Backend",
        description="API REST para ubicaciones de floración, especies y overlays del mapa.",
        version="1.0.0",
        openapi_tags=tags_metadata,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    # Añade el middleware CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Estado de la aplicación
    app.state.location_store = store if store is not None else LocationStore(seed_for(config.LOCATION_SEED))
    app.state.species_catalog = [
        Species.model_validate(s) for s in (MOCK_SPECIES if species_catalog is None else species_catalog)
    ]
    app.state.overlays = [
        MapOverlay.model_validate(o) for o in (MOCK_OVERLAYS if map_overlays is None else map_overlays)
    ]
    logger.info(f"Almacén iniciado con {len(app.state.location_store)} ubicaciones")

    # Inclusión de routers con sus tags
    app.include_router(locations.router, prefix=f"{config.API_PREFIX}/locations", tags=["Locations"])
    app.include_router(species.router, prefix=f"{config.API_PREFIX}/species", tags=["Species"])
    app.include_router(overlays.router, prefix=f"{config.API_PREFIX}/overlays", tags=["Overlays"])

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
