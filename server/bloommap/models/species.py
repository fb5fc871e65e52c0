# server/bloommap/models/species.py

from pydantic import BaseModel, Field
from typing import List

from bloommap.models.location import Location


class Species(BaseModel):
    """
    Información de referencia de una especie (solo lectura):
    - name / scientificName: nombre común y científico
    - bloomTime, color, habitat, characteristics: textos descriptivos
    """
    id: int
    speciesId: int = Field(..., description="ID de la especie (coincide con Location.speciesId)")
    name: str
    scientificName: str
    description: str = ""
    imageUrl: str = ""
    bloomTime: str = ""
    color: str = ""
    habitat: str = ""
    characteristics: str = ""


class SpeciesWithLocations(BaseModel):
    species: Species
    locations: List[Location]
