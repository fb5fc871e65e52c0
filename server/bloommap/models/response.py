# server/bloommap/models/response.py

from pydantic import BaseModel, Field
from typing import Any


class ApiResponse(BaseModel):
    """
    Sobre común de todas las respuestas (incluidos los errores).
    El código HTTP indica la clase de fallo; `message` se muestra tal cual.
    """
    success: bool
    data: Any = Field(None, description="Registro, lista o null")
    message: str
