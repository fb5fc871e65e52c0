# server/bloommap/core/errors.py

from typing import Optional


class LocationError(ValueError):
    """
    Error esperado del dominio de ubicaciones.
    Cada subclase fija su `code`, el `status_code` HTTP y el mensaje
    en inglés que la UI muestra tal cual.
    """
    code = "LocationError"
    status_code = 400
    default_message = "Invalid location request"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# -------------------------------------------------------
# Errores de validación (400)
# -------------------------------------------------------

class MissingFieldError(LocationError):
    code = "MissingField"
    default_message = (
        "Missing required fields: speciesId, locationName, coordinates, bloomingPeriod"
    )


class InvalidCoordinatesError(LocationError):
    code = "InvalidCoordinates"
    default_message = "Coordinates must be an array of [longitude, latitude]"


class InvalidBloomingPeriodError(LocationError):
    code = "InvalidBloomingPeriod"
    default_message = "Blooming period must include start, peak, and end dates"


class InvalidDateOrderError(LocationError):
    code = "InvalidDateOrder"
    default_message = (
        "Invalid date order: start date must be before peak date, "
        "and peak date must be before end date"
    )


class InvalidSpeciesIdError(LocationError):
    code = "InvalidSpeciesId"
    default_message = "speciesId must be a positive integer"


# -------------------------------------------------------
# Errores de petición / búsqueda
# -------------------------------------------------------

class MissingIdError(LocationError):
    code = "MissingId"
    default_message = "Location ID is required"


class MalformedRequestError(LocationError):
    code = "MalformedRequest"
    default_message = "Invalid request body"


class NotFoundError(LocationError):
    code = "NotFound"
    status_code = 404
    default_message = "Location not found"


class ApiError(RuntimeError):
    """La API remota respondió con `success: false`."""
