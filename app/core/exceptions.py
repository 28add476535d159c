"""
Excepciones de dominio del flujo de solicitudes.

Los servicios las lanzan; `app.core.error_handlers` las traduce a respuestas
JSON con el mismo formato que HTTPException ({"detail": ...}).
"""
from fastapi import status


class MachineShopError(Exception):
    """Error base con código HTTP asociado."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class RecursoNoEncontrado(MachineShopError):
    status_code = status.HTTP_404_NOT_FOUND


class DatosInvalidos(MachineShopError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictoEstado(MachineShopError):
    status_code = status.HTTP_409_CONFLICT
