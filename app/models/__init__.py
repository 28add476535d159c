from app.db.base import Base

# Importa modelos para que se registren en Base.metadata
from .usuario import Usuario
from .area import Area
from .pieza import Pieza
from .maquina import MaquinaMS
from .solicitud import Solicitud
from .revision import Revision, NivelPrioridad
from .estado_trabajo import EstadoTrabajo, EstadoOperacion

__all__ = [
    "Usuario",
    "Area",
    "Pieza",
    "MaquinaMS",
    "Solicitud",
    "Revision",
    "NivelPrioridad",
    "EstadoTrabajo",
    "EstadoOperacion",
    "Base",
]
