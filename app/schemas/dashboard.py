from pydantic import BaseModel
from typing import Dict, List, Optional

from app.schemas.solicitud import SolicitudDashboard
from app.schemas.revision import RevisionRead
from app.schemas.estado_trabajo import EstadoTrabajoRead


class SolicitudDetalle(SolicitudDashboard):
    """Vista completa de una solicitud para el panel de detalle."""
    area_nombre: Optional[str] = None
    revision: Optional[RevisionRead] = None
    ultimo_estado: Optional[EstadoTrabajoRead] = None
    historial: List[EstadoTrabajoRead] = []
    tiempo_trabajado_horas: float = 0.0


class ResumenDashboard(BaseModel):
    total_solicitudes: int
    por_prioridad: Dict[str, int]
    por_estado: Dict[str, int]
