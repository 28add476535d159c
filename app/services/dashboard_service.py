"""
Vistas derivadas de las solicitudes.

Ninguno de estos valores se almacena: prioridad actual, estado operacional,
maquinista asignado y tiempos se calculan a partir de la revisión y del
historial de EstadoTrabajo de cada solicitud.
"""
from collections import Counter
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import RecursoNoEncontrado
from app.models.estado_trabajo import EstadoTrabajo, EstadoOperacion
from app.models.revision import PRIORIDAD_SIN_REVISION
from app.models.solicitud import Solicitud


# ==================== DERIVACIONES ====================

def ordenar_operaciones(operaciones: List[EstadoTrabajo]) -> List[EstadoTrabajo]:
    """Historial en orden cronológico; el id desempata registros del mismo instante."""
    return sorted(operaciones, key=lambda op: (op.fecha_y_hora_de_inicio, op.id))


def ultima_operacion(solicitud: Solicitud) -> Optional[EstadoTrabajo]:
    operaciones = ordenar_operaciones(solicitud.operaciones)
    return operaciones[-1] if operaciones else None


def prioridad_actual(solicitud: Solicitud) -> str:
    if solicitud.revision is None:
        return PRIORIDAD_SIN_REVISION
    return solicitud.revision.prioridad


def estado_operacional(solicitud: Solicitud) -> str:
    ultima = ultima_operacion(solicitud)
    if ultima is not None:
        return ultima.descripcion_operacion
    # Sin historial: se infiere de la revisión
    if solicitud.revision is not None:
        return "Aprobada/En Espera"
    return EstadoOperacion.EN_REVISION.value


def maquinista_asignado(solicitud: Solicitud) -> Optional[EstadoTrabajo]:
    """Registro más reciente con un maquinista real (se ignora el usuario de sistema)."""
    candidatos = [
        op for op in solicitud.operaciones
        if op.id_maquinista is not None and op.id_maquinista != settings.system_user_id
    ]
    if not candidatos:
        return None
    return max(candidatos, key=lambda op: (op.fecha_y_hora_de_inicio, op.id))


def total_tiempo_maquina(solicitud: Solicitud) -> float:
    total = sum(
        op.tiempo_maquina or 0
        for op in solicitud.operaciones
        if op.descripcion_operacion == EstadoOperacion.COMPLETADO.value
    )
    return round(float(total), 2)


def tiempo_trabajado_horas(solicitud: Solicitud) -> float:
    """Horas reales de reloj en segmentos 'En progreso' ya cerrados."""
    total = sum(
        op.tiempo_maquina or 0
        for op in solicitud.operaciones
        if op.descripcion_operacion == EstadoOperacion.EN_PROGRESO.value and not op.abierto
    )
    return round(float(total), 2)


def a_fila_dashboard(solicitud: Solicitud) -> Dict[str, Any]:
    asignacion = maquinista_asignado(solicitud)
    pieza = solicitud.pieza
    return {
        "id": solicitud.id,
        "pieza_nombre": pieza.nombre_pieza if pieza else None,
        "maquina": pieza.maquina if pieza and pieza.maquina else "No Asignada",
        "solicitante_nombre": solicitud.solicitante.nombre if solicitud.solicitante else None,
        "fecha_y_hora": solicitud.fecha_y_hora,
        "turno": solicitud.turno,
        "tipo": solicitud.tipo,
        "detalles": solicitud.detalles,
        "dibujo": solicitud.dibujo,
        "prioridad_actual": prioridad_actual(solicitud),
        "estado_operacional": estado_operacional(solicitud),
        "maquinista_asignado_nombre": asignacion.maquinista_nombre if asignacion else None,
        "total_tiempo_maquina": total_tiempo_maquina(solicitud),
    }


# ==================== SERVICIO ====================

class DashboardService:
    def __init__(self, db: Session):
        self.db = db

    def detalle(self, id_solicitud: int) -> Dict[str, Any]:
        solicitud = self.db.query(Solicitud).filter(Solicitud.id == id_solicitud).first()
        if not solicitud:
            raise RecursoNoEncontrado("Solicitud no encontrada")

        historial = ordenar_operaciones(solicitud.operaciones)
        fila = a_fila_dashboard(solicitud)
        fila.update({
            "area_nombre": solicitud.pieza.nombre_area if solicitud.pieza else None,
            "revision": solicitud.revision,
            "ultimo_estado": historial[-1] if historial else None,
            # Más reciente primero, como lo muestra el panel
            "historial": list(reversed(historial)),
            "tiempo_trabajado_horas": tiempo_trabajado_horas(solicitud),
        })
        return fila

    def resumen(self) -> Dict[str, Any]:
        solicitudes = self.db.query(Solicitud).all()
        por_prioridad = Counter(prioridad_actual(s) for s in solicitudes)
        por_estado = Counter(estado_operacional(s) for s in solicitudes)
        return {
            "total_solicitudes": len(solicitudes),
            "por_prioridad": dict(por_prioridad),
            "por_estado": dict(por_estado),
        }
