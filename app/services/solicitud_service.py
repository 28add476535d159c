"""
Servicio de alta y consulta de solicitudes de trabajo.

Cada solicitud nace con un registro de EstadoTrabajo abierto ("En Revisión")
a nombre del usuario de sistema; ambos se guardan en la misma transacción.
"""
from datetime import datetime
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import DatosInvalidos, RecursoNoEncontrado
from app.models.estado_trabajo import EstadoTrabajo, EstadoOperacion
from app.models.pieza import Pieza
from app.models.revision import NivelPrioridad, PRIORIDADES_TERMINALES
from app.models.solicitud import Solicitud
from app.models.usuario import Usuario
from app.schemas.solicitud import SolicitudCreate
from app.services.dashboard_service import (
    a_fila_dashboard,
    maquinista_asignado,
    prioridad_actual,
)
from app.utils.logger import logger

FILTROS_ASIGNACION = ("activo", "completado", "historial")


class SolicitudService:
    def __init__(self, db: Session):
        self.db = db

    # ==================== ALTA ====================

    def crear(self, data: SolicitudCreate) -> Solicitud:
        solicitante = self.db.query(Usuario).filter(Usuario.id == data.solicitante_id).first()
        pieza = self.db.query(Pieza).filter(Pieza.id == data.id_pieza).first()
        if not solicitante or not pieza:
            raise DatosInvalidos("El ID del Solicitante o de la Pieza proporcionado no es válido.")

        ahora = datetime.now()
        solicitud = Solicitud(**data.model_dump(), fecha_y_hora=ahora)
        solicitud.operaciones.append(
            EstadoTrabajo(
                id_maquinista=settings.system_user_id,
                descripcion_operacion=EstadoOperacion.EN_REVISION.value,
                maquina_asignada=settings.maquina_placeholder,
                fecha_y_hora_de_inicio=ahora,
                tiempo_maquina=0,
                observaciones="Solicitud registrada, pendiente de revisión de ingeniería",
            )
        )
        self.db.add(solicitud)
        self.db.commit()
        self.db.refresh(solicitud)

        logger.info(
            "Solicitud creada id=%s solicitante=%s", solicitud.id, solicitud.solicitante_id,
        )
        return solicitud

    # ==================== CONSULTAS ====================

    def obtener(self, id_solicitud: int) -> Solicitud:
        solicitud = self.db.query(Solicitud).filter(Solicitud.id == id_solicitud).first()
        if not solicitud:
            raise RecursoNoEncontrado("Solicitud no encontrada")
        return solicitud

    def listar(self) -> List[Dict[str, Any]]:
        solicitudes = self.db.query(Solicitud).order_by(Solicitud.fecha_y_hora.desc(), Solicitud.id.desc()).all()
        return [a_fila_dashboard(s) for s in solicitudes]

    def pendientes(self) -> List[Dict[str, Any]]:
        """Solicitudes que no están completadas ni rechazadas."""
        return [
            fila for fila in self.listar()
            if fila["prioridad_actual"] not in PRIORIDADES_TERMINALES
        ]

    def asignaciones_por_maquinista(self, id_maquinista: int, estado_filtro: str = "activo") -> List[Dict[str, Any]]:
        """
        Solicitudes de un maquinista:
        - activo: asignadas actualmente y sin terminar
        - completado: asignadas actualmente y completadas
        - historial: cualquiera en la que haya registrado un segmento
        """
        if estado_filtro not in FILTROS_ASIGNACION:
            raise DatosInvalidos(
                f"Filtro inválido. Valores permitidos: {', '.join(FILTROS_ASIGNACION)}"
            )
        if not self.db.query(Usuario).filter(Usuario.id == id_maquinista).first():
            raise RecursoNoEncontrado("Maquinista no encontrado")

        resultado = []
        for solicitud in self.db.query(Solicitud).order_by(Solicitud.fecha_y_hora.desc(), Solicitud.id.desc()).all():
            if estado_filtro == "historial":
                incluir = any(op.id_maquinista == id_maquinista for op in solicitud.operaciones)
            else:
                asignacion = maquinista_asignado(solicitud)
                if asignacion is None or asignacion.id_maquinista != id_maquinista:
                    continue
                completada = prioridad_actual(solicitud) == NivelPrioridad.COMPLETADO.value
                if estado_filtro == "completado":
                    incluir = completada
                else:
                    incluir = prioridad_actual(solicitud) not in PRIORIDADES_TERMINALES
            if incluir:
                resultado.append(a_fila_dashboard(solicitud))
        return resultado
