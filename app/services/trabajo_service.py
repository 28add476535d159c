"""
Máquina de estados de la ejecución del trabajo.

Estados (descripcion_operacion del registro más reciente):

    En Revisión -> Asignada -> En progreso <-> Pausada -> Completado
    (RECHAZADA desde la revisión, antes de completar)

Cada transición cierra el registro abierto (si existe) y agrega el siguiente
dentro de la misma transacción, de modo que por solicitud nunca queda más de
un registro abierto.
"""
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import ConflictoEstado, DatosInvalidos, RecursoNoEncontrado
from app.models.estado_trabajo import EstadoTrabajo, EstadoOperacion
from app.models.revision import NivelPrioridad, PRIORIDADES_TERMINALES
from app.models.solicitud import Solicitud
from app.models.usuario import Usuario
from app.schemas.estado_trabajo import AccionTrabajo, EstadoTrabajoLegacy, FinalizarTrabajo
from app.services.dashboard_service import (
    estado_operacional,
    maquinista_asignado,
    ordenar_operaciones,
    ultima_operacion,
)
from app.utils.logger import logger


def horas_transcurridas(inicio: datetime, fin: datetime) -> float:
    return round(max((fin - inicio).total_seconds(), 0) / 3600, 2)


def cerrar_registros_abiertos(db: Session, id_solicitud: int, ahora: datetime) -> List[EstadoTrabajo]:
    """Cierra los registros abiertos de la solicitud y les asigna las horas transcurridas."""
    abiertos = (
        db.query(EstadoTrabajo)
        .filter(
            EstadoTrabajo.id_solicitud == id_solicitud,
            EstadoTrabajo.fecha_y_hora_de_fin.is_(None),
        )
        .all()
    )
    for registro in abiertos:
        registro.fecha_y_hora_de_fin = ahora
        registro.tiempo_maquina = horas_transcurridas(registro.fecha_y_hora_de_inicio, ahora)
    return abiertos


class TrabajoService:
    def __init__(self, db: Session):
        self.db = db

    # ==================== VALIDACIONES ====================

    def _cargar(self, id_solicitud: int, id_maquinista: int) -> Solicitud:
        solicitud = self.db.query(Solicitud).filter(Solicitud.id == id_solicitud).first()
        if not solicitud:
            raise RecursoNoEncontrado("Solicitud no encontrada")

        if not self.db.query(Usuario).filter(Usuario.id == id_maquinista).first():
            raise DatosInvalidos("El maquinista indicado no existe.")

        if solicitud.revision is None:
            raise DatosInvalidos("La solicitud aún no ha sido revisada por ingeniería.")

        if solicitud.revision.prioridad in PRIORIDADES_TERMINALES:
            raise ConflictoEstado(
                f"La solicitud ya está en estado '{solicitud.revision.prioridad}' y no admite más cambios."
            )
        return solicitud

    def _maquina_actual(self, solicitud: Solicitud, maquina: Optional[str]) -> str:
        if maquina:
            return maquina
        ultima = ultima_operacion(solicitud)
        if ultima and ultima.maquina_asignada:
            return ultima.maquina_asignada
        return settings.maquina_placeholder

    def _abrir(
        self,
        solicitud: Solicitud,
        descripcion: str,
        id_maquinista: int,
        maquina: Optional[str],
        observaciones: Optional[str],
    ) -> EstadoTrabajo:
        ahora = datetime.now()
        maquina_asignada = self._maquina_actual(solicitud, maquina)
        cerrar_registros_abiertos(self.db, solicitud.id, ahora)

        registro = EstadoTrabajo(
            id_solicitud=solicitud.id,
            id_maquinista=id_maquinista,
            descripcion_operacion=descripcion,
            maquina_asignada=maquina_asignada,
            fecha_y_hora_de_inicio=ahora,
            tiempo_maquina=0,
            observaciones=observaciones,
        )
        self.db.add(registro)
        self.db.commit()
        self.db.refresh(registro)
        return registro

    # ==================== TRANSICIONES ====================

    def iniciar(self, id_solicitud: int, data: AccionTrabajo) -> EstadoTrabajo:
        """Inicia o reanuda el trabajo."""
        solicitud = self._cargar(id_solicitud, data.id_maquinista)
        if estado_operacional(solicitud) == EstadoOperacion.EN_PROGRESO.value:
            raise ConflictoEstado("El trabajo ya está en progreso.")

        registro = self._abrir(
            solicitud,
            EstadoOperacion.EN_PROGRESO.value,
            data.id_maquinista,
            data.maquina_asignada,
            data.observaciones,
        )
        logger.info(
            "Trabajo iniciado solicitud=%s maquinista=%s", id_solicitud, data.id_maquinista,
        )
        return registro

    def pausar(self, id_solicitud: int, data: AccionTrabajo) -> EstadoTrabajo:
        solicitud = self._cargar(id_solicitud, data.id_maquinista)
        if estado_operacional(solicitud) != EstadoOperacion.EN_PROGRESO.value:
            raise ConflictoEstado("Solo se puede pausar un trabajo en progreso.")

        registro = self._abrir(
            solicitud,
            EstadoOperacion.PAUSADA.value,
            data.id_maquinista,
            data.maquina_asignada,
            data.observaciones,
        )
        logger.info(
            "Trabajo pausado solicitud=%s maquinista=%s", id_solicitud, data.id_maquinista,
        )
        return registro

    def finalizar(self, id_solicitud: int, data: FinalizarTrabajo) -> List[EstadoTrabajo]:
        """
        Cierra el trabajo: marca la revisión como Completado y registra un
        segmento cerrado por cada máquina con horas positivas.
        """
        solicitud = self._cargar(id_solicitud, data.id_maquinista)
        tiempos = self._validar_tiempos(data.tiempos_por_maquina)

        ahora = datetime.now()
        cerrar_registros_abiertos(self.db, solicitud.id, ahora)
        solicitud.revision.prioridad = NivelPrioridad.COMPLETADO.value

        registros = []
        for maquina, horas in tiempos.items():
            registro = EstadoTrabajo(
                id_solicitud=solicitud.id,
                id_maquinista=data.id_maquinista,
                descripcion_operacion=EstadoOperacion.COMPLETADO.value,
                maquina_asignada=maquina,
                fecha_y_hora_de_inicio=ahora,
                fecha_y_hora_de_fin=ahora,
                tiempo_maquina=round(horas, 2),
                observaciones=data.observaciones,
            )
            self.db.add(registro)
            registros.append(registro)

        self.db.commit()
        for registro in registros:
            self.db.refresh(registro)

        logger.info(
            "Trabajo finalizado solicitud=%s maquinas=%s", id_solicitud, list(tiempos.keys()),
        )
        return registros

    def registrar(self, data: EstadoTrabajoLegacy) -> List[EstadoTrabajo]:
        """Despacha el cuerpo plano heredado según el valor de `prioridad`."""
        if data.prioridad == EstadoOperacion.COMPLETADO.value:
            maquina = data.maquina_asignada or settings.maquina_placeholder
            return self.finalizar(
                data.id_solicitud,
                FinalizarTrabajo(
                    id_maquinista=data.id_maquinista,
                    tiempos_por_maquina={maquina: data.tiempo_maquina},
                    observaciones=data.observaciones,
                ),
            )

        accion = AccionTrabajo(
            id_maquinista=data.id_maquinista,
            maquina_asignada=data.maquina_asignada,
            observaciones=data.observaciones,
        )
        if data.prioridad == EstadoOperacion.PAUSADA.value:
            return [self.pausar(data.id_solicitud, accion)]
        return [self.iniciar(data.id_solicitud, accion)]

    @staticmethod
    def _validar_tiempos(tiempos: Dict[str, float]) -> Dict[str, float]:
        if any(horas < 0 for horas in tiempos.values()):
            raise DatosInvalidos("Los tiempos de máquina no pueden ser negativos.")
        positivos: Dict[str, float] = {}
        for maquina, horas in tiempos.items():
            nombre = maquina.strip()
            if horas > 0 and nombre:
                # Nombres que solo difieren en espacios se acumulan en la misma máquina
                positivos[nombre] = positivos.get(nombre, 0) + horas
        if not positivos:
            raise DatosInvalidos("Debe registrar al menos una máquina con tiempo mayor a cero.")
        return positivos

    # ==================== CONSULTAS ====================

    def listar(self) -> List[EstadoTrabajo]:
        return (
            self.db.query(EstadoTrabajo)
            .order_by(EstadoTrabajo.fecha_y_hora_de_inicio, EstadoTrabajo.id)
            .all()
        )

    def historial(self, id_solicitud: int) -> List[EstadoTrabajo]:
        solicitud = self.db.query(Solicitud).filter(Solicitud.id == id_solicitud).first()
        if not solicitud:
            raise RecursoNoEncontrado("Solicitud no encontrada")
        return ordenar_operaciones(solicitud.operaciones)

    def asignaciones(self) -> List[Dict]:
        """Maquinista asignado de cada solicitud que ya tiene uno."""
        resultado = []
        for solicitud in self.db.query(Solicitud).order_by(Solicitud.id).all():
            asignacion = maquinista_asignado(solicitud)
            if asignacion is not None and asignacion.maquinista_nombre:
                resultado.append({
                    "id_solicitud": solicitud.id,
                    "maquinista_asignado_nombre": asignacion.maquinista_nombre,
                })
        return resultado
