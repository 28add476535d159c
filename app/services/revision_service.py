"""
Servicio de revisión de ingeniería: aprobación con prioridad y asignación
de maquinista, rechazo y cambios de prioridad posteriores.
"""
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import ConflictoEstado, DatosInvalidos, RecursoNoEncontrado
from app.models.estado_trabajo import EstadoTrabajo, EstadoOperacion
from app.models.revision import Revision, NivelPrioridad, PRIORIDADES_TERMINALES
from app.models.solicitud import Solicitud
from app.models.usuario import Usuario
from app.schemas.revision import RevisionCreate, PrioridadUpdate
from app.services.dashboard_service import ultima_operacion
from app.services.trabajo_service import cerrar_registros_abiertos
from app.utils.logger import logger


class RevisionService:
    def __init__(self, db: Session):
        self.db = db

    def _usuario(self, usuario_id: int, etiqueta: str) -> Usuario:
        usuario = self.db.query(Usuario).filter(Usuario.id == usuario_id).first()
        if not usuario:
            raise DatosInvalidos(f"El {etiqueta} indicado no existe.")
        return usuario

    def _registro_rechazo(self, id_solicitud: int, ahora: datetime, observaciones: str) -> EstadoTrabajo:
        return EstadoTrabajo(
            id_solicitud=id_solicitud,
            id_maquinista=settings.system_user_id,
            descripcion_operacion=EstadoOperacion.RECHAZADA.value,
            maquina_asignada="",
            fecha_y_hora_de_inicio=ahora,
            fecha_y_hora_de_fin=ahora,
            tiempo_maquina=0,
            observaciones=observaciones,
        )

    # ==================== CREAR ====================

    def crear(self, data: RevisionCreate) -> Revision:
        solicitud = self.db.query(Solicitud).filter(Solicitud.id == data.id_solicitud).first()
        if not solicitud:
            raise RecursoNoEncontrado("Solicitud no encontrada")

        if solicitud.revision is not None:
            raise ConflictoEstado("La solicitud ya tiene una revisión registrada.")

        revisor = self._usuario(data.id_revisor, "revisor")
        maquinista = None
        if data.id_maquinista_asignado is not None:
            maquinista = self._usuario(data.id_maquinista_asignado, "maquinista")

        ahora = datetime.now()
        revision = Revision(
            id_solicitud=solicitud.id,
            id_revisor=revisor.id,
            prioridad=data.prioridad,
            comentarios=data.comentarios,
            fecha_hora_revision=ahora,
        )
        self.db.add(revision)

        cerrar_registros_abiertos(self.db, solicitud.id, ahora)
        if data.prioridad == NivelPrioridad.RECHAZADA.value:
            registro = self._registro_rechazo(
                solicitud.id, ahora, f"Rechazada por {revisor.nombre}: {data.comentarios or 'sin comentarios'}"
            )
        else:
            registro = EstadoTrabajo(
                id_solicitud=solicitud.id,
                id_maquinista=maquinista.id,
                descripcion_operacion=EstadoOperacion.ASIGNADA.value,
                maquina_asignada=settings.maquina_placeholder,
                fecha_y_hora_de_inicio=ahora,
                tiempo_maquina=0,
                observaciones=f"Asignada a {maquinista.nombre} con prioridad {data.prioridad}",
            )
        self.db.add(registro)

        self.db.commit()
        self.db.refresh(revision)

        logger.info(
            "Revisión creada solicitud=%s prioridad=%s", solicitud.id, revision.prioridad,
        )
        return revision

    # ==================== CAMBIO DE PRIORIDAD ====================

    def actualizar_prioridad(self, id_solicitud: int, data: PrioridadUpdate) -> Revision:
        revision = self.obtener_por_solicitud(id_solicitud)

        if revision.prioridad in PRIORIDADES_TERMINALES:
            raise DatosInvalidos(
                f"No se puede cambiar la prioridad de una solicitud en estado '{revision.prioridad}'."
            )

        autor: Optional[Usuario] = None
        if data.id_usuario is not None:
            autor = self._usuario(data.id_usuario, "usuario")

        anterior = revision.prioridad
        if anterior == data.nueva_prioridad:
            return revision

        ahora = datetime.now()
        nota = f"Prioridad actualizada: {anterior} → {data.nueva_prioridad}"
        if autor is not None:
            nota += f" (por {autor.nombre})"

        revision.prioridad = data.nueva_prioridad

        if data.nueva_prioridad == NivelPrioridad.RECHAZADA.value:
            cerrar_registros_abiertos(self.db, id_solicitud, ahora)
            self.db.add(self._registro_rechazo(id_solicitud, ahora, nota))
        else:
            # El registro de auditoría conserva el estado y maquinista vigentes
            ultima = ultima_operacion(revision.solicitud)
            self.db.add(
                EstadoTrabajo(
                    id_solicitud=id_solicitud,
                    id_maquinista=ultima.id_maquinista if ultima else settings.system_user_id,
                    descripcion_operacion=(
                        ultima.descripcion_operacion if ultima else EstadoOperacion.ASIGNADA.value
                    ),
                    maquina_asignada=ultima.maquina_asignada if ultima else settings.maquina_placeholder,
                    fecha_y_hora_de_inicio=ahora,
                    fecha_y_hora_de_fin=ahora,
                    tiempo_maquina=0,
                    observaciones=nota,
                )
            )

        self.db.commit()
        self.db.refresh(revision)

        logger.info(
            "Prioridad actualizada solicitud=%s %s -> %s", id_solicitud, anterior, revision.prioridad,
        )
        return revision

    # ==================== CONSULTAS ====================

    def listar(self) -> List[Revision]:
        return self.db.query(Revision).order_by(Revision.fecha_hora_revision.desc()).all()

    def obtener_por_solicitud(self, id_solicitud: int) -> Revision:
        revision = self.db.query(Revision).filter(Revision.id_solicitud == id_solicitud).first()
        if not revision:
            raise RecursoNoEncontrado("La solicitud no tiene revisión")
        return revision
