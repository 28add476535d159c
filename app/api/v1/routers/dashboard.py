from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.common import ErrorResponse
from app.schemas.dashboard import ResumenDashboard, SolicitudDetalle
from app.services.dashboard_service import DashboardService

router = APIRouter(tags=["Dashboard"])


@router.get(
    "/detalle/{id_solicitud}",
    response_model=SolicitudDetalle,
    responses={404: {"model": ErrorResponse}},
    summary="Detalle completo de una solicitud",
    description="Solicitud, área, revisión, último estado e historial de trabajo con tiempos.",
)
def detalle_solicitud(id_solicitud: int, db: Session = Depends(get_db)):
    return DashboardService(db).detalle(id_solicitud)


@router.get(
    "/resumen",
    response_model=ResumenDashboard,
    summary="Resumen del tablero",
    description="Conteo de solicitudes por prioridad actual y por estado operacional.",
)
def resumen(db: Session = Depends(get_db)):
    return DashboardService(db).resumen()
