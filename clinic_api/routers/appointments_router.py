from typing import List
from fastapi import APIRouter, Depends
import logging

from ..application.ports.audit_logger import AuditLogger
from ..application.ports.clinic_repo import ClinicRepository, AppointmentDto
from ..application.services.appointments_service import AppointmentsService
from ..dependencies import get_audit_logger, get_repository, read_body
from ..schemas.appointments.appointment import AppointmentResponse
from ..schemas.common.common import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments", tags=["Appointments"])


def get_appointments_service(
    repo: ClinicRepository = Depends(get_repository),
    audit: AuditLogger = Depends(get_audit_logger),
) -> AppointmentsService:
    return AppointmentsService(repo=repo, audit=audit)


def _to_response(a: AppointmentDto) -> AppointmentResponse:
    return AppointmentResponse(
        id=a.id,
        patientId=a.patient_id,
        patientName=a.patient_name,
        doctorId=a.doctor_id,
        doctorName=a.doctor_name,
        date=a.date,
    )


@router.get("", response_model=List[AppointmentResponse])
def get_appointments(appt_service: AppointmentsService = Depends(get_appointments_service)):
    return [_to_response(a) for a in appt_service.list()]


@router.post("", response_model=AppointmentResponse, status_code=201)
def book_appointment(
    body: bytes = Depends(read_body),
    appt_service: AppointmentsService = Depends(get_appointments_service),
):
    return _to_response(appt_service.book(body))


@router.delete("/{appointment_id:int}", response_model=SuccessResponse)
def delete_appointment(
    appointment_id: int,
    appt_service: AppointmentsService = Depends(get_appointments_service),
):
    appt_service.cancel(appointment_id)
    return SuccessResponse(success=True)
