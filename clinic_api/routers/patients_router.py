from typing import List
from fastapi import APIRouter, Depends
import logging

from ..application.ports.audit_logger import AuditLogger
from ..application.ports.clinic_repo import ClinicRepository, PatientDto
from ..application.services.patients_service import PatientsService
from ..dependencies import get_audit_logger, get_repository, read_body
from ..schemas.common.common import SuccessResponse
from ..schemas.patients.patient import PatientResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/patients", tags=["Patients"])


def get_patients_service(
    repo: ClinicRepository = Depends(get_repository),
    audit: AuditLogger = Depends(get_audit_logger),
) -> PatientsService:
    return PatientsService(repo=repo, audit=audit)


def _to_response(p: PatientDto) -> PatientResponse:
    return PatientResponse(id=p.id, name=p.name, phone=p.phone)


@router.get("", response_model=List[PatientResponse])
def get_patients(patients_service: PatientsService = Depends(get_patients_service)):
    return [_to_response(p) for p in patients_service.list()]


@router.post("", response_model=PatientResponse, status_code=201)
def create_patient(
    body: bytes = Depends(read_body),
    patients_service: PatientsService = Depends(get_patients_service),
):
    return _to_response(patients_service.create(body))


@router.put("/{patient_id:int}", response_model=PatientResponse)
def update_patient(
    patient_id: int,
    body: bytes = Depends(read_body),
    patients_service: PatientsService = Depends(get_patients_service),
):
    return _to_response(patients_service.update(patient_id, body))


@router.delete("/{patient_id:int}", response_model=SuccessResponse)
def delete_patient(
    patient_id: int,
    patients_service: PatientsService = Depends(get_patients_service),
):
    patients_service.delete(patient_id)
    return SuccessResponse(success=True)
