from typing import List
from fastapi import APIRouter, Depends
import logging

from ..application.ports.clinic_repo import ClinicRepository
from ..application.services.doctors_service import DoctorsService
from ..dependencies import get_repository
from ..schemas.doctors.doctor import DoctorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/doctors", tags=["Doctors"])


def get_doctors_service(repo: ClinicRepository = Depends(get_repository)) -> DoctorsService:
    return DoctorsService(repo=repo)


@router.get("", response_model=List[DoctorResponse])
def get_doctors(doctors_service: DoctorsService = Depends(get_doctors_service)):
    return [
        DoctorResponse(id=d.id, name=d.name, specialty=d.specialty)
        for d in doctors_service.list()
    ]
