import logging
from dataclasses import dataclass
from typing import List

from ..ports.audit_logger import AuditLogger
from ..ports.clinic_repo import ClinicRepository, PatientDto
from ...exceptions import NotFoundError
from ...schemas.patients.patient import PatientCreate, PatientUpdate

logger = logging.getLogger(__name__)


@dataclass
class PatientsService:
    repo: ClinicRepository
    audit: AuditLogger

    def list(self) -> List[PatientDto]:
        return self.repo.list_patients()

    def create(self, body: bytes) -> PatientDto:
        payload = PatientCreate.from_body(body)
        patient = self.repo.create_patient(payload.name, payload.phone)
        logger.info(f"Created patient {patient.id}")
        self.audit.log("patient.create", patient.id, phone=patient.phone)
        return patient

    def update(self, patient_id: int, body: bytes) -> PatientDto:
        # existence is checked before the body is looked at
        with self.repo.transaction():
            if not self.repo.get_patient(patient_id):
                logger.warning(f"Update for unknown patient {patient_id}")
                raise NotFoundError("Patient not found")
            payload = PatientUpdate.from_body(body)
            patient = self.repo.update_patient(patient_id, payload.name, payload.phone)
        logger.info(f"Updated patient {patient_id}")
        self.audit.log("patient.update", patient_id, phone=patient.phone)
        return patient

    def delete(self, patient_id: int) -> None:
        with self.repo.transaction():
            patient = self.repo.get_patient(patient_id)
            if not patient:
                logger.warning(f"Delete for unknown patient {patient_id}")
                raise NotFoundError("Patient not found")
            self.repo.delete_patient(patient_id)
            removed = self.repo.delete_appointments_for_patient(patient_id)
        logger.info(f"Deleted patient {patient_id} and {removed} appointment(s)")
        self.audit.log("patient.delete", patient_id, phone=patient.phone, details={"appointments_removed": removed})
