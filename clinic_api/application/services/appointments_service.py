import logging
from dataclasses import dataclass
from typing import List

from ..ports.audit_logger import AuditLogger
from ..ports.clinic_repo import ClinicRepository, AppointmentDto
from ...exceptions import NotFoundError, ValidationError
from ...schemas.appointments.appointment import AppointmentCreate, INVALID_REFERENCES

logger = logging.getLogger(__name__)

CONFLICT_MESSAGE = "Conflict: doctor or patient already booked at that time"


@dataclass
class AppointmentsService:
    repo: ClinicRepository
    audit: AuditLogger

    def list(self) -> List[AppointmentDto]:
        return self.repo.list_appointments()

    def book(self, body: bytes) -> AppointmentDto:
        payload = AppointmentCreate.from_body(body)

        with self.repo.transaction():
            patient = self.repo.get_patient(payload.patientId)
            doctor = self.repo.get_doctor(payload.doctorId)
            if not patient or not doctor:
                logger.warning(f"Booking rejected: unknown patient {payload.patientId} or doctor {payload.doctorId}")
                raise ValidationError(INVALID_REFERENCES)

            # Same date with the same doctor OR the same patient is a double booking
            if self.repo.find_conflict(doctor.id, patient.id, payload.date):
                logger.warning(f"Booking rejected: conflict at {payload.date} for doctor {doctor.id} / patient {patient.id}")
                raise ValidationError(CONFLICT_MESSAGE)

            appt = self.repo.create_appointment(patient, doctor, payload.date)

        logger.info(f"Booked appointment {appt.id} for patient {patient.id} with doctor {doctor.id}")
        self.audit.log("appointment.create", appt.id, details={"patient_id": patient.id, "doctor_id": doctor.id, "date": appt.date})
        return appt

    def cancel(self, appointment_id: int) -> None:
        if not self.repo.delete_appointment(appointment_id):
            logger.warning(f"Delete for unknown appointment {appointment_id}")
            raise NotFoundError("Appointment not found")
        logger.info(f"Deleted appointment {appointment_id}")
        self.audit.log("appointment.delete", appointment_id)
