import threading
from dataclasses import replace
from typing import List, Optional

from ....application.ports.clinic_repo import (
    ClinicRepository,
    AppointmentDto,
    DoctorDto,
    PatientDto,
)


SEED_DOCTORS = (
    DoctorDto(id=1, name="Dr. Smith", specialty="Cardiology"),
    DoctorDto(id=2, name="Dr. Johnson", specialty="Dermatology"),
    DoctorDto(id=3, name="Dr. Patel", specialty="Pediatrics"),
)


class InMemoryClinicRepository(ClinicRepository):
    """Process-local store for doctors, patients and appointments.

    Every public method takes the store lock, and ``transaction()`` exposes the
    same re-entrant lock so a service can group several calls (lookup, conflict
    check, insert) into one atomic step. Returned DTOs are copies; mutating
    them does not touch the store.

    Ids come from counters that only move forward, so an id is never handed
    out twice even when the entity holding it has been deleted.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._doctors: List[DoctorDto] = [replace(d) for d in SEED_DOCTORS]
        self._patients: List[PatientDto] = []
        self._appointments: List[AppointmentDto] = []
        self._next_patient_id = 1
        self._next_appointment_id = 1

    def transaction(self) -> threading.RLock:
        return self._lock

    # Doctors

    def list_doctors(self) -> List[DoctorDto]:
        with self._lock:
            return [replace(d) for d in self._doctors]

    def get_doctor(self, doctor_id: int) -> Optional[DoctorDto]:
        with self._lock:
            d = self._find(self._doctors, doctor_id)
            return replace(d) if d else None

    # Patients

    def list_patients(self) -> List[PatientDto]:
        with self._lock:
            return [replace(p) for p in self._patients]

    def get_patient(self, patient_id: int) -> Optional[PatientDto]:
        with self._lock:
            p = self._find(self._patients, patient_id)
            return replace(p) if p else None

    def create_patient(self, name: str, phone: str) -> PatientDto:
        with self._lock:
            patient = PatientDto(id=self._next_patient_id, name=name, phone=phone)
            self._next_patient_id += 1
            self._patients.append(patient)
            return replace(patient)

    def update_patient(self, patient_id: int, name: str, phone: str) -> Optional[PatientDto]:
        with self._lock:
            p = self._find(self._patients, patient_id)
            if not p:
                return None
            p.name = name
            p.phone = phone
            return replace(p)

    def delete_patient(self, patient_id: int) -> bool:
        with self._lock:
            p = self._find(self._patients, patient_id)
            if not p:
                return False
            self._patients.remove(p)
            return True

    # Appointments

    def list_appointments(self) -> List[AppointmentDto]:
        with self._lock:
            return [replace(a) for a in self._appointments]

    def find_conflict(self, doctor_id: int, patient_id: int, date: str) -> bool:
        with self._lock:
            return any(
                a.date == date and (a.doctor_id == doctor_id or a.patient_id == patient_id)
                for a in self._appointments
            )

    def create_appointment(self, patient: PatientDto, doctor: DoctorDto, date: str) -> AppointmentDto:
        with self._lock:
            appt = AppointmentDto(
                id=self._next_appointment_id,
                patient_id=patient.id,
                patient_name=patient.name,
                doctor_id=doctor.id,
                doctor_name=doctor.name,
                date=date,
            )
            self._next_appointment_id += 1
            self._appointments.append(appt)
            return replace(appt)

    def delete_appointment(self, appointment_id: int) -> bool:
        with self._lock:
            a = self._find(self._appointments, appointment_id)
            if not a:
                return False
            self._appointments.remove(a)
            return True

    def delete_appointments_for_patient(self, patient_id: int) -> int:
        with self._lock:
            kept = [a for a in self._appointments if a.patient_id != patient_id]
            removed = len(self._appointments) - len(kept)
            self._appointments = kept
            return removed

    @staticmethod
    def _find(items, entity_id: int):
        return next((item for item in items if item.id == entity_id), None)
