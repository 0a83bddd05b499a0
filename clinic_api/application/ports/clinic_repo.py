from dataclasses import dataclass
from typing import ContextManager, List, Optional, Protocol


@dataclass
class DoctorDto:
    id: int
    name: str
    specialty: str


@dataclass
class PatientDto:
    id: int
    name: str
    phone: str


@dataclass
class AppointmentDto:
    id: int
    patient_id: int
    patient_name: str
    doctor_id: int
    doctor_name: str
    date: str


class ClinicRepository(Protocol):
    def transaction(self) -> ContextManager:
        """Hold the store exclusively for a read-modify-write sequence."""
        ...

    def list_doctors(self) -> List[DoctorDto]:
        ...

    def get_doctor(self, doctor_id: int) -> Optional[DoctorDto]:
        ...

    def list_patients(self) -> List[PatientDto]:
        ...

    def get_patient(self, patient_id: int) -> Optional[PatientDto]:
        ...

    def create_patient(self, name: str, phone: str) -> PatientDto:
        ...

    def update_patient(self, patient_id: int, name: str, phone: str) -> Optional[PatientDto]:
        ...

    def delete_patient(self, patient_id: int) -> bool:
        ...

    def list_appointments(self) -> List[AppointmentDto]:
        ...

    def find_conflict(self, doctor_id: int, patient_id: int, date: str) -> bool:
        ...

    def create_appointment(self, patient: PatientDto, doctor: DoctorDto, date: str) -> AppointmentDto:
        ...

    def delete_appointment(self, appointment_id: int) -> bool:
        ...

    def delete_appointments_for_patient(self, patient_id: int) -> int:
        ...
