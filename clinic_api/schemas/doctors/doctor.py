# clinic_api/schemas/doctor.py
from pydantic import BaseModel


class DoctorResponse(BaseModel):
    id: int
    name: str
    specialty: str
