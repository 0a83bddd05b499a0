# clinic_api/schemas/patient.py
from pydantic import BaseModel, StrictStr, ValidationError as PydanticValidationError

from ...exceptions import ParseError, ValidationError
from ..common.common import is_present, load_json_object

__all__ = ["PatientCreate", "PatientUpdate", "PatientResponse"]

INVALID_PATIENT_DATA = "Invalid patient data"
PATIENT_FIELDS_REQUIRED = "Name and phone are required"


class PatientCreate(BaseModel):
    """Body of POST /patients and PUT /patients/{id}."""
    name: StrictStr
    phone: StrictStr

    @classmethod
    def from_body(cls, body: bytes) -> "PatientCreate":
        data = load_json_object(body, INVALID_PATIENT_DATA)
        if not is_present(data.get("name")) or not is_present(data.get("phone")):
            raise ValidationError(PATIENT_FIELDS_REQUIRED)
        try:
            return cls.model_validate(data)
        except PydanticValidationError:
            raise ParseError(INVALID_PATIENT_DATA)


class PatientUpdate(PatientCreate):
    pass


class PatientResponse(BaseModel):
    id: int
    name: str
    phone: str
