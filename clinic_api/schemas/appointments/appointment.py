# clinic_api/schemas/appointment.py
from pydantic import BaseModel, StrictInt, StrictStr, ValidationError as PydanticValidationError, field_validator

from ...exceptions import ParseError, ValidationError
from ..common.common import is_present, load_json_object

__all__ = ["AppointmentCreate", "AppointmentResponse"]

INVALID_APPOINTMENT_DATA = "Invalid appointment data"
APPOINTMENT_FIELDS_REQUIRED = "patientId, doctorId, and date are required"
INVALID_REFERENCES = "Invalid patientId or doctorId"
_REFERENCE_FIELDS = ("patientId", "doctorId")


class AppointmentCreate(BaseModel):
    patientId: StrictInt
    doctorId: StrictInt
    date: StrictStr  # compared verbatim, e.g. 2024-01-01T10:00

    @field_validator("patientId", "doctorId", mode="before")
    @classmethod
    def _integral_float_to_int(cls, value):
        # JSON has one number type: 1.0 names the same entity as 1
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    @classmethod
    def from_body(cls, body: bytes) -> "AppointmentCreate":
        data = load_json_object(body, INVALID_APPOINTMENT_DATA)
        if not all(is_present(data.get(f)) for f in ("patientId", "doctorId", "date")):
            raise ValidationError(APPOINTMENT_FIELDS_REQUIRED)
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            # a non-integer id can never match an entity
            if any(err["loc"] and err["loc"][0] in _REFERENCE_FIELDS for err in e.errors()):
                raise ValidationError(INVALID_REFERENCES)
            raise ParseError(INVALID_APPOINTMENT_DATA)


class AppointmentResponse(BaseModel):
    id: int
    patientId: int
    patientName: str
    doctorId: int
    doctorName: str
    date: str
