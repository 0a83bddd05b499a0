import json

import pytest

from clinic_api.application.services.appointments_service import AppointmentsService
from clinic_api.application.services.patients_service import PatientsService
from clinic_api.exceptions import NotFoundError, ParseError, ValidationError

DATE = "2024-01-01T10:00"


def body(data) -> bytes:
    return json.dumps(data).encode()


@pytest.fixture
def patients(repo, audit):
    svc = PatientsService(repo=repo, audit=audit)
    svc.create(body({"name": "Alice", "phone": "555-1111"}))
    svc.create(body({"name": "Bob", "phone": "555-2222"}))
    return svc


@pytest.fixture
def svc(repo, audit, patients):
    return AppointmentsService(repo=repo, audit=audit)


def test_book_success(svc):
    out = svc.book(body({"patientId": 1, "doctorId": 1, "date": DATE}))
    assert out.id == 1
    assert out.patient_name == "Alice"
    assert out.doctor_name == "Dr. Smith"
    assert out.date == DATE


def test_book_requires_all_fields(svc):
    for data in ({"doctorId": 1, "date": DATE}, {"patientId": 1, "date": DATE},
                 {"patientId": 1, "doctorId": 1}, {"patientId": 0, "doctorId": 1, "date": DATE}):
        with pytest.raises(ValidationError) as exc:
            svc.book(body(data))
        assert exc.value.detail == "patientId, doctorId, and date are required"


@pytest.mark.parametrize("data", [
    {"patientId": 9, "doctorId": 1, "date": DATE},
    {"patientId": 1, "doctorId": 4, "date": DATE},
    {"patientId": "1", "doctorId": 1, "date": DATE},
    {"patientId": 1, "doctorId": True, "date": DATE},
    {"patientId": 1.5, "doctorId": 1, "date": DATE},
])
def test_book_rejects_unknown_references(svc, data):
    with pytest.raises(ValidationError) as exc:
        svc.book(body(data))
    assert exc.value.detail == "Invalid patientId or doctorId"


def test_book_rejects_malformed_body(svc):
    with pytest.raises(ParseError) as exc:
        svc.book(b"not json")
    assert exc.value.detail == "Invalid appointment data"


def test_book_rejects_deeply_nested_body(svc):
    with pytest.raises(ParseError) as exc:
        svc.book(b"[" * 100000)
    assert exc.value.detail == "Invalid appointment data"


def test_book_accepts_integral_float_ids(svc):
    out = svc.book(body({"patientId": 1.0, "doctorId": 2.0, "date": DATE}))
    assert (out.patient_id, out.doctor_id) == (1, 2)
    assert out.patient_name == "Alice"


def test_same_doctor_same_date_conflicts(svc):
    svc.book(body({"patientId": 1, "doctorId": 1, "date": DATE}))
    with pytest.raises(ValidationError) as exc:
        svc.book(body({"patientId": 2, "doctorId": 1, "date": DATE}))
    assert exc.value.detail == "Conflict: doctor or patient already booked at that time"


def test_same_patient_same_date_conflicts(svc):
    svc.book(body({"patientId": 1, "doctorId": 1, "date": DATE}))
    with pytest.raises(ValidationError):
        svc.book(body({"patientId": 1, "doctorId": 2, "date": DATE}))


def test_different_patient_and_doctor_share_date(svc):
    svc.book(body({"patientId": 1, "doctorId": 1, "date": DATE}))
    out = svc.book(body({"patientId": 2, "doctorId": 2, "date": DATE}))
    assert out.id == 2


def test_names_are_copied_at_booking(svc, patients):
    appt = svc.book(body({"patientId": 1, "doctorId": 3, "date": DATE}))
    patients.update(1, body({"name": "Alicia", "phone": "555-1111"}))
    assert svc.list()[0].patient_name == "Alice"
    assert appt.doctor_name == "Dr. Patel"


def test_delete_patient_cascades(svc, patients):
    svc.book(body({"patientId": 1, "doctorId": 1, "date": DATE}))
    svc.book(body({"patientId": 2, "doctorId": 2, "date": DATE}))
    svc.book(body({"patientId": 1, "doctorId": 3, "date": "2024-01-02T10:00"}))
    patients.delete(1)
    assert [(a.id, a.patient_id) for a in svc.list()] == [(2, 2)]


def test_cancel(svc, audit):
    appt = svc.book(body({"patientId": 1, "doctorId": 1, "date": DATE}))
    svc.cancel(appt.id)
    assert svc.list() == []
    assert audit.actions[-2:] == ["appointment.create", "appointment.delete"]
    with pytest.raises(NotFoundError) as exc:
        svc.cancel(appt.id)
    assert exc.value.detail == "Appointment not found"


def test_appointment_ids_not_reused(svc):
    first = svc.book(body({"patientId": 1, "doctorId": 1, "date": DATE}))
    svc.cancel(first.id)
    second = svc.book(body({"patientId": 1, "doctorId": 1, "date": DATE}))
    assert second.id == 2
