from clinic_api.infrastructure.persistence.memory.clinic_repository_memory import InMemoryClinicRepository


def test_seeded_doctors_in_order():
    repo = InMemoryClinicRepository()
    assert [(d.id, d.name, d.specialty) for d in repo.list_doctors()] == [
        (1, "Dr. Smith", "Cardiology"),
        (2, "Dr. Johnson", "Dermatology"),
        (3, "Dr. Patel", "Pediatrics"),
    ]


def test_returned_dtos_are_copies():
    repo = InMemoryClinicRepository()
    repo.list_doctors()[0].name = "Changed"
    p = repo.create_patient("Alice", "1")
    p.name = "Changed"
    assert repo.get_doctor(1).name == "Dr. Smith"
    assert repo.get_patient(1).name == "Alice"


def test_stores_are_independent():
    a = InMemoryClinicRepository()
    b = InMemoryClinicRepository()
    a.create_patient("Alice", "1")
    assert b.list_patients() == []


def test_find_conflict_matches_doctor_or_patient():
    repo = InMemoryClinicRepository()
    p1 = repo.create_patient("Alice", "1")
    repo.create_patient("Bob", "2")
    repo.create_appointment(p1, repo.get_doctor(1), "d1")
    assert repo.find_conflict(doctor_id=1, patient_id=2, date="d1") is True
    assert repo.find_conflict(doctor_id=2, patient_id=1, date="d1") is True
    assert repo.find_conflict(doctor_id=2, patient_id=2, date="d1") is False
    assert repo.find_conflict(doctor_id=1, patient_id=1, date="d2") is False


def test_delete_appointments_for_patient_counts_removed():
    repo = InMemoryClinicRepository()
    p1 = repo.create_patient("Alice", "1")
    p2 = repo.create_patient("Bob", "2")
    repo.create_appointment(p1, repo.get_doctor(1), "d1")
    repo.create_appointment(p2, repo.get_doctor(2), "d1")
    repo.create_appointment(p1, repo.get_doctor(3), "d2")
    assert repo.delete_appointments_for_patient(p1.id) == 2
    assert [a.patient_id for a in repo.list_appointments()] == [p2.id]


def test_update_and_delete_unknown_ids():
    repo = InMemoryClinicRepository()
    assert repo.update_patient(5, "x", "y") is None
    assert repo.delete_patient(5) is False
    assert repo.delete_appointment(5) is False
