from dataclasses import dataclass
from typing import List

from ..ports.clinic_repo import ClinicRepository, DoctorDto


@dataclass
class DoctorsService:
    repo: ClinicRepository

    def list(self) -> List[DoctorDto]:
        return self.repo.list_doctors()
