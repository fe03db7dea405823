"""Healthcare domain: patients and the prescriptions issued to them."""
from __future__ import annotations

from datetime import datetime

from recordkeeper.domain import Entity


class Patient(Entity):
    def __init__(self, id: int, name: str, age: int, gender: str) -> None:
        super().__init__(id)
        self.name = name
        self.age = age
        self.gender = gender

    def __str__(self) -> str:
        return f"Patient(Id={self.id}, Name={self.name}, Age={self.age}, Gender={self.gender})"


class Prescription(Entity):
    def __init__(self, id: int, patient_id: int, medication_name: str, date_issued: datetime) -> None:
        super().__init__(id)
        self.patient_id = patient_id
        self.medication_name = medication_name
        self.date_issued = date_issued

    def __str__(self) -> str:
        return (
            f"Prescription(Id={self.id}, PatientId={self.patient_id}, "
            f"Medication={self.medication_name}, Date={self.date_issued:%Y-%m-%d})"
        )
