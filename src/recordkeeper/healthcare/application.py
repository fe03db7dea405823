"""Healthcare application: patient and prescription records, grouped per patient."""
from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timedelta
from typing import Optional

import typer

from recordkeeper.domain import KeyedRepository, NotFoundError

from .domain import Patient, Prescription


class HealthSystem:
    """
    Patients and prescriptions in two keyed repositories.

    The per-patient prescription map is a derived view: call
    build_prescription_map() after changing prescriptions.
    """

    def __init__(self) -> None:
        self.patients: KeyedRepository[Patient] = KeyedRepository(name="patients")
        self.prescriptions: KeyedRepository[Prescription] = KeyedRepository(name="prescriptions")
        self._prescription_map: dict[int, list[Prescription]] = {}

    def add_prescription(self, prescription: Prescription) -> None:
        """Store a prescription for a known patient. Raises NotFoundError for an unknown patient."""
        if prescription.patient_id not in self.patients:
            raise NotFoundError(
                prescription.patient_id, f"No patient found with Id {prescription.patient_id}"
            )
        self.prescriptions.add(prescription)

    def seed_data(self, now: datetime | None = None) -> None:
        now = now or datetime.now()
        self.patients.add(Patient(1, "Alice Johnson", 30, "Female"))
        self.patients.add(Patient(2, "Bob Smith", 45, "Male"))
        self.patients.add(Patient(3, "Charlie Davis", 28, "Male"))

        self.add_prescription(Prescription(1, 1, "Amoxicillin", now - timedelta(days=10)))
        self.add_prescription(Prescription(2, 1, "Ibuprofen", now - timedelta(days=5)))
        self.add_prescription(Prescription(3, 2, "Paracetamol", now - timedelta(days=12)))
        self.add_prescription(Prescription(4, 2, "Lisinopril", now - timedelta(days=2)))
        self.add_prescription(Prescription(5, 3, "Metformin", now - timedelta(days=1)))

    def build_prescription_map(self) -> dict[int, list[Prescription]]:
        grouped: dict[int, list[Prescription]] = defaultdict(list)
        for prescription in self.prescriptions.get_all():
            grouped[prescription.patient_id].append(prescription)
        self._prescription_map = dict(grouped)
        return {pid: list(items) for pid, items in self._prescription_map.items()}

    def prescriptions_for(self, patient_id: int) -> list[Prescription]:
        """Prescriptions of a patient from the last built map. Raises NotFoundError for an unknown patient."""
        self.patients.get_by_id(patient_id)
        return list(self._prescription_map.get(patient_id, []))

    def find_patient(self, name: str) -> Optional[Patient]:
        """Case-insensitive lookup by full name."""
        wanted = name.casefold()
        return self.patients.find(lambda p: p.name.casefold() == wanted)

    def print_all_patients(self) -> None:
        typer.echo("All Patients:")
        for patient in self.patients.get_all():
            typer.echo(str(patient))
        typer.echo("")

    def print_prescriptions_for_patient(self, patient_id: int) -> None:
        try:
            patient = self.patients.get_by_id(patient_id)
        except NotFoundError:
            typer.echo(f"No patient found with Id {patient_id}")
            return

        typer.echo(f"Prescriptions for {patient.name} (Id: {patient.id}):")
        prescriptions = self.prescriptions_for(patient_id)
        if prescriptions:
            for prescription in prescriptions:
                typer.echo(str(prescription))
        else:
            typer.echo("No prescriptions found for this patient.")
        typer.echo("")
