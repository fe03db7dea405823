"""Healthcare program: patients and their prescriptions."""
from recordkeeper.core import ProgramModule

from .application import HealthSystem


class RunHealthcare:
    patient_to_query = 2

    def __init__(self, system: HealthSystem):
        self._system = system

    def __call__(self) -> int:
        system = self._system
        system.seed_data()
        system.build_prescription_map()
        system.print_all_patients()
        system.print_prescriptions_for_patient(self.patient_to_query)
        return 0


healthcare_module = (
    ProgramModule("healthcare", "Patients and prescriptions grouped per patient")
    .bind(HealthSystem)
    .entrypoint(RunHealthcare)
)
