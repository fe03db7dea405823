from recordkeeper.healthcare.application import HealthSystem
from recordkeeper.healthcare.domain import Patient, Prescription
from recordkeeper.healthcare.module import healthcare_module

__all__ = ["HealthSystem", "Patient", "Prescription", "healthcare_module"]
