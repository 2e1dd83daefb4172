from hospital_directory.infra.db.models.hospital import HospitalRow
from hospital_directory.infra.db.models.medical_test import MedicalTestRow
from hospital_directory.infra.db.models.offering import OfferingRow

__all__ = ["HospitalRow", "MedicalTestRow", "OfferingRow"]
