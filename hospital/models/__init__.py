from hospital.models.user import User
from hospital.models.patient import Patient
from hospital.models.doctor import Doctor
from hospital.models.appointment import Appointment
from hospital.models.medical_record import MedicalRecord
from hospital.models.billing import Billing
from hospital.models.department import Department
from hospital.models.inventory import InventoryItem
from hospital.models.notification import Notification

__all__ = ["User", "Patient", "Doctor", "Appointment", "MedicalRecord", "Billing", "Department",
           "InventoryItem", "Notification"]
