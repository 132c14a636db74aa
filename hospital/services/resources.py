"""
Descriptors for every CRUD resource exposed under /api/<name>.
"""
from hospital.models import (
    Patient, Doctor, Appointment, MedicalRecord, Billing, Department, InventoryItem,
)
from hospital.schemas.patient import PatientCreate, PatientUpdate, PatientResponse, PatientSummary
from hospital.schemas.doctor import DoctorCreate, DoctorUpdate, DoctorResponse, DoctorSummary
from hospital.schemas.appointment import AppointmentCreate, AppointmentUpdate, AppointmentResponse
from hospital.schemas.medical_record import MedicalRecordCreate, MedicalRecordUpdate, MedicalRecordResponse
from hospital.schemas.billing import BillingCreate, BillingUpdate, BillingResponse
from hospital.schemas.department import DepartmentCreate, DepartmentUpdate, DepartmentResponse
from hospital.schemas.inventory import InventoryItemCreate, InventoryItemUpdate, InventoryItemResponse
from hospital.auth import SECTION_ROLES
from hospital.services.crud_service import ResourceType, Reference

PATIENT_REF = Reference("patient", "patient_id", Patient, PatientSummary)
DOCTOR_REF = Reference("doctor", "doctor_id", Doctor, DoctorSummary)

PATIENTS = ResourceType(
    name="patients",
    label="Patient",
    model=Patient,
    create_schema=PatientCreate,
    update_schema=PatientUpdate,
    response_schema=PatientResponse,
    allowed_roles=SECTION_ROLES["patients"],
)

DOCTORS = ResourceType(
    name="doctors",
    label="Doctor",
    model=Doctor,
    create_schema=DoctorCreate,
    update_schema=DoctorUpdate,
    response_schema=DoctorResponse,
    allowed_roles=SECTION_ROLES["doctors"],
)

APPOINTMENTS = ResourceType(
    name="appointments",
    label="Appointment",
    model=Appointment,
    create_schema=AppointmentCreate,
    update_schema=AppointmentUpdate,
    response_schema=AppointmentResponse,
    references=(PATIENT_REF, DOCTOR_REF),
)

MEDICAL_RECORDS = ResourceType(
    name="medical-records",
    label="Medical record",
    model=MedicalRecord,
    create_schema=MedicalRecordCreate,
    update_schema=MedicalRecordUpdate,
    response_schema=MedicalRecordResponse,
    references=(PATIENT_REF, DOCTOR_REF),
)

BILLING = ResourceType(
    name="billing",
    label="Bill",
    model=Billing,
    create_schema=BillingCreate,
    update_schema=BillingUpdate,
    response_schema=BillingResponse,
    references=(PATIENT_REF,),
    allowed_roles=SECTION_ROLES["billing"],
)

DEPARTMENTS = ResourceType(
    name="departments",
    label="Department",
    model=Department,
    create_schema=DepartmentCreate,
    update_schema=DepartmentUpdate,
    response_schema=DepartmentResponse,
    allowed_roles=SECTION_ROLES["departments"],
)

INVENTORY = ResourceType(
    name="inventory",
    label="Inventory item",
    model=InventoryItem,
    create_schema=InventoryItemCreate,
    update_schema=InventoryItemUpdate,
    response_schema=InventoryItemResponse,
    allowed_roles=SECTION_ROLES["inventory"],
)

RESOURCES = (PATIENTS, DOCTORS, APPOINTMENTS, MEDICAL_RECORDS, BILLING, DEPARTMENTS, INVENTORY)
