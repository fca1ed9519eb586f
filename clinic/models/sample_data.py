"""Sample records used when no clinic book file exists yet."""

from datetime import date, time

from clinic.models.clinic_book import ClinicBook
from clinic.models.events import AppointmentEvent, MedicalHistoryEvent
from clinic.models.patient import Patient


def get_sample_patients() -> list[Patient]:
    return [
        Patient(
            name="Alex Yeoh",
            nric="S8712345A",
            phone="87438807",
            email="alexyeoh@example.com",
            address="Blk 30 Geylang Street 29, #06-40",
            tags=frozenset({"diabetic"}),
            appointments=[AppointmentEvent(date=date(2024, 3, 4), time=time(9, 30))],
            medical_history=[
                MedicalHistoryEvent(
                    date=date(2023, 11, 2),
                    medical_condition="Type 2 diabetes",
                    treatment="Metformin 500mg twice daily",
                )
            ],
        ),
        Patient(
            name="Bernice Yu",
            nric="T0234567B",
            phone="99272758",
            email="berniceyu@example.com",
            address="Blk 30 Lorong 3 Serangoon Gardens, #07-18",
            tags=frozenset({"asthma", "allergic"}),
        ),
        Patient(
            name="Charlotte Oliveiro",
            nric="S9345678C",
            phone="93210283",
            email="charlotte@example.com",
            address="Blk 11 Ang Mo Kio Street 74, #11-04",
            medical_history=[
                MedicalHistoryEvent(date=date(2022, 6, 15), medical_condition="Sprained ankle", treatment="Rest")
            ],
        ),
        Patient(
            name="David Li",
            nric="S7654321D",
            phone="91031282",
            email="lidavid@example.com",
            address="Blk 436 Serangoon Gardens Street 26, #16-43",
            tags=frozenset({"elderly"}),
            appointments=[AppointmentEvent(date=date(2024, 5, 20), time=time(14, 0))],
        ),
    ]


def get_sample_clinic_book() -> ClinicBook:
    """Build a clinic book populated with sample patients."""
    return ClinicBook(get_sample_patients())
