"""Persistence for the clinic book and user preferences."""

from clinic.storage.clinic_storage import ClinicStorage, JsonClinicStorage

__all__ = ["ClinicStorage", "JsonClinicStorage"]
