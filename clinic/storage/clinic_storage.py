"""Clinic book and user preference storage interface and implementations."""

from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from clinic.exceptions import DataLoadingError
from clinic.models.clinic_book import ClinicBook
from clinic.models.user_prefs import UserPreferences
from clinic.storage.records import ClinicBookRecord
from clinic.utils.logging import get_logger

logger = get_logger(__name__)


class ClinicStorage(Protocol):
    """Interface for persisting the clinic book and user preferences."""

    @property
    def clinic_book_file_path(self) -> Path: ...

    @property
    def user_prefs_file_path(self) -> Path: ...

    def read_clinic_book(self) -> ClinicBook | None:
        """Load the clinic book.

        Returns:
            The stored clinic book, or None if nothing has been stored yet

        Raises:
            DataLoadingError: If stored data exists but cannot be loaded
        """
        ...

    def save_clinic_book(self, clinic_book: ClinicBook) -> None:
        """Persist the clinic book.

        Raises:
            OSError: If the data cannot be written
        """
        ...

    def read_user_prefs(self) -> UserPreferences | None:
        """Load user preferences, or None if none are stored."""
        ...

    def save_user_prefs(self, user_prefs: UserPreferences) -> None:
        """Persist user preferences."""
        ...


def _read_text(path: Path) -> str | None:
    if not path.exists():
        logger.info(f"{path} not found")
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DataLoadingError(f"Could not read {path}: {e}") from e


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


class JsonClinicStorage:
    """Stores the clinic book and user preferences as JSON files."""

    def __init__(self, clinic_book_file_path: Path, user_prefs_file_path: Path):
        self._clinic_book_file_path = Path(clinic_book_file_path)
        self._user_prefs_file_path = Path(user_prefs_file_path)

    @property
    def clinic_book_file_path(self) -> Path:
        return self._clinic_book_file_path

    @property
    def user_prefs_file_path(self) -> Path:
        return self._user_prefs_file_path

    def read_clinic_book(self) -> ClinicBook | None:
        """Load the clinic book from its JSON file."""
        content = _read_text(self._clinic_book_file_path)
        if content is None:
            return None

        try:
            return ClinicBookRecord.model_validate_json(content).to_model()
        except ValidationError as e:
            logger.warning(f"Illegal values found in {self._clinic_book_file_path}: {e}")
            raise DataLoadingError(f"Illegal values found in {self._clinic_book_file_path}") from e

    def save_clinic_book(self, clinic_book: ClinicBook) -> None:
        record = ClinicBookRecord.from_model(clinic_book)
        _write_text(self._clinic_book_file_path, record.model_dump_json(indent=2))

    def read_user_prefs(self) -> UserPreferences | None:
        content = _read_text(self._user_prefs_file_path)
        if content is None:
            return None

        try:
            return UserPreferences.model_validate_json(content)
        except ValidationError as e:
            raise DataLoadingError(f"Illegal values found in {self._user_prefs_file_path}") from e

    def save_user_prefs(self, user_prefs: UserPreferences) -> None:
        _write_text(self._user_prefs_file_path, user_prefs.model_dump_json(indent=2))
