"""User preference models."""

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_CLINIC_BOOK_FILE_PATH = Path("data") / "clinicbook.json"


class GuiSettings(BaseModel):
    """Window geometry of the display layer."""

    window_width: float = 740.0
    window_height: float = 600.0
    window_x: int | None = None
    window_y: int | None = None


class UserPreferences(BaseModel):
    """User preferences persisted between runs."""

    gui_settings: GuiSettings = Field(default_factory=GuiSettings)
    clinic_book_file_path: Path = DEFAULT_CLINIC_BOOK_FILE_PATH

    def set_gui_settings(self, gui_settings: GuiSettings) -> None:
        self.gui_settings = gui_settings

    def set_clinic_book_file_path(self, path: Path) -> None:
        """Point the preferences at a different clinic book file."""
        self.clinic_book_file_path = path
