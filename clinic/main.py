"""Application entry point: wires config, storage, model, logic and console together."""

import sys
from pathlib import Path

from clinic import __version__
from clinic.exceptions import DataLoadingError
from clinic.logic.logic import ClinicLogic
from clinic.models.clinic_book import ClinicBook
from clinic.models.model import ModelManager
from clinic.models.sample_data import get_sample_clinic_book
from clinic.models.user_prefs import UserPreferences
from clinic.storage import ClinicStorage, JsonClinicStorage
from clinic.ui.console import ClinicConsole
from clinic.utils.config import DEFAULT_CONFIG_FILE, AppConfig, read_config, save_config
from clinic.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def init_config(config_path: Path | None) -> AppConfig:
    """Load the config, falling back to defaults, and write it back so new fields show up."""
    config_path = config_path or DEFAULT_CONFIG_FILE
    logger.info(f"Using config file: {config_path}")

    try:
        config = read_config(config_path)
        if config is None:
            logger.info(f"Creating new config file {config_path}")
            config = AppConfig()
    except DataLoadingError:
        logger.warning(f"Config file at {config_path} could not be loaded. Using default config properties.")
        config = AppConfig()

    try:
        save_config(config, config_path)
    except OSError as e:
        logger.warning(f"Failed to save config file: {e}")

    return config


def init_prefs(prefs_path: Path) -> UserPreferences:
    """Load user preferences, falling back to defaults, and write them back."""
    logger.info(f"Using preference file: {prefs_path}")
    storage = JsonClinicStorage(UserPreferences().clinic_book_file_path, prefs_path)

    try:
        prefs = storage.read_user_prefs()
        if prefs is None:
            logger.info(f"Creating new preference file {prefs_path}")
            prefs = UserPreferences()
    except DataLoadingError:
        logger.warning(f"Preference file at {prefs_path} could not be loaded. Using default preferences.")
        prefs = UserPreferences()

    try:
        storage.save_user_prefs(prefs)
    except OSError as e:
        logger.warning(f"Failed to save preference file: {e}")

    return prefs


def init_model(storage: ClinicStorage, user_prefs: UserPreferences) -> ModelManager:
    """Build the model from stored data.

    Sample data is used when no data file exists yet, and an empty clinic
    book when the data file cannot be loaded.
    """
    logger.info(f"Using data file: {storage.clinic_book_file_path}")

    clinic_book: ClinicBook
    try:
        stored = storage.read_clinic_book()
        if stored is None:
            logger.info(f"Creating a new data file {storage.clinic_book_file_path} populated with sample data.")
            clinic_book = get_sample_clinic_book()
        else:
            clinic_book = stored
    except DataLoadingError:
        logger.warning(
            f"Data file at {storage.clinic_book_file_path} could not be loaded. Starting with an empty clinic book."
        )
        clinic_book = ClinicBook()

    return ModelManager(clinic_book, user_prefs)


def main() -> None:
    """Main entry point for the clinic console."""
    config_path = Path(sys.argv[1]) if len(sys.argv) > 1 else None

    config = init_config(config_path)
    setup_logging(config.log_config())
    logger.info(f"Starting Clinic Book {__version__}")

    user_prefs = init_prefs(config.user_prefs_file_path)
    storage = JsonClinicStorage(user_prefs.clinic_book_file_path, config.user_prefs_file_path)
    model = init_model(storage, user_prefs)
    logic = ClinicLogic(model, storage)

    try:
        ClinicConsole(logic).start()
    finally:
        logger.info("Stopping Clinic Book")
        try:
            storage.save_user_prefs(model.user_prefs)
        except OSError as e:
            logger.error(f"Failed to save preferences: {e}")


if __name__ == "__main__":
    main()
