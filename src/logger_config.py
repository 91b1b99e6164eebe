import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from src import paths

LOGGER_NAME = "weathernow"


def setup_logging(log_dir: str | None = None) -> logging.Logger:
    """Configure logging with rotation and formatting."""
    # Määritä lokihakemisto ja varmista että se on olemassa
    if log_dir is None:
        paths.ensure_dirs()
        log_dir = str(paths.LOGS)

    Path(log_dir).mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)

    # Lisää handlerit vain kerran (Streamlit ajaa skriptin uudelleen joka klikkauksella)
    if logger.handlers:
        return logger

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)

    file_handler = RotatingFileHandler(
        Path(log_dir) / "weathernow.log",
        maxBytes=5_000_000,  # 5 MB
        backupCount=3,
        encoding="utf-8",
    )

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    console.setFormatter(formatter)
    file_handler.setFormatter(formatter)

    logger.addHandler(console)
    logger.addHandler(file_handler)

    return logger
