"""Main entry point for the Weather Now Streamlit application."""

import sys
import traceback

import streamlit as st

from src.logger_config import setup_logging
from src.paths import ensure_dirs
from src.ui import card_weather
from src.ui.common import load_css

ensure_dirs()

logger = setup_logging()


def main() -> None:
    """Initialize and render the Weather Now page."""
    try:
        st.set_page_config(
            page_title="Weather Now",
            layout="wide",
            page_icon="☀️",
        )
        load_css("style.css")
        card_weather()

    except KeyboardInterrupt:
        logger.info("Weather Now shutdown requested")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Unhandled error: {str(e)}")
        logger.error(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
