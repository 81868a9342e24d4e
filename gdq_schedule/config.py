"""Settings for the tracker API client, read from the environment."""

import os

from dotenv import load_dotenv

load_dotenv()


def _optional_float(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    return float(raw)


class Config:
    """Centralised settings for fetching and building schedules."""

    # Tracker API
    TRACKER_API_URL = os.getenv("GDQ_TRACKER_API_URL", "https://gamesdonequick.com/tracker/api/v2")
    REQUEST_TIMEOUT = _optional_float(os.getenv("GDQ_REQUEST_TIMEOUT"))

    # Accepted event ids, upper bound exclusive.
    # Four-digit ids are not expected while the v2 API is in use.
    MIN_EVENT_ID = 17
    MAX_EVENT_ID = 1000

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
    LOG_DATE_FORMAT = "%H:%M:%S"


config = Config()
