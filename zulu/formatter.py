from datetime import datetime
from typing import Optional

from zulu import DEFAULT_TIME_FORMAT
from zulu.logger import setup_logger

logger = setup_logger(__name__)

def format_zulu(instant: datetime, time_format: Optional[str] = None) -> str:
    """Render a UTC instant with a strftime template, HH:MM by default"""
    if time_format is None:
        time_format = DEFAULT_TIME_FORMAT
    logger.debug(f"Formatting {instant.isoformat()} with {time_format!r}")
    return instant.strftime(time_format)
