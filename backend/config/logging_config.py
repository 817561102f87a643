"""
Logging configuration shared by the API and scripts
"""
import logging
from config.settings import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def setup_logging(level: str = LOG_LEVEL):
    """Configure the root logger once"""
    logging.basicConfig(
        format=LOG_FORMAT,
        level=getattr(logging, level, logging.INFO)
    )
    # Silence noisy third-party loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)
