"""Logging configuration using Loguru."""

import os
import sys
from datetime import datetime


from loguru import logger

logger.remove()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "false").lower() == "true"
LOG_DIR = os.getenv("LOG_DIR", "logs")

LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level} | {extra[name]}:{function}:{line} | {message}"
)

logger.configure(extra={"name": "contract_nlu"})

logger.add(
    sys.stderr,
    format=LOG_FORMAT,
    level=LOG_LEVEL,
)

if LOG_TO_FILE:
    session_id = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    logger.add(
        f"{LOG_DIR}/contract_nlu_{session_id}.log",
        format=LOG_FORMAT,
        level="DEBUG",
        rotation="10 MB",
        retention="7 days",
        compression="zip",
    )


def get_logger(name: str):
    """Get a logger tagged with the calling module's name."""
    return logger.bind(name=name)
