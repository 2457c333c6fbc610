# utils/logger.py
import logging
import os
import sys
from config.paths import LOG_PATH

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOG_PATH.parent.mkdir(parents=True, exist_ok=True)

# Root of every engine logger; modules attach below it via get_logger
logger = logging.getLogger("schedule")
logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

if not logger.handlers:
    # run log: full context per line
    file_handler = logging.FileHandler(LOG_PATH, encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    # stdout -> docker logs
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))

    logger.addHandler(file_handler)
    logger.addHandler(stream_handler)


def get_logger(name: str) -> logging.Logger:
    """Child of the "schedule" logger so every module shares its handlers."""
    return logger.getChild(name)
