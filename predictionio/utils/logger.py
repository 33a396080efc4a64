# predictionio/utils/logger.py - shared logger for the PredictionIO clients
import logging
from typing import Optional, Union

DEFAULT_LOGGER = "predictionio"


def get_logger(name: str = DEFAULT_LOGGER, level: Optional[Union[int, str]] = None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    if level is not None:
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
