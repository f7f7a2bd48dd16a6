from __future__ import annotations
import logging, sys
from typing import Optional

from .config import setting

def get_logger(name: str = "convenia_util", level: Optional[int | str] = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
    logger.setLevel(level if level is not None else setting("LOG_LEVEL").upper())
    return logger
