"""
Logging setup module for the geocoder lexer.

This module initializes a logger named 'geocoder_lexer' with both a console
stream handler and a rotating file handler. Logs are saved in a 'logs/'
directory located three levels above the current file (at the project root).
Levels, file name and rotation limits come from ``config/lexer.yaml``.

Usage:
    from geocoder_lexer.utils.logging_setup import logger
    logger.info("Message to log")
"""

import os
import logging
from logging.handlers import RotatingFileHandler

from geocoder_lexer.config.settings import logging_config

# ---------------------------------------------------------------------
# 1) Create logs folder (relative to project root, not inside src/)
# ---------------------------------------------------------------------
LOG_DIR = os.path.abspath(
    os.path.join(os.path.dirname(__file__), '..', '..', '..', 'logs')
)
os.makedirs(LOG_DIR, exist_ok=True)

# ---------------------------------------------------------------------
# 2) Set up named logger for the package
# ---------------------------------------------------------------------
logger = logging.getLogger('geocoder_lexer')
logger.setLevel(logging_config["level"])

_formatter = logging.Formatter(logging_config["format"])

# Handlers are attached once even if this module is reloaded
if not logger.handlers:
    # -----------------------------------------------------------------
    # 3) Console handler
    # -----------------------------------------------------------------
    ch = logging.StreamHandler()
    ch.setLevel(logging_config["console_level"])
    ch.setFormatter(_formatter)
    logger.addHandler(ch)

    # -----------------------------------------------------------------
    # 4) Rotating file handler
    # -----------------------------------------------------------------
    fh = RotatingFileHandler(
        os.path.join(LOG_DIR, logging_config["filename"]),
        maxBytes=logging_config["max_bytes"],
        backupCount=logging_config["backup_count"],
    )
    fh.setLevel(logging.INFO)  # Only INFO and above go to disk
    fh.setFormatter(_formatter)
    logger.addHandler(fh)
