"""Configuration Module.

This module handles environment settings.

Settings:
    LOG_LEVEL: Logging level name, read from the LOG_LEVEL env variable.
    LOG_FORMAT: Log line format shared by every module.
"""
from config.settings import BASE_DIR, LOG_LEVEL, LOG_FORMAT, LOG_DATE_FORMAT

__all__ = ["BASE_DIR", "LOG_LEVEL", "LOG_FORMAT", "LOG_DATE_FORMAT"]
