"""
Configuration module for Orbitools.
"""
from .constants import *
from .logging_config import setup_logger, get_logger, enable_debug

__all__ = [
    # Logging
    'setup_logger',
    'get_logger',
    'enable_debug',
    # Constants (all exported via *)
]
