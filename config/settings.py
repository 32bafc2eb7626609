#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings

from .constants import (
    CACHE_EXPIRATION,
    CACHE_MAX_SIZE,
    CONFIG_CHECK_TTL,
    DEFAULTS_FILENAME,
    LOG_FILE,
    NONCE_LIFETIME_HOURS,
    NOTICE_TTL,
    THEME_CONFIG_RELPATH,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent
CONFIG_DIR = BASE_DIR / "config"


class Settings(BaseSettings):
    """Application settings"""

    # ========== Environment ==========
    # Development mode: enables theme file change detection and warnings
    # for malformed theme config
    debug: bool = False

    # Rotating log file, None = console only
    log_file: Optional[str] = LOG_FILE

    # ========== Config Files ==========
    defaults_file: Path = CONFIG_DIR / DEFAULTS_FILENAME
    theme_dir: Optional[Path] = None  # Active theme root, None = no theme
    theme_config_relpath: str = THEME_CONFIG_RELPATH

    # ========== Caching ==========
    cache_ttl_seconds: int = CACHE_EXPIRATION
    cache_max_size: int = CACHE_MAX_SIZE
    config_check_ttl_seconds: int = CONFIG_CHECK_TTL

    # ========== Admin Framework ==========
    notice_ttl_seconds: int = NOTICE_TTL
    nonce_lifetime_hours: int = NONCE_LIFETIME_HOURS

    # ========== Features ==========
    gaps_frontend_css: bool = True
    gaps_editor_css: bool = True
    typography_output_preset_css: bool = True
    typography_show_groups_in_dropdown: bool = False

    class Config:
        env_prefix = "ORBITOOLS_"
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    @property
    def theme_config_file(self) -> Optional[Path]:
        """Path of the active theme's orbitools.json, if a theme is set"""
        if self.theme_dir is None:
            return None
        return Path(self.theme_dir) / self.theme_config_relpath


# Global settings instance
settings = Settings()
