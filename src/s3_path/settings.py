"""
Settings and configuration for s3-path.

Centralizes configuration values and provides validation with fail-fast behavior.
Loads settings from environment variables when the CLI context is created.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .path import S3PathBuf

__all__ = ["Settings", "create_settings_from_env", "LOG_LEVELS"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """
    Configuration settings for the s3-path CLI and operations.
    
    Key Settings:
        key_prefix: Key prefix prepended to every key handled by Operations
        local_root: Local directory that mirrors the bucket for local_path()
        
    Logging Settings:
        log_level: Root log level configured by the CLI
    """
    key_prefix: Optional[str] = None
    local_root: Optional[str] = None
    log_level: str = "WARNING"
    
    def __post_init__(self):
        """Validate settings on construction."""
        # Prefix must itself be a valid key; parse raises with the offending component
        if self.key_prefix is not None:
            S3PathBuf.parse(self.key_prefix)
        
        level = self.log_level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {self.log_level}. Must be one of {', '.join(LOG_LEVELS)}")
        object.__setattr__(self, "log_level", level)
    
    @property
    def prefix(self) -> S3PathBuf:
        """Parsed key prefix (a fresh, empty buffer when unset)."""
        if not self.key_prefix:
            return S3PathBuf()
        return S3PathBuf.parse(self.key_prefix)


def create_settings_from_env() -> Settings:
    """
    Load settings from environment variables.
    
    Environment Variables:
        - S3PATH_KEY_PREFIX (optional)
        - S3PATH_LOCAL_ROOT (optional)
        - S3PATH_LOG_LEVEL (default: WARNING)
    
    Returns:
        Settings object with validated configuration
        
    Raises:
        ValueError: If configuration is invalid
        
    Note:
        Creates a fresh Settings instance every time (no caching).
        This keeps tests isolated from each other's environment.
    """
    return Settings(
        key_prefix=os.getenv("S3PATH_KEY_PREFIX") or None,
        local_root=os.getenv("S3PATH_LOCAL_ROOT") or None,
        log_level=os.getenv("S3PATH_LOG_LEVEL", "WARNING"),
    )
