"""
Operations Facade - Application service layer.

Provides a clean interface between the CLI and the path types, centralizing
prefix and local-root policy while keeping CLI commands thin and testable.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from ..models import PathReport
from ..path import S3PathBuf
from ..settings import Settings, create_settings_from_env

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpsConfig:
    """
    Configuration for Operations facade.
    
    Centralizes output policy decisions to avoid scattered configuration.
    """
    verbose: bool = False         # Show detailed output


class Operations:
    """
    Application service facade for CLI operations.
    
    One method per CLI verb. Every raw key goes through key(), so the
    configured prefix is applied consistently. Validation errors bubble
    up unchanged for central exit code mapping.
    """
    
    def __init__(self, config: OpsConfig, settings: Optional[Settings] = None):
        """
        Initialize Operations facade.
        
        Args:
            config: Configuration settings
            settings: Optional settings (if None, loaded from environment)
        """
        self.cfg = config
        
        if settings is None:
            settings = create_settings_from_env()
        self.settings = settings

    def key(self, raw: str) -> S3PathBuf:
        """
        Parse a raw key and apply the configured prefix.
        
        Args:
            raw: '/'-delimited key from the user
            
        Returns:
            prefix + parsed key
            
        Raises:
            InvalidS3PathComponent: If any component is invalid
        """
        parsed = S3PathBuf.parse(raw)
        key = self.settings.prefix.extend(parsed)
        logger.debug(f"Resolved key {raw!r} -> {key}")
        return key

    def join(self, base: str, components: Iterable[str]) -> S3PathBuf:
        """Join components onto a base key; the result is a new buffer."""
        return self.key(base).extend(components)

    def parent(self, raw: str) -> Optional[S3PathBuf]:
        """Parent of a key, or None when the key is empty."""
        parent = self.key(raw).as_path().parent()
        return parent.to_owned() if parent is not None else None

    def local_path(self, raw: str, root: Union[str, Path, None] = None) -> Path:
        """
        Map a key onto the local filesystem.
        
        Args:
            raw: Key to map
            root: Mirror root; falls back to settings.local_root, then to a relative path
        """
        if root is None:
            root = self.settings.local_root
        return self.key(raw).to_std_path(root)

    def report(self, raw: str, root: Union[str, Path, None] = None) -> PathReport:
        """Build a PathReport describing a key."""
        key = self.key(raw)
        if root is None:
            root = self.settings.local_root
        local = str(key.to_std_path(root)) if root is not None else None
        return PathReport.for_path(key, local_path=local)
