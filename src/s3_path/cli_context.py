"""
CLI Context for managing application dependencies.

Provides a clean way to manage CLI-level dependencies like settings and the
operations facade, avoiding global state and enabling proper dependency injection.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .operations import Operations, OpsConfig
from .settings import Settings, create_settings_from_env


@dataclass
class CLIContext:
    """
    Shared context for CLI commands.
    
    Holds the settings loaded once per command execution and lazily builds
    the Operations facade on first use.
    """
    settings: Settings
    config: OpsConfig = OpsConfig()
    _ops: Optional[Operations] = None
    
    @classmethod
    def from_env(cls, config: Optional[OpsConfig] = None) -> CLIContext:
        """
        Create CLI context from environment variables.
        
        Returns:
            CLIContext with settings loaded from environment
        """
        settings = create_settings_from_env()
        return cls(settings=settings, config=config or OpsConfig())
    
    @property
    def ops(self) -> Operations:
        """Get or create the Operations facade (lazy initialization)."""
        if self._ops is None:
            self._ops = Operations(config=self.config, settings=self.settings)
        return self._ops
