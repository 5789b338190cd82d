"""
Data models for reporting S3 paths.

These Pydantic models give CLI output a stable, serializable shape so the
text and JSON renderings describe exactly the same data.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .path import S3PathBuf

__all__ = ["PathReport"]


class PathReport(BaseModel):
    """Description of a single validated key."""
    key: S3PathBuf = Field(..., description="Canonical key (components joined by '/')")
    components: List[str] = Field(default_factory=list, description="Validated components in order")
    depth: int = Field(ge=0, description="Number of components")
    parent: Optional[str] = Field(default=None, description="Canonical parent key, None for the empty key")
    local_path: Optional[str] = Field(default=None, description="Mirrored local filesystem path")
    
    @classmethod
    def for_path(cls, path: S3PathBuf, local_path: Optional[str] = None) -> PathReport:
        """Build a report from an already validated path."""
        parent = path.as_path().parent()
        return cls(
            key=path,
            components=list(path),
            depth=len(path),
            parent=str(parent) if parent is not None else None,
            local_path=local_path,
        )
