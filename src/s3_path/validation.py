"""
Component validation for S3 paths.

This module provides the single gate every path component passes through
before it may be stored in an S3Path or S3PathBuf.
"""
from __future__ import annotations

import string

from .errors import EmptyComponent, IllegalCharacter, TraversalComponent

__all__ = ["ALLOWED_CHARACTERS", "validate_component"]

# ASCII only: str.isalnum() would also accept non-ASCII letters and digits.
ALLOWED_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-_.")

_TRAVERSAL_COMPONENTS = frozenset({".", ".."})


def validate_component(component: str) -> None:
    """
    Validate a single path component.
    
    This function enforces the following rules, in order:
    - No empty components
    - Only ASCII letters, ASCII digits, '-', '_' and '.'
    - Not exactly '.' or '..' (prevents traversal when mapped to a filesystem)
    
    Args:
        component: Candidate component
        
    Raises:
        TypeError: If component is not a str
        EmptyComponent: If component is empty
        IllegalCharacter: On the first character outside the allowed set
        TraversalComponent: If component is '.' or '..'
        
    Examples:
        >>> validate_component("model.pkl")
        
        >>> validate_component("..test")
        
        >>> validate_component("a/b")
        IllegalCharacter: Invalid S3 path component 'a/b': Character '/' is not allowed
        
        >>> validate_component("..")
        TraversalComponent: Invalid S3 path component '..': Traversal component '..' is not allowed
    """
    if not isinstance(component, str):
        raise TypeError(f"S3 path components must be str, got {type(component).__name__}")
    if not component:
        raise EmptyComponent(component)
    for c in component:
        if c not in ALLOWED_CHARACTERS:
            raise IllegalCharacter(component, c)
    if component in _TRAVERSAL_COMPONENTS:
        raise TraversalComponent(component)
