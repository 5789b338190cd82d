"""
S3 path error classes.

Provides a clear taxonomy of the validation failures that can occur while
building S3 paths. Every failure is local and synchronous; none are transient,
so callers should never retry without changing the input.
"""
from __future__ import annotations


class InvalidS3PathComponent(ValueError):
    """
    Base class for all path component validation errors.
    
    Subclasses ValueError so that callers (and pydantic validators) treat
    a rejected component like any other bad input value.
    
    Attributes:
        component: The full offending component
        reason: Human-readable reason for the rejection
    """
    
    def __init__(self, component: str, reason: str):
        super().__init__(component, reason)
        self.component = component
        self.reason = reason
    
    def __str__(self) -> str:
        return f"Invalid S3 path component '{self.component}': {self.reason}"


class EmptyComponent(InvalidS3PathComponent):
    """
    Component has zero length.
    
    Raised when:
    - An empty string is pushed onto a path
    - An empty string appears in a component collection
    """
    
    def __init__(self, component: str = ""):
        super().__init__(component, "Empty component is not allowed")


class IllegalCharacter(InvalidS3PathComponent):
    """
    Component contains a character outside ``[A-Za-z0-9._-]``.
    
    Only the first offending character is reported.
    """
    
    def __init__(self, component: str, character: str):
        super().__init__(component, f"Character '{character}' is not allowed")
        self.character = character


class TraversalComponent(InvalidS3PathComponent):
    """
    Component is exactly ``.`` or ``..``.
    
    Both are legal characters, but as whole components they would escape
    or alias the parent when the key is mapped onto a filesystem.
    """
    
    def __init__(self, component: str):
        super().__init__(component, f"Traversal component '{component}' is not allowed")


class StaleS3PathView(RuntimeError):
    """
    A borrowed view was used after its source buffer was mutated.
    
    Raised when:
    - push/extend/pop ran on an S3PathBuf after as_path() handed out a view
    """
    pass


__all__ = [
    "InvalidS3PathComponent",
    "EmptyComponent",
    "IllegalCharacter",
    "TraversalComponent",
    "StaleS3PathView",
]
