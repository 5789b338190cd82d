"""
s3-path: validated object-storage keys.

Every component of an S3Path or S3PathBuf is non-empty, limited to
ASCII letters, digits, '-', '_' and '.', and never exactly '.' or '..'.
"""
from .errors import (
    EmptyComponent,
    IllegalCharacter,
    InvalidS3PathComponent,
    StaleS3PathView,
    TraversalComponent,
)
from .path import SEPARATOR, AnyS3Path, S3Path, S3PathBuf, s3_path, s3_path_buf, to_s3_path_buf
from .validation import ALLOWED_CHARACTERS, validate_component

__version__ = "0.1.0"

__all__ = [
    "ALLOWED_CHARACTERS",
    "AnyS3Path",
    "EmptyComponent",
    "IllegalCharacter",
    "InvalidS3PathComponent",
    "S3Path",
    "S3PathBuf",
    "SEPARATOR",
    "StaleS3PathView",
    "TraversalComponent",
    "s3_path",
    "s3_path_buf",
    "to_s3_path_buf",
    "validate_component",
]
