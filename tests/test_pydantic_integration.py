"""
Tests for using S3PathBuf as a pydantic field type.
"""
from __future__ import annotations

import json
from typing import Optional

import pytest
from pydantic import BaseModel, ValidationError

from s3_path import S3Path, S3PathBuf


class StorageTarget(BaseModel):
    """Example config model with key fields."""
    key: S3PathBuf
    backup_key: Optional[S3PathBuf] = None


class TestPydanticField:
    """Test validation and serialization of S3PathBuf fields."""
    
    def test_validate_from_str(self):
        """Test that strings are parsed into buffers."""
        target = StorageTarget(key="/models//v1/")
        assert isinstance(target.key, S3PathBuf)
        assert target.key == S3PathBuf(["models", "v1"])
    
    def test_validate_from_instances(self):
        """Test that buffers and views are accepted."""
        buf = S3PathBuf(["a"])
        assert StorageTarget(key=buf).key is buf
        
        target = StorageTarget(key=S3Path(["b", "c"]))
        assert isinstance(target.key, S3PathBuf)
        assert str(target.key) == "b/c"
    
    def test_validate_from_component_list(self):
        """Test that a list of components is accepted in Python mode."""
        assert str(StorageTarget(key=["x", "y"]).key) == "x/y"
    
    def test_invalid_key_raises_validation_error(self):
        """Test that invalid components surface as ValidationError."""
        with pytest.raises(ValidationError, match="Character '\\$' is not allowed"):
            StorageTarget(key="foo/bar$baz")
        
        with pytest.raises(ValidationError, match="Traversal component"):
            StorageTarget(key="../etc")
    
    def test_non_path_input_raises_validation_error(self):
        """Test that unusable input types surface as ValidationError."""
        with pytest.raises(ValidationError):
            StorageTarget(key=42)
        
        with pytest.raises(ValidationError):
            StorageTarget(key=[1, 2])
    
    def test_serialization(self):
        """Test that keys serialize to their canonical string."""
        target = StorageTarget(key="a//b", backup_key="c")
        assert target.model_dump() == {"key": "a/b", "backup_key": "c"}
        assert json.loads(target.model_dump_json()) == {"key": "a/b", "backup_key": "c"}
    
    def test_json_round_trip(self):
        """Test validating from JSON."""
        target = StorageTarget.model_validate_json('{"key": "/a/b/"}')
        assert target.key == S3PathBuf(["a", "b"])
        assert StorageTarget.model_validate_json(target.model_dump_json()) == target
    
    def test_json_rejects_non_string(self):
        """Test that JSON input must be a string."""
        with pytest.raises(ValidationError):
            StorageTarget.model_validate_json('{"key": ["a", "b"]}')
