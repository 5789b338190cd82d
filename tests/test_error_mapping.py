"""
Test error mapping and CLI exit code functionality.

Validates that exceptions are correctly mapped to exit codes and that
the run_and_exit wrapper handles errors appropriately for CLI commands.
"""
from __future__ import annotations

import pytest
import typer
from pydantic import BaseModel, ValidationError

from s3_path import (
    EmptyComponent,
    IllegalCharacter,
    InvalidS3PathComponent,
    StaleS3PathView,
    TraversalComponent,
)
from s3_path.operations.mappers import EXIT_CODES, FALLBACK_EXIT_CODE, exit_code_for, run_and_exit


class TestExitCodeMapping:
    """Test exception to exit code mapping."""
    
    def test_validation_errors_mapped(self):
        """Test that each validation error kind has its own exit code."""
        assert exit_code_for(EmptyComponent()) == 2
        assert exit_code_for(IllegalCharacter("a b", " ")) == 3
        assert exit_code_for(TraversalComponent("..")) == 4
        assert exit_code_for(InvalidS3PathComponent("x", "custom")) == 2
    
    def test_stale_view_mapped(self):
        """Test that stale view errors map to 5."""
        assert exit_code_for(StaleS3PathView("stale")) == 5
    
    def test_value_errors_mapped(self):
        """Test that ValueError and its subclasses map to 2."""
        class CustomValueError(ValueError):
            pass
        
        assert exit_code_for(ValueError("test")) == 2
        assert exit_code_for(CustomValueError("test")) == 2
    
    def test_pydantic_validation_error_mapped(self):
        """Test that pydantic ValidationError maps to 2."""
        class Model(BaseModel):
            n: int
        
        with pytest.raises(ValidationError) as exc_info:
            Model(n="not a number")
        
        assert exit_code_for(exc_info.value) == 2
    
    def test_unknown_exception_maps_to_fallback(self):
        """Test that unknown exceptions map to fallback exit code."""
        assert exit_code_for(RuntimeError("test")) == FALLBACK_EXIT_CODE
        assert exit_code_for(KeyError("test")) == FALLBACK_EXIT_CODE
        assert FALLBACK_EXIT_CODE == 1
    
    def test_exit_code_constants(self):
        """Test that EXIT_CODES constants are stable."""
        assert EXIT_CODES["EmptyComponent"] == 2
        assert EXIT_CODES["IllegalCharacter"] == 3
        assert EXIT_CODES["TraversalComponent"] == 4
        assert EXIT_CODES["StaleS3PathView"] == 5


class TestRunAndExit:
    """Test the run_and_exit wrapper."""
    
    def test_success_returns_result(self):
        """Test that successful functions return their result."""
        assert run_and_exit(lambda: "ok") == "ok"
    
    def test_failure_raises_typer_exit(self, capsys):
        """Test that exceptions become typer.Exit with a mapped code."""
        def fail():
            raise TraversalComponent("..")
        
        with pytest.raises(typer.Exit) as exc_info:
            run_and_exit(fail)
        
        assert exc_info.value.exit_code == 4
        assert isinstance(exc_info.value.__cause__, TraversalComponent)
        assert "Traversal component '..' is not allowed" in capsys.readouterr().err
