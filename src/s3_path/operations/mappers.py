"""
Error mapping and CLI utilities.

Provides centralized exception-to-exit-code mapping and CLI command wrappers
to ensure consistent error handling across all Typer commands.
"""
from __future__ import annotations

import typer
from typing import Callable, TypeVar

T = TypeVar('T')

# exit_code_for walks the MRO, so subclasses inherit their base class code
EXIT_CODES = {
    "EmptyComponent": 2,
    "IllegalCharacter": 3,
    "TraversalComponent": 4,
    "StaleS3PathView": 5,
    "InvalidS3PathComponent": 2,
    "ValidationError": 2,
    "ValueError": 2,
}

FALLBACK_EXIT_CODE = 1


def exit_code_for(exc: BaseException) -> int:
    """
    Map exception to standardized exit code.
    
    Returns:
    - 0: Success (never returned here)
    - 1: Unknown error
    - 2: Invalid input (EmptyComponent, InvalidS3PathComponent, ValueError)
    - 3: Illegal character in a component
    - 4: Traversal component ('.' or '..')
    - 5: Stale path view
    
    The exception's own class is checked first, then its base classes,
    so subclasses of ValueError still map to 2.
    
    Args:
        exc: Exception to map
        
    Returns:
        Exit code
    """
    for cls in type(exc).__mro__:
        if cls.__name__ in EXIT_CODES:
            return EXIT_CODES[cls.__name__]
    return FALLBACK_EXIT_CODE


def run_and_exit(func: Callable[[], T]) -> T:
    """
    Unified error wrapper for CLI commands.
    
    Executes the given function and maps any exceptions to appropriate
    exit codes using typer.Exit. The error message is written to stderr
    so it can be surfaced directly to the user.
    
    Args:
        func: Function to execute
        
    Returns:
        Function result if successful
        
    Raises:
        typer.Exit: With appropriate exit code if function raises exception
    """
    try:
        return func()
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=exit_code_for(e)) from e
