"""
Human-readable and JSON output formatting.

Centralizes all CLI output formatting so commands stay thin and both
output modes render the same data.
"""
from __future__ import annotations

import typer

from ..models import PathReport
from ..path import AnyS3Path


def print_key(path: AnyS3Path) -> None:
    """Print a canonical key; the empty key prints as an empty line."""
    typer.echo(str(path))


def print_report(report: PathReport, json_output: bool = False, verbose: bool = False) -> None:
    """
    Print a PathReport.
    
    Args:
        report: Report to display
        json_output: Emit the report as JSON
        verbose: Also list each component with its index
    """
    if json_output:
        typer.echo(report.model_dump_json(indent=2))
        return
    
    typer.echo(f"Key: {report.key}")
    typer.echo(f"Depth: {report.depth}")
    typer.echo(f"Parent: {report.parent if report.parent is not None else '(none)'}")
    if report.local_path is not None:
        typer.echo(f"Local path: {report.local_path}")
    
    if verbose:
        for index, component in enumerate(report.components):
            typer.echo(f"  [{index}] {component}")
