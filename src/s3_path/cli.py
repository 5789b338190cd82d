"""
s3-path CLI

Implements 5 CLI verbs on top of the Operations facade:
- check: Validate keys and print their canonical form
- join: Append components to a key
- parent: Print the parent of a key
- local: Print the local filesystem path mirroring a key
- inspect: Describe a key (text or JSON)
"""
from __future__ import annotations

import logging
from typing import List, Optional

import typer

from .cli_context import CLIContext
from .operations import OpsConfig, run_and_exit
from .operations.printers import print_key, print_report

app = typer.Typer(name="s3-path", help="Validate S3 object keys and map them onto local paths")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging and detailed output"),
) -> None:
    """Validate S3 object keys and map them onto local paths."""
    context = run_and_exit(lambda: CLIContext.from_env(OpsConfig(verbose=verbose)))
    _configure_logging("DEBUG" if verbose else context.settings.log_level)
    ctx.obj = context


@app.command()
def check(
    ctx: typer.Context,
    keys: List[str] = typer.Argument(..., help="Keys to validate"),
) -> None:
    """Validate keys and print their canonical form."""
    context: CLIContext = ctx.obj

    def _check() -> None:
        for raw in keys:
            print_key(context.ops.key(raw))

    run_and_exit(_check)


@app.command()
def join(
    ctx: typer.Context,
    base: str = typer.Argument(..., help="Base key"),
    components: List[str] = typer.Argument(..., help="Components to append"),
) -> None:
    """Append components to a key."""
    context: CLIContext = ctx.obj
    run_and_exit(lambda: print_key(context.ops.join(base, components)))


@app.command()
def parent(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Key whose parent to print"),
) -> None:
    """Print the parent of a key (an empty line for a single component key)."""
    context: CLIContext = ctx.obj

    def _parent() -> None:
        result = context.ops.parent(key)
        if result is None:
            raise ValueError("Path has no parent")
        print_key(result)

    run_and_exit(_parent)


@app.command()
def local(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Key to map"),
    root: Optional[str] = typer.Option(None, "--root", help="Local mirror root directory"),
) -> None:
    """Print the local filesystem path mirroring a key."""
    context: CLIContext = ctx.obj
    run_and_exit(lambda: typer.echo(str(context.ops.local_path(key, root))))


@app.command()
def inspect(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Key to describe"),
    root: Optional[str] = typer.Option(None, "--root", help="Local mirror root directory"),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON"),
) -> None:
    """Describe a key."""
    context: CLIContext = ctx.obj

    def _inspect() -> None:
        report = context.ops.report(key, root)
        print_report(report, json_output=json_output, verbose=context.config.verbose)

    run_and_exit(_inspect)


if __name__ == "__main__":
    app()
