"""Main entry point for the authdelegate CLI."""

from __future__ import annotations

import logging

try:
    import typer
except ImportError:
    import sys

    print("authdelegate CLI requires extras: pip install authdelegate[cli]")
    sys.exit(1)

from .commands import demo

app = typer.Typer(
    name="authdelegate",
    help="authdelegate CLI - Try out delegated login/logout",
    no_args_is_help=True,
)

app.add_typer(demo.app, name="demo")


def _version_callback(value: bool) -> None:
    """Handle --version and exit early."""
    if value:
        from authdelegate import __version__

        typer.echo(f"authdelegate {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the CLI version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log coordinator activity to stderr."),
) -> None:
    """authdelegate CLI root callback."""
    _ = version
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def version() -> None:
    """Show the CLI version."""
    from authdelegate import __version__

    typer.echo(f"authdelegate {__version__}")


if __name__ == "__main__":
    app()
