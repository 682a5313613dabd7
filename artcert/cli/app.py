"""Main Typer application — imports and registers all CLI commands.

Entry point: ``artcert`` (configured via pyproject.toml console_scripts).
"""

from __future__ import annotations

import logging

import typer

from artcert.cli.commands.admin import admin_app
from artcert.cli.commands.clock import tick_cmd
from artcert.cli.commands.init import init_cmd
from artcert.cli.commands.issue import issue_cmd
from artcert.cli.commands.query import (
    count_cmd,
    history_cmd,
    show_cmd,
    status_cmd,
    verify_cmd,
)
from artcert.cli.commands.update import update_cmd
from artcert.config import config

app = typer.Typer(
    name="artcert",
    help="artcert: provenance certificates for physical artifacts.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def _configure_logging(
    verbose: bool = typer.Option(False, "--verbose", help="Log at DEBUG level."),
) -> None:
    level = logging.DEBUG if verbose else config.log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# Register subcommands
app.command(name="init", help="Create a fresh registry snapshot.")(init_cmd)
app.command(name="issue", help="Issue a new certificate.")(issue_cmd)
app.command(name="update", help="Amend a certificate you issued.")(update_cmd)
app.command(name="show", help="Show a certificate.")(show_cmd)
app.command(name="verify", help="Verify a certificate is registered.")(verify_cmd)
app.command(name="count", help="Number of certificates issued.")(count_cmd)
app.command(name="history", help="List a certificate's amendments.")(history_cmd)
app.command(name="status", help="Show registry configuration.")(status_cmd)
app.command(name="tick", help="Advance the logical clock.")(tick_cmd)
app.add_typer(admin_app, name="admin")


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
