"""``artcert update ID`` — amend description, condition and valuation."""

from __future__ import annotations

from pathlib import Path

import typer

from artcert.cli.commands._session import (
    CallerOption,
    StateOption,
    console,
    fail,
    registry_session,
)
from artcert.models.results import Err


def update_cmd(
    certificate_id: int = typer.Argument(..., help="Certificate to amend."),
    description: str = typer.Option(..., "--description", "-d"),
    condition: str = typer.Option(..., "--condition"),
    valuation: int = typer.Option(..., "--valuation", "-v"),
    caller: str = CallerOption,
    state_path: Path = StateOption,
) -> None:
    """Amend a certificate. Only its issuer may do this."""
    with registry_session(state_path) as (registry, _clock, _fees):
        result = registry.update_certificate(
            caller, certificate_id, description, condition, valuation
        )
        if isinstance(result, Err):
            fail(result)
    console.print(f"[green]Certificate #{certificate_id} updated.[/green]")
