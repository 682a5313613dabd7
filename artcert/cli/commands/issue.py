"""``artcert issue`` — validate and issue a new certificate.

The artifact fingerprint is either given as hex (``--fingerprint``) or
computed from a reference file (``--file``).
"""

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
from artcert.core.hasher import fingerprint_file, parse_fingerprint
from artcert.models.certificates import IssueRequest
from artcert.models.results import Err


def _resolve_fingerprint(fingerprint: str | None, source: Path | None) -> bytes:
    if (fingerprint is None) == (source is None):
        console.print("[bold red]Give exactly one of --fingerprint or --file.[/bold red]")
        raise typer.Exit(code=2)
    if source is not None:
        return fingerprint_file(source)
    try:
        return parse_fingerprint(fingerprint)
    except ValueError:
        console.print(f"[bold red]Fingerprint is not valid hex:[/bold red] {fingerprint}")
        raise typer.Exit(code=2)


def issue_cmd(
    title: str = typer.Option(..., "--title", "-t", help="Artifact title."),
    category: str = typer.Option(
        ..., "--category", "-c", help="painting, sculpture or artifact."
    ),
    valuation: int = typer.Option(..., "--valuation", "-v", help="Appraised value."),
    weight: int = typer.Option(..., "--weight", "-w", help="Weight of the artifact."),
    fingerprint: str = typer.Option(
        None, "--fingerprint", "-F", help="Hex SHA-256 fingerprint of the artifact."
    ),
    source: Path = typer.Option(
        None,
        "--file",
        exists=True,
        dir_okay=False,
        help="Reference file to fingerprint instead of --fingerprint.",
    ),
    description: str = typer.Option("", "--description", "-d"),
    origin: str = typer.Option("", "--origin"),
    condition: str = typer.Option("", "--condition"),
    material: str = typer.Option("", "--material"),
    dimensions: str = typer.Option("", "--dimensions"),
    artist: str = typer.Option("", "--artist"),
    period: str = typer.Option("", "--period"),
    restorations: list[str] = typer.Option(
        None, "--restoration", "-r", help="Restoration entry (repeatable)."
    ),
    insurance: bool = typer.Option(False, "--insured/--uninsured"),
    loan_status: bool = typer.Option(False, "--on-loan/--not-on-loan"),
    acquired: int = typer.Option(
        None, "--acquired", help="Acquisition time (defaults to the current clock)."
    ),
    expiry: int = typer.Option(None, "--expiry", help="Optional expiry time."),
    caller: str = CallerOption,
    state_path: Path = StateOption,
) -> None:
    """Issue a provenance certificate and print its id."""
    artifact_hash = _resolve_fingerprint(fingerprint, source)

    with registry_session(state_path) as (registry, clock, _fees):
        request = IssueRequest(
            artifact_hash=artifact_hash,
            title=title,
            description=description,
            origin=origin,
            condition=condition,
            material=material,
            dimensions=dimensions,
            weight=weight,
            artist=artist,
            period=period,
            category=category,
            valuation=valuation,
            insurance=insurance,
            loan_status=loan_status,
            restoration_history=tuple(restorations or ()),
            acquisition_date=clock.now() if acquired is None else acquired,
            expiry=expiry,
        )
        result = registry.issue_certificate(caller, request)
        if isinstance(result, Err):
            fail(result)
        fee = registry.state.issuance_fee

    console.print(
        f"[bold green]Issued certificate #{result.value}[/bold green] "
        f"[dim](fee {fee} charged to {caller})[/dim]"
    )
    # Plain id for scripting
    console.print(f"[bold]{result.value}[/bold]")
