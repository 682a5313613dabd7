"""Read-only commands: ``show``, ``verify``, ``count``, ``history``, ``status``.

None of these write the snapshot back.
"""

from __future__ import annotations

from pathlib import Path

import typer

from artcert.cli.commands._session import (
    StateOption,
    console,
    registry_session,
    renderer,
)
from artcert.core.hasher import parse_fingerprint


def show_cmd(
    certificate_id: int = typer.Argument(None, help="Certificate id."),
    fingerprint: str = typer.Option(
        None, "--fingerprint", "-F", help="Look up by hex fingerprint instead."
    ),
    state_path: Path = StateOption,
) -> None:
    """Show a certificate by id or fingerprint."""
    if (certificate_id is None) == (fingerprint is None):
        console.print("[bold red]Give either a certificate id or --fingerprint.[/bold red]")
        raise typer.Exit(code=2)

    with registry_session(state_path, write=False) as (registry, _clock, _fees):
        if fingerprint is not None:
            try:
                certificate = registry.get_certificate_by_hash(parse_fingerprint(fingerprint))
            except ValueError:
                console.print(f"[bold red]Fingerprint is not valid hex:[/bold red] {fingerprint}")
                raise typer.Exit(code=2)
        else:
            certificate = registry.get_certificate(certificate_id)

    if certificate is None:
        console.print("[bold red]Certificate not found.[/bold red]")
        raise typer.Exit(code=1)
    renderer.print_certificate(certificate)


def verify_cmd(
    certificate_id: int = typer.Argument(..., help="Certificate id."),
    state_path: Path = StateOption,
) -> None:
    """Verify that a certificate is registered. Exit status 1 if it is not."""
    with registry_session(state_path, write=False) as (registry, _clock, _fees):
        verification = registry.verify_certificate(certificate_id)
    renderer.print_verification(certificate_id, verification)
    if not verification.valid:
        raise typer.Exit(code=1)


def count_cmd(state_path: Path = StateOption) -> None:
    """Print the number of certificates issued so far."""
    with registry_session(state_path, write=False) as (registry, _clock, _fees):
        count = registry.get_certificate_count()
    console.print(str(count))


def history_cmd(
    certificate_id: int = typer.Argument(..., help="Certificate id."),
    state_path: Path = StateOption,
) -> None:
    """List the amendments of a certificate, oldest first."""
    with registry_session(state_path, write=False) as (registry, _clock, _fees):
        if registry.get_certificate(certificate_id) is None:
            console.print("[bold red]Certificate not found.[/bold red]")
            raise typer.Exit(code=1)
        history = registry.get_update_history(certificate_id)

    if not history:
        console.print(f"[dim]Certificate #{certificate_id} has never been amended.[/dim]")
        return
    console.print(renderer.render_history(certificate_id, history))


def status_cmd(state_path: Path = StateOption) -> None:
    """Show registry configuration, capacity and clock."""
    with registry_session(state_path, write=False) as (registry, clock, _fees):
        panel = renderer.render_status(registry.state, clock.now())
    console.print(panel)
