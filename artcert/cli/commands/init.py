"""``artcert init`` — create a fresh registry snapshot.

The authority principal, capacity and issuance fee are fixed from
configuration (ARTCERT_* variables) at this point.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.panel import Panel

from artcert.cli.commands._session import StateOption, console, resolve_store
from artcert.config import config
from artcert.core.snapshot_store import RegistrySnapshot
from artcert.core.state import RegistryState


def init_cmd(
    state_path: Path = StateOption,
    authority: str = typer.Option(
        None,
        "--authority",
        "-A",
        help="Authority identity (defaults to ARTCERT_AUTHORITY_PRINCIPAL).",
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing snapshot."
    ),
) -> None:
    """Initialize an empty registry."""
    store = resolve_store(state_path)
    if store.exists() and not force:
        console.print(f"[bold red]Snapshot already exists:[/bold red] {store.path}")
        console.print("[dim]Pass --force to overwrite it.[/dim]")
        raise typer.Exit(code=1)

    state = RegistryState.from_config(config)
    if authority:
        state.authority_principal = authority
    store.save(RegistrySnapshot(state=state))

    console.print(
        Panel(
            "\n".join([
                "[bold green]Registry initialized.[/bold green]",
                "",
                f"[bold]Snapshot:[/bold]     {store.path}",
                f"[bold]Authority:[/bold]    {state.authority_principal}",
                f"[bold]Capacity:[/bold]     {state.max_certificates}",
                f"[bold]Issuance fee:[/bold] {state.issuance_fee}",
                "",
                "[dim]Configure collaborators with: artcert admin set-registry / set-provenance[/dim]",
            ]),
            title="[bold]artcert[/bold]",
            border_style="green",
            padding=(1, 2),
        )
    )
