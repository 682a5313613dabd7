"""``artcert admin`` — authority-only registry configuration."""

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

admin_app = typer.Typer(
    name="admin",
    help="Authority-only configuration of the registry.",
    no_args_is_help=True,
)


@admin_app.command(name="set-registry", help="Set the registry collaborator address.")
def set_registry_cmd(
    address: str = typer.Argument(..., help="Registry collaborator address."),
    caller: str = CallerOption,
    state_path: Path = StateOption,
) -> None:
    with registry_session(state_path) as (registry, _clock, _fees):
        result = registry.set_registry_contract(caller, address)
        if isinstance(result, Err):
            fail(result)
    console.print(f"[green]Registry contract set to[/green] {address}")


@admin_app.command(name="set-provenance", help="Set the provenance collaborator address.")
def set_provenance_cmd(
    address: str = typer.Argument(..., help="Provenance collaborator address."),
    caller: str = CallerOption,
    state_path: Path = StateOption,
) -> None:
    with registry_session(state_path) as (registry, _clock, _fees):
        result = registry.set_provenance_contract(caller, address)
        if isinstance(result, Err):
            fail(result)
    console.print(f"[green]Provenance contract set to[/green] {address}")


@admin_app.command(name="set-fee", help="Set the per-issuance fee.")
def set_fee_cmd(
    fee: int = typer.Argument(..., min=0, help="New issuance fee."),
    caller: str = CallerOption,
    state_path: Path = StateOption,
) -> None:
    with registry_session(state_path) as (registry, _clock, _fees):
        result = registry.set_issuance_fee(caller, fee)
        if isinstance(result, Err):
            fail(result)
    console.print(f"[green]Issuance fee set to[/green] {fee}")


@admin_app.command(name="set-max", help="Set the certificate capacity.")
def set_max_cmd(
    maximum: int = typer.Argument(..., min=0, help="Maximum number of certificates."),
    caller: str = CallerOption,
    state_path: Path = StateOption,
) -> None:
    with registry_session(state_path) as (registry, _clock, _fees):
        result = registry.set_max_certificates(caller, maximum)
        if isinstance(result, Err):
            fail(result)
    console.print(f"[green]Certificate capacity set to[/green] {maximum}")
