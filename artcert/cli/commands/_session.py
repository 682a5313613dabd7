"""Shared CLI plumbing: option definitions and the load/operate/save cycle."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import typer
from rich.console import Console

from artcert.config import config
from artcert.core.collaborators import BlockClock, FeeLedger
from artcert.core.registry import CertificateRegistry
from artcert.core.snapshot_store import SnapshotStore
from artcert.models.results import Err
from artcert.monitor.renderer import CertificateRenderer

console = Console()
renderer = CertificateRenderer(console=console)

CallerOption = typer.Option(
    ...,
    "--as",
    envvar="ARTCERT_CALLER",
    help="Identity performing the operation (supplied by the host).",
)

StateOption = typer.Option(
    None,
    "--state",
    "-s",
    help="Path to the registry snapshot (defaults to ARTCERT_STATE_PATH).",
)


def resolve_store(state_path: Path | None) -> SnapshotStore:
    return SnapshotStore(state_path or config.state_path)


@contextmanager
def registry_session(
    state_path: Path | None, *, write: bool = True
) -> Iterator[tuple[CertificateRegistry, BlockClock, FeeLedger]]:
    """Load the snapshot, yield a live registry, save it back on success.

    Nothing is saved if the body raises (including ``typer.Exit``).
    """
    store = resolve_store(state_path)
    snapshot = store.load(config)
    registry, clock, fees = store.open_registry(snapshot)
    yield registry, clock, fees
    if write:
        store.save(store.capture(registry, clock, fees))


def fail(error: Err) -> None:
    """Print a registry error and exit with status 1."""
    renderer.print_error(error)
    raise typer.Exit(code=1)
