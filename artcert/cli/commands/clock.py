"""``artcert tick`` — advance the host's logical clock."""

from __future__ import annotations

from pathlib import Path

import typer

from artcert.cli.commands._session import StateOption, console, registry_session


def tick_cmd(
    blocks: int = typer.Argument(1, min=0, help="Number of blocks to advance."),
    state_path: Path = StateOption,
) -> None:
    """Advance the logical clock and print the new height."""
    with registry_session(state_path) as (_registry, clock, _fees):
        height = clock.advance(blocks)
    console.print(str(height))
