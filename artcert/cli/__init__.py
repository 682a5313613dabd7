"""artcert CLI — Typer-based command-line interface.

Provides the ``artcert`` command with subcommands for initializing a
registry snapshot, configuring it as the authority, issuing and amending
certificates, and querying them.

All output uses Rich for formatted terminal display.
"""
