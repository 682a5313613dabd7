"""Rich terminal renderer for certificates and registry status.

Color scheme
------------
- green     : active certificate / successful verification
- red       : unknown certificate / error codes
- magenta   : amendments
- dim       : empty values
"""

from __future__ import annotations

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from artcert.core.hasher import certificate_digest
from artcert.core.state import RegistryState
from artcert.models.certificates import Certificate, CertificateUpdate, Verification
from artcert.models.results import Err

_CATEGORY_STYLES: dict[str, str] = {
    "painting": "bold cyan",
    "sculpture": "bold yellow",
    "artifact": "bold magenta",
}


def _or_dash(value: object) -> str:
    if value is None or value == "" or value == []:
        return "[dim]-[/dim]"
    return escape(str(value))


class CertificateRenderer:
    """Renders certificates, audit trails and registry status.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    # ------------------------------------------------------------------
    # Renderables
    # ------------------------------------------------------------------

    def render_certificate(self, certificate: Certificate) -> Panel:
        """Render one certificate as a Panel with a two-column field table."""
        table = Table(show_header=False, expand=True, box=None, pad_edge=False)
        table.add_column("Field", style="bold", width=20)
        table.add_column("Value")

        style = _CATEGORY_STYLES.get(certificate.category.value, "")
        status = "[green]active[/green]" if certificate.status else "[red]inactive[/red]"

        table.add_row("Fingerprint", f"sha256:{certificate.fingerprint_hex}")
        table.add_row("Category", f"[{style}]{certificate.category.value}[/{style}]")
        table.add_row("Artist", _or_dash(certificate.artist))
        table.add_row("Period", _or_dash(certificate.period))
        table.add_row("Origin", _or_dash(certificate.origin))
        table.add_row("Description", _or_dash(certificate.description))
        table.add_row("Condition", _or_dash(certificate.condition))
        table.add_row("Material", _or_dash(certificate.material))
        table.add_row("Dimensions", _or_dash(certificate.dimensions))
        table.add_row("Weight", str(certificate.weight))
        table.add_row("Valuation", f"{certificate.valuation:,}")
        table.add_row("Insured", "yes" if certificate.insurance else "no")
        table.add_row("On loan", "yes" if certificate.loan_status else "no")
        table.add_row(
            "Restorations",
            escape("\n".join(certificate.restoration_history)) or "[dim]-[/dim]",
        )
        table.add_row("Acquired at", str(certificate.acquisition_date))
        table.add_row("Expiry", _or_dash(certificate.expiry))
        table.add_row("Issuer", escape(certificate.issuer))
        table.add_row("Owner", escape(certificate.current_owner))
        table.add_row("Status", status)

        return Panel(
            table,
            title=f"[bold]#{certificate.certificate_id} {escape(certificate.title)}[/bold]",
            subtitle=f"Last modified at {certificate.issuance_timestamp}",
            border_style="blue",
            padding=(1, 2),
        )

    def render_history(
        self, certificate_id: int, history: list[CertificateUpdate]
    ) -> Table:
        table = Table(
            title=f"Amendments of certificate #{certificate_id}",
            show_header=True,
            header_style="bold cyan",
            expand=True,
        )
        table.add_column("At", justify="right", width=8)
        table.add_column("By", style="magenta")
        table.add_column("Condition")
        table.add_column("Valuation", justify="right")
        table.add_column("Description")

        for record in history:
            table.add_row(
                str(record.update_timestamp),
                escape(record.updater),
                _or_dash(record.update_condition),
                f"{record.update_valuation:,}",
                _or_dash(record.update_description),
            )
        return table

    def render_status(self, state: RegistryState, height: int) -> Panel:
        """Summarize registry configuration and capacity."""
        parts = [
            f"[bold]Certificates:[/bold] {state.next_certificate_id}/{state.max_certificates}",
            f"[bold]Issuance fee:[/bold] {state.issuance_fee}",
            f"[bold]Authority:[/bold] {escape(state.authority_principal)}",
            f"[bold]Registry:[/bold] {_or_dash(state.registry_contract)}",
            f"[bold]Provenance:[/bold] {_or_dash(state.provenance_contract)}",
            f"[bold]Clock:[/bold] {height}",
        ]
        ready = (
            "[green]ready for issuance[/green]"
            if state.collaborators_configured
            else "[yellow]collaborators not configured[/yellow]"
        )
        return Panel(
            Group(Text.from_markup("\n".join(parts)), Text(""), Text.from_markup(ready)),
            title="[bold]artcert registry[/bold]",
            border_style="blue",
            padding=(1, 2),
        )

    # ------------------------------------------------------------------
    # Standalone print
    # ------------------------------------------------------------------

    def print_certificate(self, certificate: Certificate) -> None:
        self.console.print(self.render_certificate(certificate))

    def print_verification(self, certificate_id: int, verification: Verification) -> None:
        """Print a verification result, with the certificate digest when valid."""
        if verification.valid and verification.certificate is not None:
            self.console.print(
                f"[green]Certificate #{certificate_id} is valid.[/green] "
                f"[dim]digest sha256:{certificate_digest(verification.certificate)}[/dim]"
            )
            self.print_certificate(verification.certificate)
        else:
            self.console.print(
                f"[bold red]Certificate #{certificate_id} is not registered.[/bold red]"
            )

    def print_error(self, error: Err) -> None:
        self.console.print(
            f"[bold red]Error {error.code.value} ({error.code.name}):[/bold red] {error.message}"
        )
