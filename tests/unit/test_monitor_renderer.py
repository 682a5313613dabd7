"""Unit tests for CertificateRenderer — Rich output of certificates and status."""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from artcert.models.results import Err, ErrorCode
from artcert.monitor.renderer import CertificateRenderer


def _capture_console() -> tuple[Console, StringIO]:
    buf = StringIO()
    return Console(file=buf, force_terminal=False, width=120), buf


@pytest.fixture
def issued_registry(configured_registry, make_request):
    configured_registry.issue_certificate("ST1TEST", make_request())
    return configured_registry


class TestCertificateRenderer:
    def test_render_certificate_returns_panel(self, issued_registry):
        renderer = CertificateRenderer()
        panel = renderer.render_certificate(issued_registry.get_certificate(0))
        assert isinstance(panel, Panel)

    def test_print_certificate_shows_fields(self, issued_registry):
        console, buf = _capture_console()
        CertificateRenderer(console=console).print_certificate(issued_registry.get_certificate(0))
        output = buf.getvalue()
        assert "Mona Lisa" in output
        assert "Da Vinci" in output
        assert "1,000,000" in output
        assert "sha256:" + "01" * 32 in output

    def test_verification_output(self, issued_registry):
        console, buf = _capture_console()
        renderer = CertificateRenderer(console=console)
        renderer.print_verification(0, issued_registry.verify_certificate(0))
        renderer.print_verification(5, issued_registry.verify_certificate(5))
        output = buf.getvalue()
        assert "Certificate #0 is valid." in output
        assert "Certificate #5 is not registered." in output

    def test_history_table(self, issued_registry):
        issued_registry.update_certificate("ST1TEST", 0, "Cleaned", "Good", 5)
        table = CertificateRenderer().render_history(0, issued_registry.get_update_history(0))
        assert isinstance(table, Table)
        assert table.row_count == 1

    def test_status_panel(self, registry):
        console, buf = _capture_console()
        console.print(CertificateRenderer().render_status(registry.state, 3))
        output = buf.getvalue()
        assert "0/10000" in output
        assert "collaborators not configured" in output

    def test_print_error(self):
        console, buf = _capture_console()
        CertificateRenderer(console=console).print_error(Err.of(ErrorCode.INVALID_WEIGHT))
        assert "Error 117 (INVALID_WEIGHT)" in buf.getvalue()
