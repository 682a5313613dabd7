"""Terminal rendering for certificates and registry status (Rich)."""

from artcert.monitor.renderer import CertificateRenderer

__all__ = ["CertificateRenderer"]
