"""artcert: provenance certificates for physical artifacts.

A certificate binds the SHA-256 fingerprint of an artwork or artifact to
its descriptive metadata, issuer, owner and valuation.  The registry:
  - validates every write through an ordered gate (first failure wins)
  - keeps exactly one certificate per fingerprint
  - assigns sequential ids that are never reused
  - lets only the issuer amend a certificate, recording each amendment
  - gates configuration changes on a single authority identity
"""

__version__ = "0.1.0"
__description__ = "Provenance certificate registry for physical artifacts"

from artcert.core.registry import CertificateRegistry
from artcert.core.state import RegistryState
from artcert.cli.app import app as cli

__all__ = ["CertificateRegistry", "RegistryState", "cli", "__version__"]
