"""Finding models, display classification, and redaction."""

from secretsweep.findings.classify import display_severity
from secretsweep.findings.models import Finding, ScanSession
from secretsweep.findings.redactor import redact

__all__ = ["Finding", "ScanSession", "display_severity", "redact"]
