from .findings import Finding, Report, Severity
from .schema import HCSchema

__all__ = ["Finding", "HCSchema", "Report", "Severity"]
