from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Severity = Literal["ERROR", "WARNING"]


class Finding(BaseModel):
    """A single validation finding with severity, code, message, and context."""

    model_config = ConfigDict(extra="ignore")
    severity: Severity
    code: str
    message: str
    context: dict = Field(default_factory=dict)


def error(code: str, message: str, **context) -> Finding:
    return Finding(severity="ERROR", code=code, message=message, context=context)


def warning(code: str, message: str, **context) -> Finding:
    return Finding(severity="WARNING", code=code, message=message, context=context)


class Report(BaseModel):
    """Validation result for one document.

    Errors gate the verdict; warnings never do.
    """

    model_config = ConfigDict(extra="ignore")
    document: str
    errors: list[Finding] = Field(default_factory=list)
    warnings: list[Finding] = Field(default_factory=list)

    @classmethod
    def from_findings(cls, document: str, findings: list[Finding]) -> "Report":
        """Partition findings by severity, keeping check-execution order."""
        return cls(
            document=document,
            errors=[f for f in findings if f.severity == "ERROR"],
            warnings=[f for f in findings if f.severity == "WARNING"],
        )

    @property
    def failed(self) -> bool:
        return len(self.errors) > 0

    @property
    def passed(self) -> bool:
        return not self.failed

    @property
    def summary(self) -> dict:
        return {"errors": len(self.errors), "warnings": len(self.warnings)}
