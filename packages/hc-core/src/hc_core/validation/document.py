"""
HC document validation.

Runs the fixed pipeline of document checks (doctype, required blocks,
metadata, instructions, human docs) and partitions the findings into a Report.
Malformed content never raises; only unreadable input does (see validate_file).
"""

from __future__ import annotations
import logging
from pathlib import Path

from hc_core.codebase.debug import spy_trace
from hc_core.data.loader import read_document
from hc_core.data.schema import load_schema
from hc_core.models.findings import Finding, Report, error, warning
from hc_core.models.schema import HCSchema
from hc_core.validation.blocks import find_block, validate_required_blocks
from hc_core.validation.metadata import validate_metadata

logger = logging.getLogger("hc.validator")

HTML5_DOCTYPE = "<!doctype html>"


@spy_trace
def validate_doctype(content: str) -> list[Finding]:
    """Prefix check only; the document is not parsed as HTML."""
    if content.strip().lower().startswith(HTML5_DOCTYPE):
        return []
    return [error("MISSING_DOCTYPE", "Missing HTML5 doctype (<!DOCTYPE html>)")]


@spy_trace
def validate_instructions(instructions: str | None, schema: HCSchema) -> list[Finding]:
    findings = []
    if instructions is None:
        return findings

    if len(instructions) < schema.min_instructions_chars:
        findings.append(warning(
            "INSTRUCTIONS_SHORT",
            f"{schema.instructions_block} seems very short. Include detailed steps.",
            length=len(instructions),
            minimum=schema.min_instructions_chars,
        ))
    # containment only, step numbering is not checked
    if schema.step_marker not in instructions:
        findings.append(warning(
            "INSTRUCTIONS_NO_STEPS",
            f"{schema.instructions_block} should include numbered steps",
            marker=schema.step_marker,
        ))
    return findings


@spy_trace
def validate_human_docs(docs: str | None, schema: HCSchema) -> list[Finding]:
    if docs is None or len(docs) >= schema.min_human_docs_chars:
        return []
    return [warning(
        "HUMAN_DOCS_SHORT",
        f"{schema.human_docs_block} seems very short. Include comprehensive documentation.",
        length=len(docs),
        minimum=schema.min_human_docs_chars,
    )]


def validate_document(content: str, name: str = "<document>", schema: HCSchema | None = None) -> Report:
    """
    Top-level validation function.

    A pure function of (content, schema): every call builds its own findings.
    """
    schema = schema or load_schema()

    all_findings = []

    all_findings.extend(validate_doctype(content))
    all_findings.extend(validate_required_blocks(content, schema))
    all_findings.extend(validate_metadata(find_block(content, schema.metadata_block, "script"), schema))
    all_findings.extend(validate_instructions(find_block(content, schema.instructions_block, "script"), schema))
    all_findings.extend(validate_human_docs(find_block(content, schema.human_docs_block, "div"), schema))

    report = Report.from_findings(name, all_findings)
    logger.debug(
        "validated %s: %d error(s), %d warning(s)", name, len(report.errors), len(report.warnings)
    )
    return report


def validate_file(path: Path | str, schema: HCSchema | None = None) -> Report:
    """Read and validate one file. FileNotFoundError/DocumentReadError propagate."""
    p = Path(path)
    content = read_document(p)
    return validate_document(content, name=p.name, schema=schema)
