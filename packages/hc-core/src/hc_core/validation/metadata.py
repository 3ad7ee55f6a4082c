"""
Metadata validation for the hc-metadata block.

The block is parsed once as strict JSON. A parse failure is reported as a
single finding and every field-level check is skipped; field checks never see
a partially-parsed object.
"""

from __future__ import annotations
import json
import logging
from datetime import datetime
from typing import Any

from dateutil import parser as date_parser
from pydantic import TypeAdapter, ValidationError

from hc_core.codebase.debug import spy_trace
from hc_core.models.findings import Finding, error, warning
from hc_core.models.schema import HCSchema

logger = logging.getLogger("hc.validator.metadata")

_DATETIME = TypeAdapter(datetime)

_JSON_TYPE_NAMES = {
    list: "array",
    str: "string",
    int: "number",
    float: "number",
    bool: "boolean",
    type(None): "null",
}


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant {name!r}")


def parse_json(raw: str) -> Any:
    """Strict JSON parse; NaN and Infinity are rejected with ValueError."""
    return json.loads(raw, parse_constant=_reject_constant)


def is_missing(value: Any) -> bool:
    """JSON truthiness: null, false, "" and 0 count as missing; [] and {} do not."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0
    return False


def json_text(value: Any) -> str:
    """Strings as-is, every other JSON value in its JSON spelling (true, null, [..])."""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def is_timestamp(value: Any) -> bool:
    """ISO 8601 and epoch numbers via pydantic, then free-form dates such as RFC 2822."""
    try:
        _DATETIME.validate_python(value)
        return True
    except ValidationError:
        pass
    if not isinstance(value, str):
        return False
    try:
        date_parser.parse(value)
    except (ValueError, OverflowError):
        return False
    return True


def word_count(text: str) -> int:
    """Whitespace-delimited words. Approximates tokens, it is not a tokenizer."""
    return len(text.split())


def validate_required_fields(metadata: dict[str, Any], schema: HCSchema) -> list[Finding]:
    findings = []
    for field in schema.required_fields:
        if is_missing(metadata.get(field)):
            findings.append(error(
                "METADATA_MISSING_FIELD",
                f"Missing required metadata field: {field}",
                field=field,
            ))
    return findings


def validate_hc_version(metadata: dict[str, Any], schema: HCSchema) -> list[Finding]:
    found = metadata.get("hc_version")
    if is_missing(found) or found == schema.hc_version:
        return []
    return [warning(
        "METADATA_VERSION_MISMATCH",
        f'hc_version should be "{schema.hc_version}", found "{json_text(found)}"',
        expected=schema.hc_version,
        found=found,
    )]


def validate_hc_type(metadata: dict[str, Any], schema: HCSchema) -> list[Finding]:
    found = metadata.get("hc_type")
    if is_missing(found) or found in schema.valid_types:
        return []
    return [error(
        "METADATA_INVALID_TYPE",
        f"Invalid hc_type: {json_text(found)}. Must be one of: {', '.join(schema.valid_types)}",
        found=found,
        allowed=list(schema.valid_types),
    )]


def validate_artifact_id(metadata: dict[str, Any], schema: HCSchema) -> list[Finding]:
    found = metadata.get("artifact_id")
    if is_missing(found) or schema.artifact_id_pattern.fullmatch(json_text(found)):
        return []
    return [warning(
        "METADATA_ID_FORMAT",
        "artifact_id format should be: hc-[type]-[slug]-[timestamp]",
        found=found,
    )]


def validate_timestamps(metadata: dict[str, Any], schema: HCSchema) -> list[Finding]:
    findings = []
    for field in schema.timestamp_fields:
        raw = metadata.get(field)
        if not is_missing(raw) and not is_timestamp(raw):
            findings.append(error(
                "METADATA_INVALID_TIMESTAMP",
                f"Invalid {field} timestamp: {json_text(raw)}",
                field=field,
                value=raw,
            ))
    return findings


def validate_summary(metadata: dict[str, Any], schema: HCSchema) -> list[Finding]:
    summary = metadata.get("summary")
    if is_missing(summary):
        return []
    words = word_count(json_text(summary))
    if words >= schema.min_summary_words:
        return []
    return [warning(
        "METADATA_SUMMARY_SHORT",
        f"Summary seems short ({words} words). Aim for {schema.target_summary_tokens} tokens.",
        words=words,
        minimum=schema.min_summary_words,
    )]


@spy_trace
def validate_metadata(raw: str | None, schema: HCSchema) -> list[Finding]:
    """Parse the metadata block and run every field-level check in order.

    ``raw`` is None when the block could not be located; the missing block is
    reported by the block checks, so nothing is reported here.
    """
    if raw is None:
        return []

    try:
        metadata = parse_json(raw)
    except (ValueError, RecursionError) as e:
        logger.debug("metadata parse failed: %s", e)
        return [error(
            "METADATA_INVALID_JSON",
            f"Invalid JSON in {schema.metadata_block}: {e}",
            block_id=schema.metadata_block,
            error=str(e),
        )]

    if not isinstance(metadata, dict):
        found = _JSON_TYPE_NAMES.get(type(metadata), type(metadata).__name__)
        return [error(
            "METADATA_NOT_OBJECT",
            f"{schema.metadata_block} must contain a JSON object, found {found}",
            block_id=schema.metadata_block,
            found=found,
        )]

    findings = []
    findings.extend(validate_required_fields(metadata, schema))
    findings.extend(validate_hc_version(metadata, schema))
    findings.extend(validate_hc_type(metadata, schema))
    findings.extend(validate_artifact_id(metadata, schema))
    findings.extend(validate_timestamps(metadata, schema))
    findings.extend(validate_summary(metadata, schema))
    return findings
