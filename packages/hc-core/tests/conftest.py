"""Shared HC document fixtures."""

import json

import pytest

INSTRUCTIONS = """
Step 1: Do X by reading the metadata block and confirming the artifact type.
Step 2: Apply the skill to the user's request, following each constraint listed here.
Step 3: Report the outcome.
"""

HUMAN_DOCS = """
<h1>Foo Bar Skill</h1>
<p>This skill demonstrates a complete HyperContext document. It carries machine
metadata, execution instructions for an agent, and this human-readable section
so that people browsing the file in a browser understand what it does and how to
use it safely.</p>
"""


def _metadata() -> dict:
    return {
        "hc_version": "1.1",
        "hc_type": "skill",
        "artifact_id": "hc-skill-foo-bar-20240208",
        "version": "1.0.0",
        "created": "2024-02-08T00:00:00Z",
        "updated": "2024-02-08T00:00:00Z",
        "summary": "Validates HC documents by checking structure, metadata fields, and content length heuristics.",
    }


def _build(
    metadata: dict | None = None,
    *,
    raw_metadata: str | None = None,
    instructions: str | None = INSTRUCTIONS,
    human_docs: str | None = HUMAN_DOCS,
    doctype: str = "<!DOCTYPE html>",
    include_metadata: bool = True,
) -> str:
    parts = [doctype, '<html lang="en">', "<head>", "<title>HC document</title>"]
    if include_metadata:
        body = raw_metadata if raw_metadata is not None else json.dumps(_metadata() if metadata is None else metadata, indent=2)
        parts.append(f'<script type="application/json" id="hc-metadata">\n{body}\n</script>')
    if instructions is not None:
        parts.append(f'<script type="text/plain" id="hc-instructions">{instructions}</script>')
    parts.extend(["</head>", "<body>"])
    if human_docs is not None:
        parts.append(f'<div id="hc-human-docs">{human_docs}</div>')
    parts.extend(["</body>", "</html>"])
    return "\n".join(parts)


@pytest.fixture
def valid_metadata():
    """Metadata that passes every field-level check."""
    return _metadata()


@pytest.fixture
def build_document():
    """Factory for HC documents; pass None for a block to leave it out."""
    return _build


@pytest.fixture
def valid_document():
    return _build()
