"""
Block location for HC documents.

Blocks are found by pattern-matching the opening tag that carries the block id
and capturing non-greedily up to the closing tag of that element type. This is
deliberately not a DOM parse: presence is keyed on the id attribute alone.
"""

from __future__ import annotations
import re
from functools import lru_cache
from typing import Literal

from hc_core.codebase.debug import spy_trace
from hc_core.models.findings import Finding, error
from hc_core.models.schema import HCSchema

BlockTag = Literal["script", "div"]


def _id_attr(block_id: str) -> str:
    return rf"""id=(["']){re.escape(block_id)}\1"""


@lru_cache(maxsize=32)
def _block_pattern(block_id: str, tag: str) -> re.Pattern[str]:
    return re.compile(
        rf"<(?i:{tag})\b[^>]*{_id_attr(block_id)}[^>]*>(?P<body>.*?)</(?i:{tag})\s*>",
        re.DOTALL,
    )


def has_block_id(content: str, block_id: str) -> bool:
    """True if ``id="<block_id>"`` appears anywhere, attached to any element or none."""
    return re.search(_id_attr(block_id), content) is not None


def find_block(content: str, block_id: str, tag: BlockTag) -> str | None:
    """Return the trimmed inner text of the first ``<tag id=block_id>`` element, or None."""
    match = _block_pattern(block_id, tag).search(content)
    if match is None:
        return None
    return match.group("body").strip()


@spy_trace
def validate_required_blocks(content: str, schema: HCSchema) -> list[Finding]:
    """One MISSING_BLOCK error per required block id absent from the document."""
    findings = []

    for block_id in schema.required_blocks:
        if not has_block_id(content, block_id):
            findings.append(error(
                "MISSING_BLOCK",
                f"Missing required block: #{block_id}",
                block_id=block_id,
            ))

    return findings
