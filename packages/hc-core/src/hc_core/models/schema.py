# hc_core/models/schema.py
import re
from typing import List

from pydantic import BaseModel, ConfigDict, Field

# ---- HC v1.1 constants ----

HC_VERSION = "1.1"

METADATA_BLOCK = "hc-metadata"
INSTRUCTIONS_BLOCK = "hc-instructions"
HUMAN_DOCS_BLOCK = "hc-human-docs"

VALID_TYPES = ["registry", "skill", "artifact", "identity", "framework"]

REQUIRED_METADATA_FIELDS = [
    "hc_version",
    "hc_type",
    "artifact_id",
    "version",
    "created",
    "updated",
    "summary",
]

# ---- root schema ----


class HCSchema(BaseModel):
    """Format constants the validator checks documents against.

    Defaults mirror HC v1.1; a YAML schema file may override any key.
    """

    model_config = ConfigDict(extra="ignore")

    hc_version: str = HC_VERSION

    metadata_block: str = METADATA_BLOCK
    instructions_block: str = INSTRUCTIONS_BLOCK
    human_docs_block: str = HUMAN_DOCS_BLOCK
    required_blocks: List[str] = Field(
        default_factory=lambda: [METADATA_BLOCK, INSTRUCTIONS_BLOCK, HUMAN_DOCS_BLOCK]
    )

    required_fields: List[str] = Field(default_factory=lambda: list(REQUIRED_METADATA_FIELDS))
    valid_types: List[str] = Field(default_factory=lambda: list(VALID_TYPES))
    timestamp_fields: List[str] = Field(default_factory=lambda: ["created", "updated"])

    # whitespace-delimited words, a rough stand-in for model tokens
    min_summary_words: int = Field(default=10, ge=0)
    target_summary_tokens: str = "50-100"

    min_instructions_chars: int = Field(default=100, ge=0)
    min_human_docs_chars: int = Field(default=200, ge=0)
    step_marker: str = "Step"

    @property
    def artifact_id_pattern(self) -> re.Pattern[str]:
        """hc-<type>-<slug>-<numeric suffix>"""
        types = "|".join(re.escape(t) for t in self.valid_types)
        return re.compile(rf"^hc-({types})-[a-z0-9-]+-\d+$")
