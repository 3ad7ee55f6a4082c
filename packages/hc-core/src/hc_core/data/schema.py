# hc_core/data/schema.py
from __future__ import annotations
from pathlib import Path

from hc_core.data.loader import load_yaml_typed
from hc_core.models.schema import HCSchema


def load_schema(path: str | Path | None = None) -> HCSchema:
    """Load the HC schema; keys missing from the file keep their v1.1 defaults."""
    if path is None:
        return HCSchema()
    return load_yaml_typed(Path(path), model=HCSchema)
