from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, TypeAdapter, ValidationError


class DocumentReadError(ValueError):
    """Raised when a candidate document exists but cannot be read as text."""


# -------------------------------
# Document reader
# -------------------------------


def read_document(path: Path | str) -> str:
    """Read one candidate HC document as UTF-8 text.

    This is the only failure that propagates out of a validation run: content
    problems become findings, unreadable input does not.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"File not found: {p}")
    if p.is_dir():
        raise DocumentReadError(f"Is a directory: {p}")

    try:
        return p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DocumentReadError(f"Unable to decode UTF-8 in {p}: {e}") from e
    except OSError as e:
        raise DocumentReadError(f"Unable to read {p}: {e}") from e


# -------------------------------
# Internal raw YAML reader
# -------------------------------


def _read_yaml_raw(path: Path | str) -> Any:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"File not found: {p}")

    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(f"Unable to decode UTF-8 in {p}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {p}: {e}") from e

    if data is None:
        raise ValueError(f"Empty YAML file: {p}")

    return data


# -------------------------------
# Public typed YAML loader
# -------------------------------


def load_yaml_typed[M: BaseModel](path: Path | str, *, model: type[M]) -> M:
    """Read YAML and validate/parse it into a typed model using Pydantic v2.

    Example:
        load_yaml_typed("schemas/hc-1.1.yaml", model=HCSchema)
    """
    data = _read_yaml_raw(path)

    try:
        return TypeAdapter(model).validate_python(data)
    except ValidationError as e:
        # Normalize error so callers see the file path in the message
        raise ValueError(f"Invalid structure in {path}: {e}") from e
