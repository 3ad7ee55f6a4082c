from .loader import DocumentReadError, read_document
from .schema import load_schema

__all__ = [
    "DocumentReadError",
    "load_schema",
    "read_document",
]
