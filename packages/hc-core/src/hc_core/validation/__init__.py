from .document import validate_document, validate_file

__all__ = ["validate_document", "validate_file"]
