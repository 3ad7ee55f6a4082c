from .schema import schema
from .validate import validate

__all__ = ["schema", "validate"]
