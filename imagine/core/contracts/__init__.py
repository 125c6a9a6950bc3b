"""
Contract Validation Module

JSON Schema контракты для входных структур imagine.
"""

from .validators import (
    ContractValidator,
    ImportRequestValidator,
    SchemaLoader,
    validate_import_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ImportRequestValidator",
    # Functions
    "validate_import_request",
]
