"""
Contract Validation Module

JSON Schema контракты скалярного формата обмена и единый путь их
декодирования (ScalarContract.decode).
"""

from .validators import (
    SCHEMA_DIR,
    ScalarContract,
    SchemaLoader,
    StrictScalarValidator,
    contract_for,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ScalarContract",
    "StrictScalarValidator",
    # Functions
    "contract_for",
    # Constants
    "SCHEMA_DIR",
]
