"""
Contract Validation Module

Валидация JSON контрактов внутреннего представления BigNum.
"""

from .validators import (
    BigNumLayoutValidator,
    ContractValidator,
    SchemaLoader,
    validate_bignum_layout,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigNumLayoutValidator",
    # Functions
    "validate_bignum_layout",
]
