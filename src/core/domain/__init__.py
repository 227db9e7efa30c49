"""
Domain models and value objects.

BigNum value type, error hierarchy and arithmetic configuration.
"""

from src.core.domain.bignum import (
    RADIX,
    RNUM,
    BigNum,
    from_groups,
    from_int,
    normalize,
    one,
    trim_fraction,
    zero,
)
from src.core.domain.config import (
    DEFAULT_CONFIG,
    DEFAULT_FRACTION_BITS,
    DEFAULT_PRECISION,
    ArithmeticConfig,
    resolve_config,
)
from src.core.domain.errors import (
    BigNumError,
    DivisionByZero,
    InvalidFractionalPower,
    NegativeSqrt,
    ParseError,
)

__all__ = [
    # BigNum
    "RADIX",
    "RNUM",
    "BigNum",
    "from_groups",
    "from_int",
    "normalize",
    "one",
    "trim_fraction",
    "zero",
    # Config
    "DEFAULT_CONFIG",
    "DEFAULT_FRACTION_BITS",
    "DEFAULT_PRECISION",
    "ArithmeticConfig",
    "resolve_config",
    # Errors
    "BigNumError",
    "DivisionByZero",
    "InvalidFractionalPower",
    "NegativeSqrt",
    "ParseError",
]
