"""
Core math modules

Арифметика произвольной точности над digit-group представлением BigNum.
"""

# Decimal Codec
from src.core.math.codec import (
    bignum_from_dict,
    bignum_to_dict,
    format_bignum,
    parse_bignum,
)

# Magnitude core
from src.core.math.magnitude import (
    EQUAL,
    GREATER,
    LESS,
    add_magnitude,
    compare_magnitude,
    sub_magnitude,
)

# Signed add/sub
from src.core.math.signed import (
    absolute,
    add,
    add_or_sub,
    compare,
    negate,
    numerically_equal,
    subtract,
)

# Multiplication / Division / Square root
from src.core.math.multiplication import multiply
from src.core.math.division import divide
from src.core.math.square_root import sqrt_signed, sqrt_unsigned

# Exponentiation
from src.core.math.power import (
    long_pow,
    pow_sfrac,
    pow_sint,
    pow_small,
    pow_ufrac,
    pow_uint,
    split_exponent,
)

__all__ = [
    # Codec
    "bignum_from_dict",
    "bignum_to_dict",
    "format_bignum",
    "parse_bignum",
    # Magnitude - Constants
    "EQUAL",
    "GREATER",
    "LESS",
    # Magnitude - Functions
    "add_magnitude",
    "compare_magnitude",
    "sub_magnitude",
    # Signed
    "absolute",
    "add",
    "add_or_sub",
    "compare",
    "negate",
    "numerically_equal",
    "subtract",
    # Long operations
    "multiply",
    "divide",
    "sqrt_signed",
    "sqrt_unsigned",
    # Exponentiation
    "long_pow",
    "pow_sfrac",
    "pow_sint",
    "pow_small",
    "pow_ufrac",
    "pow_uint",
    "split_exponent",
]
