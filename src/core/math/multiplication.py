"""
Multiplication — schoolbook long multiplication

Частичное произведение двух групп < 1e18, перенос < 1e9; Python int
не переполняется, поэтому отдельный double-width тип не нужен.
"""

from src.core.domain.bignum import RADIX, BigNum


def multiply(a: BigNum, b: BigNum) -> BigNum:
    """
    a * b (знаковое).

    Длина результата len(a) + len(b), знак XOR знаков операндов,
    point_offset = a.point_offset + b.point_offset. Финальный перенос
    каждой внешней итерации записывается на одну группу выше текущего окна.

    Examples:
        >>> format_bignum(multiply(parse_bignum("-1.5"), parse_bignum("4")))
        '-6'
    """
    result = [0] * (a.num_digits + b.num_digits)
    b_digits = b.digits
    b_len = len(b_digits)

    for ai, da in enumerate(a.digits):
        if not da:
            continue
        carry = 0
        for bi in range(b_len):
            total = da * b_digits[bi] + result[ai + bi] + carry
            carry, result[ai + bi] = divmod(total, RADIX)
        result[ai + b_len] = carry

    return BigNum(a.sign != b.sign, a.point_offset + b.point_offset, tuple(result))
