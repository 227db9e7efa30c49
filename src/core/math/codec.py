"""
Decimal Codec — строка ↔ BigNum

Два независимых направления:
- parse_bignum: десятичная строка → BigNum
- format_bignum: BigNum → каноническая десятичная строка

Плюс serialized layout (dict) для обмена внутренним представлением,
валидируемый JSON Schema контрактом.

КАНОНИЧЕСКАЯ ФОРМА (format_bignum):
1. Нет ведущих нулей, кроме единственного '0' перед точкой
2. Нет хвостовых нулей после точки
3. Нет точки, если дробная часть пуста
4. Нулевая magnitude всегда форматируется как "0"
"""

import re
from typing import Any, Dict

from src.core.contracts.validators import BigNumLayoutValidator
from src.core.domain.bignum import RNUM, BigNum
from src.core.domain.errors import ParseError
from src.core.logging_config import get_logger

logger = get_logger(__name__)

MINUS_CHAR = "-"
DOT_CHAR = "."
ZERO_CHAR = "0"

_DECIMAL_RE = re.compile(r"(-?)([0-9]*)(?:\.([0-9]*))?")

_LAYOUT_VALIDATOR = BigNumLayoutValidator()


# =============================================================================
# PARSE
# =============================================================================


def _pack_groups(decimal_digits: str) -> list[int]:
    """Упаковать строку цифр (длина кратна RNUM) в группы, младшая первая."""
    return [
        int(decimal_digits[end - RNUM:end])
        for end in range(len(decimal_digits), 0, -RNUM)
    ]


def parse_bignum(text: str) -> BigNum:
    """
    Десятичная строка → BigNum.

    Грамматика: необязательный '-', цифры, необязательная '.', цифры;
    хотя бы одна цифра. Окружающие пробелы игнорируются.

    point_offset = ceil(дробные_цифры / 9)
    num_digits = ceil(целые_цифры / 9) + point_offset

    Args:
        text: Десятичная строка, например "-123.45"

    Returns:
        BigNum без нормализации (ведущие нули сохраняются как группы)

    Raises:
        ParseError: Пустая строка, посторонние символы, несколько точек

    Examples:
        >>> parse_bignum("1.5").digits
        (500000000, 1)
        >>> parse_bignum("1.5").point_offset
        1
    """
    if not isinstance(text, str):
        raise ParseError(f"Expected str, got {type(text).__name__}")

    match = _DECIMAL_RE.fullmatch(text.strip())
    if match is None:
        raise ParseError(f"Invalid decimal string: {text!r}")

    minus, whole, fraction = match.group(1), match.group(2), match.group(3) or ""
    if not whole and not fraction:
        raise ParseError(f"Decimal string has no digits: {text!r}")

    # дробная часть дополняется нулями справа, целая слева
    fraction_groups = -(-len(fraction) // RNUM)
    whole_groups = -(-len(whole) // RNUM)
    fraction = fraction.ljust(fraction_groups * RNUM, ZERO_CHAR)
    whole = whole.rjust(whole_groups * RNUM, ZERO_CHAR)

    digits = _pack_groups(whole + fraction)
    return BigNum(bool(minus), fraction_groups, tuple(digits))


# =============================================================================
# FORMAT
# =============================================================================


def format_bignum(num: BigNum) -> str:
    """
    BigNum → каноническая десятичная строка.

    Находит первую и последнюю ненулевые группы (fnzdi, lnzdi), печатает
    группы от lnzdi до fnzdi с точкой на границе point_offset. Если все
    ненулевые группы по одну сторону от точки, диапазон расширяется до
    младшей целой группы.

    Examples:
        >>> format_bignum(parse_bignum("000.500"))
        '0.5'
        >>> format_bignum(parse_bignum("-0"))
        '0'
    """
    digits = num.digits
    nonzero = [i for i, d in enumerate(digits) if d]
    if not nonzero:
        return ZERO_CHAR

    units = num.point_offset  # индекс младшей целой группы
    first = min(nonzero[0], units)
    last = nonzero[-1]

    parts = [MINUS_CHAR] if num.sign else []
    if last < units:
        # только дробная часть: 0.1 вместо .1
        parts.append(ZERO_CHAR)
        last = units - 1

    for index in range(last, first - 1, -1):
        if index == units - 1:
            parts.append(DOT_CHAR)
        group = digits[index] if index < len(digits) else 0
        if index == last and index >= units:
            parts.append(str(group))
        else:
            parts.append(f"{group:0{RNUM}d}")

    text = "".join(parts)
    if first < units:
        text = text.rstrip(ZERO_CHAR).rstrip(DOT_CHAR)
    return text


# =============================================================================
# SERIALIZED LAYOUT
# =============================================================================


def bignum_to_dict(num: BigNum) -> Dict[str, Any]:
    """
    Внутреннее представление как JSON-совместимый dict.

    Returns:
        {"sign": bool, "point_offset": int, "digits": [int, ...]}
    """
    return {
        "sign": num.sign,
        "point_offset": num.point_offset,
        "digits": list(num.digits),
    }


def bignum_from_dict(data: Dict[str, Any]) -> BigNum:
    """
    dict → BigNum с валидацией по контракту bignum_layout.

    Raises:
        ParseError: Если data не соответствует JSON Schema контракту
    """
    errors = _LAYOUT_VALIDATOR.get_errors(data)
    if errors:
        logger.debug("Rejected layout: %s", errors)
        raise ParseError(f"Invalid bignum layout: {'; '.join(errors)}")

    return BigNum(data["sign"], data["point_offset"], tuple(data["digits"]))
