"""
Exponentiation — возведение в степень

Композиция остальных операций:
- pow_small: целая степень < 2^31 бинарным возведением (O(log n) умножений)
- pow_uint: целая BigNum степень, группы показателя от младшей к старшей
- pow_sint: pow_uint + обратная величина для отрицательного показателя
- pow_ufrac: дробная степень 0 <= f < 1 через повторное извлечение корня
  (непрерывный аналог бинарного возведения: i-й двоичный разряд f
  соответствует множителю a^(2^-i))
- pow_sfrac: pow_ufrac + обратная величина для отрицательной дроби
- long_pow: общий случай, a^b = a^c * a^d, где c — целая часть b,
  d — только первая дробная digit-group b

Учитывается только первая дробная группа показателя: более глубокие
разряды почти не влияют на результат, а промежуточные значения при их
учёте растут неограниченно.
"""

from fractions import Fraction

from src.core.domain.bignum import RADIX, BigNum, normalize, one, trim_fraction
from src.core.domain.config import ArithmeticConfig, resolve_config
from src.core.domain.errors import InvalidFractionalPower
from src.core.logging_config import get_logger
from src.core.math.division import divide
from src.core.math.multiplication import multiply
from src.core.math.square_root import sqrt_unsigned

logger = get_logger(__name__)


def pow_small(a: BigNum, n: int) -> BigNum:
    """
    a^n для небольшого целого n >= 0.

    Знак a учитывается через правило знаков умножения.
    """
    if n < 0:
        raise ValueError(f"pow_small expects non-negative exponent, got {n}")

    result = one()
    square = a
    while n:
        if n & 1:
            result = normalize(multiply(result, square))
        n >>= 1
        if n:
            square = normalize(multiply(square, square))
    return result


def pow_uint(a: BigNum, b: BigNum) -> BigNum:
    """
    a^|b| для целочисленного b; point_offset и знак b игнорируются.

    Группы b обрабатываются от младшей к старшей: результат умножается на
    acc^group, затем acc возводится в степень RADIX.
    """
    groups = b.digits[: b.significant_groups()]

    result = one()
    acc = a
    for i, group in enumerate(groups):
        if group:
            result = normalize(multiply(result, pow_small(acc, group)))
        if i != len(groups) - 1:
            acc = pow_small(acc, RADIX)
    return result


def pow_sint(a: BigNum, b: BigNum, config: ArithmeticConfig | None = None) -> BigNum:
    """
    a^b для целочисленного b любого знака.

    Raises:
        DivisionByZero: Если a == 0 и b < 0
    """
    result = pow_uint(a, b)
    if b.is_negative:
        result = divide(one(), result, config)
    return result


def pow_ufrac(a: BigNum, frac: Fraction, config: ArithmeticConfig | None = None) -> BigNum:
    """
    |a|^frac для 0 <= frac < 1.

    Повторно извлекает корень из аккумулятора и умножает результат на
    него, если очередной двоичный разряд frac равен 1. Учитывается не
    более config.fraction_bits разрядов.
    """
    if not 0 <= frac < 1:
        raise ValueError(f"pow_ufrac expects 0 <= frac < 1, got {frac}")

    cfg = resolve_config(config)
    keep = 2 * cfg.precision

    result = one()
    root = a.abs()
    bits = 0
    while frac and bits < cfg.fraction_bits:
        root = sqrt_unsigned(root, cfg)
        frac *= 2
        if frac >= 1:
            result = trim_fraction(multiply(result, root), keep)
            frac -= 1
        bits += 1
    return result


def pow_sfrac(a: BigNum, frac: Fraction, config: ArithmeticConfig | None = None) -> BigNum:
    """
    |a|^frac для -1 < frac < 1.

    Raises:
        DivisionByZero: Если a == 0 и frac < 0
    """
    result = pow_ufrac(a, abs(frac), config)
    if frac < 0:
        result = divide(one(), result, config)
    return result


def split_exponent(b: BigNum) -> tuple[BigNum, Fraction]:
    """
    Разделить показатель на целую часть и первую дробную группу.

    Returns:
        (c, d): c — целая часть со знаком b, d — первая дробная группа
        как Fraction в (-1, 1)
    """
    if b.point_offset == 0:
        return b, Fraction(0)

    integer = trim_fraction(b, 0)
    frac = Fraction(b.digit_at(-1), RADIX)
    if b.sign:
        frac = -frac
    return integer, frac


def long_pow(a: BigNum, b: BigNum, config: ArithmeticConfig | None = None) -> BigNum:
    """
    a^b для произвольного BigNum показателя.

    Args:
        a: Основание
        b: Показатель (учитывается целая часть и первая дробная группа)
        config: Конфигурация точности (default: DEFAULT_CONFIG)

    Returns:
        a^b; дробные и отрицательные показатели дают результат с
        усечённой точностью

    Raises:
        InvalidFractionalPower: Отрицательное основание и нецелый показатель
        DivisionByZero: Нулевое основание и отрицательный показатель

    Examples:
        >>> format_bignum(long_pow(parse_bignum("2"), parse_bignum("10")))
        '1024'
        >>> format_bignum(long_pow(parse_bignum("4"), parse_bignum("-0.5")))
        '0.5'
    """
    if a.is_negative and b.has_fraction():
        raise InvalidFractionalPower("Fractional power of negative base not supported")

    integer, frac = split_exponent(b)
    logger.debug(
        "long_pow: exponent integer=%d groups, fraction=%s",
        integer.significant_groups(), frac,
    )

    result = pow_sint(a, integer, config)
    if not frac:
        return result
    return multiply(result, pow_sfrac(a, frac, config))
