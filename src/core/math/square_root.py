"""
Square Root — извлечение корня по цифрам (digit-by-digit)

Одна группа результата на каждые две группы подкоренного числа.
На каждом шаге:
1. К остатку «сносятся» две следующие группы
2. Бинарным поиском находится наибольшее x в [0, RADIX - 1], для которого
   (2 * result * RADIX + x) * x <= остаток
3. x дописывается к результату младшей группой, остаток уменьшается на
   (2 * result * RADIX + x) * x

Количество шагов: целые группы (дополненные до чётного) / 2 + precision.
Результат усекается до config.precision дробных групп.
"""

from src.core.domain.bignum import BigNum, trim_fraction
from src.core.domain.config import ArithmeticConfig, resolve_config
from src.core.domain.errors import NegativeSqrt
from src.core.logging_config import get_logger
from src.core.math.digit_window import DigitWindow
from src.core.math.division import search_digit
from src.core.math.magnitude import GREATER, add_magnitude, compare_magnitude, sub_magnitude
from src.core.math.multiplication import multiply

logger = get_logger(__name__)

_TWO = BigNum(False, 0, (2,))
_RADIX_NUM = BigNum(False, 0, (0, 1))


def sqrt_unsigned(a: BigNum, config: ArithmeticConfig | None = None) -> BigNum:
    """
    sqrt(|a|) с точностью config.precision дробных групп.

    Знак a игнорируется.

    Args:
        a: Подкоренное число
        config: Конфигурация точности (default: DEFAULT_CONFIG)

    Returns:
        Корень с point_offset == precision

    Examples:
        >>> format_bignum(sqrt_unsigned(parse_bignum("4")))
        '2'
    """
    precision = resolve_config(config).precision

    # дробная часть длиннее 2 * precision не влияет на усечённый корень
    if a.point_offset > 2 * precision:
        a = trim_fraction(a, 2 * precision)

    whole = max(a.whole_groups, 0)
    size = whole + (whole & 1) + 2 * precision
    steps = size // 2
    naz = 2 * precision - a.point_offset

    logger.debug("sqrt: radicand=%d groups, %d root groups", a.num_digits, steps)

    remainder = DigitWindow(size + 1, start=size, length=1)
    remainder.load(a.digits[: size - naz], at=naz)
    root = DigitWindow(steps, start=steps, length=0)

    for _ in range(steps):
        partial = root.view()
        remainder.expose(2)
        root.expose(1)

        current = remainder.view()
        base = multiply(_RADIX_NUM, multiply(_TWO, partial))

        def trial(candidate: int) -> BigNum:
            digit = BigNum(False, 0, (candidate,))
            return multiply(digit, add_magnitude(base, digit))

        def fits(candidate: int) -> bool:
            return compare_magnitude(trial(candidate), current) != GREATER

        digit = search_digit(fits)
        root.set_lowest(digit)
        if digit:
            remainder.store(sub_magnitude(current, trial(digit)))

    return BigNum(False, precision, root.view().digits)


def sqrt_signed(a: BigNum, config: ArithmeticConfig | None = None) -> BigNum:
    """
    sqrt(a) для неотрицательного a.

    Raises:
        NegativeSqrt: Если a < 0 (-0 допустим)
    """
    if a.is_negative:
        raise NegativeSqrt("Sqrt of negative number not supported")
    return sqrt_unsigned(a, config)
