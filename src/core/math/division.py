"""
Division — long division фиксированной точности

Частное вычисляется до config.precision дробных digit-groups
(усечение, не округление). Каждая цифра частного находится бинарным
поиском по [0, RADIX - 1]: наибольшее d, для которого d * b <= остаток.

Остаток хранится в DigitWindow: на каждом шаге окно длиной bnd + 1
сдвигается на одну группу вниз («снос» следующей группы делимого).
Старшая группа окна после вычитания всегда нулевая, так как остаток
меньше делителя.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нулевая magnitude делителя → DivisionByZero
2. Знак результата = XOR знаков, point_offset результата = precision
3. Цифра частного может равняться RADIX - 1: верхняя граница поиска
   включительная
"""

from src.core.domain.bignum import RADIX, BigNum, trim_fraction, zero
from src.core.domain.config import ArithmeticConfig, resolve_config
from src.core.domain.errors import DivisionByZero
from src.core.logging_config import get_logger
from src.core.math.digit_window import DigitWindow
from src.core.math.magnitude import GREATER, compare_magnitude, sub_magnitude
from src.core.math.multiplication import multiply

logger = get_logger(__name__)


def search_digit(fits, high: int = RADIX - 1) -> int:
    """
    Наибольшая digit-group x в [0, high], для которой fits(x) истинно.

    fits должен быть монотонным (истинно на префиксе) и fits(0) истинно.
    """
    lo, hi = 0, high
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if fits(mid):
            lo = mid
        else:
            hi = mid - 1
    return lo


def divide(a: BigNum, b: BigNum, config: ArithmeticConfig | None = None) -> BigNum:
    """
    a / b с точностью config.precision дробных групп.

    Args:
        a: Делимое
        b: Делитель
        config: Конфигурация точности (default: DEFAULT_CONFIG)

    Returns:
        Частное с point_offset == precision

    Raises:
        DivisionByZero: Если все группы делителя нулевые

    Examples:
        >>> format_bignum(divide(parse_bignum("10"), parse_bignum("4")))
        '2.5'
    """
    precision = resolve_config(config).precision
    sign = a.sign != b.sign

    # значащие группы делителя (без ведущих нулей)
    bnd = b.significant_groups()
    if bnd == 0:
        raise DivisionByZero("Division by zero")

    # лишние дробные группы делимого не влияют на усечённое частное
    if a.point_offset > precision + b.point_offset:
        a = trim_fraction(a, precision + b.point_offset)

    # нулевые группы, дописываемые к делимому ради точности
    naz = precision + b.point_offset - a.point_offset
    steps = a.num_digits + naz - bnd + 1
    if steps <= 0:
        return zero(precision).with_sign(sign)

    logger.debug(
        "long_div: dividend=%d groups, divisor=%d significant groups, %d quotient groups",
        a.num_digits, bnd, steps,
    )

    divisor = BigNum(False, 0, b.digits[:bnd])

    capacity = a.num_digits + naz + 1
    remainder = DigitWindow(capacity, start=capacity - bnd, length=bnd)
    remainder.load(a.digits, at=naz)
    remainder.expose(1)

    quotient = [0] * steps
    for position in range(steps - 1, -1, -1):
        current = remainder.view()

        def fits(candidate: int) -> bool:
            product = multiply(BigNum(False, 0, (candidate,)), divisor)
            return compare_magnitude(product, current) != GREATER

        digit = search_digit(fits)
        quotient[position] = digit
        if digit:
            remainder.store(
                sub_magnitude(current, multiply(BigNum(False, 0, (digit,)), divisor))
            )
        if position:
            remainder.slide(1)

    return BigNum(sign, precision, tuple(quotient))
