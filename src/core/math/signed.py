"""
Signed Add/Subtract — знаковое сложение и вычитание

Знаковая арифметика строится поверх magnitude ядра через диспетчеризацию
по правилу знаков:
- одинаковые знаки → add_magnitude с общим знаком
- разные знаки → sub_magnitude большего по magnitude минус меньший,
  знак берётся у операнда с большей magnitude

Сложение и вычитание точные (без потери точности), в отличие от
div и sqrt.
"""

from src.core.domain.bignum import BigNum
from src.core.math.magnitude import EQUAL, LESS, add_magnitude, compare_magnitude, sub_magnitude


def add_or_sub(a: BigNum, b: BigNum, subtract: bool) -> BigNum:
    """
    a + b при subtract=False, a - b при subtract=True.

    Порядок вычитания при разных знаках определяется magnitude, а не
    позицией операнда: иначе a - b для |b| > |a| дало бы заём за
    пределы старшей группы.

    Examples:
        >>> format_bignum(add_or_sub(from_int(3), from_int(10), subtract=True))
        '-7'
    """
    b_sign = b.sign != subtract
    if a.sign == b_sign:
        return add_magnitude(a, b).with_sign(a.sign)

    if compare_magnitude(a, b) != LESS:
        return sub_magnitude(a, b).with_sign(a.sign)
    return sub_magnitude(b, a).with_sign(b_sign)


def add(a: BigNum, b: BigNum) -> BigNum:
    return add_or_sub(a, b, subtract=False)


def subtract(a: BigNum, b: BigNum) -> BigNum:
    return add_or_sub(a, b, subtract=True)


def negate(a: BigNum) -> BigNum:
    return a.negate()


def absolute(a: BigNum) -> BigNum:
    return a.abs()


def compare(a: BigNum, b: BigNum) -> int:
    """
    Знаковое сравнение a и b.

    -0 и +0 равны.

    Returns:
        -1, 0 или +1
    """
    a_neg = a.is_negative
    b_neg = b.is_negative
    if a_neg != b_neg:
        return -1 if a_neg else 1

    order = compare_magnitude(a, b)
    return -order if a_neg else order


def numerically_equal(a: BigNum, b: BigNum) -> bool:
    """Равенство значений независимо от layout (ведущих/хвостовых нулей, знака нуля)."""
    return compare(a, b) == EQUAL
