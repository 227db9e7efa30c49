"""
Magnitude Arithmetic — беззнаковые операции над digit-groups

Модуль реализует ядро, на котором строятся все остальные операции:
- Трёхстороннее сравнение magnitude
- Беззнаковое сложение с переносом
- Беззнаковое вычитание с заёмом (только для |a| >= |b|)

Выравнивание операндов делается через BigNum.digit_at: разные
point_offset и длины не требуют копирования.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнение не опирается на num_digits или point_offset: ведущие и
   хвостовые нулевые группы не влияют на результат
2. Результат сложения резервирует одну группу под финальный перенос
3. Знак операндов игнорируется, результат всегда неотрицательный
"""

from typing import Final

from src.core.domain.bignum import RADIX, BigNum

# =============================================================================
# РЕЗУЛЬТАТЫ СРАВНЕНИЯ
# =============================================================================

LESS: Final[int] = -1
EQUAL: Final[int] = 0
GREATER: Final[int] = 1


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitude(a: BigNum, b: BigNum) -> int:
    """
    Сравнение |a| и |b|.

    Сканирует логические индексы от старшей целой группы до младшей
    дробной; первое расхождение определяет порядок.

    Args:
        a: Первое значение
        b: Второе значение

    Returns:
        -1 если |a| < |b|
         0 если |a| == |b|
        +1 если |a| > |b|

    Examples:
        >>> compare_magnitude(from_int(2), from_int(3))
        -1
        >>> compare_magnitude(parse_bignum("1.50"), parse_bignum("001.5"))
        0
    """
    offset = max(a.point_offset, b.point_offset)
    whole = max(a.whole_groups, b.whole_groups)

    for index in range(whole - 1, -offset - 1, -1):
        da = a.digit_at(index)
        db = b.digit_at(index)
        if da < db:
            return LESS
        if da > db:
            return GREATER
    return EQUAL


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add_magnitude(a: BigNum, b: BigNum) -> BigNum:
    """
    |a| + |b|.

    Returns:
        Неотрицательный BigNum с point_offset = max(point_offset) и
        1 + max(whole_groups) целыми группами
    """
    offset = max(a.point_offset, b.point_offset)
    whole = 1 + max(a.whole_groups, b.whole_groups, 0)

    digits = [0] * (whole + offset)
    carry = 0
    for index in range(-offset, whole):
        total = a.digit_at(index) + b.digit_at(index) + carry
        if total >= RADIX:
            total -= RADIX
            carry = 1
        else:
            carry = 0
        digits[index + offset] = total
    return BigNum(False, offset, tuple(digits))


def sub_magnitude(a: BigNum, b: BigNum) -> BigNum:
    """
    |a| - |b| при условии |a| >= |b|.

    Проверка условия — ответственность вызывающего кода
    (см. signed.add_or_sub).

    Raises:
        ValueError: если после обработки старшей группы остался заём,
            т.е. |a| < |b|
    """
    offset = max(a.point_offset, b.point_offset)
    whole = max(a.whole_groups, b.whole_groups, 0)

    digits = [0] * (whole + offset)
    borrow = 0
    for index in range(-offset, whole):
        diff = a.digit_at(index) - b.digit_at(index) - borrow
        if diff < 0:
            diff += RADIX
            borrow = 1
        else:
            borrow = 0
        digits[index + offset] = diff

    if borrow:
        raise ValueError("sub_magnitude requires |a| >= |b|")
    return BigNum(False, offset, tuple(digits))
