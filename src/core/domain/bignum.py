"""
BigNum — знаковое десятичное число произвольной точности

Представление sign-magnitude в системе счисления RADIX = 1e9:
- sign: True для отрицательного числа (для нулевой magnitude знак
  не имеет значения и трактуется как неотрицательный)
- point_offset: количество digit-groups справа от десятичной точки
- digits: digit-groups в диапазоне [0, RADIX), младшая группа первая

Логический индекс i (i >= 0 слева от точки, i < 0 справа) отображается
в индекс массива i + point_offset. Обращение за пределы массива
возвращает 0: так выравниваются операнды с разными point_offset
без копирования.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. num_digits всегда равен len(digits)
2. Значения immutable: ни одна операция не изменяет свои входы
3. Ведущие и хвостовые нулевые группы допустимы; каноническая форма
   строится только при форматировании в строку
"""

from dataclasses import dataclass, replace
from typing import Final

# =============================================================================
# RADIX
# =============================================================================

# Основание представления: одна digit-group = 9 десятичных знаков
RADIX: Final[int] = 1_000_000_000

# Количество десятичных знаков в одной digit-group
RNUM: Final[int] = 9


# =============================================================================
# VALUE TYPE
# =============================================================================


@dataclass(frozen=True)
class BigNum:
    """
    Immutable digit-group число.

    Равенство dataclass сравнивает layout, а не значение: для численного
    сравнения используйте signed.numerically_equal или
    magnitude.compare_magnitude.
    """

    sign: bool
    point_offset: int
    digits: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.point_offset < 0:
            raise ValueError(
                f"point_offset must be non-negative, got {self.point_offset}"
            )

    @property
    def num_digits(self) -> int:
        return len(self.digits)

    @property
    def whole_groups(self) -> int:
        """Количество digit-groups слева от точки (может быть отрицательным)."""
        return len(self.digits) - self.point_offset

    def digit_at(self, index: int) -> int:
        """
        Digit-group по логическому индексу относительно точки.

        Args:
            index: 0 — младшая целая группа, -1 — первая дробная группа

        Returns:
            digits[index + point_offset] или 0 вне хранимого диапазона
        """
        position = index + self.point_offset
        if position < 0 or position >= len(self.digits):
            return 0
        return self.digits[position]

    def is_zero(self) -> bool:
        return not any(self.digits)

    @property
    def is_negative(self) -> bool:
        """Знак с учётом нуля: -0 не считается отрицательным."""
        return self.sign and not self.is_zero()

    def clone(self) -> "BigNum":
        return BigNum(self.sign, self.point_offset, tuple(self.digits))

    def abs(self) -> "BigNum":
        return replace(self, sign=False)

    def negate(self) -> "BigNum":
        return replace(self, sign=not self.sign)

    def with_sign(self, sign: bool) -> "BigNum":
        return replace(self, sign=sign)

    def significant_groups(self) -> int:
        """Количество групп без ведущих нулевых групп (0 для нуля)."""
        count = len(self.digits)
        while count and not self.digits[count - 1]:
            count -= 1
        return count

    def integer_part(self) -> "BigNum":
        """Целая часть (отбрасывание дробных групп, знак сохраняется)."""
        return trim_fraction(self, 0)

    def has_fraction(self) -> bool:
        """True если хотя бы одна дробная группа ненулевая."""
        return any(self.digits[: self.point_offset])


# =============================================================================
# CONSTRUCTORS
# =============================================================================


def zero(point_offset: int = 0) -> BigNum:
    """Ноль с одной группой (плюс point_offset дробных групп)."""
    return BigNum(False, point_offset, (0,) * (point_offset + 1))


def one() -> BigNum:
    return BigNum(False, 0, (1,))


def from_int(value: int) -> BigNum:
    """
    Целое Python → BigNum.

    Examples:
        >>> from_int(1_000_000_001).digits
        (1, 1)
        >>> from_int(-7).sign
        True
    """
    sign = value < 0
    value = -value if sign else value
    groups = []
    while True:
        value, group = divmod(value, RADIX)
        groups.append(group)
        if not value:
            break
    return BigNum(sign, 0, tuple(groups))


def from_groups(digits, point_offset: int = 0, sign: bool = False) -> BigNum:
    """
    Построение BigNum из произвольной последовательности групп с валидацией.

    Raises:
        ValueError: если группа вне [0, RADIX)
    """
    groups = tuple(int(d) for d in digits)
    for group in groups:
        if group < 0 or group >= RADIX:
            raise ValueError(f"digit-group must be in [0, {RADIX}), got {group}")
    return BigNum(bool(sign), point_offset, groups)


def trim_fraction(num: BigNum, precision: int) -> BigNum:
    """
    Обрезать (или дополнить нулями) дробную часть до precision групп.

    Усечение, не округление. Целые группы не меняются.

    Args:
        num: Исходное число
        precision: Требуемое количество дробных групп (>= 0)

    Returns:
        Новый BigNum с point_offset == precision
    """
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")

    whole = max(num.whole_groups, 0)
    digits = tuple(num.digit_at(i) for i in range(-precision, whole))
    if not digits:
        digits = (0,)
    return BigNum(num.sign, precision, digits)


def normalize(num: BigNum) -> BigNum:
    """
    Убрать ведущие целые и хвостовые дробные нулевые группы.

    Значение не меняется; сохраняется хотя бы одна целая группа.
    Используется для ограничения роста промежуточных значений.
    """
    digits = num.digits
    low = 0
    while low < num.point_offset and low < len(digits) and not digits[low]:
        low += 1
    high = len(digits)
    while high > num.point_offset + 1 and not digits[high - 1]:
        high -= 1
    trimmed = digits[low:high]
    offset = num.point_offset - low
    if len(trimmed) <= offset:
        trimmed = trimmed + (0,) * (offset + 1 - len(trimmed))
    return BigNum(num.sign, offset, trimmed)
