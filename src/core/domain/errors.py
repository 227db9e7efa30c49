"""
BigNum Errors — иерархия ошибок арифметического ядра

Все ошибки value-level и recoverable: вызывающий код (dispatcher)
перехватывает их и продолжает работу. Ни одна операция не возвращает
None как признак ошибки.
"""


class BigNumError(ArithmeticError):
    """Базовая ошибка арифметики произвольной точности."""

    pass


class ParseError(BigNumError, ValueError):
    """
    Невалидная десятичная строка или невалидный serialized layout.

    Допустимая грамматика: необязательный '-', цифры, не более одной '.',
    хотя бы одна цифра.
    """

    pass


class DivisionByZero(BigNumError, ZeroDivisionError):
    """Делитель имеет нулевую magnitude (все digit-groups равны 0)."""

    pass


class NegativeSqrt(BigNumError, ValueError):
    """Квадратный корень из отрицательного числа."""

    pass


class InvalidFractionalPower(BigNumError, ValueError):
    """
    Нецелая степень отрицательного основания.

    Результат комплексный, поэтому вместо вещественного значения
    поднимается ошибка.
    """

    pass
