"""
DigitWindow — буфер фиксированной ёмкости с видимым диапазоном

Long division и извлечение корня работают с остатком, к которому на
каждом шаге «сносится» следующая digit-group. Вместо перевыделения
остатка используется буфер фиксированной ёмкости и пара индексов
(start, length), задающая видимую часть.

Видимая часть всегда читается как неотрицательное целое (point_offset 0).
"""

from src.core.domain.bignum import BigNum


class DigitWindow:
    """
    Изменяемый буфер digit-groups с видимым окном [start, start + length).

    Используется только внутри одной операции и не покидает её.
    """

    def __init__(self, capacity: int, start: int, length: int = 0):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._buffer = [0] * capacity
        self.start = start
        self.length = length
        self._check_bounds()

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def load(self, digits, at: int = 0) -> None:
        """Скопировать digits в буфер начиная с позиции at."""
        for i, digit in enumerate(digits):
            self._buffer[at + i] = digit

    def expose(self, count: int = 1) -> None:
        """Открыть count младших групп: окно растёт вниз."""
        self.start -= count
        self.length += count
        self._check_bounds()

    def slide(self, count: int = 1) -> None:
        """Сдвинуть окно на count групп вниз, сохраняя длину."""
        self.start -= count
        self._check_bounds()

    def view(self) -> BigNum:
        """Видимая часть как BigNum (копия, без алиасинга с буфером)."""
        visible = tuple(self._buffer[self.start:self.start + self.length])
        return BigNum(False, 0, visible or (0,))

    def store(self, value: BigNum) -> None:
        """
        Перезаписать видимую часть целыми группами value.

        Группы value выше окна обязаны быть нулевыми.
        """
        for i in range(self.length):
            self._buffer[self.start + i] = value.digit_at(i)
        if any(value.digit_at(i) for i in range(self.length, max(value.whole_groups, 0))):
            raise ValueError("value does not fit into the visible window")

    def set_lowest(self, digit: int) -> None:
        """Записать младшую видимую группу."""
        self._buffer[self.start] = digit

    def _check_bounds(self) -> None:
        if self.start < 0 or self.length < 0 or self.start + self.length > len(self._buffer):
            raise IndexError(
                f"window [{self.start}, {self.start + self.length}) "
                f"outside buffer of capacity {len(self._buffer)}"
            )
