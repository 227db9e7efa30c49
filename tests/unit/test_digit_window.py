"""
Тесты для DigitWindow

Проверяет:
1. Видимую часть после load / expose / slide
2. store: перезапись окна и отказ при переполнении
3. Проверку границ буфера
"""

import pytest

from src.core.domain.bignum import BigNum
from src.core.math.digit_window import DigitWindow


class TestDigitWindowMovement:
    """Тесты перемещения окна"""

    def test_initial_view(self) -> None:
        window = DigitWindow(4, start=2, length=2)
        window.load([1, 2, 3, 4])
        assert window.capacity == 4
        assert window.view() == BigNum(False, 0, (3, 4))

    def test_empty_view_is_zero(self) -> None:
        window = DigitWindow(3, start=3, length=0)
        assert window.view() == BigNum(False, 0, (0,))

    def test_load_at_offset(self) -> None:
        window = DigitWindow(5, start=0, length=5)
        window.load([7, 8], at=2)
        assert window.view().digits == (0, 0, 7, 8, 0)

    def test_expose_grows_downwards(self) -> None:
        window = DigitWindow(4, start=3, length=1)
        window.load([1, 2, 3, 4])
        window.expose(2)
        assert (window.start, window.length) == (1, 3)
        assert window.view().digits == (2, 3, 4)

    def test_slide_keeps_length(self) -> None:
        window = DigitWindow(4, start=2, length=2)
        window.load([1, 2, 3, 4])
        window.slide(1)
        assert (window.start, window.length) == (1, 2)
        assert window.view().digits == (2, 3)

    def test_view_is_a_copy(self) -> None:
        window = DigitWindow(2, start=0, length=2)
        before = window.view()
        window.set_lowest(5)
        assert before.digits == (0, 0)
        assert window.view().digits == (5, 0)


class TestDigitWindowStore:
    """Тесты store"""

    def test_store_overwrites_visible_part(self) -> None:
        window = DigitWindow(4, start=1, length=3)
        window.load([9, 9, 9, 9])
        window.store(BigNum(False, 0, (1,)))
        assert window.view().digits == (1, 0, 0)
        # группа вне окна не тронута
        window.expose(1)
        assert window.view().digits == (9, 1, 0, 0)

    def test_store_ignores_high_zero_groups(self) -> None:
        window = DigitWindow(2, start=0, length=2)
        window.store(BigNum(False, 0, (4, 5, 0, 0)))
        assert window.view().digits == (4, 5)

    def test_store_overflow_rejected(self) -> None:
        window = DigitWindow(2, start=0, length=2)
        with pytest.raises(ValueError, match="does not fit"):
            window.store(BigNum(False, 0, (1, 2, 3)))


class TestDigitWindowBounds:
    """Тесты границ буфера"""

    def test_negative_capacity(self) -> None:
        with pytest.raises(ValueError, match="capacity"):
            DigitWindow(-1, start=0)

    def test_initial_window_outside_buffer(self) -> None:
        with pytest.raises(IndexError):
            DigitWindow(2, start=1, length=2)

    def test_expose_past_start(self) -> None:
        window = DigitWindow(3, start=1, length=1)
        with pytest.raises(IndexError):
            window.expose(2)

    def test_slide_past_start(self) -> None:
        window = DigitWindow(3, start=0, length=1)
        with pytest.raises(IndexError):
            window.slide(1)
