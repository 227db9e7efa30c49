"""
Тесты для Decimal Codec

Проверяет:
1. Разбор строки в digit-group layout
2. Ошибки разбора (ParseError)
3. Каноническое форматирование
4. Round-trip parse → format
5. Serialized layout (dict) и валидацию по контракту
"""

import pytest

from src.core.domain.bignum import BigNum
from src.core.domain.errors import BigNumError, ParseError
from src.core.math.codec import (
    bignum_from_dict,
    bignum_to_dict,
    format_bignum,
    parse_bignum,
)
from src.core.math.signed import numerically_equal


# =============================================================================
# ТЕСТЫ PARSE
# =============================================================================


class TestParse:
    """Тесты parse_bignum: layout результата"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("123", BigNum(False, 0, (123,))),
            ("-1.5", BigNum(True, 1, (500_000_000, 1))),
            ("1234567890", BigNum(False, 0, (234_567_890, 1))),
            ("0.000000001", BigNum(False, 1, (1, 0))),
            (".5", BigNum(False, 1, (500_000_000,))),
            ("5.", BigNum(False, 0, (5,))),
            ("1.0000000001", BigNum(False, 2, (100_000_000, 0, 1))),
            ("000", BigNum(False, 0, (0,))),
        ],
    )
    def test_layout(self, text: str, expected: BigNum) -> None:
        assert parse_bignum(text) == expected

    def test_point_offset_is_ceil_of_fraction_groups(self) -> None:
        """point_offset = ceil(дробные цифры / 9)"""
        assert parse_bignum("1." + "1" * 9).point_offset == 1
        assert parse_bignum("1." + "1" * 10).point_offset == 2
        assert parse_bignum("1." + "1" * 18).point_offset == 2

    def test_num_digits(self) -> None:
        """num_digits = ceil(целые / 9) + point_offset"""
        num = parse_bignum("1" * 10 + "." + "2" * 10)
        assert num.num_digits == 4

    def test_surrounding_whitespace_ignored(self) -> None:
        assert parse_bignum("  42\n") == BigNum(False, 0, (42,))

    def test_leading_zero_groups_preserved(self) -> None:
        """Ведущие нули сохраняются как группы (нормализации нет)"""
        assert parse_bignum("0" * 10 + "1").num_digits == 2


class TestParseErrors:
    """Тесты ошибок parse_bignum"""

    @pytest.mark.parametrize(
        "text",
        ["", "-", ".", "-.", "abc", "1.2.3", "--1", "+1", "1e5", "1 2", "12a", "١٢", "0x10"],
    )
    def test_invalid_strings(self, text: str) -> None:
        with pytest.raises(ParseError):
            parse_bignum(text)

    def test_non_string_rejected(self) -> None:
        with pytest.raises(ParseError, match="Expected str"):
            parse_bignum(12)  # type: ignore[arg-type]

    def test_parse_error_hierarchy(self) -> None:
        """ParseError — одновременно BigNumError и ValueError"""
        with pytest.raises(BigNumError):
            parse_bignum("x")
        with pytest.raises(ValueError):
            parse_bignum("x")


# =============================================================================
# ТЕСТЫ FORMAT
# =============================================================================


class TestFormat:
    """Тесты format_bignum: каноническая форма"""

    @pytest.mark.parametrize(
        "text,canonical",
        [
            ("0", "0"),
            ("-0", "0"),
            ("000", "0"),
            ("0.000", "0"),
            ("-0.0", "0"),
            ("007", "7"),
            ("1.500", "1.5"),
            ("-001.0100", "-1.01"),
            (".5", "0.5"),
            ("5.", "5"),
            ("1000000000", "1000000000"),
            ("1000000000.5", "1000000000.5"),
            ("123456789012345678901234567890", "123456789012345678901234567890"),
            ("0.000000000000000001", "0.000000000000000001"),
            ("-12345678901.00000000012345", "-12345678901.00000000012345"),
            ("100.001", "100.001"),
            ("999999999.999999999", "999999999.999999999"),
            ("-0.1", "-0.1"),
        ],
    )
    def test_canonical_form(self, text: str, canonical: str) -> None:
        assert format_bignum(parse_bignum(text)) == canonical

    def test_redundant_groups_do_not_change_output(self) -> None:
        """Лишние нулевые группы в layout не влияют на строку"""
        assert format_bignum(BigNum(False, 0, (7, 0, 0))) == "7"
        assert format_bignum(BigNum(True, 1, (0, 3, 0))) == "-3"
        assert format_bignum(BigNum(False, 3, (0, 0, 0, 12, 0))) == "12"

    def test_point_offset_beyond_digits(self) -> None:
        """Дробные группы, не хранимые явно, печатаются как нули"""
        num = BigNum(False, 3, (5,))
        assert format_bignum(num) == "0." + "0" * 26 + "5"

    def test_group_padding_inside_number(self) -> None:
        """Внутренние группы дополняются нулями до 9 знаков"""
        assert format_bignum(BigNum(False, 0, (5, 1))) == "1000000005"
        assert format_bignum(BigNum(False, 1, (5, 1))) == "1.000000005"


class TestRoundTrip:
    """Round-trip: parse(format(v)) численно равно v"""

    @pytest.mark.parametrize(
        "num",
        [
            BigNum(False, 2, (1, 2, 3)),
            BigNum(True, 1, (0, 0, 9)),
            BigNum(False, 0, (0,)),
            BigNum(True, 4, (1, 0, 0, 0, 0)),
            BigNum(False, 1, (999_999_999, 999_999_999, 0, 0)),
        ],
    )
    def test_parse_of_format(self, num: BigNum) -> None:
        assert numerically_equal(parse_bignum(format_bignum(num)), num)

    @pytest.mark.parametrize("text", ["1", "-2.5", "0.001", "123456789.987654321", "-1000000000"])
    def test_canonical_strings_are_fixed_points(self, text: str) -> None:
        assert format_bignum(parse_bignum(text)) == text


# =============================================================================
# ТЕСТЫ SERIALIZED LAYOUT
# =============================================================================


class TestLayoutSerialization:
    """Тесты bignum_to_dict / bignum_from_dict"""

    def test_to_dict(self) -> None:
        assert bignum_to_dict(parse_bignum("-1.5")) == {
            "sign": True,
            "point_offset": 1,
            "digits": [500_000_000, 1],
        }

    def test_from_dict(self) -> None:
        data = {"sign": False, "point_offset": 1, "digits": [250_000_000, 3]}
        assert bignum_from_dict(data) == BigNum(False, 1, (250_000_000, 3))

    def test_dict_round_trip(self) -> None:
        num = parse_bignum("-98765432109876543210.0123456789")
        assert bignum_from_dict(bignum_to_dict(num)) == num

    @pytest.mark.parametrize(
        "data",
        [
            {"sign": False, "point_offset": 0, "digits": [1_000_000_000]},
            {"sign": False, "point_offset": 0, "digits": [-1]},
            {"sign": False, "point_offset": -1, "digits": [1]},
            {"sign": False, "point_offset": 0, "digits": []},
            {"sign": "yes", "point_offset": 0, "digits": [1]},
            {"sign": False, "digits": [1]},
            {"sign": False, "point_offset": 0, "digits": [1], "extra": 1},
            {"sign": False, "point_offset": 0, "digits": [1.5]},
        ],
    )
    def test_invalid_layout_rejected(self, data) -> None:
        with pytest.raises(ParseError, match="Invalid bignum layout"):
            bignum_from_dict(data)
