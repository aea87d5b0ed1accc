"""
tests/test_helpers.py
=====================
Covers syp_converter/utils/helpers.py — conversion arithmetic, digit
translation, input parsing and number formatting.
"""
import pytest
from syp_converter.utils.helpers import (
    OLD_TO_NEW,
    NEW_TO_OLD,
    convert_old_to_new,
    convert_new_to_old,
    arabic_to_western,
    western_to_arabic,
    has_arabic_numerals,
    clean_amount_input,
    parse_amount,
    format_number,
    convert_amount_text,
    get_direction_arabic,
)


class TestConversion:

    def test_old_to_new(self):
        assert convert_old_to_new(5000) == 50

    def test_new_to_old(self):
        assert convert_new_to_old(5) == 500

    def test_custom_rate(self):
        assert convert_old_to_new(1000, rate=10) == 100


class TestDigits:

    def test_arabic_to_western(self):
        assert arabic_to_western("١٢٣٤٥٦٧٨٩٠") == "1234567890"

    def test_western_to_arabic(self):
        assert western_to_arabic("2026") == "٢٠٢٦"

    def test_other_characters_untouched(self):
        assert arabic_to_western("ل.س ٥") == "ل.س 5"

    def test_has_arabic_numerals(self):
        assert has_arabic_numerals("١٠٠")
        assert not has_arabic_numerals("100")


class TestCleanAmountInput:

    def test_strips_non_digits(self):
        assert clean_amount_input("12abc.5") == "12.5"

    def test_translates_arabic_digits(self):
        assert clean_amount_input("١٬٠٠٠ ليرة") == "1000"

    def test_empty(self):
        assert clean_amount_input("") == ""
        assert clean_amount_input(None) == ""


class TestParseAmount:

    @pytest.mark.parametrize("text, expected", [
        ("", 0),
        ("abc", 0),
        ("1.2.3", 0),
        ("nan", 0),
        ("inf", 0),
        ("1,234.5", 1234.5),
        ("١٬٢٣٤", 1234),
        ("50", 50),
    ])
    def test_parse(self, text, expected):
        assert parse_amount(text) == expected


class TestFormatNumber:

    def test_grouping(self):
        assert format_number(1234567) == "1,234,567"

    def test_fraction_digits_trimmed(self):
        assert format_number(1234.5, fraction_digits=2) == "1,234.5"
        assert format_number(50.0, fraction_digits=2) == "50"

    def test_rounds_half_up(self):
        assert format_number(0.125, fraction_digits=2) == "0.13"
        assert format_number(1234.5) == "1,235"

    def test_arabic_digits(self):
        assert format_number(1234, use_arabic=True) == "١٬٢٣٤"

    def test_zero(self):
        assert format_number(0) == "0"


class TestConvertAmountText:

    def test_old_to_new(self):
        assert convert_amount_text("5000", OLD_TO_NEW) == "50"
        assert convert_amount_text("12345", OLD_TO_NEW) == "123.45"
        assert convert_amount_text("1", OLD_TO_NEW) == "0.01"

    def test_new_to_old(self):
        assert convert_amount_text("1.5", NEW_TO_OLD) == "150"
        assert convert_amount_text("1234.5", NEW_TO_OLD) == "123,450"

    def test_arabic_input(self):
        assert convert_amount_text("٥٠٠٠") == "50"

    def test_overflowing_input_gives_empty_result(self):
        assert convert_amount_text("9" * 400, OLD_TO_NEW) == ""
        assert convert_amount_text("9" * 400, NEW_TO_OLD) == ""

    @pytest.mark.parametrize("text", ["", "abc", "1.2.3", "."])
    def test_invalid_input_gives_empty_result(self, text):
        assert convert_amount_text(text) == ""

    def test_unknown_direction(self):
        with pytest.raises(ValueError):
            convert_amount_text("12", "sideways")


def test_direction_labels():
    assert get_direction_arabic(OLD_TO_NEW) == "قديمة إلى جديدة"
    assert get_direction_arabic(NEW_TO_OLD) == "جديدة إلى قديمة"
    assert get_direction_arabic("other") == "other"
