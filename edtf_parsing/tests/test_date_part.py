"""Unit tests for DatePart."""

import pytest

from edtf_parsing.date_part import MAX_MAGNITUDE, DatePart
from edtf_parsing.propagation import Qualifiers


class TestDatePartParse:
    """Digit text to value, masks and precision."""

    def test_empty_is_absent(self):
        part = DatePart.parse("")
        assert part.has_value is False
        assert part == DatePart()

    def test_plain_value(self):
        part = DatePart.parse("2004")
        assert part.value == 2004
        assert part.has_value is True
        assert part.unspecified_mask == 0
        assert part.insignificant_digits == 0

    def test_zero_has_value(self):
        part = DatePart.parse("0000")
        assert part.value == 0
        assert part.has_value is True

    def test_negative(self):
        assert DatePart.parse("-0999").value == -999

    @pytest.mark.parametrize(
        "digits, value, mask",
        [
            ("199u", 1990, 0b1),
            ("19uu", 1900, 0b11),
            ("uu", 0, 0b11),
            ("156u", 1560, 0b1),
            ("u9u9", 909, 0b1010),
        ],
    )
    def test_unspecified_digits(self, digits, value, mask):
        part = DatePart.parse(digits)
        assert part.value == value
        assert part.unspecified_mask == mask

    @pytest.mark.parametrize("digits, value, insignificant", [("196x", 1960, 1), ("19xx", 1900, 2)])
    def test_masked_digits(self, digits, value, insignificant):
        part = DatePart.parse(digits, allow_scientific_and_mask=True)
        assert part.value == value
        assert part.insignificant_digits == insignificant
        assert part.unspecified_mask == 0

    def test_masked_digits_rejected_without_flag(self):
        with pytest.raises(ValueError):
            DatePart.parse("196x")

    @pytest.mark.parametrize("digits, value", [("17e7", 170000000), ("-17e7", -170000000), ("17101e4", 171010000)])
    def test_exponent(self, digits, value):
        assert DatePart.parse(digits, allow_scientific_and_mask=True).value == value

    def test_precision_counts_insignificant_digits(self):
        part = DatePart.parse("17101e4", allow_scientific_and_mask=True).with_precision(3)
        assert part.value == 171010000
        assert part.insignificant_digits == 6

    def test_precision_never_negative(self):
        part = DatePart.parse("170000002", allow_scientific_and_mask=True).with_precision(20)
        assert part.insignificant_digits == 0

    def test_largest_value_accepted(self):
        assert DatePart.parse(str(MAX_MAGNITUDE)).value == MAX_MAGNITUDE

    @pytest.mark.parametrize("digits", [str(MAX_MAGNITUDE + 1), "1e19", "1e100000", "-99999999999999999999"])
    def test_overflow_raises(self, digits):
        with pytest.raises(ValueError):
            DatePart.parse(digits, allow_scientific_and_mask=True)

    @pytest.mark.parametrize("digits", ["-0000", "-0uuu", "-uuuu", "-0xxx", "-xxx", "-0e5"])
    def test_negative_zero_raises(self, digits):
        with pytest.raises(ValueError):
            DatePart.parse(digits, allow_scientific_and_mask=True)


class TestDatePartFormat:
    """Rendering digits and markers."""

    def test_pads_to_width(self):
        assert DatePart.parse("6").format(2) == "06"
        assert DatePart.parse("-999").format(4) == "-0999"

    def test_absent_renders_empty(self):
        assert DatePart().format(4) == ""

    @pytest.mark.parametrize("digits", ["199u", "19uu", "uuuu", "1u9u"])
    def test_unspecified_round_trip(self, digits):
        assert DatePart.parse(digits).format(4) == digits

    @pytest.mark.parametrize("digits", ["196x", "19xx", "1xxx"])
    def test_masked_round_trip(self, digits):
        assert DatePart.parse(digits, allow_scientific_and_mask=True).format(4) == digits

    def test_long_year_prefix(self):
        assert DatePart.parse("170000002").format(4) == "y170000002"
        assert DatePart.parse("-170000002").format(4) == "y-170000002"

    def test_threshold_stays_short(self):
        assert DatePart.parse("9999").format(4) == "9999"

    def test_exponent_renders_expanded(self):
        part = DatePart.parse("17e7", allow_scientific_and_mask=True)
        assert part.format(4) == "y170000000"

    def test_long_year_keeps_precision(self):
        part = DatePart.parse("17101e4", allow_scientific_and_mask=True).with_precision(3)
        assert part.format(4) == "y171010000p3"

    def test_markers(self):
        part = DatePart.parse("2004").with_qualifiers(Qualifiers(uncertain=True, approximate=True))
        assert part.format(4) == "2004?~"
        assert part.digits(4) == "2004"

    def test_markers_already_represented(self):
        part = DatePart.parse("2004").with_qualifiers(Qualifiers(uncertain=True, approximate=True))
        assert part.format(4, already_uncertain=True) == "2004~"
        assert part.format(4, already_uncertain=True, already_approximate=True) == "2004"

    def test_str_renders_lone_part(self):
        part = DatePart.parse("-0999").with_qualifiers(Qualifiers(approximate=True))
        assert str(part) == "-999~"
        assert part.format(4) == "-0999~"

    def test_to_dict(self):
        part = DatePart.parse("19uu")
        assert part.to_dict() == {
            "value": 1900,
            "has_value": True,
            "is_uncertain": False,
            "is_approximate": False,
            "unspecified_mask": 3,
            "insignificant_digits": 0,
        }
