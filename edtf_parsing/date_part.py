"""Fuzzy integer used for the year, month and day of an EDTF date."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from decimal import Decimal, InvalidOperation
from typing import Any

from edtf_parsing.propagation import Qualifiers

# Values are held to a signed 64-bit range.
MAX_MAGNITUDE = 2**63 - 1

# Years beyond four digits are written with the "y" prefix.
LONG_YEAR_THRESHOLD = 9999

UNSPECIFIED_DIGIT = "u"
MASKED_DIGIT = "x"
EXPONENT = "e"


def _checked(value: int) -> int:
    if abs(value) > MAX_MAGNITUDE:
        raise ValueError(f"Value {value} exceeds the signed 64-bit range")
    return value


@dataclass(frozen=True)
class DatePart:
    """An integer component plus everything EDTF can say about its certainty.

    Attributes:
        value: Numeric value; unspecified and masked digits count as zero
        has_value: False when the component was absent from the input
        is_uncertain: Marked with ``?`` (directly or through propagation)
        is_approximate: Marked with ``~`` (directly or through propagation)
        unspecified_mask: Bitset of ``u`` digits, bit 0 = least significant
        insignificant_digits: Trailing digits that are not significant
            (``x`` masking or a ``pN`` suffix)
    """
    value: int = 0
    has_value: bool = False
    is_uncertain: bool = False
    is_approximate: bool = False
    unspecified_mask: int = 0
    insignificant_digits: int = 0

    @classmethod
    def parse(cls, digits: str | None, allow_scientific_and_mask: bool = False) -> DatePart:
        """Parse the digit text of one component.

        Args:
            digits: Component text without markers, e.g. ``"19uu"``, ``"196x"``
                or ``"-17e7"``; empty or None yields an absent part
            allow_scientific_and_mask: Accept exponents and ``x`` masking
                (years only)

        Returns:
            A DatePart with has_value set

        Raises:
            ValueError: If the digits are not numeric or overflow 64 bits
        """
        if not digits:
            return cls()

        text = digits
        if allow_scientific_and_mask and EXPONENT in text:
            try:
                number = Decimal(text)
            except InvalidOperation as e:
                raise ValueError(f"Invalid exponent notation: {digits!r}") from e
            # Reject before int() expands an enormous exponent.
            if number.adjusted() > len(str(MAX_MAGNITUDE)):
                raise ValueError(f"Value {digits!r} exceeds the signed 64-bit range")
            if number.is_zero() and text.startswith("-"):
                raise ValueError(f"Negative zero: {digits!r}")
            return cls(value=_checked(int(number)), has_value=True)

        insignificant = 0
        if allow_scientific_and_mask:
            stripped = text.rstrip(MASKED_DIGIT)
            insignificant = len(text) - len(stripped)
            text = stripped + "0" * insignificant

        sign = ""
        if text.startswith("-"):
            sign, text = "-", text[1:]

        mask = 0
        for position, char in enumerate(reversed(text)):
            if char == UNSPECIFIED_DIGIT:
                mask |= 1 << position

        value = int(sign + text.replace(UNSPECIFIED_DIGIT, "0"))
        # The sign lives in value, so "-0000", "-0uuu" and "-0xxx" could not
        # be written back.
        if sign and value == 0:
            raise ValueError(f"Negative zero: {digits!r}")
        return cls(
            value=_checked(value),
            has_value=True,
            unspecified_mask=mask,
            insignificant_digits=insignificant,
        )

    def with_precision(self, significant_digits: int) -> DatePart:
        """Mark all but the leading ``significant_digits`` digits insignificant."""
        total = len(str(abs(self.value)))
        return replace(self, insignificant_digits=max(0, total - significant_digits))

    def with_qualifiers(self, qualifiers: Qualifiers) -> DatePart:
        return replace(self, is_uncertain=qualifiers.uncertain, is_approximate=qualifiers.approximate)

    @property
    def qualifiers(self) -> Qualifiers:
        return Qualifiers(self.is_uncertain, self.is_approximate)

    @property
    def is_long(self) -> bool:
        return abs(self.value) > LONG_YEAR_THRESHOLD

    def digits(self, pad_width: int = 0) -> str:
        """Render the value with masking and unspecified digits, without markers."""
        if not self.has_value:
            return ""

        magnitude = str(abs(self.value))
        width = max(pad_width, self.unspecified_mask.bit_length())
        chars = list(magnitude.zfill(width))

        if not self.is_long:
            for place in range(1, min(self.insignificant_digits, len(chars)) + 1):
                chars[-place] = MASKED_DIGIT

        for position in range(len(chars)):
            if self.unspecified_mask >> position & 1:
                chars[-1 - position] = UNSPECIFIED_DIGIT

        text = "".join(chars)
        if self.value < 0:
            text = "-" + text
        if self.is_long:
            text = "y" + text
            if self.insignificant_digits:
                # Long years keep their precision as a significant-digit count.
                text += f"p{max(len(magnitude) - self.insignificant_digits, 0)}"
        return text

    def format(self, pad_width: int = 0, already_uncertain: bool = False, already_approximate: bool = False) -> str:
        """Render the part in EDTF form on its own.

        Date.format lays out markers across all components with
        layout_markers() and uses digits() directly; this renderer serves a
        lone part and ``str()``. The ``already_*`` flags let a caller that
        has written a flag on a finer component suppress it here.

        Args:
            pad_width: Minimum digit count (4 for years, 2 for months and days)
            already_uncertain: A finer component already carries the ``?``
            already_approximate: A finer component already carries the ``~``

        Returns:
            The digits followed by any markers not already represented
        """
        if not self.has_value:
            return ""
        return self.digits(pad_width) + Qualifiers(
            self.is_uncertain and not already_uncertain,
            self.is_approximate and not already_approximate,
        ).markers()

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return self.format()
