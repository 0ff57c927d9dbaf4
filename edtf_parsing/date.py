"""A single EDTF date endpoint: year, month, day, time and timezone."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum
from typing import Any

from edtf_parsing.date_part import DatePart
from edtf_parsing.grammar import EndpointMatch, match_endpoint
from edtf_parsing.propagation import Zone, layout_markers, propagate

logger = logging.getLogger(__name__)

OPEN = "open"
UNKNOWN = "unknown"

# Minimum digit count for year, month and day.
_PAD_WIDTHS = (4, 2, 2)

# Month values at or above this encode a season.
SEASON_THRESHOLD = 20


class DateStatus(Enum):
    """Outcome of parsing one endpoint."""
    NORMAL = "normal"    # A (possibly partial) date value
    OPEN = "open"        # No bound: the interval runs on without end
    UNKNOWN = "unknown"  # A bound exists but nothing is known about it
    UNUSED = "unused"    # No input, e.g. the end of a single date
    INVALID = "invalid"  # The grammar rejected the input


class Season(IntEnum):
    SPRING = 21
    SUMMER = 22
    AUTUMN = 23
    WINTER = 24


@dataclass(frozen=True)
class Date:
    """One side of an EDTF value.

    Month values 21-24 encode seasons; a season never carries a day or a
    time. Time fields default to zero and are only written out when one of
    them is non-zero or a timezone was given. ``timezone_offset`` is in
    minutes east of UTC and is only meaningful when ``has_timezone_offset``
    is set.
    """
    status: DateStatus = DateStatus.UNUSED
    year: DatePart = field(default_factory=DatePart)
    month: DatePart = field(default_factory=DatePart)
    day: DatePart = field(default_factory=DatePart)
    season_qualifier: str | None = None
    hour: int = 0
    minute: int = 0
    second: int = 0
    timezone_offset: int = 0
    has_timezone_offset: bool = False

    @classmethod
    def parse(cls, text: str | None) -> Date:
        """Parse one endpoint.

        Never raises for malformed text: the returned status says whether
        the fields can be trusted.

        Args:
            text: Endpoint text such as ``"2004-06-11?"``, ``"open"`` or ``""``

        Returns:
            A Date whose status is UNUSED, OPEN, UNKNOWN, INVALID or NORMAL
        """
        if not text:
            return cls(status=DateStatus.UNUSED)
        if text == OPEN:
            return cls(status=DateStatus.OPEN)
        if text == UNKNOWN:
            return cls(status=DateStatus.UNKNOWN)

        m = match_endpoint(text)
        if m is None:
            logger.debug("Rejected EDTF endpoint %r", text)
            return cls(status=DateStatus.INVALID)

        try:
            return cls._from_match(m)
        except ValueError as e:
            logger.debug("Rejected EDTF endpoint %r: %s", text, e)
            return cls(status=DateStatus.INVALID)

    @classmethod
    def _from_match(cls, m: EndpointMatch) -> Date:
        if not m.year_digits:
            return cls(status=DateStatus.NORMAL)

        year = DatePart.parse(m.year_digits, allow_scientific_and_mask=True)
        if m.year_precision:
            year = year.with_precision(int(m.year_precision))

        zones = [Zone(m.year_open_parens, m.year_markers)]
        if m.month_digits is None:
            (year_q,) = propagate(zones)
            return cls(status=DateStatus.NORMAL, year=year.with_qualifiers(year_q))

        month = DatePart.parse(m.month_digits)
        zones.append(Zone(m.month_open_parens, m.month_markers))

        if month.value >= SEASON_THRESHOLD:
            # A day or time after a season is dropped, but the markers and
            # parentheses following the day still qualify year and season.
            if m.day_digits is not None:
                zones.append(Zone(m.day_open_parens, m.day_markers))
            year_q, month_q = propagate(zones)[:2]
            return cls(
                status=DateStatus.NORMAL,
                year=year.with_qualifiers(year_q),
                month=month.with_qualifiers(month_q),
                season_qualifier=m.season_qualifier,
            )
        if m.season_qualifier:
            raise ValueError(f"Qualifier {m.season_qualifier!r} on a month that is not a season")

        if m.day_digits is None:
            year_q, month_q = propagate(zones)
            return cls(
                status=DateStatus.NORMAL,
                year=year.with_qualifiers(year_q),
                month=month.with_qualifiers(month_q),
            )

        day = DatePart.parse(m.day_digits)
        zones.append(Zone(m.day_open_parens, m.day_markers))
        year_q, month_q, day_q = propagate(zones)
        date = cls(
            status=DateStatus.NORMAL,
            year=year.with_qualifiers(year_q),
            month=month.with_qualifiers(month_q),
            day=day.with_qualifiers(day_q),
        )

        if m.hour is None:
            return date

        offset = 0
        if m.tz_sign:
            sign = -1 if m.tz_sign == "-" else 1
            offset = sign * (int(m.tz_hour) * 60 + int(m.tz_minute or 0))

        return replace(
            date,
            hour=int(m.hour),
            minute=int(m.minute),
            second=int(m.second),
            timezone_offset=offset,
            has_timezone_offset=m.is_utc or m.tz_sign is not None,
        )

    @property
    def is_normal(self) -> bool:
        return self.status is DateStatus.NORMAL

    @property
    def season(self) -> Season | None:
        if self.month.has_value and Season.SPRING <= self.month.value <= Season.WINTER:
            return Season(self.month.value)
        return None

    @property
    def has_time(self) -> bool:
        return bool(self.hour or self.minute or self.second)

    @property
    def precision(self) -> str | None:
        """Finest component present: year, season, month, day or second."""
        if not self.is_normal or not self.year.has_value:
            return None
        if not self.month.has_value:
            return "year"
        if self.season is not None:
            return "season"
        if not self.day.has_value:
            # Also month codes 20 and 25-99: read as seasons, but naming none.
            return "month"
        return "second" if self.has_time else "day"

    def _parts(self) -> list[DatePart]:
        parts = [self.year]
        if self.month.has_value:
            parts.append(self.month)
            if self.day.has_value and self.month.value < SEASON_THRESHOLD:
                parts.append(self.day)
        return parts

    def _timezone_suffix(self) -> str:
        if self.timezone_offset == 0:
            return "Z" if self.has_timezone_offset else ""
        sign = "-" if self.timezone_offset < 0 else "+"
        hours, minutes = divmod(abs(self.timezone_offset), 60)
        return f"{sign}{hours:02d}:{minutes:02d}"

    def format(self) -> str:
        """Render the endpoint in EDTF form (inverse of parse)."""
        if self.status is DateStatus.OPEN:
            return OPEN
        if self.status is DateStatus.UNKNOWN:
            return UNKNOWN
        if self.status is not DateStatus.NORMAL or not self.year.has_value:
            return ""

        parts = self._parts()
        zones = layout_markers([part.qualifiers for part in parts])

        pieces = []
        for index, (part, zone) in enumerate(zip(parts, zones)):
            qualifier = ""
            if index == 1 and self.season_qualifier:
                qualifier = "^" + self.season_qualifier
            pieces.append("(" * zone.open_parens + part.digits(_PAD_WIDTHS[index]) + qualifier + zone.markers)
        result = "-".join(pieces)

        # An explicit zone keeps a midnight time, so "T00:00:00Z" survives.
        if len(parts) == 3 and (self.has_time or self.has_timezone_offset):
            result += f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}" + self._timezone_suffix()
        return result

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "year": self.year.to_dict(),
            "month": self.month.to_dict(),
            "day": self.day.to_dict(),
            "season_qualifier": self.season_qualifier,
            "hour": self.hour,
            "minute": self.minute,
            "second": self.second,
            "timezone_offset": self.timezone_offset,
            "has_timezone_offset": self.has_timezone_offset,
        }

    def __str__(self) -> str:
        return self.format()
