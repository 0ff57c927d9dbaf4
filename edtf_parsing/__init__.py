"""Parsing and formatting of Extended Date/Time Format (EDTF) values.

Levels 0, 1 and 2 are supported: uncertain (``?``) and approximate (``~``)
components with parenthesised scoping, unspecified (``u``) and masked
(``x``) digits, long years, seasons, open and unknown endpoints, intervals,
ranges and lists.

    >>> from edtf_parsing import parse
    >>> str(parse("2004-(06)?-11"))
    '2004-(06)?-11'
"""

from edtf_parsing.date import Date, DateStatus, Season
from edtf_parsing.date_pair import DatePair
from edtf_parsing.date_pair_list import DatePairList, DatePairListMode
from edtf_parsing.date_part import DatePart

__all__ = [
    "Date",
    "DateStatus",
    "Season",
    "DatePart",
    "DatePair",
    "DatePairList",
    "DatePairListMode",
    "parse",
    "parse_date",
]


def parse(text: str | None) -> DatePairList:
    """Parse any EDTF value: a date, interval, range or list."""
    return DatePairList.parse(text)


def parse_date(text: str | None) -> Date:
    """Parse a single EDTF endpoint."""
    return Date.parse(text)
