"""Regular-expression grammar for a single EDTF date endpoint.

The pattern covers Level 0, 1 and 2 endpoint syntax: plain and negative
years, masked (``196x``) and unspecified (``19uu``) digits, long years with a
``y`` prefix, exponents and significant-digit suffixes (``y17101e4p3``),
seasons with an optional ``^qualifier``, date-times with a timezone, and the
``?``/``~``/parenthesis marker zones that follow each component.

Intervals, ranges and lists are split by the callers before an endpoint ever
reaches this module.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Compiled once at import; the compiled pattern is read-only and safe to share
# between threads.
_ENDPOINT_RE = re.compile(
    r"""
    (?P<yearopenparens>\(*)
    (?:
        y(?P<longyear>-?(?:[0-9]+e[0-9]+|[0-9]{5,}))
        (?:p(?P<yearprecision>[0-9]+))?
      |
        (?P<yearnum>-?(?:[0-9u]{4}|[0-9u]{3}x|[0-9u]{2}xx|[0-9u]xxx))
    )
    (?P<yearend>[?~)]*)
    (?:
        -(?P<monthopenparens>\(*)
        (?P<monthnum>[0-9u]{2})
        (?:\^(?P<seasonqualifier>[A-Za-z0-9]+))?
        (?P<monthend>[?~)]*)
        (?:
            -(?P<dayopenparens>\(*)
            (?P<daynum>[0-9u]{2})
            (?P<dayend>[?~)]*)
            (?:
                T(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})
                (?:
                    (?P<utc>Z)
                  |
                    (?P<tzsign>[+-])(?P<tzhour>[0-9]{2})(?::?(?P<tzminute>[0-9]{2}))?
                )?
            )?
        )?
    )?
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class EndpointMatch:
    """Named substrings captured from one accepted EDTF endpoint.

    Component digits keep their ``u``/``x``/``e`` characters; callers decide
    how to interpret them. Marker fields hold the raw zone that follows a
    component (any mix of ``?``, ``~`` and ``)``), and the ``*_open_parens``
    fields count the ``(`` characters that precede it.
    """

    year_digits: str
    is_long_year: bool = False
    year_precision: str | None = None
    year_markers: str = ""
    year_open_parens: int = 0
    month_digits: str | None = None
    month_markers: str = ""
    month_open_parens: int = 0
    season_qualifier: str | None = None
    day_digits: str | None = None
    day_markers: str = ""
    day_open_parens: int = 0
    hour: str | None = None
    minute: str | None = None
    second: str | None = None
    is_utc: bool = False
    tz_sign: str | None = None
    tz_hour: str | None = None
    tz_minute: str | None = None


def _parens_balance(m: re.Match) -> bool:
    """Check that every ``)`` closes an open group and none stay open."""
    depth = 0
    for opens, zone in (
        ("yearopenparens", "yearend"),
        ("monthopenparens", "monthend"),
        ("dayopenparens", "dayend"),
    ):
        depth += len(m.group(opens) or "")
        for char in m.group(zone) or "":
            if char == ")":
                depth -= 1
                if depth < 0:
                    return False
    return depth == 0


def match_endpoint(text: str) -> EndpointMatch | None:
    """Match a single endpoint string against the EDTF grammar.

    Args:
        text: Candidate endpoint, e.g. ``"2004-(06)?-11"``

    Returns:
        An EndpointMatch with the captured fields, or None when the text is
        not a valid endpoint.
    """
    if not text:
        return None

    m = _ENDPOINT_RE.fullmatch(text)
    if not m or not _parens_balance(m):
        return None

    long_year = m.group("longyear")
    return EndpointMatch(
        year_digits=long_year if long_year is not None else m.group("yearnum"),
        is_long_year=long_year is not None,
        year_precision=m.group("yearprecision"),
        year_markers=m.group("yearend") or "",
        year_open_parens=len(m.group("yearopenparens") or ""),
        month_digits=m.group("monthnum"),
        month_markers=m.group("monthend") or "",
        month_open_parens=len(m.group("monthopenparens") or ""),
        season_qualifier=m.group("seasonqualifier"),
        day_digits=m.group("daynum"),
        day_markers=m.group("dayend") or "",
        day_open_parens=len(m.group("dayopenparens") or ""),
        hour=m.group("hour"),
        minute=m.group("minute"),
        second=m.group("second"),
        is_utc=m.group("utc") is not None,
        tz_sign=m.group("tzsign"),
        tz_hour=m.group("tzhour"),
        tz_minute=m.group("tzminute"),
    )
