"""Two EDTF endpoints joined as an interval or a discrete range."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from edtf_parsing.date import Date, DateStatus

INTERVAL_DELIMITER = "/"
RANGE_DELIMITER = ".."


@dataclass(frozen=True)
class DatePair:
    """A start and end Date and how the span between them is read.

    By default the pair is an interval: every instant from ``start`` to
    ``end``, or just ``start`` when ``end`` is unused. With ``is_range`` set,
    the pair covers the discrete values between the endpoints at the finer of
    their precisions, so ``2008..2010`` means 2008, 2009 or 2010 but not
    2008-03-22. A range may leave out either side: ``2008..`` is "on or
    after" and ``..2010`` is "on or before".
    """
    start: Date = field(default_factory=Date)
    end: Date = field(default_factory=Date)
    is_range: bool = False

    @classmethod
    def parse(cls, text: str | None) -> DatePair:
        """Split on ``/`` or ``..`` and parse both sides.

        A ``/`` only counts as an interval delimiter when something precedes
        it; ``..`` may lead, trail or sit between the endpoints.
        """
        if not text:
            return cls()

        index = text.find(INTERVAL_DELIMITER)
        if index > 0:
            return cls(Date.parse(text[:index]), Date.parse(text[index + 1:]))

        index = text.find(RANGE_DELIMITER)
        if index >= 0:
            return cls(
                Date.parse(text[:index]),
                Date.parse(text[index + len(RANGE_DELIMITER):]),
                is_range=True,
            )

        return cls(Date.parse(text))

    @property
    def status(self) -> DateStatus:
        if DateStatus.INVALID in (self.start.status, self.end.status):
            return DateStatus.INVALID
        if self.start.status is DateStatus.UNUSED:
            return self.end.status
        return self.start.status

    @property
    def is_valid(self) -> bool:
        return self.status is not DateStatus.INVALID

    @property
    def is_single(self) -> bool:
        """True for a lone date: no range and nothing after the start."""
        return not self.is_range and self.end.status is DateStatus.UNUSED

    def format(self) -> str:
        start = self.start.format()
        end = self.end.format()
        if self.is_range:
            return start + RANGE_DELIMITER + end
        if not end:
            return start
        return start + INTERVAL_DELIMITER + end

    def to_dict(self) -> dict[str, Any]:
        return {
            "edtf": self.format(),
            "status": self.status.value,
            "is_range": self.is_range,
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
        }

    def __str__(self) -> str:
        return self.format()
