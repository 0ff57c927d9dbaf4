"""Lists of EDTF values: ``[a, b]`` (one of a set) and ``{a, b}`` (multiple)."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Iterable, Iterator

from edtf_parsing.date import Date, DateStatus
from edtf_parsing.date_pair import DatePair

logger = logging.getLogger(__name__)

ITEM_SEPARATOR = ","
_WRAPPERS = {"[": "]", "{": "}"}


def _parse_item(text: str) -> DatePair:
    # An empty slot between separators names no value at all.
    if not text:
        logger.debug("Rejected empty EDTF list item")
        return DatePair(Date(status=DateStatus.INVALID))
    return DatePair.parse(text)


class DatePairListMode(Enum):
    """How the items of a list relate to the true value."""
    ONE_OF_A_SET = "one_of_a_set"  # Exactly one item is the true value
    MULTIPLE = "multiple"          # Every item is true at once


class DatePairList:
    """Ordered, growable sequence of DatePair values with a list mode.

    Unwrapped input parses to a single-item ONE_OF_A_SET list, which
    formats back without brackets.
    """

    def __init__(self, items: Iterable[DatePair] = (), mode: DatePairListMode = DatePairListMode.ONE_OF_A_SET):
        self.mode = mode
        self._items: list[DatePair] = []
        self.extend(items)

    @classmethod
    def parse(cls, text: str | None) -> DatePairList:
        """Parse a list, or a single interval/range/date.

        Args:
            text: EDTF text such as ``"[1667, 1668, 1670..1672]"``

        Returns:
            A DatePairList; an empty one for empty input. A wrapper without
            its matching closer yields a single invalid item.
        """
        if not text:
            return cls()

        opener = text[0]
        if opener not in _WRAPPERS:
            return cls([DatePair.parse(text)])

        mode = DatePairListMode.MULTIPLE if opener == "{" else DatePairListMode.ONE_OF_A_SET
        if len(text) < 2 or text[-1] != _WRAPPERS[opener]:
            logger.debug("Rejected EDTF list %r: missing %r", text, _WRAPPERS[opener])
            return cls([DatePair(Date(status=DateStatus.INVALID))], mode)

        interior = text[1:-1].strip()
        if not interior:
            return cls(mode=mode)
        return cls((_parse_item(item.strip()) for item in interior.split(ITEM_SEPARATOR)), mode)

    def append(self, item: DatePair) -> None:
        if not isinstance(item, DatePair):
            raise TypeError(f"Expected DatePair, got {type(item).__name__}")
        self._items.append(item)

    def extend(self, items: Iterable[DatePair]) -> None:
        for item in items:
            self.append(item)

    @property
    def is_valid(self) -> bool:
        return all(item.is_valid for item in self._items)

    def format(self) -> str:
        joined = ", ".join(item.format() for item in self._items)
        if self.mode is DatePairListMode.MULTIPLE:
            return "{" + joined + "}"
        if not self._items:
            return ""
        if len(self._items) == 1 and not self._items[0].is_range:
            return joined
        return "[" + joined + "]"

    def to_dict(self) -> dict[str, Any]:
        return {
            "edtf": self.format(),
            "mode": self.mode.value,
            "valid": self.is_valid,
            "items": [item.to_dict() for item in self._items],
        }

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[DatePair]:
        return iter(self._items)

    def __getitem__(self, index: int) -> DatePair:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DatePairList):
            return NotImplemented
        return self.mode is other.mode and self._items == other._items

    def __repr__(self) -> str:
        return f"DatePairList({self._items!r}, mode={self.mode})"

    def __str__(self) -> str:
        return self.format()
