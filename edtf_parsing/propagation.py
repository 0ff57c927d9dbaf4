"""Scoping of ``?`` and ``~`` markers across year, month and day.

EDTF lets a qualifier follow any component, and lets parentheses limit which
components it covers::

    2004-06-11?      uncertain year, month and day
    2004-(06)?-11    uncertain month only
    2011-(06-04)~    approximate month and day
    (2004-(06)~)?    uncertain year and month, approximate month

Parsing runs a single left-to-right scan over the marker zones (year zone,
then month zone, then day zone). Formatting runs the scan in reverse: it
proposes marker layouts in a fixed order of preference and keeps the first
one the scan maps back onto the requested qualifiers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Sequence


class Level(IntEnum):
    """Date components, coarsest first."""
    YEAR = 0
    MONTH = 1
    DAY = 2


UNCERTAIN = "?"
APPROXIMATE = "~"
CLOSE_PAREN = ")"


@dataclass(frozen=True)
class Qualifiers:
    """Final uncertain/approximate state of one component."""
    uncertain: bool = False
    approximate: bool = False

    def markers(self) -> str:
        return (UNCERTAIN if self.uncertain else "") + (APPROXIMATE if self.approximate else "")


@dataclass(frozen=True)
class Zone:
    """Parentheses opened before a component and the markers that follow it."""
    open_parens: int = 0
    markers: str = ""


class MarkerScanner:
    """Finite-state scan over the marker zones of one date.

    Zones must be fed coarsest first. For every level the scanner tracks how
    many groups were opened there and how many of them have closed. A level
    is protected once one of its own groups closed in an earlier zone.

    A flag always lands on the component it follows. It also reaches a
    coarser level when that level is unprotected and the most recent ``)``
    in the current zone (if any) closed a group opened at that level or a
    coarser one.
    """

    def __init__(self):
        self._opened = [0, 0, 0]
        self._closed = [0, 0, 0]
        self._uncertain = [False, False, False]
        self._approximate = [False, False, False]
        self._scanned = 0

    def _close(self) -> Level | None:
        # Innermost first: day groups, then month, then year.
        for level in (Level.DAY, Level.MONTH, Level.YEAR):
            if self._opened[level] > self._closed[level]:
                self._closed[level] += 1
                return level
        return None

    def scan(self, zone: Zone) -> None:
        level = Level(self._scanned)
        self._scanned += 1
        self._opened[level] += zone.open_parens

        protected = [self._closed[coarser] > 0 for coarser in range(level)]
        last_closed: Level | None = None

        for char in zone.markers:
            if char == CLOSE_PAREN:
                last_closed = self._close()
                continue

            targets = [level]
            for coarser in range(level):
                if protected[coarser]:
                    continue
                if last_closed is not None and last_closed > coarser:
                    continue
                targets.append(coarser)

            flags = self._uncertain if char == UNCERTAIN else self._approximate
            for target in targets:
                flags[target] = True

    def result(self) -> tuple[Qualifiers, ...]:
        return tuple(
            Qualifiers(self._uncertain[level], self._approximate[level])
            for level in range(self._scanned)
        )


def propagate(zones: Sequence[Zone]) -> tuple[Qualifiers, ...]:
    """Resolve the qualifiers of each component from its marker zones.

    Args:
        zones: One Zone per present component, year first (at most three)

    Returns:
        One Qualifiers per zone, in the same order
    """
    scanner = MarkerScanner()
    for zone in zones:
        scanner.scan(zone)
    return scanner.result()


def _runs(levels: Sequence[bool]) -> list[tuple[int, int]]:
    """Maximal stretches of consecutive True entries as (first, last) pairs."""
    runs = []
    start = None
    for index, flagged in enumerate(levels):
        if flagged and start is None:
            start = index
        elif not flagged and start is not None:
            runs.append((start, index - 1))
            start = None
    if start is not None:
        runs.append((start, len(levels) - 1))
    return runs


def _suffix_layout(qualifiers: Sequence[Qualifiers]) -> list[Zone]:
    # Level 1 form: each component writes the flags its finer neighbour lacks.
    zones = []
    for index, current in enumerate(qualifiers):
        finer = qualifiers[index + 1] if index + 1 < len(qualifiers) else Qualifiers()
        zones.append(Zone(markers=Qualifiers(
            current.uncertain and not finer.uncertain,
            current.approximate and not finer.approximate,
        ).markers()))
    return zones


def _grouped_layout(qualifiers: Sequence[Qualifiers], bare_leading: bool) -> list[Zone]:
    groups: dict[tuple[int, int], str] = {}
    bare = ["" for _ in qualifiers]

    for flag in (UNCERTAIN, APPROXIMATE):
        attr = "uncertain" if flag == UNCERTAIN else "approximate"
        for first, last in _runs([getattr(q, attr) for q in qualifiers]):
            if first == Level.YEAR and bare_leading:
                bare[last] += flag
            else:
                groups[(first, last)] = groups.get((first, last), "") + flag

    opens = [0 for _ in qualifiers]
    markers = ["" for _ in qualifiers]
    for first, last in groups:
        opens[first] += 1
    for index in range(len(qualifiers)):
        # Groups ending here close innermost (latest opening) first.
        ending = sorted((g for g in groups if g[1] == index), key=lambda g: -g[0])
        markers[index] = "".join(CLOSE_PAREN + groups[g] for g in ending) + bare[index]

    return [Zone(opens[i], markers[i]) for i in range(len(qualifiers))]


def _isolated_layout(qualifiers: Sequence[Qualifiers]) -> list[Zone]:
    zones = []
    for q in qualifiers:
        flags = q.markers()
        zones.append(Zone(1, CLOSE_PAREN + flags) if flags else Zone())
    return zones


def _candidate_layouts(qualifiers: Sequence[Qualifiers]) -> Iterator[list[Zone]]:
    yield _suffix_layout(qualifiers)
    yield _grouped_layout(qualifiers, bare_leading=True)
    yield _grouped_layout(qualifiers, bare_leading=False)
    yield _isolated_layout(qualifiers)


def layout_markers(qualifiers: Sequence[Qualifiers]) -> list[Zone]:
    """Choose parentheses and markers that reproduce the given qualifiers.

    Args:
        qualifiers: Desired qualifiers per present component, year first

    Returns:
        One Zone per component; feeding them to propagate() yields
        ``qualifiers`` again
    """
    wanted = tuple(qualifiers)
    for layout in _candidate_layouts(wanted):
        if propagate(layout) == wanted:
            return layout
    # Unreachable: an isolated group per component never propagates.
    raise AssertionError(f"No marker layout reproduces {wanted!r}")
