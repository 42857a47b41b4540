#!/usr/bin/env python3
"""
intersection/directions.py
==========================
Cardinal directions, turn types and the turn classifier.

The cyclic order ``north → east → south → west`` is fixed; every turn
decision in the package is derived from the index difference between
two directions in that order.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Iterator, Optional, Tuple

log = logging.getLogger("geometry")


class Direction(Enum):
    """Approach arm of the intersection, in fixed cyclic order."""
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def index(self) -> int:
        return _ORDER.index(self)

    @classmethod
    def parse(cls, value: Any) -> Optional["Direction"]:
        """Resolve *value* to a :class:`Direction`, or ``None``.

        Accepts a ``Direction``, its value (``"north"``), its name
        (``"NORTH"``) or a one-letter arm code (``"N"``), ignoring case
        and surrounding whitespace.
        """
        if isinstance(value, Direction):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        if len(key) == 1:
            return _ARM_CODES.get(key)
        for direction in cls:
            if direction.value == key:
                return direction
        return None


class TurnType(Enum):
    """Manoeuvre implied by an ordered (from, to) direction pair."""
    STRAIGHT = "straight"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: Any) -> Optional["TurnType"]:
        if isinstance(value, TurnType):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        for turn in cls:
            if turn.value == key:
                return turn
        return None


_ORDER: Tuple[Direction, ...] = (
    Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST,
)
_ARM_CODES = {d.value[0]: d for d in _ORDER}

# index difference (to - from) mod 4 → turn; 0 is deliberately absent
_DIFF_TO_TURN = {1: TurnType.RIGHT, 2: TurnType.STRAIGHT, 3: TurnType.LEFT}
_TURN_TO_DIFF = {turn: diff for diff, turn in _DIFF_TO_TURN.items()}


def classify(from_dir: Any, to_dir: Any) -> Optional[TurnType]:
    """Turn type for travelling from *from_dir* to *to_dir*.

    Returns ``None`` when either direction is invalid or when both are
    the same (a vehicle cannot leave on the arm it entered from).
    """
    src = Direction.parse(from_dir)
    dst = Direction.parse(to_dir)
    if src is None or dst is None:
        log.warning("Cannot classify turn for invalid direction pair (%r, %r)",
                    from_dir, to_dir)
        return None
    diff = (dst.index - src.index + 4) % 4
    return _DIFF_TO_TURN.get(diff)


def target_direction(from_dir: Any, turn: Any) -> Optional[Direction]:
    """Direction reached by making *turn* from *from_dir*."""
    src = Direction.parse(from_dir)
    kind = TurnType.parse(turn)
    if src is None or kind is None:
        return None
    return _ORDER[(src.index + _TURN_TO_DIFF[kind]) % 4]


def valid_pairs() -> Iterator[Tuple[Direction, Direction]]:
    """Yield the 12 ordered ``(from, to)`` pairs with ``from != to``."""
    for src in _ORDER:
        for dst in _ORDER:
            if src is not dst:
                yield src, dst
