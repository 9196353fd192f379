from __future__ import annotations
from typing import Sequence
from pinfall.constants import SCORE_WINDOW
from pinfall.state import Throw, ThrowKind


def strike_points(window: Sequence[Throw]) -> int:
    first, a, b = window
    if first.kind is ThrowKind.STRIKE:
        return first.pins + a.pins + b.pins
    return 0


def spare_points(window: Sequence[Throw]) -> int:
    _, spare, a = window
    if spare.kind is ThrowKind.SPARE:
        return spare.pins + a.pins
    return 0


def normal_points(window: Sequence[Throw]) -> int:
    _, _, last = window
    if last.kind is ThrowKind.NORMAL:
        return last.pins
    return 0


def window_points(window: Sequence[Throw]) -> int:
    return strike_points(window) + spare_points(window) + normal_points(window)


def total_score(throws: Sequence[Throw]) -> int:
    """
    Sum every window of three consecutive throws. The history must start with
    the synthetic zero throws so the first real throws still get a full window.
    Bonus throws only count as look-ahead for a strike or spare before them.
    """
    windows = zip(*(throws[i:] for i in range(SCORE_WINDOW)))
    return sum(window_points(w) for w in windows)
