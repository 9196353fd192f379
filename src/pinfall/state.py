from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class ThrowKind(str, Enum):
    NORMAL = "normal"
    SPARE = "spare"
    BONUS = "bonus"
    STRIKE = "strike"


class Phase(str, Enum):
    IN_FRAME = "in_frame"
    TENTH_FRAME_BONUS = "tenth_frame_bonus"
    COMPLETE = "complete"


@dataclass(frozen=True, slots=True)
class Throw:
    kind: ThrowKind
    pins: int               # face value; a strike carries the full rack


@dataclass(frozen=True, slots=True)
class ScorerState:
    frame: int              # 1..frames, frames+1 once complete
    phase: Phase
    bonus_owed: int         # >0 only in TENTH_FRAME_BONUS
    throws_in_frame: int
    pins_left: int          # 0..pins
    throws: tuple[Throw, ...]  # append-only, starts with synthetic padding
