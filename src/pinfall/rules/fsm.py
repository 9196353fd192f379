from __future__ import annotations
import numpy as np
from dataclasses import replace
from pinfall.config import RulesCfg
from pinfall.constants import (FRAMES_PER_GAME, HISTORY_PADDING, MAX_PINS,
                               SPARE_BONUS_THROWS, STRIKE_BONUS_THROWS, THROWS_PER_FRAME)
from pinfall.exceptions import GameComplete, NotEnoughPinsLeft
from pinfall.state import Phase, ScorerState, Throw, ThrowKind


class BowlingRules:
    def __init__(self, pins: int = MAX_PINS, frames: int = FRAMES_PER_GAME):
        self.pins = pins
        self.frames = frames

    @classmethod
    def from_config(cls, cfg: RulesCfg) -> BowlingRules:
        return cls(pins=cfg.pins, frames=cfg.frames)

    def initial_state(self) -> ScorerState:
        padding = (Throw(ThrowKind.NORMAL, 0),) * HISTORY_PADDING
        return ScorerState(frame=1, phase=Phase.IN_FRAME, bonus_owed=0,
                           throws_in_frame=0, pins_left=self.pins, throws=padding)

    def is_complete(self, s: ScorerState) -> bool:
        return s.phase is Phase.COMPLETE

    def legal_actions(self, s: ScorerState) -> dict[str, np.ndarray]:
        mask_pins = np.zeros(self.pins + 1, dtype=bool)
        if not self.is_complete(s):
            mask_pins[: s.pins_left + 1] = True
        return {"pins": mask_pins}

    def classify(self, s: ScorerState, pins: int) -> ThrowKind:
        if s.phase is Phase.TENTH_FRAME_BONUS:
            return ThrowKind.BONUS
        if s.throws_in_frame == 0 and pins == self.pins:
            return ThrowKind.STRIKE
        if pins == s.pins_left:
            return ThrowKind.SPARE
        return ThrowKind.NORMAL

    def apply_roll(self, s: ScorerState, pins: int) -> ScorerState:
        """Return the state after knocking down `pins`; `s` is never modified."""
        if self.is_complete(s):
            raise GameComplete()
        if pins < 0:
            raise ValueError(f"pins must be non-negative, got {pins}")
        if pins > s.pins_left:
            raise NotEnoughPinsLeft(pins, s.pins_left)

        kind = self.classify(s, pins)
        ns = replace(s, pins_left=s.pins_left - pins,
                     throws_in_frame=s.throws_in_frame + 1,
                     throws=s.throws + (Throw(kind, pins),))

        if ns.phase is Phase.TENTH_FRAME_BONUS:
            ns = replace(ns, bonus_owed=ns.bonus_owed - 1)
            if ns.bonus_owed == 0:
                return self._next_frame(ns)
            if ns.pins_left == 0:
                ns = replace(ns, pins_left=self.pins)  # fresh rack for the next bonus ball
            return ns

        if ns.pins_left == 0 and ns.frame == self.frames:
            owed = STRIKE_BONUS_THROWS if kind is ThrowKind.STRIKE else SPARE_BONUS_THROWS
            return replace(ns, phase=Phase.TENTH_FRAME_BONUS, bonus_owed=owed,
                           pins_left=self.pins)

        if ns.pins_left == 0 or ns.throws_in_frame >= THROWS_PER_FRAME:
            return self._next_frame(ns)
        return ns

    def _next_frame(self, s: ScorerState) -> ScorerState:
        frame = s.frame + 1
        phase = Phase.COMPLETE if frame > self.frames else Phase.IN_FRAME
        return replace(s, frame=frame, phase=phase, bonus_owed=0,
                       throws_in_frame=0, pins_left=self.pins)
