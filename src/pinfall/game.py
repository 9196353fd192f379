from __future__ import annotations
import logging
from typing import Optional

from pinfall.constants import HISTORY_PADDING
from pinfall.exceptions import BowlingError
from pinfall.rules.fsm import BowlingRules
from pinfall.rules.scoring import total_score
from pinfall.state import Phase, ScorerState, Throw

logger = logging.getLogger(__name__)


class BowlingGame:
    """One game of ten-pin bowling, fed one roll at a time."""

    def __init__(self, rules: Optional[BowlingRules] = None):
        self.rules = rules or BowlingRules()
        self._state = self.rules.initial_state()

    @property
    def state(self) -> ScorerState:
        return self._state

    @property
    def frame(self) -> int:
        return self._state.frame

    @property
    def pins_left(self) -> int:
        return self._state.pins_left

    @property
    def is_complete(self) -> bool:
        return self.rules.is_complete(self._state)

    @property
    def throws(self) -> tuple[Throw, ...]:
        return self._state.throws[HISTORY_PADDING:]

    def roll(self, pins: int) -> None:
        """
        Knock down `pins` pins. Raises NotEnoughPinsLeft or GameComplete and
        leaves the game untouched when the roll is not allowed.
        """
        try:
            ns = self.rules.apply_roll(self._state, pins)
        except BowlingError as e:
            logger.info("rejected roll of %d in frame %d: %s", pins, self._state.frame, e)
            raise
        logger.debug("frame %d: rolled %d (%s)", self._state.frame, pins, ns.throws[-1].kind.value)
        if ns.frame != self._state.frame:
            logger.debug("advanced to frame %d", ns.frame)
        if ns.phase is Phase.COMPLETE:
            logger.debug("game complete after %d throws", len(ns.throws) - HISTORY_PADDING)
        self._state = ns

    def score(self) -> Optional[int]:
        if not self.is_complete:
            return None
        return total_score(self._state.throws)
