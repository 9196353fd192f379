from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional

from pinfall.constants import (INITIAL_HEALTH, INITIAL_MANA, MIN_MANA_ACCESS_LEVEL,
                               SPELL_DAMAGE_MULTIPLIER)


@dataclass(slots=True)
class Player:
    health: int
    mana: Optional[int]     # None until the player can use mana
    level: int

    def revive(self) -> Optional[Player]:
        """Return a fresh copy of a dead player, or None if still alive."""
        if self.health > 0:
            return None
        mana = INITIAL_MANA if self.level >= MIN_MANA_ACCESS_LEVEL else None
        return replace(self, health=INITIAL_HEALTH, mana=mana)

    def cast_spell(self, mana_cost: int) -> int:
        """
        Spend mana and return the damage dealt. Players without a mana pool
        pay with health instead and deal no damage.
        """
        if self.mana is None:
            self.health = max(0, self.health - mana_cost)
            return 0
        if self.mana < mana_cost:
            return 0
        self.mana -= mana_cost
        return SPELL_DAMAGE_MULTIPLIER * mana_cost
