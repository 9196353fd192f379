from __future__ import annotations

# Rack / game shape
MAX_PINS = 10
FRAMES_PER_GAME = 10
THROWS_PER_FRAME = 2

# Tenth-frame bonus throws owed
STRIKE_BONUS_THROWS = 2
SPARE_BONUS_THROWS = 1

# Synthetic zero throws that pad the history so scoring windows never run short
HISTORY_PADDING = 2
SCORE_WINDOW = 3

# Player
INITIAL_HEALTH = 100
INITIAL_MANA = 100
MIN_MANA_ACCESS_LEVEL = 10
SPELL_DAMAGE_MULTIPLIER = 2
