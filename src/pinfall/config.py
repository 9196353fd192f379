from __future__ import annotations
from pydantic import BaseModel, Field
import yaml

from pinfall.constants import FRAMES_PER_GAME, MAX_PINS

class RulesCfg(BaseModel):
    pins: int = Field(default=MAX_PINS, ge=1)
    frames: int = Field(default=FRAMES_PER_GAME, ge=1)

class SimCfg(BaseModel):
    n_games: int = Field(default=1000, ge=1)

class FullConfig(BaseModel):
    seed: int = 42
    rules: RulesCfg = RulesCfg()
    sim: SimCfg = SimCfg()

def load_config(path: str) -> FullConfig:
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}
    return FullConfig.model_validate(raw)
