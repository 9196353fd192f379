"""Errors raised by the bowling scorer."""


class BowlingError(ValueError):
    """Base class for rejected rolls."""


class NotEnoughPinsLeft(BowlingError):
    def __init__(self, pins: int, pins_left: int) -> None:
        super().__init__(f"cannot knock down {pins} pins, only {pins_left} left standing")
        self.pins = pins
        self.pins_left = pins_left


class GameComplete(BowlingError):
    def __init__(self) -> None:
        super().__init__("game is complete, no more rolls allowed")
