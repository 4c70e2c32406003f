"""Game configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from idle_economy import ThrottlePolicy

DEBUG_AMOUNT_LIMIT = 1000


def clamp_debug_amount(amount: int) -> int:
    """Pin a debug grant amount to the slider range."""
    return max(-DEBUG_AMOUNT_LIMIT, min(DEBUG_AMOUNT_LIMIT, amount))


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for an ``IdleGame``.

    Attributes:
        tps: Simulation ticks per second.
        max_ticks_per_frame: Catch-up cap; ticks beyond it wait for later frames.
        seed: RNG seed (None picks one at random).
        policy: How producers behave when inputs run short.
        debug: Whether debug grants and fast-forward are offered to the player.
        debug_amount: Default amount for debug grants, within +/-1000.
    """

    tps: int = 20
    max_ticks_per_frame: int = 100
    seed: int | None = None
    policy: ThrottlePolicy = ThrottlePolicy.PROPORTIONAL
    debug: bool = True
    debug_amount: int = 100

    def __post_init__(self) -> None:
        if self.tps <= 0:
            raise ValueError(f"tps must be positive, got {self.tps}")
        if self.max_ticks_per_frame <= 0:
            raise ValueError(
                f"max_ticks_per_frame must be positive, got {self.max_ticks_per_frame}"
            )
        if abs(self.debug_amount) > DEBUG_AMOUNT_LIMIT:
            raise ValueError(
                f"debug_amount must be within +/-{DEBUG_AMOUNT_LIMIT}, got {self.debug_amount}"
            )
