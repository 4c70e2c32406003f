"""idle-ores - The ore-mining minigame."""
from __future__ import annotations

from idle_ores.minigame import MinigameStatus, OreMinigame
from idle_ores.sessions import OreSessions

__all__ = ["MinigameStatus", "OreMinigame", "OreSessions"]
