"""idle-game - The game-state aggregate tying the idle packages together."""
from __future__ import annotations

from idle_game.config import GameConfig
from idle_game.game import IdleGame, Selection
from idle_game.storage import load_game, save_game

__all__ = ["GameConfig", "IdleGame", "Selection", "load_game", "save_game"]
