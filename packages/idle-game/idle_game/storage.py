"""JSON file persistence for IdleGame snapshots."""
from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Callable

from idle_economy import GOODS, PRODUCERS, GoodCatalog, ProducerCatalog
from idle_game.config import GameConfig
from idle_game.game import IdleGame

logger = logging.getLogger(__name__)


def save_game(game: IdleGame, path: str | Path) -> None:
    path = Path(path)
    path.write_text(json.dumps(game.snapshot(), indent=2), encoding="utf-8")
    logger.info("saved game to %s", path)


def load_game(
    path: str | Path,
    config: GameConfig | None = None,
    now: float | None = None,
    time_fn: Callable[[], float] = time.monotonic,
    goods: GoodCatalog = GOODS,
    producers: ProducerCatalog = PRODUCERS,
) -> IdleGame:
    """Load a saved game, or start a new one if the file is missing or bad."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.info("no save at %s, starting a new game", path)
        return IdleGame(config, time_fn, goods, producers)
    except (OSError, ValueError) as exc:
        logger.warning("could not read save %s: %s", path, exc)
        return IdleGame(config, time_fn, goods, producers)
    return IdleGame.load(data, config, now, time_fn, goods, producers)
