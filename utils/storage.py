"""
JSON file persistence for game snapshots.
"""
import json
import logging
from pathlib import Path
from typing import Union

from core.game import Game

logger = logging.getLogger(__name__)


def save_game(game: Game, path: Union[str, Path]) -> None:
    """Write the game snapshot to a JSON file."""
    with open(path, "w") as f:
        json.dump(game.to_json(), f, indent=2)
    logger.debug("Saved game to %s", path)


def load_game(path: Union[str, Path]) -> Game:
    """Load a game from a JSON snapshot file."""
    with open(path, "r") as f:
        data = json.load(f)
    logger.debug("Loaded game from %s", path)
    return Game.from_json(data)
