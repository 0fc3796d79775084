"""
High-score persistence used by the game engine.

The engine only relies on `load()` and `store(score)`. The JSON store also
remembers the last player name so the start screen can pre-fill it.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import List, Optional, Protocol, Union

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path.home() / ".tilesnake" / "scores.json"


class HighScoreStore(Protocol):
    def load(self) -> int:
        ...

    def store(self, score: int) -> None:
        ...


class MemoryHighScoreStore:
    """In-process store. Keeps every stored value in `history`."""

    def __init__(self, initial: int = 0):
        self.value = initial
        self.history: List[int] = []
        self.loads = 0

    def load(self) -> int:
        self.loads += 1
        return self.value

    def store(self, score: int) -> None:
        self.value = score
        self.history.append(score)


class JsonHighScoreStore:
    """
    Stores the high score and player name in a small JSON document:

        {"high_score": 120, "player_name": "Ada"}

    A missing or unreadable file reads as an empty record.
    """

    def __init__(self, path: Union[str, os.PathLike] = DEFAULT_PATH):
        self.path = Path(path)

    def _read(self) -> dict:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read scores file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed scores file {self.path}")
            return {}
        return data

    def _write(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f)
        os.replace(tmp, self.path)

    def load(self) -> int:
        value = self._read().get("high_score", 0)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            return 0
        return value

    def store(self, score: int) -> None:
        data = self._read()
        data["high_score"] = int(score)
        self._write(data)
        logger.info(f"Saved high score {score} to {self.path}")

    def load_player_name(self) -> Optional[str]:
        name = self._read().get("player_name")
        return name if isinstance(name, str) and name.strip() else None

    def store_player_name(self, name: str) -> None:
        data = self._read()
        data["player_name"] = name
        self._write(data)
