"""
store.py — The day's record (JSON, overwritten) and the history log (JSONL, appended).

A missing or unreadable record is not an error: ``load`` returns None and
the caller starts a new day. History is only ever appended to.
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from . import config
from .derivation import Cast

logger = logging.getLogger(__name__)


class RevealState(Enum):
    FRESH = "fresh"
    REVEALED = "revealed"


@dataclass(frozen=True)
class DailyRecord:
    """Today's cast and whether its primary reading has been shown."""
    date: str
    cast: Cast
    revealed: bool = False

    @property
    def state(self) -> RevealState:
        return RevealState.REVEALED if self.revealed else RevealState.FRESH

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "cast": self.cast.to_dict(), "revealed": self.revealed}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DailyRecord":
        date = data["date"]
        revealed = data.get("revealed", False)
        if not isinstance(date, str) or not isinstance(revealed, bool):
            raise ValueError("Record date must be a string and revealed a bool")
        return cls(date=date, cast=Cast.from_dict(data["cast"]), revealed=revealed)


@dataclass(frozen=True)
class HistoryEntry:
    date: str
    cast: Cast

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "cast": self.cast.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoryEntry":
        return cls(date=str(data["date"]), cast=Cast.from_dict(data["cast"]))


class DailyCastStore:
    """Flat-file storage for the current record and the history log."""

    def __init__(self, cache_path: Optional[Union[str, Path]] = None,
                 history_path: Optional[Union[str, Path]] = None):
        self.cache_path = Path(cache_path) if cache_path else config.cache_path()
        self.history_path = Path(history_path) if history_path else config.history_path()

    def load(self) -> Optional[DailyRecord]:
        if not self.cache_path.exists():
            return None
        try:
            with open(self.cache_path, "r", encoding="utf-8") as f:
                return DailyRecord.from_dict(json.load(f))
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning(f"Ignoring unreadable record {self.cache_path}: {e}")
            return None

    def save(self, record: DailyRecord) -> None:
        self.cache_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.cache_path, "w", encoding="utf-8") as f:
            json.dump(record.to_dict(), f, ensure_ascii=False)

    def append_history(self, entry: HistoryEntry) -> None:
        self.history_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.history_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry.to_dict(), ensure_ascii=False) + "\n")
        logger.info(f"Archived cast for {entry.date} to {self.history_path}")

    def read_history(self, limit: Optional[int] = None) -> List[HistoryEntry]:
        """Archived entries in append order; unreadable lines are skipped."""
        if not self.history_path.exists():
            return []
        entries: List[HistoryEntry] = []
        with open(self.history_path, "r", encoding="utf-8") as f:
            for number, raw in enumerate(f, start=1):
                if not raw.strip():
                    continue
                try:
                    entries.append(HistoryEntry.from_dict(json.loads(raw)))
                except (ValueError, KeyError, TypeError) as e:
                    logger.warning(f"Skipping history line {number}: {e}")
        if limit is not None:
            entries = entries[-limit:] if limit > 0 else []
        return entries
