"""
reveal.py — What each invocation shows.

The first invocation of a day always shows the primary reading. Every later
one draws a single uniform value and walks an ordered table of cumulative
thresholds; the first threshold above the draw picks the action, and a draw
past the last threshold is silent.
"""

from __future__ import annotations
import datetime as dt
import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple, Union

from . import config
from .casting import LineCaster
from .derivation import Cast, DerivationEngine
from .entropy import EntropySource
from .readings import STYLES, DerivedType, Style, format_derived, format_reading
from .store import DailyRecord, HistoryEntry, RevealState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RevealAction:
    """Either a primary reading in ``style`` or a ``derived`` reading."""
    style: Optional[Style] = None
    derived: Optional[DerivedType] = None

    def __post_init__(self):
        if (self.style is None) == (self.derived is None):
            raise ValueError("RevealAction needs exactly one of style or derived")


RevealTable = List[Tuple[float, RevealAction]]


def build_reveal_table(style_band: float = config.STYLE_BAND,
                       derived_band: float = config.DERIVED_BAND) -> RevealTable:
    """Cumulative (threshold, action) pairs: styles first, then derived types."""
    bands = [(style_band, RevealAction(style=style)) for style in STYLES]
    bands += [(derived_band, RevealAction(derived=kind)) for kind in DerivedType]
    table: RevealTable = []
    total = 0.0
    for width, action in bands:
        if width <= 0:
            raise ValueError(f"Band width must be positive, got {width}")
        total += width
        table.append((total, action))
    check_table(table)
    return table


def check_table(table: Sequence[Tuple[float, RevealAction]]) -> None:
    previous = 0.0
    for threshold, _ in table:
        if threshold <= previous:
            raise ValueError(f"Thresholds must increase, got {threshold} after {previous}")
        previous = threshold
    # Small slack for float accumulation
    if previous > 1.0 + 1e-9:
        raise ValueError(f"Bands cover {previous:.3f} of [0, 1)")


@dataclass(frozen=True)
class Invocation:
    """Result of one invocation: the record to store, the line to print, what to archive."""
    record: DailyRecord
    output: Optional[str] = None
    archived: Optional[HistoryEntry] = None


def _as_date_string(today: Union[dt.date, str]) -> str:
    return today.isoformat() if isinstance(today, dt.date) else str(today)


class RevealScheduler:
    """Per-day state machine over Fresh and Revealed records."""

    def __init__(self, entropy: Optional[EntropySource] = None,
                 table: Optional[Sequence[Tuple[float, RevealAction]]] = None,
                 caster: Optional[LineCaster] = None,
                 engine: Optional[DerivationEngine] = None):
        self.entropy = entropy or EntropySource()
        self.table = list(table) if table is not None else build_reveal_table()
        check_table(self.table)
        self.caster = caster or LineCaster(self.entropy)
        self.engine = engine or DerivationEngine()

    def new_record(self, date: str) -> DailyRecord:
        cast = self.engine.derive(self.caster.cast_hexagram())
        logger.debug(f"Cast #{cast.primary} for {date}")
        return DailyRecord(date=date, cast=cast, revealed=False)

    def select(self, draw: float) -> Optional[RevealAction]:
        for threshold, action in self.table:
            if draw < threshold:
                return action
        return None

    def render(self, action: RevealAction, cast: Cast) -> Optional[str]:
        if action.style is not None:
            return format_reading(cast, action.style)
        return format_derived(cast, action.derived, self.entropy)

    def advance(self, record: Optional[DailyRecord], today: Union[dt.date, str]) -> Invocation:
        """
        Move ``record`` forward by one invocation on ``today``.

        A record from another day is handed back as ``archived`` and
        replaced by a fresh cast, whose primary reading is shown at once.
        """
        date = _as_date_string(today)
        archived = None
        if record is None or record.date != date:
            if record is not None:
                archived = HistoryEntry(date=record.date, cast=record.cast)
            record = self.new_record(date)

        if record.state is RevealState.FRESH:
            output = format_reading(record.cast, Style(config.FIRST_READING_STYLE))
            return Invocation(replace(record, revealed=True), output, archived)

        action = self.select(self.entropy.uniform())
        output = self.render(action, record.cast) if action is not None else None
        return Invocation(record, output, archived)
