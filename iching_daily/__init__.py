"""Daily I Ching hexagram casting with progressive reveal."""

from .casting import Line, LineCaster, LineValue
from .codec import encode, to_binary, to_canonical, verify_table
from .derivation import Cast, DerivationEngine
from .entropy import EntropySource
from .reveal import RevealAction, RevealScheduler, build_reveal_table
from .store import DailyCastStore, DailyRecord, HistoryEntry, RevealState

__version__ = "0.1.0"

__all__ = [
    "Cast",
    "DailyCastStore",
    "DailyRecord",
    "DerivationEngine",
    "EntropySource",
    "HistoryEntry",
    "Line",
    "LineCaster",
    "LineValue",
    "RevealAction",
    "RevealScheduler",
    "RevealState",
    "build_reveal_table",
    "encode",
    "to_binary",
    "to_canonical",
    "verify_table",
]
