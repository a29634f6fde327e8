from .analysis import (
    AnalysisResult,
    BiasAnalysis,
    FactualAccuracy,
    ClickbaitPotential,
    KeyClaim,
    SourceLink,
)
from .history import ScanHistoryEntry, HistoryList, make_history_title
from .requests import AnalyzeRequest

__all__ = [
    "AnalysisResult",
    "BiasAnalysis",
    "FactualAccuracy",
    "ClickbaitPotential",
    "KeyClaim",
    "SourceLink",

    "ScanHistoryEntry",
    "HistoryList",
    "make_history_title",

    "AnalyzeRequest",
]
