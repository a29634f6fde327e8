from typing import List

from pydantic import BaseModel, TypeAdapter

from config import INPUT_CONFIG
from .analysis import AnalysisResult


def make_history_title(text: str) -> str:
    return text[:INPUT_CONFIG.TITLE_LENGTH] + INPUT_CONFIG.TITLE_ELLIPSIS


class ScanHistoryEntry(BaseModel):
    """Compact record of a past analysis kept in the local history."""
    id: str
    title: str
    timestamp: int
    score: float
    verdict: str

    @classmethod
    def from_analysis(cls, text: str, result: AnalysisResult, timestamp: int) -> "ScanHistoryEntry":
        return cls(
            id=str(timestamp),
            title=make_history_title(text),
            timestamp=timestamp,
            score=result.credibility_score,
            verdict=result.verdict,
        )


HistoryList = TypeAdapter(List[ScanHistoryEntry])
