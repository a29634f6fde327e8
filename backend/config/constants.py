from dataclasses import dataclass, field
from typing import Dict, Optional

@dataclass(frozen=True)
class LLMConfig:
    # None leaves the timeout to the transport.
    REQUEST_TIMEOUT: Optional[float] = None
    SOURCE_FALLBACK_TITLE: str = "External Source"

@dataclass(frozen=True)
class InputConfig:
    MIN_LENGTH: int = 50
    TITLE_LENGTH: int = 60
    TITLE_ELLIPSIS: str = "..."

@dataclass(frozen=True)
class HistoryConfig:
    LIMIT: int = 10
    STORAGE_KEY: str = "veritas_history"

@dataclass(frozen=True)
class GaugeConfig:
    GOOD_THRESHOLD: float = 80
    WARNING_THRESHOLD: float = 50
    DEFAULT_SIZE: int = 120
    RESULT_SIZE: int = 160
    STROKE_WIDTH: int = 8
    COLORS: Dict[str, str] = field(default_factory=lambda: {
        "good": "#10b981",
        "warning": "#f59e0b",
        "bad": "#ef4444",
    })

    def tone_for(self, score: float) -> str:
        if score >= self.GOOD_THRESHOLD:
            return "good"
        elif score >= self.WARNING_THRESHOLD:
            return "warning"
        else:
            return "bad"

@dataclass(frozen=True)
class Messages:
    """User-facing messages."""
    INPUT_TOO_SHORT: str = (
        "Please provide a longer text sample (at least 50 characters) for accurate analysis."
    )
    ANALYSIS_FAILED: str = "Failed to analyze content. Please try again later."
    ANALYSIS_IN_PROGRESS: str = "An analysis is already running. Please wait for it to finish."

VERDICT_STYLES: Dict[str, str] = {
    "Reliable": "reliable",
    "Partially Reliable": "partial",
    "Unreliable": "unreliable",
    "Likely Fake": "fake",
}
NEUTRAL_VERDICT_STYLE = "neutral"

BIAS_TONES: Dict[str, str] = {
    "Low": "good",
    "Medium": "warning",
}

LLM_CONFIG = LLMConfig()
INPUT_CONFIG = InputConfig()
HISTORY_CONFIG = HistoryConfig()
GAUGE_CONFIG = GaugeConfig()
MESSAGES = Messages()
