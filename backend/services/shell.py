import time
from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional

from config import logger, HISTORY_CONFIG, MESSAGES
from exceptions import (
    AnalysisException,
    AnalysisInProgressException,
    PersistenceException,
    ValidationException,
)
from models import AnalysisResult, ScanHistoryEntry
from utils.validation import InputValidator
from .analysis import analyze_news
from .storage import HistoryStore

Analyzer = Callable[[str], Awaitable[AnalysisResult]]


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class AppState:
    input_text: str = ""
    is_analyzing: bool = False
    result: Optional[AnalysisResult] = None
    error: Optional[str] = None
    history: List[ScanHistoryEntry] = field(default_factory=list)


class AppShell:
    """
    Owns the page state and orchestrates one analysis at a time.

    The in-memory history and its persisted copy only change together,
    through _replace_history.
    """

    def __init__(
        self,
        store: HistoryStore,
        analyzer: Analyzer = analyze_news,
        clock: Callable[[], int] = _now_ms,
    ):
        self.store = store
        self.analyzer = analyzer
        self.clock = clock
        self.state = AppState()

    @property
    def history(self) -> List[ScanHistoryEntry]:
        return list(self.state.history)

    def load_history(self) -> List[ScanHistoryEntry]:
        try:
            self.state.history = self.store.load()
        except PersistenceException as e:
            logger.error("Failed to parse history, starting empty: %s", e.message)
            self.state.history = []
        return self.history

    def _replace_history(self, entries: List[ScanHistoryEntry]) -> None:
        self.store.save(entries)
        self.state.history = entries

    def edit(self, text: str) -> None:
        self.state.input_text = text

    async def submit(self, text: str) -> AnalysisResult:
        if self.state.is_analyzing:
            raise AnalysisInProgressException()

        try:
            InputValidator.validate_article(text)
        except ValidationException as e:
            self.state.error = e.message
            raise

        self.state.error = None
        self.state.result = None
        self.state.is_analyzing = True
        submitted_at = self.clock()

        try:
            result = await self.analyzer(text)
        except AnalysisException as e:
            logger.error("Analysis failed at stage %s: %s", e.stage, e.message)
            self.state.error = MESSAGES.ANALYSIS_FAILED
            raise
        except Exception as e:
            logger.exception("Unexpected error during analysis.")
            self.state.error = MESSAGES.ANALYSIS_FAILED
            raise AnalysisException(str(e), stage="unknown") from e
        finally:
            self.state.is_analyzing = False

        self.state.result = result
        entry = ScanHistoryEntry.from_analysis(text, result, submitted_at)
        try:
            self._replace_history([entry] + self.state.history[:HISTORY_CONFIG.LIMIT - 1])
        except PersistenceException as e:
            logger.error("Could not persist history; keeping previous entries: %s", e.message)

        return result

    def clear_history(self) -> None:
        self.store.clear()
        self.state.history = []
