from .llm import call_gemini
from .analysis import analyze_news, extract_grounding_sources
from .storage import LocalStorage, HistoryStore
from .shell import AppShell, AppState

__all__ = [
    "call_gemini",
    "analyze_news",
    "extract_grounding_sources",
    "LocalStorage",
    "HistoryStore",
    "AppShell",
    "AppState",
]
