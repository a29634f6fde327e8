import json
import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).parent.parent))

FIXED_NOW_MS = 1_700_000_000_000


@pytest.fixture(scope="session", autouse=True)
def setup_test_env(tmp_path_factory):
    """Set up test environment variables before any imports."""
    env_vars = {
        "GEMINI_API_KEY": "test_gemini_key",
        "GEMINI_MODEL": "gemini-3-pro-preview",
        "HISTORY_DIR": str(tmp_path_factory.mktemp("history")),
    }
    for key, value in env_vars.items():
        os.environ[key] = value
    yield
    for key in env_vars.keys():
        os.environ.pop(key, None)


@pytest.fixture
def analysis_payload():
    """A response body matching the analysis schema, without sourcesFound."""
    return {
        "credibilityScore": 72,
        "verdict": "Partially Reliable",
        "summary": "The article reports a real funding decision but overstates its scope.",
        "biasAnalysis": {"level": "Medium", "description": "Loaded language in the headline."},
        "factualAccuracy": {"score": 68, "issues": ["The budget figure is rounded up by 20%."]},
        "clickbaitPotential": {"score": 40, "description": "Sensational headline, measured body."},
        "keyClaims": [
            {"claim": "The city approved $2M for transit.", "isVerified": True, "explanation": "Council minutes confirm it."},
            {"claim": "Fares will be free next year.", "isVerified": False, "explanation": "No source supports this."},
        ],
    }


@pytest.fixture
def grounding_metadata():
    """Two chunks: one web reference without a title, one without a web reference."""
    return {
        "groundingChunks": [
            {"web": {"uri": "https://www.reuters.com/world/transit-funding"}},
            {"retrievedContext": {"uri": "gs://bucket/doc", "title": "Internal doc"}},
        ]
    }


@pytest.fixture
def sample_gemini_response(analysis_payload, grounding_metadata):
    """Sample Gemini generateContent response."""
    return {
        "candidates": [
            {
                "content": {"parts": [{"text": json.dumps(analysis_payload)}], "role": "model"},
                "groundingMetadata": grounding_metadata,
            }
        ]
    }


@pytest.fixture
def make_result(analysis_payload):
    """Factory for AnalysisResult objects."""
    from models import AnalysisResult

    def _make(**overrides):
        payload = {**analysis_payload, **overrides}
        return AnalysisResult.model_validate(payload)

    return _make


@pytest.fixture
def article_text():
    return (
        "The city council approved two million dollars in new transit funding on Monday, "
        "officials said, promising free fares for all riders starting next year."
    )


@pytest.fixture
def history_store(tmp_path):
    from services import HistoryStore, LocalStorage
    return HistoryStore(LocalStorage(tmp_path / "storage"))


@pytest.fixture
def mock_analyzer(make_result):
    return AsyncMock(return_value=make_result())


@pytest.fixture
def shell(history_store, mock_analyzer):
    from services import AppShell
    return AppShell(history_store, analyzer=mock_analyzer, clock=lambda: FIXED_NOW_MS)


@pytest.fixture
def test_client(shell):
    """Create a TestClient for FastAPI app with an isolated shell."""
    import main
    main.app.dependency_overrides[main.get_shell] = lambda: shell
    yield TestClient(main.app)
    main.app.dependency_overrides.clear()


@pytest.fixture
def mock_httpx_client():
    """Mock httpx.AsyncClient for API calls."""
    mock_client = MagicMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client
