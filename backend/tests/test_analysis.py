import json
import pytest
from unittest.mock import AsyncMock, patch

from exceptions import AnalysisException
from services.analysis import extract_grounding_sources


class TestExtractGroundingSources:

    def test_skips_chunks_without_web_reference(self, grounding_metadata):
        """One web chunk and one non-web chunk yield exactly one source."""
        sources = extract_grounding_sources(grounding_metadata)
        assert sources == [
            {"title": "External Source", "url": "https://www.reuters.com/world/transit-funding"}
        ]

    def test_uses_citation_title(self):
        metadata = {"groundingChunks": [{"web": {"uri": "https://apnews.com/x", "title": "apnews.com"}}]}
        assert extract_grounding_sources(metadata) == [{"title": "apnews.com", "url": "https://apnews.com/x"}]

    def test_no_metadata(self):
        assert extract_grounding_sources({}) == []
        assert extract_grounding_sources(None) == []
        assert extract_grounding_sources({"groundingChunks": None}) == []

    def test_skips_malformed_web_entries(self):
        metadata = {"groundingChunks": [{"web": "https://example.com"}, {"web": {}}, "chunk"]}
        assert extract_grounding_sources(metadata) == []


@pytest.mark.asyncio
class TestAnalyzeNews:

    async def test_merges_payload_and_sources(self, analysis_payload, grounding_metadata, article_text):
        from services.analysis import analyze_news

        gemini = AsyncMock(return_value={"text": json.dumps(analysis_payload), "grounding_metadata": grounding_metadata})
        with patch("services.analysis.call_gemini", gemini):
            result = await analyze_news(article_text)

        assert result.credibility_score == 72
        assert result.verdict == "Partially Reliable"
        assert result.bias_analysis.level == "Medium"
        assert result.factual_accuracy.issues == ["The budget figure is rounded up by 20%."]
        assert [c.is_verified for c in result.key_claims] == [True, False]
        assert len(result.sources_found) == 1
        assert result.sources_found[0].title == "External Source"

        prompt = gemini.call_args.args[0]
        assert article_text in prompt
        assert gemini.call_args.kwargs["tools"] == [{"google_search": {}}]

    async def test_grounding_replaces_model_sources(self, analysis_payload):
        from services.analysis import analyze_news

        payload = {**analysis_payload, "sourcesFound": [{"title": "made up", "url": "https://example.com"}]}
        gemini = AsyncMock(return_value={"text": json.dumps(payload), "grounding_metadata": {}})
        with patch("services.analysis.call_gemini", gemini):
            result = await analyze_news("x" * 60)

        assert result.sources_found == []

    async def test_fenced_json_is_accepted(self, analysis_payload):
        from services.analysis import analyze_news

        text = "```json\n" + json.dumps(analysis_payload) + "\n```"
        with patch("services.analysis.call_gemini", AsyncMock(return_value={"text": text, "grounding_metadata": {}})):
            result = await analyze_news("x" * 60)

        assert result.summary == analysis_payload["summary"]

    async def test_unparseable_response(self):
        from services.analysis import analyze_news

        with patch("services.analysis.call_gemini", AsyncMock(return_value={"text": "I cannot help with that.", "grounding_metadata": {}})):
            with pytest.raises(AnalysisException) as exc_info:
                await analyze_news("x" * 60)

        assert exc_info.value.stage == "parse"

    async def test_missing_required_field(self, analysis_payload):
        from services.analysis import analyze_news

        payload = dict(analysis_payload)
        del payload["keyClaims"]
        with patch("services.analysis.call_gemini", AsyncMock(return_value={"text": json.dumps(payload), "grounding_metadata": {}})):
            with pytest.raises(AnalysisException) as exc_info:
                await analyze_news("x" * 60)

        assert exc_info.value.stage == "schema"

    async def test_out_of_range_score(self, analysis_payload):
        from services.analysis import analyze_news

        payload = {**analysis_payload, "credibilityScore": 140}
        with patch("services.analysis.call_gemini", AsyncMock(return_value={"text": json.dumps(payload), "grounding_metadata": {}})):
            with pytest.raises(AnalysisException):
                await analyze_news("x" * 60)

    async def test_transport_failure_propagates(self):
        from services.analysis import analyze_news

        with patch("services.analysis.call_gemini", AsyncMock(side_effect=AnalysisException("HTTP 503", stage="http"))):
            with pytest.raises(AnalysisException) as exc_info:
                await analyze_news("x" * 60)

        assert exc_info.value.stage == "http"
