from typing import Dict, Any, List

from pydantic import ValidationError

from config import logger, LLM_CONFIG
from exceptions import AnalysisException
from models import AnalysisResult
from prompts import ANALYSIS_PROMPT, RESPONSE_SCHEMA, SEARCH_TOOLS
from utils.parsing import parse_json_payload
from .llm import call_gemini


def extract_grounding_sources(grounding_metadata: Dict[str, Any]) -> List[Dict[str, str]]:
    """Turn Gemini grounding chunks into {title, url} links. Chunks without a web reference are skipped."""
    sources = []
    for chunk in (grounding_metadata or {}).get("groundingChunks") or []:
        web = chunk.get("web") if isinstance(chunk, dict) else None
        if not web or not isinstance(web, dict):
            continue
        sources.append({
            "title": web.get("title") or LLM_CONFIG.SOURCE_FALLBACK_TITLE,
            "url": web.get("uri", ""),
        })
    return sources


async def analyze_news(content: str) -> AnalysisResult:
    """
    Assess the credibility of a news article or claim with a single grounded Gemini call.
    Args:
        content: The raw text pasted by the user
    Returns:
        The parsed AnalysisResult with sourcesFound taken from grounding metadata
    Raises:
        AnalysisException: on any transport, parse or schema failure. Nothing is retried.
    """
    prompt = ANALYSIS_PROMPT.format(content=content)
    res = await call_gemini(prompt, tools=SEARCH_TOOLS, response_schema=RESPONSE_SCHEMA)

    parsed = parse_json_payload(res.get("text", ""))
    if parsed is None:
        logger.error("Failed to parse analysis JSON from Gemini response: %s", res.get("text", ""))
        raise AnalysisException("Response was not a JSON object", stage="parse")

    sources = extract_grounding_sources(res.get("grounding_metadata", {}))
    try:
        result = AnalysisResult.model_validate({**parsed, "sourcesFound": sources})
    except ValidationError as e:
        logger.error("Gemini response did not match the analysis schema: %s", e)
        raise AnalysisException(f"Schema mismatch ({e.error_count()} errors)", stage="schema")

    logger.info(
        "Analysis complete: score=%s verdict=%s sources=%d",
        result.credibility_score, result.verdict, len(result.sources_found)
    )
    return result
