from typing import Dict, Any, List, Optional
import httpx

from config import settings, logger, LLM_CONFIG
from exceptions import AnalysisException


async def call_gemini(
    prompt: str,
    tools: Optional[List[Dict[str, Any]]] = None,
    response_schema: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Single generateContent call. Returns the raw payload, joined text parts and grounding metadata."""
    if not settings.GEMINI_API_KEY:
        logger.critical("GEMINI_API_KEY not configured.")
        raise AnalysisException("API key not configured", stage="config")

    headers = {"Content-Type": "application/json", "x-goog-api-key": settings.GEMINI_API_KEY}
    body: Dict[str, Any] = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
    }
    if tools:
        body["tools"] = tools
    if response_schema:
        body["generationConfig"] = {
            "responseMimeType": "application/json",
            "responseSchema": response_schema,
        }

    try:
        async with httpx.AsyncClient(timeout=LLM_CONFIG.REQUEST_TIMEOUT) as client:
            response = await client.post(settings.GEMINI_ENDPOINT, headers=headers, json=body)
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPStatusError as e:
        logger.error("Gemini HTTP error %s for URL %s: %s", e.response.status_code, e.request.url, e.response.text)
        raise AnalysisException(f"HTTP {e.response.status_code}", stage="http")
    except httpx.RequestError as e:
        logger.error("Gemini request error: %s", str(e))
        raise AnalysisException(f"Request failed: {str(e)}", stage="transport")
    except ValueError as e:
        logger.error("Gemini returned a non-JSON body: %s", e)
        raise AnalysisException("Response body was not JSON", stage="parse")

    text = ""
    grounding_metadata: Dict[str, Any] = {}
    if isinstance(data, dict):
        if candidates := data.get("candidates", []):
            candidate = candidates[0] or {}
            parts = (candidate.get("content") or {}).get("parts") or []
            text = "".join(part.get("text") or "" for part in parts if isinstance(part, dict))
            grounding_metadata = candidate.get("groundingMetadata") or {}
        elif feedback := data.get("promptFeedback"):
            logger.warning("Gemini returned no candidates: %s", feedback)

    return {"raw": data, "text": text, "grounding_metadata": grounding_metadata}
