ANALYSIS_PROMPT = """Analyze the following news content for credibility, bias, and factual accuracy.
Use web search to check the key claims against current, reputable reporting.
Content to analyze: "{content}"
"""

# Gemini responseSchema (OpenAPI subset). sourcesFound is derived from grounding metadata.
RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "credibilityScore": {"type": "NUMBER", "description": "A score from 0-100 where 100 is highly credible."},
        "verdict": {"type": "STRING", "description": "One of: Reliable, Partially Reliable, Unreliable, Likely Fake"},
        "summary": {"type": "STRING", "description": "A concise summary of the analysis."},
        "biasAnalysis": {
            "type": "OBJECT",
            "properties": {
                "level": {"type": "STRING", "description": "Low, Medium, or High"},
                "description": {"type": "STRING"}
            },
            "required": ["level", "description"]
        },
        "factualAccuracy": {
            "type": "OBJECT",
            "properties": {
                "score": {"type": "NUMBER", "description": "0-100 score for facts."},
                "issues": {"type": "ARRAY", "items": {"type": "STRING"}}
            },
            "required": ["score", "issues"]
        },
        "clickbaitPotential": {
            "type": "OBJECT",
            "properties": {
                "score": {"type": "NUMBER", "description": "0-100 score for clickbait nature."},
                "description": {"type": "STRING"}
            },
            "required": ["score", "description"]
        },
        "keyClaims": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "claim": {"type": "STRING"},
                    "isVerified": {"type": "BOOLEAN"},
                    "explanation": {"type": "STRING"}
                },
                "required": ["claim", "isVerified", "explanation"]
            }
        }
    },
    "required": [
        "credibilityScore", "verdict", "summary", "biasAnalysis",
        "factualAccuracy", "clickbaitPotential", "keyClaims"
    ]
}

SEARCH_TOOLS = [{"google_search": {}}]
