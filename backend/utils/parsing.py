import json
import re
from typing import Any, Optional, Dict


def extract_json_block(text: str) -> Optional[Dict[str, Any]]:
    """Extract the first balanced JSON object from text."""
    if not text:
        return None

    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    for i in range(start, len(text)):
        ch = text[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                candidate = text[start : i + 1]
                try:
                    return json.loads(candidate)
                except json.JSONDecodeError:
                    try:
                        cleaned = re.sub(r"[\x00-\x1f]", "", candidate)
                        return json.loads(cleaned)
                    except json.JSONDecodeError:
                        return None
    return None


def parse_json_payload(text: str) -> Optional[Dict[str, Any]]:
    """Parse a model payload as a JSON object, tolerating fences or surrounding prose."""
    if not text:
        return None
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        return extract_json_block(text)
    return parsed if isinstance(parsed, dict) else None
