from .parsing import extract_json_block, parse_json_payload
from .validation import InputValidator

__all__ = [
    "extract_json_block",
    "parse_json_payload",
    "InputValidator",
]
