from config import INPUT_CONFIG, MESSAGES
from exceptions import ValidationException


class InputValidator:

    @staticmethod
    def validate_article(text: str) -> str:
        """Return the text unchanged if it is long enough to analyze."""
        if not text or len(text.strip()) < INPUT_CONFIG.MIN_LENGTH:
            raise ValidationException("text", MESSAGES.INPUT_TOO_SHORT)
        return text

    @staticmethod
    def is_submittable(text: str) -> bool:
        return bool(text and text.strip())
