from typing import Optional, Dict, Any

class VeritasException(Exception):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }

class ValidationException(VeritasException):
    def __init__(self, field: str, reason: str):
        super().__init__(
            reason,
            {"field": field, "reason": reason}
        )

class AnalysisException(VeritasException):
    """Any failure of the Gemini call or of its response.

    ``stage`` is one of config, transport, http, parse, schema.
    """
    def __init__(self, reason: str, stage: str = "unknown"):
        super().__init__(
            f"Analysis failed: {reason}",
            {"reason": reason, "stage": stage}
        )

    @property
    def stage(self) -> str:
        return self.details["stage"]

class PersistenceException(VeritasException):
    def __init__(self, key: str, reason: str):
        super().__init__(
            f"Stored value for {key} is unusable: {reason}",
            {"key": key, "reason": reason}
        )

class AnalysisInProgressException(VeritasException):
    def __init__(self):
        super().__init__("An analysis is already in progress")
