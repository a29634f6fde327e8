from pydantic import BaseModel


class AnalyzeRequest(BaseModel):
    """Request body for /api/analyze."""
    text: str

    model_config = {
        "json_schema_extra": {
            "example": {
                "text": "A new study claims that drinking 10 cups of coffee daily doubles life expectancy."
            }
        }
    }
