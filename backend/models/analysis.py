from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Wire format is camelCase; attributes stay snake_case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class BiasAnalysis(_CamelModel):
    # Low, Medium or High; wording is not enforced.
    level: str
    description: str


class FactualAccuracy(_CamelModel):
    score: float = Field(..., ge=0, le=100)
    issues: List[str]


class ClickbaitPotential(_CamelModel):
    score: float = Field(..., ge=0, le=100)
    description: str


class KeyClaim(_CamelModel):
    claim: str
    is_verified: bool
    explanation: str


class SourceLink(_CamelModel):
    title: str
    url: str


class AnalysisResult(_CamelModel):
    """Credibility assessment for one piece of content, as produced by Gemini."""
    credibility_score: float = Field(..., ge=0, le=100)
    verdict: str
    summary: str
    bias_analysis: BiasAnalysis
    factual_accuracy: FactualAccuracy
    clickbait_potential: ClickbaitPotential
    key_claims: List[KeyClaim]
    sources_found: List[SourceLink] = []
