from typing import List, Optional, TypedDict

from config import GAUGE_CONFIG, VERDICT_STYLES, NEUTRAL_VERDICT_STYLE, BIAS_TONES
from models import AnalysisResult
from .gauge import GaugeDrawing, build_gauge


class VerdictBadge(TypedDict):
    label: str
    style: str

class BiasCard(TypedDict):
    level: str
    tone: str
    description: str

class AccuracyCard(TypedDict):
    score: float
    bar_width: float
    issues: List[str]
    issue_count: int
    text: str

class ClickbaitCard(TypedDict):
    score: float
    bar_width: float
    description: str

class ClaimRow(TypedDict):
    claim: str
    explanation: str
    verified: bool
    indicator: str

class SourceRow(TypedDict):
    title: str
    url: str

class AnalysisPresentation(TypedDict):
    gauge: GaugeDrawing
    verdict: VerdictBadge
    summary: str
    bias: BiasCard
    accuracy: AccuracyCard
    clickbait: ClickbaitCard
    claims: List[ClaimRow]
    sources: Optional[List[SourceRow]]


def verdict_style(verdict: str) -> str:
    return VERDICT_STYLES.get(verdict, NEUTRAL_VERDICT_STYLE)


def bias_tone(level: str) -> str:
    return BIAS_TONES.get(level, "bad")


def build_analysis_view(result: AnalysisResult) -> AnalysisPresentation:
    issues = list(result.factual_accuracy.issues)
    if issues:
        accuracy_text = f"{len(issues)} potential inaccuracies detected."
    else:
        accuracy_text = "No major factual errors found."

    sources = [{"title": s.title, "url": s.url} for s in result.sources_found]

    return {
        "gauge": build_gauge(result.credibility_score, size=GAUGE_CONFIG.RESULT_SIZE, label="Credibility"),
        "verdict": {"label": result.verdict, "style": verdict_style(result.verdict)},
        "summary": result.summary,
        "bias": {
            "level": result.bias_analysis.level,
            "tone": bias_tone(result.bias_analysis.level),
            "description": result.bias_analysis.description,
        },
        "accuracy": {
            "score": result.factual_accuracy.score,
            "bar_width": result.factual_accuracy.score,
            "issues": issues,
            "issue_count": len(issues),
            "text": accuracy_text,
        },
        "clickbait": {
            "score": result.clickbait_potential.score,
            "bar_width": result.clickbait_potential.score,
            "description": result.clickbait_potential.description,
        },
        "claims": [
            {
                "claim": c.claim,
                "explanation": c.explanation,
                "verified": c.is_verified,
                "indicator": "verified" if c.is_verified else "unverified",
            }
            for c in result.key_claims
        ],
        "sources": sources or None,
    }
