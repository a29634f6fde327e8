from .gauge import GaugeDrawing, build_gauge, render_gauge_svg, score_tone
from .analysis_view import AnalysisPresentation, build_analysis_view, verdict_style, bias_tone
from .page import render_page, render_state

__all__ = [
    "GaugeDrawing",
    "build_gauge",
    "render_gauge_svg",
    "score_tone",
    "AnalysisPresentation",
    "build_analysis_view",
    "verdict_style",
    "bias_tone",
    "render_page",
    "render_state",
]
