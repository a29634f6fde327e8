import html
import math
from dataclasses import dataclass

from config import GAUGE_CONFIG


@dataclass(frozen=True)
class GaugeDrawing:
    size: int
    center: float
    radius: float
    stroke_width: int
    circumference: float
    dash_offset: float
    tone: str
    color: str
    percent: int
    label: str


def score_tone(score: float) -> str:
    return GAUGE_CONFIG.tone_for(score)


def build_gauge(score: float, size: int = GAUGE_CONFIG.DEFAULT_SIZE, label: str = "Credibility") -> GaugeDrawing:
    """Circular progress arc for a 0-100 score; the filled fraction is score/100."""
    radius = size / 2.5
    circumference = 2 * math.pi * radius
    tone = score_tone(score)
    return GaugeDrawing(
        size=size,
        center=size / 2,
        radius=radius,
        stroke_width=GAUGE_CONFIG.STROKE_WIDTH,
        circumference=circumference,
        dash_offset=circumference - (score / 100) * circumference,
        tone=tone,
        color=GAUGE_CONFIG.COLORS[tone],
        percent=math.floor(score + 0.5),
        label=label,
    )


def render_gauge_svg(drawing: GaugeDrawing) -> str:
    d = drawing
    return f"""
<div class="gauge" style="width:{d.size}px">
  <div class="gauge-dial" style="width:{d.size}px;height:{d.size}px">
    <svg width="{d.size}" height="{d.size}" style="transform:rotate(-90deg)">
      <circle stroke="#e2e8f0" stroke-width="{d.stroke_width}" fill="transparent"
              r="{d.radius:.2f}" cx="{d.center:.2f}" cy="{d.center:.2f}"/>
      <circle stroke="{d.color}" stroke-width="{d.stroke_width}" fill="transparent"
              stroke-dasharray="{d.circumference:.2f}" stroke-dashoffset="{d.dash_offset:.2f}"
              stroke-linecap="round" r="{d.radius:.2f}" cx="{d.center:.2f}" cy="{d.center:.2f}"/>
    </svg>
    <div class="gauge-value">{d.percent}%</div>
  </div>
  <span class="gauge-label">{html.escape(d.label)}</span>
</div>"""
