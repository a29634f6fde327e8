"""
Server-rendered single page: input form, analysis result and recent scans.
"""

from datetime import datetime
from html import escape
from typing import List, Optional

from models import ScanHistoryEntry
from utils.validation import InputValidator
from .analysis_view import AnalysisPresentation, build_analysis_view
from .gauge import render_gauge_svg, score_tone

CSS = """
<style>
* { box-sizing: border-box; margin: 0; padding: 0; }
body { font-family: Inter, system-ui, sans-serif; background: #f8fafc; color: #0f172a; }
header { background: #fff; border-bottom: 1px solid #e2e8f0; }
.wrap { max-width: 1100px; margin: 0 auto; padding: 0 16px; }
header .wrap { height: 64px; display: flex; align-items: center; justify-content: space-between; }
header h1 { font-size: 20px; } header h1 span { color: #4f46e5; }
main .wrap { display: grid; grid-template-columns: 2fr 1fr; gap: 32px; padding-top: 40px; }
.panel { background: #fff; border: 1px solid #e2e8f0; border-radius: 16px; padding: 24px; margin-bottom: 24px; }
textarea { width: 100%; height: 256px; padding: 20px; border: 1px solid #e2e8f0; border-radius: 12px; font: inherit; resize: none; }
.count { text-align: right; font-size: 12px; color: #94a3b8; margin: 4px 0 16px; }
button.primary { width: 100%; padding: 16px; border: 0; border-radius: 12px; background: #4f46e5; color: #fff; font-weight: 700; cursor: pointer; }
button.primary:disabled { background: #94a3b8; cursor: not-allowed; }
button.link { border: 0; background: none; color: #94a3b8; font-size: 12px; font-weight: 600; cursor: pointer; }
.error { margin-bottom: 24px; padding: 16px; background: #fef2f2; border: 1px solid #fee2e2; color: #dc2626; border-radius: 12px; font-size: 14px; }
.analyzing { text-align: center; padding: 48px; color: #475569; }
.result-head { display: flex; gap: 32px; align-items: center; margin-bottom: 32px; }
.gauge { display: flex; flex-direction: column; align-items: center; }
.gauge-dial { position: relative; }
.gauge-value { position: absolute; inset: 0; display: flex; align-items: center; justify-content: center; font-weight: 700; font-size: 20px; }
.gauge-label { margin-top: 8px; font-size: 13px; color: #64748b; text-transform: uppercase; letter-spacing: .05em; }
.badge { display: inline-block; padding: 6px 16px; border-radius: 999px; font-size: 14px; font-weight: 600; border: 1px solid; }
.badge.reliable { color: #059669; background: #ecfdf5; border-color: #a7f3d0; }
.badge.partial { color: #d97706; background: #fffbeb; border-color: #fde68a; }
.badge.unreliable { color: #ea580c; background: #fff7ed; border-color: #fed7aa; }
.badge.fake { color: #dc2626; background: #fef2f2; border-color: #fecaca; }
.badge.neutral { color: #475569; background: #f8fafc; border-color: #e2e8f0; }
.cards { display: grid; grid-template-columns: repeat(3, 1fr); gap: 24px; margin-bottom: 32px; }
.card { padding: 16px; border-radius: 12px; background: #f8fafc; border: 1px solid #f1f5f9; font-size: 14px; color: #475569; }
.card h4 { color: #1e293b; margin-bottom: 8px; }
.tag { display: inline-block; font-size: 11px; font-weight: 700; text-transform: uppercase; padding: 2px 8px; border-radius: 4px; margin-bottom: 8px; }
.tag.good { background: #d1fae5; color: #047857; } .tag.warning { background: #fef3c7; color: #b45309; } .tag.bad { background: #fee2e2; color: #b91c1c; }
.bar { width: 100%; height: 8px; background: #e2e8f0; border-radius: 999px; margin-bottom: 12px; }
.bar div { height: 8px; border-radius: 999px; }
.claim { display: flex; gap: 16px; padding: 16px; border: 1px solid #f1f5f9; border-radius: 8px; margin-top: 12px; font-size: 14px; }
.claim .verified { color: #10b981; } .claim .unverified { color: #ef4444; }
.sources { display: grid; grid-template-columns: 1fr 1fr; gap: 12px; }
.sources a { padding: 12px; border: 1px solid #f1f5f9; border-radius: 8px; color: #334155; text-decoration: none; font-size: 14px; overflow: hidden; text-overflow: ellipsis; white-space: nowrap; }
.history-item { display: flex; gap: 12px; margin-top: 16px; }
.dot { width: 8px; height: 8px; border-radius: 999px; margin-top: 6px; flex-shrink: 0; }
.dot.good { background: #10b981; } .dot.warning { background: #f59e0b; } .dot.bad { background: #ef4444; }
.meta { font-size: 10px; color: #94a3b8; text-transform: uppercase; font-weight: 700; }
.empty { text-align: center; padding: 32px 0; color: #94a3b8; font-size: 14px; }
.tip { margin-top: 12px; padding: 12px; background: #eef2ff; border-radius: 12px; font-size: 12px; font-weight: 500; }
.indicator { display: flex; align-items: center; gap: 12px; margin-top: 16px; font-size: 14px; color: #475569; font-weight: 500; }
.swatch { width: 32px; height: 32px; border-radius: 8px; display: flex; align-items: center; justify-content: center; }
footer { text-align: center; color: #94a3b8; font-size: 13px; padding: 32px 0; border-top: 1px solid #e2e8f0; margin-top: 48px; background: #fff; }
</style>
"""

SCRIPT = """
<script>
const form = document.getElementById('analyze-form');
const input = document.getElementById('text');
const counter = document.getElementById('count');
const button = document.getElementById('analyze-btn');
input.addEventListener('input', () => {
  counter.textContent = input.value.length + ' characters';
  button.disabled = !input.value.trim();
});
form.addEventListener('submit', () => {
  button.disabled = true;
  button.textContent = 'Analyzing with Gemini...';
});
</script>
"""


TIP = "Check for provocative language and missing author details."

TRUST_INDICATORS = [
    ("Neutral Language", "#dbeafe", "#2563eb"),
    ("Source Citation", "#d1fae5", "#059669"),
    ("No Emotional Triggers", "#f3e8ff", "#9333ea"),
]


def render_trust_indicators() -> str:
    rows = "".join(
        f'<div class="indicator"><span class="swatch" style="background:{bg};color:{fg}">&#9679;</span>'
        f'{escape(label)}</div>'
        for label, bg, fg in TRUST_INDICATORS
    )
    return f"""
    <section class="panel trust">
      <h3>Trust Indicators</h3>{rows}
    </section>"""


def format_history_date(timestamp: int) -> str:
    return datetime.fromtimestamp(timestamp / 1000).strftime("%b %d, %Y")


def render_analysis(view: AnalysisPresentation) -> str:
    bias = view["bias"]
    accuracy = view["accuracy"]
    clickbait = view["clickbait"]

    claims_html = "".join(
        f"""
      <div class="claim">
        <div class="{c['indicator']}">{'&#10004;' if c['verified'] else '&#10008;'}</div>
        <div><strong>{escape(c['claim'])}</strong><p>{escape(c['explanation'])}</p></div>
      </div>"""
        for c in view["claims"]
    )

    sources_html = ""
    if view["sources"]:
        links = "".join(
            f'<a href="{escape(s["url"])}" target="_blank" rel="noopener noreferrer">{escape(s["title"])}</a>'
            for s in view["sources"]
        )
        sources_html = f"""
  <section class="panel">
    <h3>Grounding Sources</h3>
    <div class="sources">{links}</div>
  </section>"""

    return f"""
  <section class="panel result">
    <div class="result-head">
      {render_gauge_svg(view["gauge"])}
      <div>
        <span class="badge {view['verdict']['style']}">{escape(view['verdict']['label'])}</span>
        <h2>Analysis Summary</h2>
        <p>{escape(view['summary'])}</p>
      </div>
    </div>
    <div class="cards">
      <div class="card">
        <h4>Bias Analysis</h4>
        <span class="tag {bias['tone']}">{escape(bias['level'])} Bias</span>
        <p>{escape(bias['description'])}</p>
      </div>
      <div class="card">
        <h4>Accuracy</h4>
        <div class="bar"><div style="width:{accuracy['bar_width']:g}%;background:#10b981"></div></div>
        <p>{escape(accuracy['text'])}</p>
      </div>
      <div class="card">
        <h4>Clickbait Risk</h4>
        <div class="bar"><div style="width:{clickbait['bar_width']:g}%;background:#f97316"></div></div>
        <p>{escape(clickbait['description'])}</p>
      </div>
    </div>
    <h3>Key Claims Verification</h3>
    {claims_html}
  </section>{sources_html}"""


def render_history(history: List[ScanHistoryEntry]) -> str:
    if not history:
        items = '<div class="empty">No recent activity</div>'
        clear = ""
    else:
        items = "".join(
            f"""
      <div class="history-item">
        <div class="dot {score_tone(item.score)}"></div>
        <div>
          <p><strong>{escape(item.title)}</strong></p>
          <span class="meta">{escape(item.verdict)} &middot; {format_history_date(item.timestamp)}</span>
        </div>
      </div>"""
            for item in history
        )
        clear = (
            '<form method="post" action="/history/clear">'
            '<button class="link" type="submit">Clear All</button></form>'
        )

    return f"""
  <section class="panel history">
    <div style="display:flex;justify-content:space-between;align-items:center">
      <h3>Recent Scans</h3>{clear}
    </div>{items}
  </section>"""


def render_page(
    input_text: str,
    is_analyzing: bool,
    error: Optional[str],
    view: Optional[AnalysisPresentation],
    history: List[ScanHistoryEntry],
) -> str:
    disabled = " disabled" if is_analyzing or not InputValidator.is_submittable(input_text) else ""
    button_text = "Analyzing with Gemini..." if is_analyzing else "Start Deep Analysis"
    error_html = f'<div class="error" role="alert">{escape(error)}</div>' if error else ""
    analyzing_html = (
        '<div class="analyzing"><h3>Checking claims and sources...</h3>'
        '<p>Gemini is searching the web to verify facts and analyze linguistic bias patterns.</p></div>'
        if is_analyzing else ""
    )
    result_html = render_analysis(view) if view else ""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Veritas AI</title>
{CSS}
</head>
<body>
<header><div class="wrap"><h1>Veritas <span>AI</span></h1><a href="/">New Scan</a></div></header>
<main><div class="wrap">
  <div>
    <section class="panel">
      <h2>Analyze News Content</h2>
      <p>Paste an article, text snippet, or claim to evaluate its credibility.</p>
      <form id="analyze-form" method="post" action="/analyze">
        <textarea id="text" name="text" placeholder="Paste article text here...">{escape(input_text)}</textarea>
        <div class="count" id="count">{len(input_text)} characters</div>
        {error_html}
        <button class="primary" id="analyze-btn" type="submit"{disabled}>{button_text}</button>
      </form>
    </section>
    {analyzing_html}
    {result_html}
  </div>
  <div>
    {render_history(history)}
    <section class="panel">
      <h3>Did you know?</h3>
      <p>Fake news spreads 6x faster than true news on social media. Always verify multiple sources before sharing.</p>
      <p class="tip">&#128161; {escape(TIP)}</p>
    </section>
    {render_trust_indicators()}
  </div>
</div></main>
<footer>
  <p>Powered by Google Gemini &amp; Search Grounding.</p>
  <p>Veritas AI analysis is for informational purposes only and should not be used as the sole basis for critical decisions.</p>
</footer>
{SCRIPT}
</body>
</html>"""


def render_state(state) -> str:
    """Render the page for an AppState."""
    view = build_analysis_view(state.result) if state.result else None
    return render_page(state.input_text, state.is_analyzing, state.error, view, state.history)
