import math
import pytest

from views.gauge import build_gauge, render_gauge_svg, score_tone


@pytest.mark.parametrize("score,expected", [
    (100, "good"),
    (80, "good"),
    (79, "warning"),
    (50, "warning"),
    (49, "bad"),
    (0, "bad"),
])
def test_score_tone_thresholds(score, expected):
    assert score_tone(score) == expected


def test_geometry_for_default_size():
    drawing = build_gauge(50)
    assert drawing.size == 120
    assert drawing.radius == pytest.approx(48.0)
    assert drawing.circumference == pytest.approx(2 * math.pi * 48)
    assert drawing.dash_offset == pytest.approx(drawing.circumference / 2)


def test_full_and_empty_arc():
    assert build_gauge(100).dash_offset == pytest.approx(0.0)
    empty = build_gauge(0)
    assert empty.dash_offset == pytest.approx(empty.circumference)


def test_colors_follow_tone():
    assert build_gauge(92).color == "#10b981"
    assert build_gauge(65).color == "#f59e0b"
    assert build_gauge(10).color == "#ef4444"


def test_percent_rounds_half_up():
    assert build_gauge(72.5).percent == 73
    assert build_gauge(72.4).percent == 72


def test_render_svg():
    svg = render_gauge_svg(build_gauge(72, size=160, label="Credibility"))
    assert 'width="160"' in svg
    assert "72%" in svg
    assert 'stroke="#f59e0b"' in svg
    assert "Credibility" in svg
