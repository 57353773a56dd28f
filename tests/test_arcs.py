from __future__ import annotations

import math

import numpy as np
import pytest

from svgpath import Path
from svgpath.arcs import (
    FULL_TURN,
    circle_point,
    decompose_arc,
    decompose_span,
    full_circle,
    normalize_span,
    partial_circle,
    segment_count,
)

from tests.helpers import arc_endpoints, split_commands


@pytest.mark.parametrize(
    ("span", "expected"),
    [
        (0.5, 1),
        (math.pi - 1e-9, 1),
        (math.pi, 2),
        (1.5 * math.pi, 2),
        (FULL_TURN, 3),
        (-math.pi, 2),
        (-0.25, 1),
    ],
)
def test_segment_count(span, expected):
    assert segment_count(span) == expected


@pytest.mark.parametrize("span", [0.1, 1.0, math.pi, 4.0, 5.5, FULL_TURN, -0.1, -math.pi, -5.0, -FULL_TURN])
def test_segment_count_law(span):
    segments = decompose_arc(0.0, 0.0, 5.0, 0.0, span)
    if abs(span) < math.pi:
        assert len(segments) == 1
    else:
        assert len(segments) >= 2


@pytest.mark.parametrize("span", [0.4, math.pi, 4.5, FULL_TURN, -2.0, -math.pi, -FULL_TURN])
def test_no_segment_reaches_half_turn(span):
    for segment in decompose_arc(1.0, 2.0, 3.0, 0.7, 0.7 + span):
        assert abs(segment.span) <= math.pi + 1e-9


@pytest.mark.parametrize("span", [1.0, math.pi, 5.0, FULL_TURN, -4.0])
def test_endpoint_continuity(span):
    cx, cy, radius, start = 2.0, -3.0, 4.0, 0.3
    segments = decompose_arc(cx, cy, radius, start, start + span)
    for current, following in zip(segments, segments[1:]):
        assert np.allclose(current.end, following.start)
        assert current.end_angle == pytest.approx(following.start_angle)
    assert np.allclose(segments[0].start, circle_point(cx, cy, radius, start))
    assert np.allclose(segments[-1].end, circle_point(cx, cy, radius, start + span))


def test_segments_share_center_and_radius():
    segments = decompose_arc(1.0, 2.0, 3.0, 0.0, 5.0)
    assert {segment.center for segment in segments} == {(1.0, 2.0)}
    assert {segment.radius for segment in segments} == {3.0}


def test_sweep_follows_direction():
    assert all(segment.sweep for segment in decompose_arc(0, 0, 1, 0, 4.0))
    assert not any(segment.sweep for segment in decompose_arc(0, 0, 1, 0, -4.0))


def test_equal_angles_yield_no_segments():
    assert decompose_arc(0.0, 0.0, 5.0, 1.2, 1.2) == []


def test_normalize_span():
    assert normalize_span(1.0) == 1.0
    assert normalize_span(FULL_TURN) == FULL_TURN
    assert normalize_span(3 * math.pi) == pytest.approx(math.pi)
    assert normalize_span(-5 * math.pi) == pytest.approx(-math.pi)
    assert normalize_span(2 * FULL_TURN) == FULL_TURN
    assert normalize_span(-2 * FULL_TURN) == -FULL_TURN


def test_spans_beyond_full_turn_end_at_end_angle():
    segments = decompose_arc(0.0, 0.0, 5.0, 0.0, 3 * math.pi)
    assert 1 <= len(segments) <= 2
    assert np.allclose(segments[-1].end, (-5.0, 0.0))


def test_decompose_span_matches_decompose_arc():
    assert decompose_span(0.0, 0.0, 2.0, 0.5, 2.0) == decompose_arc(0.0, 0.0, 2.0, 0.5, 2.5)


def test_quarter_arc_renders_exactly():
    path = Path(precision=6).partial_circle(0, 0, 10, 0.0, math.pi / 2)
    assert path.render() == "M 10 0 A 10 10 0 0 1 0 10"


def test_negative_quarter_arc_uses_zero_sweep():
    path = Path(precision=6).partial_circle(0, 0, 10, 0.0, -math.pi / 2)
    assert path.render() == "M 10 0 A 10 10 0 0 0 0 -10"


def test_full_circle_traces_back_to_start():
    data = Path().circle(0, 0, 5).render()
    commands = split_commands(data)
    assert commands[0] == ("M", [5.0, 0.0])
    arcs = [args for letter, args in commands if letter == "A"]
    assert len(arcs) >= 2
    for rx, ry, rotation, large_arc, sweep, _, _ in arcs:
        assert (rx, ry, rotation) == (5.0, 5.0, 0.0)
        assert large_arc == 0
        assert sweep == 1
    assert np.allclose(arc_endpoints(data)[-1], (5.0, 0.0))


def test_full_circle_counterclockwise():
    data = Path().circle(3, 4, 2, start_angle=math.pi / 2, clockwise=False).render()
    arcs = [args for letter, args in split_commands(data) if letter == "A"]
    assert len(arcs) >= 2
    assert all(args[4] == 0 for args in arcs)
    assert np.allclose(arc_endpoints(data)[-1], circle_point(3, 4, 2, math.pi / 2))


def test_endpoints_lie_on_circle():
    data = Path().partial_circle(1, -1, 3, 0.2, 5.9).render()
    points = arc_endpoints(data)
    distances = np.hypot(points[:, 0] - 1, points[:, 1] + 1)
    assert np.allclose(distances, 3.0)


def test_move_false_continues_current_subpath():
    path = Path().move_to(0, 0).partial_circle(0, 0, 1, 0.0, 1.0, move=False)
    letters = [letter for letter, _ in split_commands(path.render())]
    assert letters == ["M", "A"]


def test_zero_radius_degenerates_silently():
    path = Path().partial_circle(3, 4, 0, 0.0, math.pi)
    assert path.render() == "M 3 4 A 0 0 0 0 1 3 4 A 0 0 0 0 1 3 4"


def test_equal_angles_emit_only_move():
    path = Path().partial_circle(0, 0, 5, 1.0, 1.0)
    assert len(path) == 1
    assert path.render().startswith("M ")


def test_module_helpers_return_given_path():
    path = Path()
    assert partial_circle(path, 0, 0, 1, 0.0, 2.0) is path
    assert full_circle(path, 0, 0, 1) is path


def test_non_finite_angle_does_not_raise():
    data = Path().partial_circle(0, 0, 5, 0.0, float("nan")).render()
    assert "nan" in data


def test_span_just_short_of_two_turns_keeps_its_end_point():
    span = 2 * FULL_TURN - 5e-5
    segments = decompose_arc(0.0, 0.0, 10000.0, 0.0, span)
    assert normalize_span(span) == pytest.approx(FULL_TURN - 5e-5)
    assert np.allclose(segments[-1].end, circle_point(0.0, 0.0, 10000.0, span))
    assert not np.allclose(segments[-1].end, segments[0].start)
