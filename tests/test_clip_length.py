import pytest

from alongline.core.geo import distance
from alongline.geometry.clip import clip_line
from alongline.geometry.length import line_length

from samples import DC_COORDS


def test_clip_keeps_prefix_and_appends_closest_point():
    coords = [(0, 0), (1, 0), (2, 0), (3, 0)]

    # Closest point on segment 1: keep vertices 0..1, then the point itself.
    clipped = clip_line(coords, 1, (1.5, 0))

    assert clipped == [(0.0, 0.0), (1.0, 0.0), (1.5, 0.0)]
    # Length is always segment index + 2.
    assert len(clipped) == 1 + 2
    # The input list is left untouched.
    assert coords == [(0, 0), (1, 0), (2, 0), (3, 0)]


def test_clip_on_first_segment():
    # Only the first vertex survives before the closest point.
    assert clip_line([(0, 0), (1, 0)], 0, (0.25, 0)) == [(0.0, 0.0), (0.25, 0.0)]


def test_clip_rejects_out_of_range_index():
    # A two-vertex line has a single segment, index 0.
    with pytest.raises(ValueError, match="out of range"):
        clip_line([(0, 0), (1, 0)], 1, (1, 0))


def test_line_length_sums_consecutive_distances():
    # The total is the plain sum of the five DC segment lengths.
    expected = sum(distance(a, b, "kilometers") for a, b in zip(DC_COORDS, DC_COORDS[1:]))
    assert line_length(DC_COORDS, "kilometers") == pytest.approx(expected)
    assert line_length(DC_COORDS, "miles") > 0


def test_line_length_is_zero_for_repeated_vertex():
    # All vertices identical: every segment has zero length.
    assert line_length([(5, 5), (5, 5), (5, 5)], "miles") == 0.0
