import pytest

from alongline.core.geo import distance
from alongline.geometry.project import perpendicular_foot, project_point

from samples import DC_COORDS


def test_point_on_vertex_projects_to_that_vertex():
    # Query exactly on vertex 2 of the DC line.
    result = project_point(DC_COORDS[2], DC_COORDS, "miles")

    # The vertex itself is the closest candidate, at zero distance.
    assert result.distance == 0
    assert result.coordinates == tuple(DC_COORDS[2])
    # Segment 1 reaches the vertex first; segment 2's equal start does not replace it.
    assert result.index == 1


def test_perpendicular_foot_beats_vertices():
    # A point just north of the middle of an east-west segment.
    line = [(0, 0), (1, 0)]
    result = project_point((0.5, 0.1), line, "miles")

    # The foot directly below the point wins over both end vertices.
    assert result.index == 0
    assert result.coordinates[0] == pytest.approx(0.5)
    assert result.coordinates[1] == pytest.approx(0.0, abs=1e-9)
    assert result.distance == pytest.approx(distance((0.5, 0.1), (0.5, 0.0)), rel=1e-6)


def test_perpendicular_foot_found_on_the_other_side():
    # The +90 probe points away from the segment, so the -90 probe has to find it.
    foot = perpendicular_foot((0.5, -0.1), (0, 0), (1, 0))

    assert foot is not None
    assert foot[0] == pytest.approx(0.5)
    assert foot[1] == pytest.approx(0.0, abs=1e-9)


def test_no_perpendicular_foot_beyond_segment_ends():
    # The perpendicular through this point crosses the extended line past the segment end.
    assert perpendicular_foot((2.0, 0.1), (0, 0), (1, 0)) is None


def test_index_belongs_to_the_winning_candidate():
    # The best candidate is the foot on segment 0; segment 1 never improves on it,
    # so the index must stay 0 rather than follow the loop to the last segment.
    line = [(0, 0), (1, 0), (1, 1)]
    result = project_point((0.5, -0.1), line, "miles")

    assert result.index == 0
    assert result.coordinates[0] == pytest.approx(0.5)


def test_short_probe_misses_the_foot():
    line = [(0, 0), (2, 0)]

    # With the default 1000-mile probe the foot under the point is found.
    found = project_point((0.8, 0.5), line, "miles")
    assert found.coordinates[0] == pytest.approx(0.8)

    # A 1-mile probe never reaches the segment, so only the vertices compete.
    missed = project_point((0.8, 0.5), line, "miles", probe_distance=1.0)
    assert missed.coordinates == (0.0, 0.0)
    assert missed.index == 0


def test_point_inside_a_segment_falls_back_to_nearest_vertex():
    # The query sits on the segment itself (not on a vertex).
    line = [(0, 0), (2, 0)]

    # The probe starts on the segment, and a crossing at the probe's start does not count.
    assert perpendicular_foot((1, 0), (0, 0), (2, 0)) is None

    # So the nearest vertex wins (the earlier one on a tie), one degree of arc away.
    result = project_point((1, 0), line, "miles")
    assert result.coordinates == (0.0, 0.0)
    assert result.index == 0
    assert result.distance == pytest.approx(distance((1, 0), (0, 0)))
    assert result.distance > 0


def test_project_requires_two_coordinates():
    # A single vertex has no segments to project onto.
    with pytest.raises(ValueError):
        project_point((0, 0), [(0, 0)], "miles")
