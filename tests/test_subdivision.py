import threading

import pytest

from koch.boundary import Boundary
from koch.point import LatticePoint
from koch.subdivision import subdivide
from koch.vector import LatticeVector


def _centroid(points):
    return (sum(p.x for p in points) / len(points), sum(p.y for p in points) / len(points))


def _cross(vector, point):
    d = vector.delta
    return d.x * (point.y - vector.start.y) - d.y * (point.x - vector.start.x)


@pytest.fixture
def boundary():
    b = Boundary()
    b.initialize(800, 600, 30)
    return b


def test_one_pass_quadruples_segments(boundary):
    assert subdivide(boundary) == 12
    assert len(boundary) == 12
    assert boundary.is_closed()


@pytest.mark.parametrize('generations', [1, 2, 3, 4])
def test_growth_law_and_closure(boundary, generations):
    for _ in range(generations):
        subdivide(boundary)

    assert len(boundary) == 3 * 4 ** generations
    assert boundary.is_closed()

    segments = boundary.segments()
    assert len(segments) == 3 * 4 ** generations
    assert segments[-1].end == segments[0].start


def test_start_stays_on_first_child_of_former_start(boundary):
    seed_start = boundary.start_node.line.start
    subdivide(boundary)
    assert boundary.start_node.line.start == seed_start
    assert boundary.current_node is boundary.start_node


def test_original_vertices_are_kept(boundary):
    corners = [line.start for line in boundary.segments()]
    subdivide(boundary)
    starts = [line.start for line in boundary.segments()]
    assert starts[0::4] == corners


def test_bumps_point_outward(boundary):
    seed = boundary.segments()
    centroid = LatticePoint(*_centroid([line.start for line in seed]))

    subdivide(boundary)
    segments = boundary.segments()

    for i, edge in enumerate(seed):
        apex = segments[4 * i + 1].end
        # Apex and centroid lie on opposite sides of the original edge
        assert _cross(edge, apex) * _cross(edge, centroid) < 0


def test_segments_shrink_by_a_third(boundary):
    seed_lengths = [line.length for line in boundary.segments()]
    subdivide(boundary)
    lengths = [line.length for line in boundary.segments()]

    for i, length in enumerate(seed_lengths):
        for child in lengths[4 * i:4 * i + 4]:
            assert child == pytest.approx(length / 3)


def test_uninitialized_boundary_is_rejected():
    with pytest.raises(RuntimeError):
        subdivide(Boundary())


def test_sub_triangular_boundary_is_rejected(boundary):
    a, b = LatticePoint(0, 0), LatticePoint(10, 0)
    boundary.replace([LatticeVector.of(a, b), LatticeVector.of(b, a)])
    with pytest.raises(RuntimeError):
        subdivide(boundary)
    assert len(boundary) == 2


def test_degenerate_edges_are_tolerated(boundary):
    p = LatticePoint(1, 1)
    q = LatticePoint(4, 1)
    boundary.replace([LatticeVector.of(p, q), LatticeVector.of(q, q), LatticeVector.of(q, p)])

    subdivide(boundary)

    assert len(boundary) == 12
    assert boundary.is_closed()
    assert all(line.length == 0 for line in boundary.segments()[4:8])


def _area(segments):
    return abs(sum(s.start.x * s.end.y - s.end.x * s.start.y for s in segments)) / 2


def test_area_grows_every_generation(boundary):
    seed_area = _area(boundary.segments())
    areas = [seed_area]

    for _ in range(5):
        subdivide(boundary)
        areas.append(_area(boundary.segments()))

    # An inward bump anywhere would shrink the enclosed area
    for before, after in zip(areas, areas[1:]):
        assert after > before
    # The limit of the snowflake is 8/5 of the seed triangle
    assert areas[-1] < seed_area * 8 / 5


def test_concurrent_traversal_sees_whole_generations(boundary):
    generations = 6
    valid_lengths = {3 * 4 ** k for k in range(generations + 1)}
    seen = []
    done = threading.Event()

    def reader():
        while not done.is_set():
            seen.append(sum(1 for _ in boundary.traverse()))
        seen.append(sum(1 for _ in boundary.traverse()))

    def writer():
        try:
            for _ in range(generations):
                subdivide(boundary)
        finally:
            done.set()

    threads = [threading.Thread(target=reader), threading.Thread(target=writer)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=60)

    assert done.is_set()
    assert seen
    assert set(seen) <= valid_lengths
    assert seen[-1] == 3 * 4 ** generations
    assert boundary.is_closed()
