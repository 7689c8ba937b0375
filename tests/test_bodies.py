import math
import random

import pytest

from fui.bodies import Body, BodySimulation


def make_body(x, y, r=5.0):
    return Body(x=x, y=y, vx=0.0, vy=0.0, r=r, mass=r * r * math.pi, color=0xFF00FF00)


def test_initial_bodies_within_region():
    sim = BodySimulation(1000, 800, count=200, rng=random.Random(3))
    assert len(sim.bodies) == 200
    for b in sim.bodies:
        assert 200 <= b.x < 1000 - 200
        assert 200 <= b.y < 800 - 200
        assert 5 <= b.r <= 14
        assert b.mass == pytest.approx(b.r * b.r * math.pi)
        assert (b.vx, b.vy) == (0.0, 0.0)


def test_initial_colors_are_green_with_scaled_alpha():
    sim = BodySimulation(1000, 800, count=100, rng=random.Random(4))
    for b in sim.bodies:
        assert b.color & 0x00FFFFFF == 0x0000FF00
        alpha = b.color >> 24
        assert int(0.2 * 255) <= alpha <= 255


def test_heavier_bodies_are_more_opaque():
    sim = BodySimulation(1000, 800, count=300, rng=random.Random(5))
    ordered = sorted(sim.bodies, key=lambda b: b.mass)
    alphas = [b.color >> 24 for b in ordered]
    assert alphas == sorted(alphas)


def test_attractor_starts_at_centre():
    sim = BodySimulation(1000, 800, count=0)
    assert sim.attractor.x == 1000 // 2
    assert sim.attractor.y == 800 // 2
    assert sim.attractor.mass == 100000
    assert sim.attractor.color == 0xFFFF0000
    assert sim.attractor.r == pytest.approx(math.sqrt(100000 / 3.14))


def test_scroll_clamps_mass():
    sim = BodySimulation(1000, 800, count=0)
    sim.scroll(1000)
    assert sim.attractor.mass == 1000000
    assert sim.attractor.r == pytest.approx(math.sqrt(1000000 / 3.14))
    sim.scroll(-1000)
    assert sim.attractor.mass == 10000


def test_scroll_one_step_scales_mass():
    sim = BodySimulation(1000, 800, count=0)
    sim.scroll(1)
    assert sim.attractor.mass == pytest.approx(100000 * 1.1)


def test_move_attractor():
    sim = BodySimulation(1000, 800, count=0)
    sim.move_attractor(123.0, 456.0)
    assert (sim.attractor.x, sim.attractor.y) == (123.0, 456.0)


def test_single_body_falls_toward_attractor():
    sim = BodySimulation(1000, 1000, count=0)
    sim.bodies = [make_body(400.0, 500.0)]
    sim.move_attractor(500.0, 500.0)
    sim.step()
    body = sim.bodies[0]
    assert body.x > 400.0
    assert body.y == pytest.approx(500.0)


def test_symmetric_bodies_stay_symmetric():
    sim = BodySimulation(1000, 1000, count=0)
    sim.bodies = [make_body(400.0, 500.0), make_body(600.0, 500.0)]
    sim.move_attractor(500.0, 500.0)
    for _ in range(3):
        sim.step()
    left, right = sim.bodies
    assert left.x - 500.0 == pytest.approx(-(right.x - 500.0))
    assert left.vx == pytest.approx(-right.vx)
    assert left.x > 400.0


def test_no_pull_inside_attractor_core():
    sim = BodySimulation(1000, 1000, count=0)
    sim.bodies = [make_body(505.0, 500.0)]
    sim.move_attractor(500.0, 500.0)
    sim.step()
    assert sim.bodies[0].x == 505.0
    assert sim.bodies[0].vx == 0.0


@pytest.mark.parametrize("size", [(400, 800), (800, 300)])
def test_small_screen_rejected(size):
    with pytest.raises(ValueError):
        BodySimulation(*size, count=1)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        BodySimulation(1000, 1000, count=-1)