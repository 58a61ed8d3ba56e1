"""Tests for the projectile simulation and trajectory plotting."""

import logging

import pytest

from raytracer.canvas import Canvas
from raytracer.color import BLACK, RED
from raytracer.math_utils import point, vector
from raytracer.projectile import (
    Environment,
    Projectile,
    canvas_coords,
    plot_trajectory,
    tick,
    trajectory,
)


@pytest.fixture
def env():
    return Environment(gravity=vector(0, -0.1, 0), wind=vector(-0.01, 0, 0))


def test_tick_moves_then_accelerates(env):
    p = Projectile(position=point(0, 1, 0), velocity=vector(1, 1, 0))
    p2 = tick(env, p)
    assert p2.position == point(1, 2, 0)
    assert p2.velocity == vector(0.99, 0.9, 0)
    # Original state is untouched
    assert p.position == point(0, 1, 0)


def test_in_flight():
    assert Projectile(point(0, 0.5, 0), vector(0, 0, 0)).in_flight()
    assert not Projectile(point(0, 0, 0), vector(0, 0, 0)).in_flight()
    assert not Projectile(point(0, -1, 0), vector(0, 0, 0)).in_flight()


def test_trajectory_starts_with_initial_state_and_lands(env):
    p = Projectile(point(0, 1, 0), vector(1, 1, 0).normalize())
    states = list(trajectory(env, p))
    assert states[0] is p
    assert all(s.in_flight() for s in states)
    assert not tick(env, states[-1]).in_flight()


def test_trajectory_of_landed_projectile_is_empty(env):
    assert list(trajectory(env, Projectile(point(0, 0, 0), vector(1, 1, 0)))) == []


@pytest.mark.parametrize("gravity_y, velocity_y", [(-0.1, 1.0), (-1.0, 50.0), (-0.001, 0.5), (-9.8, 0.0)])
def test_trajectory_terminates_under_negative_gravity(gravity_y, velocity_y):
    env = Environment(gravity=vector(0, gravity_y, 0), wind=vector(0, 0, 0))
    p = Projectile(point(0, 1, 0), vector(1, velocity_y, 0))
    states = list(trajectory(env, p))
    assert len(states) > 0


def test_trajectory_stops_at_max_ticks(caplog):
    env = Environment(gravity=vector(0, 0.1, 0), wind=vector(0, 0, 0))
    p = Projectile(point(0, 1, 0), vector(1, 1, 0))
    with caplog.at_level(logging.WARNING, logger="raytracer.projectile"):
        states = list(trajectory(env, p, max_ticks=5))
    assert len(states) == 5
    assert "still in flight after 5 ticks" in caplog.text


def test_canvas_coords_flip_y():
    c = Canvas(900, 550)
    assert canvas_coords(c, point(0, 1, 0)) == (0, 549)
    assert canvas_coords(c, point(10.5, 20.4, 0)) == (11, 530)


def test_plot_trajectory_paints_path():
    c = Canvas(900, 550)
    env = Environment(gravity=vector(0, -0.1, 0), wind=vector(0.01, 0, 0))
    p = Projectile(point(0, 1, 0), vector(1, 1.8, 0).normalize() * 11.25)
    ticks = plot_trajectory(c, env, p, RED)
    assert ticks == len(list(trajectory(env, p)))
    assert c.pixel_at(0, 549) == RED
    painted = sum(1 for row in c.rows() for px in row if px == RED)
    assert 0 < painted <= ticks


def test_plot_trajectory_drops_off_canvas_points():
    c = Canvas(5, 5)
    env = Environment(gravity=vector(0, -1, 0), wind=vector(0, 0, 0))
    p = Projectile(point(-10, 1, 0), vector(-1, 3, 0))
    ticks = plot_trajectory(c, env, p, RED)
    assert ticks > 0
    assert all(px == BLACK for row in c.rows() for px in row)


def test_plot_just_below_half_rounds_down_and_drops_off_canvas():
    c = Canvas(5, 5)
    env = Environment(gravity=vector(0, -1, 0), wind=vector(0, 0, 0))
    p = Projectile(point(0, 0.49999999999999994, 0), vector(0, -1, 0))
    assert canvas_coords(c, p.position) == (0, 5)
    assert plot_trajectory(c, env, p, RED) == 1
    assert all(px == BLACK for row in c.rows() for px in row)
