import dataclasses

import pytest

from flappy_sim.constants import BASE_HEIGHT, PLAYER_START_Y_FRAC
from flappy_sim.data_models import Lifecycle, Obstacle, Viewport
from flappy_sim.physics_core import advance
from flappy_sim.world import World


@pytest.fixture
def world():
    return World(Viewport(480, 600), seed=1)


def test_first_session_waits_for_start(world):
    assert world.lifecycle is Lifecycle.NOT_STARTED
    assert world.score == 0
    assert world.obstacles == []

    world.start_run()
    assert world.lifecycle is Lifecycle.RUNNING

    # start_run is meaningless once running
    world.start_run()
    assert world.lifecycle is Lifecycle.RUNNING


def test_player_starts_at_fixed_fraction(world):
    assert world.player.y == pytest.approx(600 * PLAYER_START_Y_FRAC)
    assert world.player.velocity == 0.0
    # 600 high viewport is the reference size
    assert world.player.width == pytest.approx(40)
    assert world.player.x == pytest.approx(80)


def test_player_scales_with_viewport_height():
    world = World(Viewport(480, BASE_HEIGHT * 2))
    assert world.player.width == pytest.approx(80)
    assert world.player.gravity == pytest.approx(2800)
    assert world.player.jump == pytest.approx(-840)


def test_restart_skips_start_menu(world):
    world.start_run()
    world.score = 7
    world.obstacles.append(Obstacle(x=10, width=60, top=100, bottom=200))
    world.game_over()
    assert world.lifecycle is Lifecycle.GAME_OVER

    world.restart()
    assert world.lifecycle is Lifecycle.RUNNING
    assert world.score == 0
    assert world.obstacles == []


def test_restart_ignored_while_running(world):
    world.start_run()
    world.score = 3
    world.restart()
    assert world.score == 3
    assert world.lifecycle is Lifecycle.RUNNING


def test_reset_updates_viewport_height(world):
    world.reset(900)
    assert world.viewport.height == 900
    assert world.viewport.width == 480
    assert world.player.y == pytest.approx(900 * PLAYER_START_Y_FRAC)
    # Second reset on this world: no start menu
    assert world.lifecycle is Lifecycle.RUNNING


def test_jump_ignored_before_start(world):
    world.request_jump()
    assert world.jump_pending is False


def test_held_jump_applies_once(world):
    world.start_run()
    world.request_jump()
    world.request_jump()
    advance(world, 0.01)
    assert world.player.velocity == pytest.approx(world.player.jump)

    # Still held: gravity takes over, no second impulse
    world.request_jump()
    advance(world, 0.01)
    assert world.player.velocity == pytest.approx(world.player.jump + world.player.gravity * 0.01)
    assert world.jump_pending is True


def test_release_enables_next_jump(world):
    world.start_run()
    world.request_jump()
    advance(world, 0.01)
    advance(world, 0.01)
    world.release_jump()
    assert world.jump_pending is False

    world.request_jump()
    advance(world, 0.01)
    assert world.player.velocity == pytest.approx(world.player.jump)


def test_release_clears_in_any_state(world):
    world.start_run()
    world.request_jump()
    world.game_over()
    world.release_jump()
    assert world.jump_pending is False


def test_snapshot_is_read_only(world):
    world.start_run()
    advance(world, 0.016)
    snap = world.snapshot()

    assert snap.lifecycle is Lifecycle.RUNNING
    assert snap.score == 0
    assert len(snap.obstacles) == 1
    assert snap.width == 480 and snap.height == 600
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.score = 5
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.player.y = 0


def test_difficulty_property_tracks_score(world):
    assert world.difficulty == 1.0
    world.score = 10
    assert world.difficulty == pytest.approx(1.5)


def test_viewport_rejects_non_positive_size():
    with pytest.raises(ValueError):
        Viewport(0, 600)
    viewport = Viewport(480, 600)
    with pytest.raises(ValueError):
        viewport.resize(480, -1)
