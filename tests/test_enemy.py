import math
import random

import pytest

from entities.enemy import Enemy, EnemyManager, EnemyState, behavior_state
from entities.player import Player
from game.collision import CollisionOracle
from maze.generator import generate_maze


def test_chases_visible_player(open_oracle):
    enemy = Enemy(400, 400)
    player = Player(600, 400)

    state = enemy.update(player, open_oracle, random.Random(0))

    assert state == EnemyState.CHASING
    assert enemy.velocity.x == pytest.approx(1.5)
    assert enemy.velocity.y == pytest.approx(0)
    assert enemy.angle == pytest.approx(0)


def test_chase_speed_is_fixed_in_any_direction(open_oracle):
    enemy = Enemy(400, 400)
    player = Player(550, 600)
    enemy.update(player, open_oracle, random.Random(0))
    assert enemy.velocity.length() == pytest.approx(1.5)


def test_enemy_on_top_of_player_stops(open_oracle):
    enemy = Enemy(400, 400)
    player = Player(400, 400)
    assert enemy.update(player, open_oracle, random.Random(0)) == EnemyState.CHASING
    assert enemy.velocity.length() == 0


def test_wall_hides_player(walled_oracle):
    enemy = Enemy(800, 400)
    player = Player(1000, 400)
    assert behavior_state(enemy, player, walled_oracle) == EnemyState.WANDERING


def test_never_chases_beyond_five_cells(open_oracle):
    enemy = Enemy(120, 120)
    player = Player(120 + 5 * 80 + 1, 120)
    assert behavior_state(enemy, player, open_oracle) == EnemyState.WANDERING


@pytest.mark.parametrize("seed", range(5))
def test_never_chases_beyond_range_in_any_maze(seed):
    rng = random.Random(seed)
    grid = generate_maze(31, 31, rng)
    oracle = CollisionOracle(grid, 80)
    cells = grid.open_cells()

    checked = 0
    while checked < 200:
        ex, ey = rng.choice(cells)
        px, py = rng.choice(cells)
        enemy = Enemy((ex + 0.5) * 80, (ey + 0.5) * 80)
        player = Player((px + 0.5) * 80, (py + 0.5) * 80)
        if math.hypot(enemy.x - player.x, enemy.y - player.y) <= 400:
            continue
        assert behavior_state(enemy, player, oracle) == EnemyState.WANDERING
        checked += 1


def test_wander_picks_heading_then_counts_down(open_oracle, sequence_rng):
    enemy = Enemy(800, 800)
    player = Player(100, 1500)
    rng = sequence_rng([0.25])

    assert enemy.update(player, open_oracle, rng) == EnemyState.WANDERING
    assert enemy.velocity.x == pytest.approx(0, abs=1e-9)
    assert enemy.velocity.y == pytest.approx(1.5)
    assert enemy.wander_cooldown == 60

    enemy.update(player, open_oracle, rng)
    assert enemy.wander_cooldown == 59
    assert enemy.velocity.y == pytest.approx(1.35)
    assert enemy.angle == pytest.approx(math.pi / 2)


def test_new_heading_after_cooldown_runs_out(open_oracle, sequence_rng):
    enemy = Enemy(800, 800, wander_ticks=2)
    player = Player(100, 1500)
    rng = sequence_rng([0.25, 0.5])

    enemy.update(player, open_oracle, rng)   # heading down, cooldown 2
    enemy.update(player, open_oracle, rng)   # 1
    enemy.update(player, open_oracle, rng)   # 0
    enemy.update(player, open_oracle, rng)   # new heading: left
    assert enemy.velocity.x == pytest.approx(-1.5)
    assert enemy.wander_cooldown == 2


def test_turns_away_from_wall_ahead(walled_oracle, sequence_rng):
    enemy = Enemy(879, 800)
    player = Player(100, 1500)
    rng = sequence_rng([0.0, 0.5])  # right (into the wall), then left

    enemy.update(player, walled_oracle, rng)

    assert enemy.velocity.x == pytest.approx(-1.5)
    assert enemy.angle == pytest.approx(math.pi)


def test_enemy_movement_is_collision_gated(walled_oracle):
    enemy = Enemy(879, 800)
    enemy.velocity.update(1.5, 0)
    enemy.integrate(walled_oracle)
    assert enemy.x == 879


def test_state_is_not_stored(open_oracle):
    enemy = Enemy(400, 400)
    assert not hasattr(enemy, "state")
    near = Player(500, 400)
    far = Player(1500, 1500)
    assert behavior_state(enemy, near, open_oracle) == EnemyState.CHASING
    assert behavior_state(enemy, far, open_oracle) == EnemyState.WANDERING


def test_manager_counts_chasers(open_oracle):
    manager = EnemyManager()
    manager.add_enemy(400, 400)
    manager.add_enemy(1500, 1500)
    player = Player(500, 400)

    assert manager.update(player, open_oracle, random.Random(0)) == 1
    assert len(manager) == 2
