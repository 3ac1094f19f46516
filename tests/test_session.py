import random

import pytest
from pygame.math import Vector2

from entities.collectible import Collectible
from game.game_state import LevelComplete, LifeLost, GameOver
from game.session import GameSession, Level, MoveIntent
from maze.generator import entrance_cell
from maze.maze_core import is_fully_connected
from utils.config import GameConfig
from utils.constants import OPEN, WALL


ROOM_3_3 = (280, 280)  # centre of cell (3, 3); every odd/odd room is carved


def small_config(**kwargs):
    defaults = dict(cols=11, rows=11, enemy_count=0, collectible_count=5,
                    door_count=2, seed=1, viewport_w=400, viewport_h=300)
    defaults.update(kwargs)
    return GameConfig(**defaults)


def keep_one_far_collectible(session):
    session.current.collectible_manager.collectibles = [
        Collectible(760, 760, (255, 215, 0))
    ]


def test_new_session_counters_and_population():
    session = GameSession(small_config(enemy_count=4, collectible_count=30))

    assert (session.score, session.level, session.lives) == (0, 1, 3)
    assert len(session.enemies) == 4
    assert len(session.collectibles) == 30
    assert (session.player.x, session.player.y) == (120, 120)


def test_spawns_land_on_open_cells_away_from_start():
    session = GameSession(small_config(enemy_count=20, collectible_count=50))
    grid = session.grid

    for enemy in session.enemies:
        col, row = int(enemy.x // 80), int(enemy.y // 80)
        assert grid.get(col, row) == OPEN
        assert not (col < 3 and row < 3)

    for item in session.collectibles:
        assert grid.get(int(item.x // 80), int(item.y // 80)) == OPEN


def test_same_seed_same_session():
    a = GameSession(small_config(enemy_count=3, seed=99))
    b = GameSession(small_config(enemy_count=3, seed=99))
    assert a.grid.cells == b.grid.cells
    assert [(c.x, c.y, c.color) for c in a.collectibles] == [(c.x, c.y, c.color) for c in b.collectibles]
    assert [(e.x, e.y) for e in a.enemies] == [(e.x, e.y) for e in b.enemies]


def test_pickup_scores_once_and_is_gone_next_tick():
    session = GameSession(small_config())
    player = session.player
    target = Collectible(player.x, player.y, (255, 215, 0))
    keep_one_far_collectible(session)
    session.current.collectible_manager.collectibles.append(target)

    session.tick()
    assert session.score == 10
    assert target not in session.collectibles

    session.tick()
    assert session.score == 10
    assert target not in session.collectibles


def test_level_complete_regenerates_and_keeps_counters():
    session = GameSession(small_config())
    old_grid = session.grid
    session.lives = 2
    session.score = 40
    player = session.player
    session.current.collectible_manager.collectibles = [
        Collectible(player.x, player.y, (255, 215, 0))
    ]

    events = session.tick()

    assert events == [LevelComplete(1, 50)]
    assert session.level == 2
    assert session.score == 50
    assert session.lives == 2
    assert session.grid is not old_grid
    assert len(session.collectibles) == 5
    assert is_fully_connected(session.grid, entrance_cell(11, 11))

    assert [e for e in session.tick() if isinstance(e, LevelComplete)] == []


def test_enemy_contact_costs_a_life_and_respawns_player():
    session = GameSession(small_config())
    keep_one_far_collectible(session)
    grid = session.grid
    session.player.place(*ROOM_3_3)
    session.current.enemy_manager.add_enemy(*ROOM_3_3)

    events = session.tick()

    assert events == [LifeLost(2)]
    assert session.lives == 2
    assert (session.player.x, session.player.y) == (120, 120)
    assert session.player.velocity.length() == 0
    assert session.grid is grid
    assert len(session.enemies) == 1


def test_last_life_resets_game():
    session = GameSession(small_config())
    keep_one_far_collectible(session)
    old_grid = session.grid
    session.score = 70
    session.level = 4
    session.lives = 1
    session.current.enemy_manager.add_enemy(session.player.x, session.player.y)

    events = session.tick()

    assert events == [GameOver(70)]
    assert (session.score, session.level, session.lives) == (0, 1, 3)
    assert session.grid is not old_grid
    assert len(session.enemies) == 0
    assert is_fully_connected(session.grid, entrance_cell(11, 11))


def test_several_enemies_can_hit_in_one_tick():
    session = GameSession(small_config())
    keep_one_far_collectible(session)
    session.player.place(*ROOM_3_3)
    session.current.enemy_manager.add_enemy(*ROOM_3_3)
    session.current.enemy_manager.add_enemy(120, 120)  # waiting at the spawn

    events = session.tick()

    assert events == [LifeLost(2), LifeLost(1)]
    assert session.lives == 1


def test_hit_grace_window_blocks_second_hit():
    session = GameSession(small_config(hit_invulnerability_ms=1000))
    keep_one_far_collectible(session)
    session.player.place(*ROOM_3_3)
    session.current.enemy_manager.add_enemy(*ROOM_3_3)
    session.current.enemy_manager.add_enemy(120, 120)

    events = session.tick(now_ms=5000)

    assert events == [LifeLost(2)]
    assert session.lives == 2


def test_intent_moves_player_and_dash_starts():
    session = GameSession(small_config())
    keep_one_far_collectible(session)

    session.tick(MoveIntent(0, 1, dash=True), now_ms=1000)
    assert session.player.y > 120
    assert session.player.is_dashing

    session.tick(MoveIntent(0, 1), now_ms=1300)
    assert not session.player.is_dashing


def test_intent_axes_are_clamped():
    intent = MoveIntent(5, -3)
    assert (intent.dx, intent.dy) == (1, -1)
    assert MoveIntent().is_idle()


def test_player_never_enters_a_wall():
    session = GameSession(small_config())
    keep_one_far_collectible(session)
    grid = session.grid

    for i in range(400):
        dx, dy = [(1, 0), (0, 1), (-1, 0), (0, -1)][(i // 25) % 4]
        session.tick(MoveIntent(dx, dy, dash=(i % 50 == 0)), now_ms=i * 16)
        col, row = int(session.player.x // 80), int(session.player.y // 80)
        assert grid.get(col, row) != WALL


def test_snapshot_is_detached_view():
    session = GameSession(small_config(enemy_count=2))
    snap = session.snapshot(now_ms=0)

    assert snap['grid']['cols'] == 11
    assert snap['grid']['cells'][1][1] == OPEN
    assert len(snap['doors']) == len(session.current.doors)
    assert snap['player']['dash_progress'] == 1.0
    assert snap['player']['dash_state'] == 'IDLE'
    assert len(snap['enemies']) == 2
    assert len(snap['collectibles']) == 5
    assert (snap['score'], snap['level'], snap['lives']) == (0, 1, 3)
    assert snap['camera'] == (0, 0)

    snap['collectibles'].clear()
    assert len(session.collectibles) == 5
    with pytest.raises(TypeError):
        snap['grid']['cells'][1][1] = WALL


def test_camera_follows_player_within_bounds():
    session = GameSession(small_config(cols=31, rows=31))
    session.player.place(1200, 1200)
    session.tick()

    cam_x, cam_y = session.camera.offset
    assert cam_x == pytest.approx(session.player.x - 200)
    assert cam_y == pytest.approx(session.player.y - 150)

    session.resize_viewport(5000, 5000)
    assert session.camera.offset == (0, 0)


def test_events_flatten_for_logging():
    assert LevelComplete(2, 120).as_dict() == {'event': 'level_complete', 'level': 2, 'score': 120}
    assert LifeLost(1) != LifeLost(2)
    assert LifeLost(1) != GameOver(1)


def test_idle_tick_only_damps_leftover_speed():
    session = GameSession(small_config())
    keep_one_far_collectible(session)
    session.player.place(*ROOM_3_3)
    session.player.velocity = Vector2(5, 0)

    session.tick(None, now_ms=10000)

    assert session.player.x == pytest.approx(285)
    assert session.player.velocity.length() == pytest.approx(4.5)


def test_regenerating_a_level_replaces_its_population():
    config = small_config(enemy_count=3, collectible_count=7)
    level = Level(config, random.Random(4))

    level._generate()

    assert len(level.enemy_manager) == 3
    assert level.collectible_manager.remaining() == 7
