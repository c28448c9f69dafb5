import random

from space_game.entities import Obstacle, Projectile, Star
from space_game.state import Page
from space_game.systems import (
    ObstacleCollisionSystem,
    ObstacleSpawnSystem,
    ProjectileSystem,
    StarfieldSystem,
    playing_systems,
    run_systems,
)


def test_playing_systems_run_in_order():
    names = [system.name for system in playing_systems()]
    assert names == ["projectiles", "obstacle_spawn", "obstacle_collision"]


# Starfield


def test_first_fill_scatters_stars_across_the_canvas(state):
    StarfieldSystem().step(state)

    assert len(state.stars) == 20
    for star in state.stars:
        assert -2 <= star.x <= 640
        assert 0 <= star.y < 480
        assert 0.4 <= star.brightness < 1.4


def test_top_up_stars_enter_from_the_right(state):
    state.stars = [Star(100, 10, 1.0) for _ in range(19)]

    StarfieldSystem().step(state)

    assert len(state.stars) == 20
    assert state.stars[-1].x == 638


def test_stars_scroll_left(state):
    state.stars = [Star(100, 10, 1.0)]

    StarfieldSystem(count=1).step(state)

    assert state.stars[0].x == 98
    assert state.stars[0].y == 10


def test_star_leaving_left_edge_respawns_on_the_right(state):
    star = Star(0, 10, 0.5)
    state.stars = [star]

    StarfieldSystem(count=1).step(state)

    respawned = state.stars[0]
    assert respawned is not star
    assert respawned.x == 640
    assert 0 <= respawned.y < 480
    assert 0.4 <= respawned.brightness < 1.4


# Projectiles


def test_projectiles_move_right_and_leave_past_the_edge(playing_state):
    inside = Projectile(630, 10)
    leaving = Projectile(637, 20)
    playing_state.player.projectiles = [inside, leaving]

    ProjectileSystem().step(playing_state)

    assert playing_state.player.projectiles == [inside]
    assert inside.x == 634


def test_projectile_system_without_player_is_a_no_op(state):
    ProjectileSystem().step(state)


# Spawning


def test_spawn_adds_obstacle_on_right_edge(playing_state, rng):
    rng.spawn = True

    ObstacleSpawnSystem().step(playing_state)

    (obstacle,) = playing_state.obstacles
    assert obstacle.x == 640
    assert 0 <= obstacle.y < 480
    assert (obstacle.width, obstacle.height) == (16, 16)


def test_no_spawn_when_roll_misses(playing_state):
    ObstacleSpawnSystem().step(playing_state)
    assert playing_state.obstacles == []


def test_spawn_chance_is_about_one_in_thirty(playing_state):
    playing_state.rng = random.Random(42)
    system = ObstacleSpawnSystem()
    for _ in range(30000):
        system.step(playing_state)

    assert 800 < len(playing_state.obstacles) < 1200


# Collisions


def test_ship_hit_removes_obstacle_and_damages_player(playing_state):
    player = playing_state.player
    player.x, player.y = 10, 100
    playing_state.obstacles = [Obstacle(10, 100, 20, 10)]

    ObstacleCollisionSystem().step(playing_state)

    assert playing_state.obstacles == []
    assert player.lives == 2
    assert (player.x, player.y) == (10, 240)
    assert playing_state.page is Page.PLAYING


def test_last_life_lost_ends_the_game(playing_state):
    player = playing_state.player
    player.lives = 1
    playing_state.obstacles = [Obstacle(player.x, player.y, 16, 16)]

    ObstacleCollisionSystem().step(playing_state)

    assert playing_state.page is Page.GAME_OVER
    assert player.lives == 0


def test_projectile_hit_removes_both_and_scores(playing_state):
    player = playing_state.player
    projectile = Projectile(50, 50)
    player.projectiles = [projectile]
    playing_state.obstacles = [Obstacle(50, 49, 16, 10)]

    ObstacleCollisionSystem().step(playing_state)

    assert playing_state.obstacles == []
    assert player.projectiles == []
    assert player.score == 100


def test_first_projectile_in_order_wins(playing_state):
    player = playing_state.player
    first, second = Projectile(300, 50), Projectile(302, 52)
    player.projectiles = [first, second]
    playing_state.obstacles = [Obstacle(300, 45, 16, 16)]

    ObstacleCollisionSystem().step(playing_state)

    assert player.projectiles == [second]
    assert player.score == 100


def test_one_projectile_destroys_only_one_obstacle(playing_state):
    player = playing_state.player
    player.projectiles = [Projectile(300, 50)]
    front = Obstacle(295, 45, 16, 16)
    back = Obstacle(298, 44, 16, 16)
    playing_state.obstacles = [front, back]

    ObstacleCollisionSystem().step(playing_state)

    assert playing_state.obstacles == [back]
    assert back.x == 297
    assert player.score == 100


def test_neighbouring_obstacles_are_all_resolved(playing_state):
    player = playing_state.player
    obstacles = [Obstacle(300, 50 + 30 * i, 16, 16) for i in range(3)]
    player.projectiles = [Projectile(305, 55 + 30 * i) for i in range(3)]
    playing_state.obstacles = list(obstacles)

    ObstacleCollisionSystem().step(playing_state)

    assert playing_state.obstacles == []
    assert player.projectiles == []
    assert player.score == 300


def test_surviving_obstacles_move_left(playing_state):
    obstacle = Obstacle(400, 20, 16, 16)
    playing_state.obstacles = [obstacle]

    ObstacleCollisionSystem().step(playing_state)

    assert obstacle.x == 399


def test_obstacles_past_left_edge_are_dropped(playing_state):
    gone = Obstacle(-15, 20, 16, 16)
    visible = Obstacle(-14, 60, 16, 16)
    playing_state.obstacles = [gone, visible]

    ObstacleCollisionSystem().step(playing_state)

    assert playing_state.obstacles == [visible]


def test_collision_with_no_obstacles_is_a_no_op(playing_state):
    ObstacleCollisionSystem().step(playing_state)
    assert playing_state.player.lives == 3


def test_run_systems_stops_when_page_changes(playing_state, rng):
    rng.spawn = True
    player = playing_state.player
    player.lives = 1
    playing_state.obstacles = [Obstacle(player.x, player.y, 16, 16)]

    systems = [ObstacleCollisionSystem(), ObstacleSpawnSystem()]
    run_systems(systems, playing_state, Page.PLAYING)

    assert playing_state.page is Page.GAME_OVER
    assert playing_state.obstacles == []
