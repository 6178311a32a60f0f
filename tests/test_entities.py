"""Tests for the player fish and enemy fish entities."""

import math

import pytest

from core.config.display import EXIT_MARGIN, SCREEN_WIDTH
from core.entities.enemy import EnemyFish, SwimDirection
from core.entities.player import PlayerFish, PlayerInput
from core.entities.tiers import FishTier
from core.math_utils import Vector2


class TestPlayerInput:
    def test_no_keys_is_zero_vector(self) -> None:
        assert PlayerInput().movement_vector() == Vector2(0.0, 0.0)

    def test_diagonal_is_normalized(self) -> None:
        vector = PlayerInput(move_up=True, move_right=True).movement_vector()
        assert vector.length() == pytest.approx(1.0)
        assert vector.x == pytest.approx(1 / math.sqrt(2))
        assert vector.y == pytest.approx(-1 / math.sqrt(2))

    def test_opposite_keys_cancel(self) -> None:
        vector = PlayerInput(move_left=True, move_right=True).movement_vector()
        assert vector == Vector2(0.0, 0.0)


class TestPlayerFish:
    """Movement, facing and cooldown of the player fish."""

    def test_starting_values(self) -> None:
        player = PlayerFish()
        assert player.position == Vector2(400.0, 300.0)
        assert player.size == pytest.approx(0.25)
        assert player.health == 100
        assert player.speed == pytest.approx(300.0)
        assert player.collision_cooldown == 0.0
        assert player.facing_right is True

    def test_moves_at_speed_times_dt(self) -> None:
        player = PlayerFish()
        player.update(0.5, PlayerInput(move_right=True))
        assert player.position.x == pytest.approx(550.0)
        assert player.position.y == pytest.approx(300.0)
        assert player.velocity == Vector2(300.0, 0.0)

    def test_diagonal_speed_is_not_faster(self) -> None:
        player = PlayerFish()
        player.update(1.0, PlayerInput(move_down=True, move_left=True))
        travelled = player.position.distance_to(Vector2(400.0, 300.0))
        assert travelled == pytest.approx(300.0)

    def test_facing_follows_horizontal_motion(self) -> None:
        player = PlayerFish()
        player.update(0.1, PlayerInput(move_left=True))
        assert player.facing_right is False

        # Pure vertical motion keeps the previous facing
        player.update(0.1, PlayerInput(move_up=True))
        assert player.facing_right is False

        player.update(0.1, PlayerInput(move_right=True))
        assert player.facing_right is True

    def test_no_input_stops_the_fish(self) -> None:
        player = PlayerFish()
        player.update(0.1, PlayerInput(move_right=True))
        player.update(0.1, PlayerInput())
        assert player.velocity == Vector2(0.0, 0.0)

    def test_cooldown_counts_down(self) -> None:
        player = PlayerFish(collision_cooldown=1.0)
        player.update(0.25, PlayerInput())
        assert player.collision_cooldown == pytest.approx(0.75)

    def test_cooldown_may_overshoot_below_zero(self) -> None:
        player = PlayerFish(collision_cooldown=0.1)
        player.update(0.25, PlayerInput())
        assert player.collision_cooldown == pytest.approx(-0.15)

        # Expired cooldowns are left alone
        player.update(0.25, PlayerInput())
        assert player.collision_cooldown == pytest.approx(-0.15)

    def test_display_size(self) -> None:
        assert PlayerFish(size=0.5).display_size == pytest.approx(15.0)


class TestEnemyFish:
    """Spawn placement, motion, bounds and collision of enemy fish."""

    def test_left_to_right_spawn(self) -> None:
        enemy = EnemyFish.spawn(FishTier.TINY, SwimDirection.LEFT_TO_RIGHT, 200.0, SCREEN_WIDTH)
        assert enemy.position == Vector2(-EXIT_MARGIN, 200.0)
        assert enemy.velocity == Vector2(FishTier.TINY.speed, 0.0)
        assert enemy.is_alive

    def test_right_to_left_spawn(self) -> None:
        enemy = EnemyFish.spawn(FishTier.LARGE, SwimDirection.RIGHT_TO_LEFT, 200.0, SCREEN_WIDTH)
        assert enemy.position == Vector2(SCREEN_WIDTH + EXIT_MARGIN, 200.0)
        assert enemy.velocity == Vector2(-FishTier.LARGE.speed, 0.0)

    def test_moves_horizontally(self) -> None:
        enemy = EnemyFish.spawn(FishTier.TINY, SwimDirection.LEFT_TO_RIGHT, 200.0, SCREEN_WIDTH)
        enemy.update(1.0)
        assert enemy.position.x == pytest.approx(-EXIT_MARGIN + FishTier.TINY.speed)
        assert enemy.position.y == pytest.approx(200.0)

    def test_dead_fish_do_not_move(self) -> None:
        enemy = EnemyFish.spawn(FishTier.TINY, SwimDirection.LEFT_TO_RIGHT, 200.0, SCREEN_WIDTH)
        enemy.be_eaten()
        enemy.update(1.0)
        assert enemy.position.x == pytest.approx(-EXIT_MARGIN)

    def test_freshly_spawned_fish_is_in_bounds(self) -> None:
        for direction in SwimDirection:
            enemy = EnemyFish.spawn(FishTier.TINY, direction, 200.0, SCREEN_WIDTH)
            assert not enemy.is_out_of_bounds(SCREEN_WIDTH)

    def test_out_of_bounds_only_past_far_edge(self) -> None:
        rightward = EnemyFish(
            FishTier.TINY, SwimDirection.LEFT_TO_RIGHT, position=Vector2(SCREEN_WIDTH + 51, 200)
        )
        assert rightward.is_out_of_bounds(SCREEN_WIDTH)

        leftward = EnemyFish(FishTier.TINY, SwimDirection.RIGHT_TO_LEFT, position=Vector2(-51, 200))
        assert leftward.is_out_of_bounds(SCREEN_WIDTH)

        # Sitting exactly on the margin is still in bounds
        edge = EnemyFish(FishTier.TINY, SwimDirection.RIGHT_TO_LEFT, position=Vector2(-50, 200))
        assert not edge.is_out_of_bounds(SCREEN_WIDTH)

    def test_collision_uses_mean_display_size(self) -> None:
        # TINY display size is 6, player display size 7.5 -> threshold 6.75
        enemy = EnemyFish(FishTier.TINY, SwimDirection.LEFT_TO_RIGHT, position=Vector2(106.7, 100))
        assert enemy.check_collision_with_player(Vector2(100, 100), 7.5)

        enemy.position = Vector2(106.8, 100)
        assert not enemy.check_collision_with_player(Vector2(100, 100), 7.5)

    def test_eaten_fish_never_collides(self) -> None:
        enemy = EnemyFish(FishTier.TINY, SwimDirection.LEFT_TO_RIGHT, position=Vector2(100, 100))
        enemy.be_eaten()
        assert not enemy.is_alive
        assert not enemy.check_collision_with_player(Vector2(100, 100), 7.5)
