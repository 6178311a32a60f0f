"""Tests for collision resolution between the player and enemy fish."""

import pytest

from core.config.display import SCREEN_HEIGHT, SCREEN_WIDTH, play_band
from core.entities.player import PlayerFish
from core.entities.tiers import FishTier
from core.events import EventBus, FishEatenEvent, PlayerDamagedEvent
from core.math_utils import Vector2
from core.systems.collision import CollisionResolver, clamp_to_play_area


class TestConsumption:
    """A strictly larger player eats what it touches."""

    def test_eating_a_tiny_fish(self, session_state, place_enemy) -> None:
        enemy = place_enemy(session_state, FishTier.TINY)

        outcome = CollisionResolver().resolve(session_state)

        assert outcome.eaten == [FishTier.TINY]
        assert not enemy.is_alive
        assert session_state.score == 1
        assert session_state.player.size == pytest.approx(0.26)
        assert session_state.size == pytest.approx(0.26)
        assert session_state.player.health == 100

    def test_eats_several_fish_in_one_frame(self, session_state, place_enemy) -> None:
        session_state.player.size = 0.55
        place_enemy(session_state, FishTier.TINY)
        place_enemy(session_state, FishTier.LARGE)

        outcome = CollisionResolver().resolve(session_state)

        assert outcome.eaten == [FishTier.TINY, FishTier.LARGE]
        assert outcome.score_gained == 5
        assert session_state.score == 5
        assert session_state.player.size == pytest.approx(0.55 + 0.010 + 0.025)

    def test_distant_fish_is_ignored(self, session_state, place_enemy) -> None:
        enemy = place_enemy(session_state, FishTier.TINY, x=50.0, y=150.0)
        outcome = CollisionResolver().resolve(session_state)
        assert outcome.eaten == []
        assert enemy.is_alive

    def test_eaten_fish_is_not_eaten_twice(self, session_state, place_enemy) -> None:
        place_enemy(session_state, FishTier.TINY)
        resolver = CollisionResolver()
        resolver.resolve(session_state)
        outcome = resolver.resolve(session_state)
        assert outcome.eaten == []
        assert session_state.score == 1

    def test_emits_fish_eaten_event(self, session_state, place_enemy) -> None:
        bus = EventBus()
        received = []
        bus.subscribe(FishEatenEvent, received.append)
        place_enemy(session_state, FishTier.TINY)

        CollisionResolver(event_bus=bus).resolve(session_state)

        assert len(received) == 1
        assert received[0].tier == "TINY"
        assert received[0].score_gained == 1


class TestDamage:
    """Equal or larger fish bite, subject to the cooldown."""

    def test_larger_fish_bites(self, session_state, place_enemy) -> None:
        enemy = place_enemy(session_state, FishTier.MEDIUM)

        outcome = CollisionResolver().resolve(session_state)

        assert outcome.hits == [FishTier.MEDIUM]
        assert enemy.is_alive
        assert session_state.player.health == 50
        assert session_state.health == 50
        assert session_state.player.collision_cooldown == pytest.approx(1.0)
        assert session_state.score == 0

    def test_legendary_fish_bites_starting_player(self, session_state, place_enemy) -> None:
        place_enemy(session_state, FishTier.LEGENDARY)
        CollisionResolver().resolve(session_state)
        assert session_state.player.health == 50
        assert session_state.player.collision_cooldown == pytest.approx(1.0)

    def test_equal_size_is_not_edible(self, session_state, place_enemy) -> None:
        session_state.player.size = FishTier.SMALL.size
        place_enemy(session_state, FishTier.SMALL)

        outcome = CollisionResolver().resolve(session_state)

        assert outcome.eaten == []
        assert outcome.hits == [FishTier.SMALL]

    def test_cooldown_blocks_repeat_hits(self, session_state, place_enemy) -> None:
        place_enemy(session_state, FishTier.MEDIUM)
        place_enemy(session_state, FishTier.LARGE)

        outcome = CollisionResolver().resolve(session_state)

        # Second contact in the same frame lands during the cooldown
        assert outcome.hits == [FishTier.MEDIUM]
        assert session_state.player.health == 50

        outcome = CollisionResolver().resolve(session_state)
        assert outcome.hits == []
        assert session_state.player.health == 50

    def test_hit_lands_again_once_cooldown_expires(self, session_state, place_enemy) -> None:
        place_enemy(session_state, FishTier.MEDIUM)
        resolver = CollisionResolver()
        resolver.resolve(session_state)

        session_state.player.collision_cooldown = 0.0
        outcome = resolver.resolve(session_state)

        assert outcome.hits == [FishTier.MEDIUM]
        assert outcome.defeat
        assert session_state.player.health == 0

    def test_negative_cooldown_counts_as_expired(self, session_state, place_enemy) -> None:
        session_state.player.collision_cooldown = -0.2
        place_enemy(session_state, FishTier.MEDIUM)
        outcome = CollisionResolver().resolve(session_state)
        assert outcome.hits == [FishTier.MEDIUM]

    def test_defeat_stops_processing(self, session_state, place_enemy) -> None:
        session_state.player.health = 50
        place_enemy(session_state, FishTier.MEDIUM)
        tiny = place_enemy(session_state, FishTier.TINY)

        outcome = CollisionResolver().resolve(session_state)

        assert outcome.defeat
        assert outcome.session_over
        assert tiny.is_alive
        assert session_state.score == 0

    def test_emits_player_damaged_event(self, session_state, place_enemy) -> None:
        bus = EventBus()
        received = []
        bus.subscribe(PlayerDamagedEvent, received.append)
        place_enemy(session_state, FishTier.HUGE)

        CollisionResolver(event_bus=bus).resolve(session_state)

        assert [(e.tier, e.damage, e.health) for e in received] == [("HUGE", 50, 50)]


class TestVictory:
    def test_victory_past_threshold(self, session_state) -> None:
        session_state.player.size = 1.21
        outcome = CollisionResolver().resolve(session_state)
        assert outcome.victory
        assert session_state.is_victory

    def test_exact_threshold_is_not_victory(self, session_state) -> None:
        session_state.player.size = 1.2
        outcome = CollisionResolver().resolve(session_state)
        assert not outcome.victory
        assert not session_state.is_victory

    def test_victory_ignores_health_and_collisions(self, session_state, place_enemy) -> None:
        session_state.player.size = 1.3
        session_state.player.health = 1
        enemy = place_enemy(session_state, FishTier.TINY)

        outcome = CollisionResolver().resolve(session_state)

        assert outcome.victory
        assert not outcome.defeat
        assert enemy.is_alive
        assert session_state.score == 0

    def test_custom_victory_size(self, session_state) -> None:
        session_state.player.size = 0.5
        assert CollisionResolver(victory_size=0.4).resolve(session_state).victory


class TestClampToPlayArea:
    """The player is pinned inside the play band."""

    def test_inside_is_untouched(self) -> None:
        player = PlayerFish()
        assert not clamp_to_play_area(player, SCREEN_WIDTH, SCREEN_HEIGHT)
        assert player.position == Vector2(400.0, 300.0)

    def test_pins_to_left_and_top(self) -> None:
        player = PlayerFish(position=Vector2(-20.0, 0.0), velocity=Vector2(-300.0, -300.0))
        assert clamp_to_play_area(player, SCREEN_WIDTH, SCREEN_HEIGHT)

        top, _ = play_band(SCREEN_HEIGHT)
        assert player.position.x == pytest.approx(player.display_size)
        assert player.position.y == pytest.approx(top + player.display_size)
        assert player.velocity == Vector2(0.0, 0.0)

    def test_pins_to_right_and_bottom(self) -> None:
        player = PlayerFish(
            position=Vector2(SCREEN_WIDTH + 20.0, SCREEN_HEIGHT), velocity=Vector2(300.0, 300.0)
        )
        assert clamp_to_play_area(player, SCREEN_WIDTH, SCREEN_HEIGHT)

        _, bottom = play_band(SCREEN_HEIGHT)
        assert player.position.x == pytest.approx(SCREEN_WIDTH - player.display_size)
        assert player.position.y == pytest.approx(bottom - player.display_size)
        assert player.velocity == Vector2(0.0, 0.0)

    def test_only_blocked_axis_is_zeroed(self) -> None:
        player = PlayerFish(position=Vector2(-20.0, 300.0), velocity=Vector2(-300.0, 120.0))
        clamp_to_play_area(player, SCREEN_WIDTH, SCREEN_HEIGHT)
        assert player.velocity == Vector2(0.0, 120.0)
