"""Pytest configuration and fixtures for Big Fish tests."""

import random

import pytest

from core.config.game_config import GameConfig
from core.entities.enemy import EnemyFish, SwimDirection
from core.entities.tiers import FishTier
from core.math_utils import Vector2
from core.persistence.records import RecordStore
from core.persistence.snapshots import SnapshotStore
from core.session import GameSession
from core.session_state import SessionState


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def game_config(tmp_path):
    """A default configuration whose files live in a temporary directory."""
    config = GameConfig(seed=42)
    config.persistence.data_dir = str(tmp_path)
    return config


@pytest.fixture
def record_store(game_config):
    return RecordStore.load(game_config.persistence.records_path)


@pytest.fixture
def snapshot_store(game_config, seeded_rng):
    return SnapshotStore(game_config.persistence.snapshot_path, seeded_rng)


@pytest.fixture
def session(record_store, snapshot_store, seeded_rng, game_config):
    """A GameSession on the HOME screen backed by temporary files."""
    return GameSession(record_store, snapshot_store, seeded_rng, config=game_config)


@pytest.fixture
def session_state(seeded_rng):
    """A fresh SessionState with an empty sea."""
    return SessionState.new(seeded_rng)


@pytest.fixture
def place_enemy():
    """Return a helper that puts a stationary enemy on the player (or at x, y)."""

    def _place(state: SessionState, tier: FishTier, x: float = None, y: float = None) -> EnemyFish:
        player_pos = state.player.position
        enemy = EnemyFish(
            tier=tier,
            direction=SwimDirection.LEFT_TO_RIGHT,
            position=Vector2(
                player_pos.x if x is None else x, player_pos.y if y is None else y
            ),
            velocity=Vector2(0.0, 0.0),
        )
        state.enemies.append(enemy)
        return enemy

    return _place
