"""Serializers between game objects and plain JSON-ready dictionaries.

Used by the session snapshot store. Vectors are stored as ``[x, y]`` pairs,
enums by name (tiers) or value (directions).

Reading is strict: a field of the wrong JSON type is reported as a
PersistenceError instead of being coerced, so a hand-edited snapshot never
restores a different session than the one that was saved.
"""

import random
from typing import Any, Dict

from core.entities.enemy import EnemyFish, SwimDirection
from core.entities.player import PlayerFish, PlayerInput
from core.entities.tiers import FishTier
from core.exceptions import PersistenceError
from core.math_utils import Vector2
from core.session_state import SessionState
from core.systems.spawning import EnemySpawner

INPUT_KEYS = ("move_up", "move_down", "move_left", "move_right", "pause")


def _mapping(value: Any, name: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise PersistenceError(f"{name} must be an object, got {type(value).__name__}")
    return value


def _flag(data: Dict[str, Any], key: str) -> bool:
    value = data[key]
    if not isinstance(value, bool):
        raise PersistenceError(f"{key} must be true or false, got {value!r}")
    return value


def _integer(data: Dict[str, Any], key: str) -> int:
    value = data[key]
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise PersistenceError(f"{key} must be an integer, got {value!r}")
    return value


def _number(data: Dict[str, Any], key: str) -> float:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PersistenceError(f"{key} must be a number, got {value!r}")
    return float(value)


def _vector(data: Dict[str, Any], key: str) -> Vector2:
    value = data[key]
    if not isinstance(value, list) or len(value) != 2:
        raise PersistenceError(f"{key} must be an [x, y] pair, got {value!r}")
    return Vector2.from_sequence([_number({key: item}, key) for item in value])


class PlayerSerializer:
    """Serializer for the player fish and its input."""

    @staticmethod
    def to_dict(player: PlayerFish) -> Dict[str, Any]:
        return {
            "position": list(player.position.to_tuple()),
            "velocity": list(player.velocity.to_tuple()),
            "size": player.size,
            "health": player.health,
            "speed": player.speed,
            "collision_cooldown": player.collision_cooldown,
            "facing_right": player.facing_right,
        }

    @staticmethod
    def from_dict(data: Any) -> PlayerFish:
        data = _mapping(data, "player")
        return PlayerFish(
            position=_vector(data, "position"),
            velocity=_vector(data, "velocity"),
            size=_number(data, "size"),
            health=_integer(data, "health"),
            speed=_number(data, "speed"),
            collision_cooldown=_number(data, "collision_cooldown"),
            facing_right=_flag(data, "facing_right"),
        )

    @staticmethod
    def input_to_dict(intent: PlayerInput) -> Dict[str, bool]:
        return {
            "move_up": intent.move_up,
            "move_down": intent.move_down,
            "move_left": intent.move_left,
            "move_right": intent.move_right,
            "pause": intent.pause,
        }

    @staticmethod
    def input_from_dict(data: Any) -> PlayerInput:
        """Missing keys default to not pressed; present keys must be booleans."""
        data = _mapping(data, "input")
        pressed = {key: _flag(data, key) for key in INPUT_KEYS if key in data}
        return PlayerInput(**pressed)


class EnemySerializer:
    """Serializer for enemy fish."""

    @staticmethod
    def to_dict(enemy: EnemyFish) -> Dict[str, Any]:
        return {
            "tier": enemy.tier.name,
            "direction": enemy.direction.value,
            "position": list(enemy.position.to_tuple()),
            "velocity": list(enemy.velocity.to_tuple()),
            "is_alive": enemy.is_alive,
        }

    @staticmethod
    def from_dict(data: Any) -> EnemyFish:
        data = _mapping(data, "enemy")
        return EnemyFish(
            tier=FishTier[data["tier"]],
            direction=SwimDirection(data["direction"]),
            position=_vector(data, "position"),
            velocity=_vector(data, "velocity"),
            is_alive=_flag(data, "is_alive"),
        )


class SessionSerializer:
    """Serializer for a whole SessionState."""

    @staticmethod
    def to_dict(state: SessionState) -> Dict[str, Any]:
        return {
            "health": state.health,
            "size": state.size,
            "score": state.score,
            "is_victory": state.is_victory,
            "frame": state.frame,
            "player": PlayerSerializer.to_dict(state.player),
            "input": PlayerSerializer.input_to_dict(state.input),
            "enemies": [EnemySerializer.to_dict(enemy) for enemy in state.enemies],
            "spawner": state.spawner.to_dict(),
        }

    @staticmethod
    def from_dict(data: Any, rng: random.Random) -> SessionState:
        """Rebuild a SessionState.

        Args:
            data: Dictionary produced by to_dict()
            rng: Random source handed to the restored spawner

        Raises:
            PersistenceError: If the data is incomplete or malformed
        """
        try:
            data = _mapping(data, "session")
            spawner_data = _mapping(data["spawner"], "spawner")
            spawner = EnemySpawner(
                rng=rng,
                spawn_interval=_number(spawner_data, "spawn_interval"),
                max_enemies=_integer(spawner_data, "max_enemies"),
                spawn_timer=_number(spawner_data, "spawn_timer"),
            )
            enemies = data["enemies"]
            if not isinstance(enemies, list):
                raise PersistenceError(f"enemies must be a list, got {type(enemies).__name__}")
            return SessionState(
                spawner=spawner,
                health=_integer(data, "health"),
                size=_number(data, "size"),
                score=_integer(data, "score"),
                player=PlayerSerializer.from_dict(data["player"]),
                input=PlayerSerializer.input_from_dict(data.get("input", {})),
                enemies=[EnemySerializer.from_dict(item) for item in enemies],
                is_victory=_flag(data, "is_victory"),
                frame=_integer(data, "frame") if "frame" in data else 0,
            )
        except PersistenceError:
            raise
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise PersistenceError(f"Malformed session data: {e!r}") from e
