"""Single-slot session snapshot.

The snapshot is written every time the game is paused so the session can be
continued later, even after the program restarts. It is deleted when a
session ends or a new one begins.

A missing or corrupt snapshot is never an error: it simply means there is
no session to continue.
"""

import json
import logging
import random
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from core.config.session import SNAPSHOT_SCHEMA_VERSION
from core.exceptions import PersistenceError
from core.result import Err, Ok, Result
from core.serializers import SessionSerializer
from core.session_state import SessionState

logger = logging.getLogger(__name__)


class SnapshotStatus(Enum):
    """Why a load did or did not produce a session."""

    LOADED = "loaded"
    MISSING = "missing"
    CORRUPT = "corrupt"


@dataclass
class SnapshotLoad:
    """Outcome of reading the snapshot slot."""

    status: SnapshotStatus
    session: Optional[SessionState] = None
    error: Optional[str] = None


class SnapshotStore:
    """Reads and writes the session snapshot file.

    Attributes:
        path: Location of the snapshot JSON file
        rng: Random source given to restored sessions
    """

    def __init__(self, path: Union[str, Path], rng: random.Random) -> None:
        self.path = Path(path)
        self.rng = rng

    def exists(self) -> bool:
        return self.path.exists()

    def save(self, session: SessionState) -> Result[Path, str]:
        """Overwrite the slot with ``session``.

        Returns:
            Ok(path) on success, Err(message) on failure
        """
        snapshot = {
            "schema_version": SNAPSHOT_SCHEMA_VERSION,
            "saved_at": datetime.now(timezone.utc).isoformat(),
            "session": SessionSerializer.to_dict(session),
        }
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_file = self.path.with_suffix(".tmp")
            with open(temp_file, "w", encoding="utf-8") as f:
                json.dump(snapshot, f, indent=2)
            temp_file.replace(self.path)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to save session snapshot to %s: %s", self.path, e)
            return Err(f"Failed to save session snapshot: {e}")

        logger.info(
            "Saved session snapshot (score %d, %d enemies)", session.score, len(session.enemies)
        )
        return Ok(self.path)

    def load_result(self) -> SnapshotLoad:
        """Read the slot, distinguishing a missing file from a corrupt one."""
        if not self.path.exists():
            return SnapshotLoad(SnapshotStatus.MISSING)

        try:
            with open(self.path, encoding="utf-8") as f:
                snapshot = json.load(f)
            if not isinstance(snapshot, dict):
                raise PersistenceError("Snapshot is not a JSON object")
            version = snapshot.get("schema_version")
            if version != SNAPSHOT_SCHEMA_VERSION:
                raise PersistenceError(
                    f"Unsupported snapshot schema {version!r}, expected {SNAPSHOT_SCHEMA_VERSION}"
                )
            session = SessionSerializer.from_dict(snapshot["session"], self.rng)
        except (OSError, ValueError, KeyError, PersistenceError) as e:
            logger.warning("Session snapshot %s is unusable: %s", self.path, e)
            return SnapshotLoad(SnapshotStatus.CORRUPT, error=str(e))

        return SnapshotLoad(SnapshotStatus.LOADED, session=session)

    def load(self) -> Optional[SessionState]:
        """Return the saved session, or None if absent or corrupt."""
        return self.load_result().session

    def clear(self) -> bool:
        """Delete the slot. Returns True if a snapshot was removed."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.error("Failed to delete session snapshot %s: %s", self.path, e)
            return False
        logger.debug("Session snapshot cleared")
        return True
