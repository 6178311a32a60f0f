"""Completed-game record ledger.

Every finished session (won or lost) appends one record. The whole ledger
is rewritten to a JSON file after each change:

    {
      "records": [
        {"id": 1, "score": 12, "timestamp": "2026-10-19T08:00:00+00:00", "player_size": 0.41}
      ],
      "next_id": 2
    }

Loading never fails: a missing, unreadable or malformed file yields an empty
ledger. Saving returns a Result instead of raising.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class GameRecord(BaseModel):
    """One completed session. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: int
    score: int
    timestamp: datetime
    player_size: float


class RecordLedger(BaseModel):
    """Ordered records plus the next identifier to assign."""

    records: List[GameRecord] = Field(default_factory=list)
    next_id: int = 1


class RecordStore:
    """Owns the ledger and the file it is persisted to.

    Attributes:
        path: Location of the ledger JSON file
        ledger: The in-memory ledger
    """

    def __init__(self, path: Union[str, Path], ledger: Optional[RecordLedger] = None) -> None:
        self.path = Path(path)
        self.ledger = ledger if ledger is not None else RecordLedger()

    @classmethod
    def load(cls, path: Union[str, Path]) -> "RecordStore":
        """Read the ledger at ``path``, falling back to an empty one."""
        path = Path(path)
        if not path.exists():
            logger.info("No record ledger at %s, starting fresh", path)
            return cls(path)

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            ledger = RecordLedger.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning("Could not read record ledger %s, starting fresh: %s", path, e)
            return cls(path)

        logger.info("Loaded %d game record(s) from %s", len(ledger.records), path)
        return cls(path, ledger)

    def save(self) -> Result[Path, str]:
        """Rewrite the whole ledger file.

        Returns:
            Ok(path) on success, Err(message) if the file could not be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Write atomically using temp file
            temp_file = self.path.with_suffix(".tmp")
            with open(temp_file, "w", encoding="utf-8") as f:
                json.dump(self.ledger.model_dump(mode="json"), f, indent=2)
            temp_file.replace(self.path)
        except OSError as e:
            logger.error("Failed to save record ledger to %s: %s", self.path, e)
            return Err(f"Failed to save record ledger: {e}")

        logger.debug("Record ledger saved (%d records)", len(self.ledger.records))
        return Ok(self.path)

    def add_record(self, score: int, player_size: float) -> GameRecord:
        """Append a record stamped with the next id and the current time."""
        record = GameRecord(
            id=self.ledger.next_id,
            score=score,
            timestamp=datetime.now(timezone.utc),
            player_size=player_size,
        )
        self.ledger.records.append(record)
        self.ledger.next_id += 1
        logger.info("Recorded game #%d: score %d, size %.2f", record.id, score, player_size)
        return record

    def delete_record(self, record_id: int) -> bool:
        """Remove the first record with ``record_id``.

        Returns:
            True if a record was removed
        """
        for index, record in enumerate(self.ledger.records):
            if record.id == record_id:
                del self.ledger.records[index]
                logger.info("Deleted game record #%d", record_id)
                return True
        return False

    @property
    def records(self) -> List[GameRecord]:
        return list(self.ledger.records)

    def records_newest_first(self) -> List[GameRecord]:
        return list(reversed(self.ledger.records))

    def __len__(self) -> int:
        return len(self.ledger.records)
