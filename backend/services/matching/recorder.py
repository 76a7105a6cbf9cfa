"""Match recorder: hands ranked outcomes to an analytics sink.

The engine never calls a recorder. Callers record after the ranking has been
returned, and `record_safely` guarantees a storage failure is only logged.
"""

import json
import logging
from abc import ABC, abstractmethod
from collections import deque
from pathlib import Path
from typing import Optional, Sequence

from models.schemas.match_result import MatchRecord, MatchResult
from services.matching.errors import PersistenceFailure

logger = logging.getLogger(__name__)


def to_records(learner_id: str, results: Sequence[MatchResult]) -> list[MatchRecord]:
    return [
        MatchRecord(
            learner_id=learner_id,
            mentor_id=r.mentor_id,
            score=r.score,
            reasons=list(r.reasons),
            created_at=r.created_at,
        )
        for r in results
    ]


class MatchRecorder(ABC):
    """Base class for analytics sinks.

    Subclasses implement write(records) and raise PersistenceFailure when
    the sink cannot accept them.
    """

    @abstractmethod
    def write(self, records: list[MatchRecord]) -> None:
        """Persist records or raise PersistenceFailure."""

    def record(self, learner_id: str, results: Sequence[MatchResult]) -> int:
        """Persist one row per result. Returns the number of rows written."""
        records = to_records(learner_id, results)
        if records:
            self.write(records)
        return len(records)

    def record_safely(self, learner_id: str, results: Sequence[MatchResult]) -> bool:
        """Like record(), but failures are logged instead of raised."""
        try:
            n = self.record(learner_id, results)
        except PersistenceFailure:
            logger.exception("Failed to record %d matches for learner %s", len(results), learner_id)
            return False
        logger.debug("Recorded %d matches for learner %s", n, learner_id)
        return True


class InMemoryMatchRecorder(MatchRecorder):
    """Keeps the most recent `maxlen` rows; unbounded when maxlen is None."""

    def __init__(self, maxlen: Optional[int] = None) -> None:
        self.records: deque[MatchRecord] = deque(maxlen=maxlen)

    def write(self, records: list[MatchRecord]) -> None:
        self.records.extend(records)


class JsonlMatchRecorder(MatchRecorder):
    """Appends one JSON object per match to a file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def write(self, records: list[MatchRecord]) -> None:
        try:
            lines = "".join(json.dumps(r.model_dump(mode="json")) + "\n" for r in records)
        except (TypeError, ValueError) as e:
            raise PersistenceFailure(f"Could not serialize match records: {e}") from e
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(lines)
        except OSError as e:
            raise PersistenceFailure(f"Could not append to {self.path}: {e}") from e


_recorder: MatchRecorder | None = None


def get_recorder() -> MatchRecorder:
    """JSONL recorder when MATCH_LOG_PATH is set, in-memory otherwise."""
    global _recorder
    if _recorder is None:
        from config import settings
        if settings.match_log_path:
            _recorder = JsonlMatchRecorder(settings.match_log_path)
            logger.info("Recording matches to %s", settings.match_log_path)
        else:
            _recorder = InMemoryMatchRecorder(maxlen=settings.match_log_buffer)
            logger.info(
                "MATCH_LOG_PATH not set - keeping the last %d matches in memory",
                settings.match_log_buffer,
            )
    return _recorder


def set_recorder(recorder: MatchRecorder | None) -> None:
    """Replace the process-wide recorder (None resets to settings-based default)."""
    global _recorder
    _recorder = recorder
