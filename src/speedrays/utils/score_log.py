"""Append-only JSON log of finished runs.

The file holds a single JSON array of run records, oldest first:

    [
      {"name": "Ana", "age": 12, "avatar": "😎", "car": "sport",
       "color": "#4cc9f0", "score": 812, "badges": [], "time": 23,
       "at": "2026-10-19T09:56:00+00:00"},
      ...
    ]

Entries are never edited or removed. A missing or unreadable file reads
as an empty log.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Union

from speedrays.core.session import RunRecord

logger = logging.getLogger(__name__)


class ScoreLog:
    """Score sink backed by a JSON file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def read(self) -> List[RunRecord]:
        """Load every record, skipping entries that cannot be parsed."""
        if not self.path.exists():
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Score log unreadable, starting empty: {e}")
            return []
        if not isinstance(raw, list):
            logger.warning(f"Score log at {self.path} is not a list, ignoring it")
            return []

        records = []
        for item in raw:
            if not isinstance(item, dict):
                continue
            try:
                records.append(RunRecord.from_dict(item))
            except (TypeError, ValueError) as e:
                logger.debug(f"Skipping malformed score entry: {e}")
        return records

    def record(self, entry: RunRecord) -> None:
        """Append one record and rewrite the file atomically."""
        entries = [r.to_dict() for r in self.read()]
        entries.append(entry.to_dict())

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".scores-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(entries, f, ensure_ascii=False, indent=2)
            os.replace(tmp, self.path)
        except OSError:
            Path(tmp).unlink(missing_ok=True)
            raise
        logger.info(f"Recorded run for {entry.name}: {entry.score}")

    def top(self, limit: int = 10) -> List[RunRecord]:
        """Best runs by score, highest first."""
        return sorted(self.read(), key=lambda r: r.score, reverse=True)[:limit]


def format_highscores(records: List[RunRecord]) -> List[str]:
    """Start-screen lines, e.g. ``#1 Ana (12) - 812 - 🅿️ Parked!``."""
    lines = []
    for i, r in enumerate(records, start=1):
        badges = f" - {' '.join(r.badges)}" if r.badges else ""
        lines.append(f"#{i} {r.name} ({r.age}) - {r.score}{badges}")
    return lines
