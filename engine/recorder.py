"""
recorder.py — Operation History
================================
Append-only log of completed operations.  Only successful runs are
recorded: a search miss, a refused parameter or a cancelled run leaves
no trace here.

Usage:
    history = History()
    history.record(step.entry)
    history.entries()          # newest first
    history.export()           # JSON-ready list for the API
"""

import logging
from typing import Any, Dict, List

from algorithms.step import HistoryEntry

log = logging.getLogger(__name__)


class History:
    def __init__(self):
        self._entries: List[HistoryEntry] = []

    def record(self, entry: HistoryEntry) -> None:
        self._entries.append(entry)
        log.info("History: %s %s", entry.type.value, entry.value)

    def entries(self) -> List[HistoryEntry]:
        """Newest first."""
        return list(reversed(self._entries))

    def clear(self) -> None:
        self._entries = []

    def export(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self.entries()]

    def __len__(self) -> int:
        return len(self._entries)
