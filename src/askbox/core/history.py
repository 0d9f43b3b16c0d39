"""
Bounded, deduplicated, most-recent-first history of submitted questions.
"""
import json
import logging

from .errors import CorruptPersistedState
from .storage import KeyValueStore

logger = logging.getLogger(__name__)

HISTORY_KEY = "history"
HISTORY_LIMIT = 50


class HistoryStore:
    def __init__(self, store: KeyValueStore, key: str = HISTORY_KEY, limit: int = HISTORY_LIMIT):
        self.store = store
        self.key = key
        self.limit = limit
        self._entries: list[str] = self.load()

    @property
    def entries(self) -> list[str]:
        """Snapshot of the in-memory history for rendering."""
        return list(self._entries)

    def _decode(self, raw: str) -> list[str]:
        try:
            parsed = json.loads(raw)
        except ValueError as exc:
            raise CorruptPersistedState(self.key, raw) from exc

        if not isinstance(parsed, list):
            raise CorruptPersistedState(self.key, raw)
        return [item for item in parsed if isinstance(item, str) and item]

    def load(self) -> list[str]:
        """
        Read history from storage.

        An absent key means no history. A corrupt payload is deleted from
        storage and read as empty so the next load does not fail again.
        """
        raw = self.store.get(self.key)
        if not raw:
            self._entries = []
            return []

        try:
            entries = self._decode(raw)
        except CorruptPersistedState as exc:
            logger.warning("Could not parse history, resetting: %s", exc)
            self._forget()
            entries = []

        self._entries = entries
        return list(entries)

    def record(self, text: str) -> list[str]:
        """
        Put ``text`` at the front of the history.

        Re-recording the current most-recent entry changes nothing. Any older
        occurrence of ``text`` is dropped and the result is capped to
        ``limit`` entries before being persisted.
        """
        history = self.load()
        if history and history[0] == text:
            return history

        history = [text, *history]

        seen = set()
        deduped = []
        for item in history:
            if item in seen:
                continue
            seen.add(item)
            deduped.append(item)

        history = deduped[:self.limit]
        self.store.set(self.key, json.dumps(history, ensure_ascii=False))
        self._entries = history
        return list(history)

    def _forget(self) -> None:
        try:
            self.store.delete(self.key)
        except OSError:
            logger.exception("Could not delete stored history under %r", self.key)

    def clear(self) -> None:
        self._entries = []
        self._forget()
