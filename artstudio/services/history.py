from typing import Dict, List, Optional

from ..config import HISTORY_CAPACITY


class SessionHistory:
    """Recent art data URIs for one session, most recent first."""

    def __init__(self, capacity: int = HISTORY_CAPACITY):
        if capacity < 1:
            raise ValueError("History capacity must be at least 1.")
        self.capacity = capacity
        self._entries: List[str] = []

    def record(self, art_data_uri: str) -> None:
        self._entries = [art_data_uri, *self._entries][: self.capacity]

    def entries(self) -> List[str]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries = []

    def __len__(self) -> int:
        return len(self._entries)


class HistoryStore:
    """In-memory map of session id to that session's own history."""

    def __init__(self, capacity: int = HISTORY_CAPACITY):
        self.capacity = capacity
        self._sessions: Dict[str, SessionHistory] = {}

    def get(self, session_id: str) -> Optional[SessionHistory]:
        """Existing history for the session, without creating one."""
        return self._sessions.get(session_id)

    def __len__(self) -> int:
        return len(self._sessions)

    def for_session(self, session_id: str) -> SessionHistory:
        history = self._sessions.get(session_id)
        if history is None:
            history = SessionHistory(self.capacity)
            self._sessions[session_id] = history
        return history
