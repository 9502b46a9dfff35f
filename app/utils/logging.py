"""
HR Dashboard - Activity Logging
Per-session JSONL trail of evaluations, shares and exports.
"""

import json
import threading
import uuid
from collections import Counter, deque
from dataclasses import dataclass, asdict, field
from datetime import datetime
from pathlib import Path
from typing import Any, Deque, Dict, List, Optional


DEFAULT_MAX_ENTRIES = 1000


@dataclass
class ActivityEntry:
    """A single logged dashboard action."""
    action: str
    candidate_id: Optional[int] = None
    details: Dict[str, Any] = field(default_factory=dict)
    timestamp: str = field(default_factory=lambda: datetime.utcnow().isoformat() + "Z")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ActivityLogger:
    """
    Appends activity entries to <log_dir>/<session_id>.jsonl.

    The most recent max_entries entries are also kept in memory for
    get_entries; the session summary counts every logged action. Pass
    log_dir=None to keep the trail in memory only.
    """

    def __init__(
        self,
        log_dir: Optional[Path],
        session_id: Optional[str] = None,
        max_entries: int = DEFAULT_MAX_ENTRIES
    ):
        self.session_id = session_id or f"session_{datetime.utcnow().strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:6]}"
        self.started_at = datetime.utcnow().isoformat() + "Z"
        self._entries: Deque[ActivityEntry] = deque(maxlen=max_entries)
        self._action_counts: Counter = Counter()
        self._lock = threading.Lock()

        self.log_file: Optional[Path] = None
        if log_dir is not None:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            self.log_file = log_dir / f"{self.session_id}.jsonl"

    def log(
        self,
        action: str,
        candidate_id: Optional[int] = None,
        **details: Any
    ) -> ActivityEntry:
        """Record an action and append it to the session file."""
        entry = ActivityEntry(action=action, candidate_id=candidate_id, details=details)
        line = json.dumps(entry.to_dict(), ensure_ascii=False) + "\n"

        with self._lock:
            self._entries.append(entry)
            self._action_counts[action] += 1

            if self.log_file is not None:
                with open(self.log_file, 'a', encoding='utf-8') as f:
                    f.write(line)

        return entry

    def get_entries(self, action: Optional[str] = None) -> List[Dict[str, Any]]:
        with self._lock:
            entries = list(self._entries)
        return [e.to_dict() for e in entries if action is None or e.action == action]

    def get_session_summary(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "session_id": self.session_id,
                "started_at": self.started_at,
                "entry_count": sum(self._action_counts.values()),
                "actions": dict(self._action_counts),
            }
