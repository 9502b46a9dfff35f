"""
HR Dashboard - Dashboard State
Explicit container for the mutable UI state: selection, share dialog and
the shared-with-HR relation.
"""

import threading
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from .candidate import Candidate


SHARE_MESSAGE_TEMPLATE = (
    "Please review candidate {name} for the {job_role} position.\n\n"
    "Key Highlights:\n"
    "- {experience} years experience\n"
    "- Skills: {skills}\n"
    "- Total Score: {total}/300"
)


def _utc_timestamp() -> str:
    return datetime.utcnow().isoformat() + "Z"


def share_message(candidate: Candidate, job_role: str) -> str:
    """Default message body for sharing a candidate with HR."""
    return SHARE_MESSAGE_TEMPLATE.format(
        name=candidate.name,
        job_role=job_role,
        experience=candidate.experience_years,
        skills=", ".join(candidate.skills),
        total=candidate.total_score
    )


@dataclass
class ShareDraft:
    """Contents of the open share dialog."""
    candidate_id: int
    email: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class DashboardState:
    """
    Application state shared by all requests.

    Mutations go through the methods below; the roster itself is never
    touched. When a share store is given, the shared relation
    (candidate id -> shared timestamp) is loaded from and written to it.
    """

    def __init__(
        self,
        job_role: str,
        default_email: str,
        store=None
    ):
        self.job_role = job_role
        self.default_email = default_email
        self._store = store
        self._lock = threading.Lock()

        self.selected_candidate: Optional[Candidate] = None
        self.share_modal_open: bool = False
        self.share_draft: Optional[ShareDraft] = None
        self._shared: Dict[int, str] = dict(store.load()) if store else {}

    # ------------------------------------------------------------------
    # Selection and share dialog
    # ------------------------------------------------------------------

    def select_candidate(self, candidate: Optional[Candidate]):
        with self._lock:
            self.selected_candidate = candidate

    def open_share(self, candidate: Candidate) -> ShareDraft:
        """Select a candidate and open the share dialog with a default draft."""
        with self._lock:
            self.selected_candidate = candidate
            self.share_modal_open = True
            self.share_draft = ShareDraft(
                candidate_id=candidate.id,
                email=self.default_email,
                message=share_message(candidate, self.job_role)
            )
            return self.share_draft

    def update_draft(self, email: Optional[str] = None, message: Optional[str] = None) -> Optional[ShareDraft]:
        with self._lock:
            if self.share_draft is None:
                return None
            if email is not None:
                self.share_draft.email = email
            if message is not None:
                self.share_draft.message = message
            return self.share_draft

    def close_share(self):
        """Close the share dialog without sharing."""
        with self._lock:
            self._close()

    def send_share(self) -> Optional[Dict[str, Any]]:
        """
        Mark the selected candidate as shared and close the dialog.

        Returns:
            The share record, or None when no candidate is selected.

        Raises:
            OSError: If the share store cannot be written. The state is
                left unchanged and the dialog stays open.
        """
        with self._lock:
            if self.selected_candidate is None or self.share_draft is None:
                return None
            candidate = self.selected_candidate
            draft = self.share_draft
            timestamp = self._mark(candidate.id)
            self._close()
            return {
                "candidate_id": candidate.id,
                "name": candidate.name,
                "email": draft.email,
                "shared_at": timestamp,
            }

    def _close(self):
        self.share_modal_open = False
        self.share_draft = None

    # ------------------------------------------------------------------
    # Shared relation
    # ------------------------------------------------------------------

    def mark_shared(self, candidate_id: int, timestamp: Optional[str] = None) -> str:
        with self._lock:
            return self._mark(candidate_id, timestamp)

    def unmark_shared(self, candidate_id: int) -> bool:
        with self._lock:
            if candidate_id not in self._shared:
                return False
            updated = {k: v for k, v in self._shared.items() if k != candidate_id}
            self._commit(updated)
            return True

    def _mark(self, candidate_id: int, timestamp: Optional[str] = None) -> str:
        # Re-sharing keeps the first timestamp
        if candidate_id not in self._shared:
            self._commit({**self._shared, candidate_id: timestamp or _utc_timestamp()})
        return self._shared[candidate_id]

    def _commit(self, shared: Dict[int, str]):
        # Written to the store first so a failed save leaves memory untouched
        if self._store:
            self._store.save(shared)
        self._shared = shared

    def is_shared(self, candidate_id: int) -> bool:
        with self._lock:
            return candidate_id in self._shared

    @property
    def shared_count(self) -> int:
        with self._lock:
            return len(self._shared)

    def shared_in(self, candidate_ids: Iterable[int]) -> List[int]:
        """Shared ids among the given ones, in the given order."""
        with self._lock:
            return [cid for cid in candidate_ids if cid in self._shared]

    def shared_relation(self) -> Dict[int, str]:
        with self._lock:
            return dict(self._shared)

    def to_dict(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "selected_candidate_id": self.selected_candidate.id if self.selected_candidate else None,
                "share_modal_open": self.share_modal_open,
                "share_draft": self.share_draft.to_dict() if self.share_draft else None,
                "shared": {str(k): v for k, v in self._shared.items()},
                "shared_count": len(self._shared),
            }
