"""Local storage for submissions and sync history."""

from feedback_insights.store.sqlite_store import SubmissionStore, SyncRecord

__all__ = ["SubmissionStore", "SyncRecord"]
