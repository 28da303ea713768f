"""Abstract base class for submission sources."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional

from feedback_insights.models.submission import Submission


class BaseConnector(ABC):
    """
    Standard interface for where submissions live.
    All connectors must fetch every submission and insert one.
    """

    source_id: str = ""

    @abstractmethod
    def fetch_all(self) -> list[Submission]:
        """
        Fetch all submissions, newest first.
        """
        pass

    @abstractmethod
    def insert(self, submission: Submission) -> Submission:
        """
        Insert one submission; returns it as stored (with id and timestamps).
        """
        pass

    def fetch_since(self, since: Optional[datetime] = None) -> list[Submission]:
        """
        Fetch submissions created on/after since.
        Default: fetch all and filter client-side; submissions without
        created_at are kept.
        """
        submissions = self.fetch_all()
        if since is None:
            return submissions
        if since.tzinfo is None:
            since = since.replace(tzinfo=timezone.utc)
        result: list[Submission] = []
        for s in submissions:
            created = s.created_at
            if created is None:
                result.append(s)
                continue
            if created.tzinfo is None:
                created = created.replace(tzinfo=timezone.utc)
            if created >= since:
                result.append(s)
        return result
