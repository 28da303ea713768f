"""Supabase connector for the hosted quiz_submissions table.

Talks to the project's PostgREST endpoint directly:
1. Fetch: GET /rest/v1/{table}?select=*&order=created_at.desc, paged with limit/offset
2. Insert: POST /rest/v1/{table} with Prefer: return=representation
"""

import logging
import os
from typing import Optional

import httpx
from pydantic import ValidationError

from feedback_insights.connectors.base import BaseConnector
from feedback_insights.models.submission import Submission

from .parsers import row_from_submission, submission_from_row

logger = logging.getLogger(__name__)


class SupabaseConnector(BaseConnector):
    """
    Connector for the hosted submissions table.
    url/key fall back to SUPABASE_URL / SUPABASE_KEY.
    """

    source_id = "supabase"

    REST_PATH = "/rest/v1/"
    DEFAULT_TABLE = "quiz_submissions"
    PAGE_SIZE = 1000

    DEFAULT_HEADERS = {
        "User-Agent": "feedback-insights/0.1",
        "Accept": "application/json",
    }

    def __init__(
        self,
        url: Optional[str] = None,
        key: Optional[str] = None,
        table: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        page_size: Optional[int] = None,
    ):
        self._url = (url or os.environ.get("SUPABASE_URL") or "").rstrip("/")
        self._key = key or os.environ.get("SUPABASE_KEY") or ""
        self._table = table or os.environ.get("SUPABASE_TABLE") or self.DEFAULT_TABLE
        self._page_size = page_size or self.PAGE_SIZE
        if not self._url or not self._key:
            raise RuntimeError(
                "Supabase connector needs a project URL and API key. "
                "Set SUPABASE_URL and SUPABASE_KEY or pass url/key."
            )
        headers = dict(self.DEFAULT_HEADERS)
        headers["apikey"] = self._key
        headers["Authorization"] = f"Bearer {self._key}"
        self._client = client or httpx.Client(timeout=30.0, headers=headers)
        if client is not None:
            self._client.headers.update(headers)

    @property
    def table_url(self) -> str:
        return f"{self._url}{self.REST_PATH}{self._table}"

    def _get_page(self, offset: int) -> list[dict]:
        """Fetch one page of rows."""
        params = {
            "select": "*",
            "order": "created_at.desc",
            "limit": str(self._page_size),
            "offset": str(offset),
        }
        resp = self._client.get(self.table_url, params=params)
        resp.raise_for_status()
        payload = resp.json()
        if not isinstance(payload, list):
            raise ValueError(f"Expected a list of rows from {self._table}, got {type(payload).__name__}")
        return payload

    def _parse_rows(self, rows: list[dict]) -> list[Submission]:
        submissions: list[Submission] = []
        for row in rows:
            try:
                submissions.append(submission_from_row(row))
            except (ValidationError, KeyError, TypeError) as e:
                logger.warning("Skipping malformed row %s: %s", row.get("id"), e)
        return submissions

    def fetch_all(self) -> list[Submission]:
        """Fetch every row, newest first, page by page."""
        rows: list[dict] = []
        offset = 0
        while True:
            page = self._get_page(offset)
            rows.extend(page)
            if len(page) < self._page_size:
                break
            offset += len(page)
        logger.info("Fetched %d rows from %s", len(rows), self._table)
        return self._parse_rows(rows)

    def insert(self, submission: Submission) -> Submission:
        """Insert one submission and return the stored row."""
        resp = self._client.post(
            self.table_url,
            json=[row_from_submission(submission)],
            headers={
                "Content-Type": "application/json",
                "Prefer": "return=representation",
            },
        )
        resp.raise_for_status()
        payload = resp.json()
        if isinstance(payload, list):
            if not payload:
                raise ValueError("Insert returned no rows")
            payload = payload[0]
        return submission_from_row(payload)
