# page_store.py
"""
Client for the documentation vector store (Supabase / PostgREST).

Only the `match_page_sections` remote procedure is used; the index itself is
built and maintained elsewhere.
"""
from typing import List

import requests

from vector_search.api.models import PageSection
from vector_search.core.errors import ApplicationError
from vector_search.core.logger import get_logger

logger = get_logger(__name__)


class PageSectionStore:
    def __init__(self, url: str, service_key: str, schema: str = "docs", session=None):
        self.url = url.rstrip("/")
        self.service_key = service_key
        self.schema = schema
        # plain requests.post per call: no cookie jar shared between requests
        self.session = session or requests

    def _headers(self) -> dict:
        return {
            "apikey": self.service_key,
            "Authorization": f"Bearer {self.service_key}",
            "Content-Type": "application/json",
            # PostgREST selects the schema for POST /rpc calls from Content-Profile
            "Content-Profile": self.schema,
            "Accept-Profile": self.schema,
        }

    def rpc(self, fn: str, params: dict):
        endpoint = f"{self.url}/rest/v1/rpc/{fn}"
        try:
            resp = self.session.post(endpoint, headers=self._headers(), json=params)
        except requests.RequestException as e:
            raise ApplicationError("Failed to match page sections", {"message": str(e)}) from e

        if resp.status_code >= 400:
            try:
                error = resp.json()
            except ValueError:
                error = {"message": resp.text}
            raise ApplicationError("Failed to match page sections", {"status": resp.status_code, "error": error})

        try:
            return resp.json()
        except ValueError as e:
            raise ApplicationError("Failed to match page sections", {"message": "Invalid JSON from store"}) from e

    def match_page_sections(
        self,
        embedding: List[float],
        match_threshold: float = 0.78,
        match_count: int = 10,
        min_content_length: int = 50,
    ) -> List[PageSection]:
        """
        Nearest page sections for an embedding, in the order the store returns them
        (relevance-descending). The order is not re-checked here.
        """
        rows = self.rpc(
            "match_page_sections",
            {
                "embedding": embedding,
                "match_threshold": match_threshold,
                "match_count": match_count,
                "min_content_length": min_content_length,
            },
        )
        if not isinstance(rows, list):
            raise ApplicationError("Failed to match page sections", {"message": "Unexpected response shape", "body": rows})
        sections = [PageSection.model_validate(row) for row in rows]
        logger.debug("Matched %d page sections", len(sections))
        return sections
