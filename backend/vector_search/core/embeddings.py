# backend/vector_search/core/embeddings.py
"""
Query embedding through the provider's embeddings endpoint.

The raw HTTP response is inspected so that a non-200 status becomes an
ApplicationError here instead of surfacing as whatever the client library raises.
"""

from typing import List

import openai

from vector_search.core.errors import ApplicationError
from vector_search.core.logger import get_logger

logger = get_logger(__name__)


class QueryEmbedder:
    def __init__(self, client: openai.OpenAI, model_name: str = "text-embedding-ada-002"):
        self.client = client
        self.model_name = (model_name or "").strip() or "text-embedding-ada-002"

    def embed(self, text: str) -> List[float]:
        """
        Embed a single normalized query -> list of floats.
        """
        try:
            raw = self.client.embeddings.with_raw_response.create(
                model=self.model_name,
                input=text,
                encoding_format="float",
            )
        except openai.APIStatusError as e:
            raise ApplicationError(
                "Failed to create embedding for question",
                {"status": e.status_code, "body": e.body},
            ) from e

        if raw.status_code != 200:
            raise ApplicationError(
                "Failed to create embedding for question",
                {"status": raw.status_code, "body": raw.text},
            )

        response = raw.parse()
        # exactly one input was sent, read the first output
        embedding = list(response.data[0].embedding)
        logger.debug("Embedded query with %s (%d dims)", self.model_name, len(embedding))
        return embedding
