# backend/vector_search/core/completions.py
"""
Streaming chat completion over a raw HTTP POST.

requests is used instead of the SDK so the provider's response body can be
relayed to the caller chunk by chunk, untouched.
"""
from typing import Iterator

import requests

from vector_search.core.errors import ApplicationError
from vector_search.core.logger import get_logger

logger = get_logger(__name__)


class CompletionClient:
    def __init__(
        self,
        api_key: str,
        endpoint: str = "https://api.openai.com/v1/chat/completions",
        model: str = "gpt-3.5-turbo",
        max_tokens: int = 512,
        temperature: float = 0,
        session=None,
    ):
        self.api_key = api_key
        self.endpoint = endpoint
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        # plain requests.post per call: no cookie jar shared between requests
        self.session = session or requests

    def build_options(self, prompt: str, query: str) -> dict:
        return {
            "messages": [
                {"role": "system", "content": prompt},
                {"role": "user", "content": query},
            ],
            "model": self.model,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "stream": True,
        }

    def stream(self, prompt: str, query: str) -> requests.Response:
        """
        Issue the completion request and return the still-open streaming response.
        The caller owns the response and must close it.
        """
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        logger.debug("Requesting completion from %s (model %s)", self.endpoint, self.model)
        resp = self.session.post(
            self.endpoint,
            headers=headers,
            json=self.build_options(prompt, query),
            stream=True,
        )

        if not resp.ok:
            try:
                error = resp.json()
            finally:
                resp.close()
            raise ApplicationError("Failed to generate completion", error)

        return resp


def iter_stream(resp: requests.Response) -> Iterator[bytes]:
    """
    Yield the body as it arrives, without re-chunking or decoding.
    """
    for chunk in resp.iter_content(chunk_size=None):
        if chunk:
            yield chunk
