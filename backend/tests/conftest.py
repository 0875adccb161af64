# tests/conftest.py
import json

import httpx
import openai
import pytest

from vector_search.api.models import PageSection


# ---------- helpers ----------

# dummy requests objects instead of real network calls
class DummyResponse:
    def __init__(self, status_code=200, json_body=None, text="", chunks=None):
        self.status_code = status_code
        self._json_body = json_body
        self.text = text if text or json_body is None else json.dumps(json_body)
        self.chunks = chunks or []
        self.closed = False

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._json_body is None:
            raise ValueError("No JSON body")
        return self._json_body

    def iter_content(self, chunk_size=None):
        for chunk in self.chunks:
            yield chunk

    def close(self):
        self.closed = True


class DummySession:
    """Records every POST and replies with queued responses (or raises them)."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def post(self, url, headers=None, json=None, stream=False):
        self.calls.append({"url": url, "headers": headers, "json": json, "stream": stream})
        resp = self.responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp


def count_words(text):
    return len(text.split())


def make_openai_client(handler):
    transport = httpx.MockTransport(handler)
    return openai.OpenAI(api_key="sk-test", max_retries=0, http_client=httpx.Client(transport=transport))


def moderation_body(flagged=False, categories=None):
    categories = categories if categories is not None else {"hate": False, "violence": False}
    return {
        "id": "modr-123",
        "model": "text-moderation-007",
        "results": [
            {
                "flagged": flagged,
                "categories": categories,
                "category_scores": {name: (0.9 if value else 0.01) for name, value in categories.items()},
            }
        ],
    }


def embedding_body(vector=(0.1, 0.2, 0.3)):
    return {
        "object": "list",
        "data": [{"object": "embedding", "index": 0, "embedding": list(vector)}],
        "model": "text-embedding-ada-002",
        "usage": {"prompt_tokens": 5, "total_tokens": 5},
    }


class FakeProvider:
    """httpx handler standing in for the moderation and embeddings endpoints."""

    def __init__(self, moderation=None, embedding=None, embedding_status=200):
        self.moderation = moderation or moderation_body()
        self.embedding = embedding or embedding_body()
        self.embedding_status = embedding_status
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content or b"{}")
        self.requests.append((request.url.path, payload))
        if request.url.path.endswith("/moderations"):
            return httpx.Response(200, json=self.moderation)
        if request.url.path.endswith("/embeddings"):
            return httpx.Response(self.embedding_status, json=self.embedding)
        return httpx.Response(404, json={"error": {"message": "not found"}})

    def inputs(self, suffix):
        return [body.get("input") for path, body in self.requests if path.endswith(suffix)]


# ---------- fixtures ----------

@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def sections():
    return [
        PageSection(content="  Open Settings and choose Security.  ", id=1),
        PageSection(content="Click Reset password and follow the emailed link.", id=2),
        PageSection(content="Links expire after 24 hours.", id=3),
    ]


@pytest.fixture
def stream_chunks():
    return [
        b'data: {"choices":[{"delta":{"content":"Go to"}}]}\n\n',
        b'data: {"choices":[{"delta":{"content":" Settings."}}]}\n\n',
        b"data: [DONE]\n\n",
    ]

