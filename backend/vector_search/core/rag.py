# backend/vector_search/core/rag.py
"""
Retrieval-augmented answer pipeline.

Flow for one query:
- sanitize (trim, newlines -> spaces) and moderate; flagged input stops here.
- embed the sanitized query and match page sections in the vector store.
- greedily pack sections into a token-budgeted context.
- build the grounding prompt and open a streaming completion.

Every stage raises UserError / ApplicationError on failure; the route maps them
to HTTP responses. Nothing here holds per-request state, so one instance
serves all requests.
"""
from typing import Callable

import openai
import requests

from vector_search.core.completions import CompletionClient
from vector_search.core.config import Settings
from vector_search.core.context import build_context
from vector_search.core.embeddings import QueryEmbedder
from vector_search.core.logger import get_logger
from vector_search.core.moderation import Moderator
from vector_search.core.page_store import PageSectionStore
from vector_search.core.prompt import build_prompt
from vector_search.core.tokenizer import TokenCounter
from vector_search.utils import sanitize_query

logger = get_logger(__name__)


class RAGPipeline:
    def __init__(
        self,
        moderator: Moderator,
        embedder: QueryEmbedder,
        store: PageSectionStore,
        count_tokens: Callable[[str], int],
        completions: CompletionClient,
        match_threshold: float = 0.78,
        match_count: int = 10,
        min_content_length: int = 50,
        max_context_tokens: int = 1500,
    ):
        self.moderator = moderator
        self.embedder = embedder
        self.store = store
        self.count_tokens = count_tokens
        self.completions = completions
        self.match_threshold = match_threshold
        self.match_count = match_count
        self.min_content_length = min_content_length
        self.max_context_tokens = max_context_tokens

    @classmethod
    def from_settings(cls, settings: Settings) -> "RAGPipeline":
        # no retries anywhere in the pipeline
        client = openai.OpenAI(api_key=settings.OPENAI_API_KEY, max_retries=0)
        return cls(
            moderator=Moderator(client),
            embedder=QueryEmbedder(client, settings.OPENAI_EMBEDDINGS_MODEL),
            store=PageSectionStore(
                settings.SUPABASE_URL,
                settings.SERVICE_ROLE_KEY,
                schema=settings.SUPABASE_DB_SCHEMA,
            ),
            count_tokens=TokenCounter(settings.TOKENIZER_NAME),
            completions=CompletionClient(
                settings.OPENAI_API_KEY,
                endpoint=settings.OPENAI_COMPLETIONS_ENDPOINT,
                model=settings.OPENAI_COMPLETIONS_MODEL,
                max_tokens=settings.COMPLETION_MAX_TOKENS,
                temperature=settings.COMPLETION_TEMPERATURE,
            ),
            match_threshold=settings.MATCH_THRESHOLD,
            match_count=settings.MATCH_COUNT,
            min_content_length=settings.MIN_CONTENT_LENGTH,
            max_context_tokens=settings.MAX_CONTEXT_TOKENS,
        )

    def retrieve_context(self, sanitized_query: str) -> str:
        embedding = self.embedder.embed(sanitized_query)
        sections = self.store.match_page_sections(
            embedding,
            match_threshold=self.match_threshold,
            match_count=self.match_count,
            min_content_length=self.min_content_length,
        )
        context, token_count = build_context(sections, self.count_tokens, self.max_context_tokens)
        logger.info(
            "Built context from %d matched sections (%d tokens counted, limit %d)",
            len(sections),
            token_count,
            self.max_context_tokens,
        )
        return context

    def answer(self, query: str) -> requests.Response:
        """
        Run the pipeline for a raw query and return the open completion stream.
        Moderation, retrieval and the prompt see the sanitized query; only the
        user message carries the query exactly as received.
        """
        sanitized_query = sanitize_query(query)
        self.moderator.check(sanitized_query)
        context = self.retrieve_context(sanitized_query)
        prompt = build_prompt(context, sanitized_query)
        return self.completions.stream(prompt, query)
