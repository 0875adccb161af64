# backend/vector_search/core/config.py
import os
from pathlib import Path
from typing import List
from dotenv import load_dotenv

from vector_search.core.errors import MissingEnvironmentError

BASE_DIR = Path(__file__).resolve().parents[2]  # backend/
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH)


def get_env(name: str, default: str = "") -> str:
    """
    Read an environment variable; empty values count as unset so defaults apply.
    """
    value = os.getenv(name, "").strip()
    return value or default


# Headers sent with every response so browser callers can read error bodies cross-origin
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

CORS_STREAMING_HEADERS = {
    **CORS_HEADERS,
    "Content-Type": "text/event-stream",
}


class Settings:
    REQUIRED = ("SERVICE_ROLE_KEY", "OPENAI_API_KEY")

    def __init__(self):
        # Vector store (Supabase / PostgREST)
        self.SUPABASE_URL: str = get_env("NEXT_PUBLIC_SUPABASE_URL", "http://localhost:54321").rstrip("/")
        self.SUPABASE_DB_SCHEMA: str = get_env("SUPABASE_DB_SCHEMA", "docs")
        self.SERVICE_ROLE_KEY: str = get_env("SERVICE_ROLE_KEY")

        # Model provider
        self.OPENAI_API_KEY: str = get_env("OPENAI_API_KEY")
        self.OPENAI_EMBEDDINGS_MODEL: str = get_env("OPENAI_EMBEDDINGS_MODEL", "text-embedding-ada-002")
        self.OPENAI_COMPLETIONS_MODEL: str = get_env("OPENAI_COMPLETIONS_MODEL", "gpt-3.5-turbo")
        self.OPENAI_COMPLETIONS_ENDPOINT: str = get_env(
            "OPENAI_COMPLETIONS_ENDPOINT", "https://api.openai.com/v1/chat/completions"
        )

        # Token counting (GPT-2 BPE is the vocabulary of the gpt3 tokenizer)
        self.TOKENIZER_NAME: str = get_env("TOKENIZER_NAME", "gpt2")

        # Retrieval / context budget
        self.MATCH_THRESHOLD: float = float(get_env("MATCH_THRESHOLD", "0.78"))
        self.MATCH_COUNT: int = int(get_env("MATCH_COUNT", "10"))
        self.MIN_CONTENT_LENGTH: int = int(get_env("MIN_CONTENT_LENGTH", "50"))
        self.MAX_CONTEXT_TOKENS: int = int(get_env("MAX_CONTEXT_TOKENS", "1500"))

        # Completion options
        self.COMPLETION_MAX_TOKENS: int = int(get_env("COMPLETION_MAX_TOKENS", "512"))
        self.COMPLETION_TEMPERATURE: float = float(get_env("COMPLETION_TEMPERATURE", "0"))

        # Server / logging
        self.LOG_LEVEL: str = get_env("LOG_LEVEL", "INFO").upper()
        self.HOST: str = get_env("HOST", "0.0.0.0")
        self.PORT: int = int(get_env("PORT", "8000"))

    def missing_required(self) -> List[str]:
        return [name for name in self.REQUIRED if not getattr(self, name)]

    def ensure_required(self) -> "Settings":
        missing = self.missing_required()
        if missing:
            raise MissingEnvironmentError(missing)
        return self
