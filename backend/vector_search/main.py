# main.py
from typing import Optional

from fastapi import FastAPI

from vector_search.api.routes import router as api_router
from vector_search.core.config import Settings
from vector_search.core.logger import configure_logging, get_logger
from vector_search.core.rag import RAGPipeline

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None, pipeline: Optional[RAGPipeline] = None) -> FastAPI:
    """
    Build the app with its clients created once and shared read-only by all requests.
    Run with: uvicorn vector_search.main:create_app --factory
    """
    if settings is None:
        settings = Settings().ensure_required()
    configure_logging(settings.LOG_LEVEL)

    if pipeline is None:
        pipeline = RAGPipeline.from_settings(settings)

    app = FastAPI(title="Vector Search", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings
    app.state.pipeline = pipeline
    app.include_router(api_router)
    logger.info(
        "Vector search ready (store %s, embeddings %s, completions %s)",
        settings.SUPABASE_URL,
        settings.OPENAI_EMBEDDINGS_MODEL,
        settings.OPENAI_COMPLETIONS_MODEL,
    )
    return app


def serve() -> None:
    import uvicorn

    settings = Settings().ensure_required()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    serve()
