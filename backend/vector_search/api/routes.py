# backend/vector_search/api/routes.py
from fastapi import APIRouter, BackgroundTasks, Request
from fastapi.responses import JSONResponse, PlainTextResponse, StreamingResponse
from typing import Optional

from vector_search.core.completions import iter_stream
from vector_search.core.config import CORS_HEADERS, CORS_STREAMING_HEADERS
from vector_search.core.errors import ApplicationError, UserError
from vector_search.core.logger import get_logger
from vector_search.utils import to_log_json

router = APIRouter()
logger = get_logger(__name__)

GENERIC_ERROR = "There was an error processing your request"

# every method except OPTIONS (preflight) runs the pipeline
ANSWER_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "TRACE", "CONNECT"]


def error_response(err: Exception) -> JSONResponse:
    """
    Map a pipeline failure to its HTTP response.
    Only UserError details reach the caller; everything else gets the generic body.
    """
    if isinstance(err, UserError):
        body = {"error": err.message}
        if err.data is not None:
            body["data"] = err.data
        return JSONResponse(body, status_code=400, headers=CORS_HEADERS)

    if isinstance(err, ApplicationError):
        logger.error("%s: %s", err.message, to_log_json(err.data))
    else:
        logger.exception("Unexpected error while answering query", exc_info=err)
    return JSONResponse({"error": GENERIC_ERROR}, status_code=500, headers=CORS_HEADERS)


# ---------- Endpoints ----------
@router.options("/{path:path}")
def preflight(path: str):
    return PlainTextResponse("ok", headers=CORS_HEADERS)


@router.api_route("/{path:path}", methods=ANSWER_METHODS)
def answer(request: Request, path: str, query: Optional[str] = None):
    try:
        # the query must be non-empty after trimming; whitespace-only counts as missing
        if not query or not query.strip():
            raise UserError("Missing query in request data")
        completion = request.app.state.pipeline.answer(query)
    except Exception as err:
        return error_response(err)

    # relay the provider stream as-is; close it once the relay ends
    cleanup = BackgroundTasks()
    cleanup.add_task(completion.close)
    return StreamingResponse(iter_stream(completion), headers=CORS_STREAMING_HEADERS, background=cleanup)
