"""Search router.

POST /api/search
    Embed the question, run the ``match_posts`` similarity RPC and return
    the matching posts.
"""

import logging

from fastapi import APIRouter, Request
from postgrest.exceptions import APIError

from ..config import DEFAULT_EMBEDDING_MODEL
from ..errors import SearchError
from ..lib.database import MATCH_COUNT, match_posts
from ..lib.embeddings import embed_question
from ..models import ErrorResponse, SearchRequest, SearchResponse

router = APIRouter(tags=["search"])

logger = logging.getLogger(__name__)


@router.post(
    "/api/search",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search(
    request: Request,
    payload: SearchRequest | None = None,
) -> SearchResponse:
    """Return the posts most similar to ``question``, best match first."""
    question = payload.question if payload else None
    if not question or not question.strip():
        raise SearchError(400, "Question is required")

    try:
        return await _search_posts(request, question)
    except SearchError:
        raise
    except Exception as exc:
        logger.exception("Search request failed")
        raise SearchError(
            500, "Internal server error", details=str(exc) or "Unknown error"
        ) from exc


async def _search_posts(request: Request, question: str) -> SearchResponse:
    # Both clients are created in the application lifespan (see main.py).
    # Tests set `app.state.openai` and `app.state.supabase` to fakes.
    state = request.app.state
    model = getattr(state, "embedding_model", DEFAULT_EMBEDDING_MODEL)

    embedding = await embed_question(state.openai, question, model=model)
    if not embedding:
        logger.error("No embedding returned for question (model=%s)", model)
        raise SearchError(500, "Failed to generate embedding")

    try:
        rows = await match_posts(state.supabase, embedding, match_count=MATCH_COUNT)
    except APIError as exc:
        message = exc.message or str(exc)
        logger.error("Supabase error: %s", message)
        raise SearchError(500, "Database query failed", details=message) from exc

    logger.debug("Search returned %d posts", len(rows))
    return SearchResponse(results=rows[:MATCH_COUNT])
