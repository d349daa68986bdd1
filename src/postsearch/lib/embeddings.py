"""Question embedding via the OpenAI embeddings API."""

import logging

from ..config import DEFAULT_EMBEDDING_MODEL

logger = logging.getLogger(__name__)


async def embed_question(
    client,
    question: str,
    model: str = DEFAULT_EMBEDDING_MODEL,
) -> list[float] | None:
    """Return the embedding vector for *question*.

    ``client`` is an ``openai.AsyncOpenAI`` instance (or anything exposing an
    async ``embeddings.create``).  The question is sent as a single-element
    input list.  Returns ``None`` when the provider answers without a usable
    vector.
    """
    resp = await client.embeddings.create(model=model, input=[question])

    data = getattr(resp, "data", None) or []
    if not data:
        logger.warning("Embedding response contained no data (model=%s)", model)
        return None

    vector = getattr(data[0], "embedding", None)
    if not vector:
        logger.warning("Embedding response contained an empty vector (model=%s)", model)
        return None
    return list(vector)
