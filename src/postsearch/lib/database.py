"""Supabase helpers.

The nearest-neighbour search itself runs inside the database as the
``match_posts`` stored procedure; this module only calls it.
"""

import logging

logger = logging.getLogger(__name__)

MATCH_POSTS_FUNCTION = "match_posts"

# Number of posts requested per question.
MATCH_COUNT = 5


async def match_posts(
    client,
    query_embedding: list[float],
    match_count: int = MATCH_COUNT,
) -> list[dict]:
    """Run the ``match_posts`` RPC and return its rows, most similar first.

    ``client`` is a ``supabase.AsyncClient``.  A ``null`` result is returned
    as an empty list.  ``postgrest.exceptions.APIError`` raised by the RPC is
    left to the caller.
    """
    resp = await client.rpc(
        MATCH_POSTS_FUNCTION,
        {"query_embedding": query_embedding, "match_count": match_count},
    ).execute()

    rows = getattr(resp, "data", None) or []
    logger.debug("%s returned %d rows", MATCH_POSTS_FUNCTION, len(rows))
    return rows
