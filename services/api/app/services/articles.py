"""Article repository: posting and reading articles.

An article is stored as a Redis HASH at ``article:<id>`` and ranked by its key
in two ZSETs:
- ``time:``   score = posting timestamp
- ``score:``  score = posting timestamp + VOTE_SCORE per up-vote

Posting runs as one MULTI/EXEC transaction after the id is allocated, so a
failed write never leaves an article that is hashed but not ranked.
"""

import logging
import time

from app.services.voting import VOTE_SCORE
from app.stores.redis import (
    KEY_ARTICLE_COUNTER,
    TTL_VOTED_SET,
    ZSET_SCORE,
    ZSET_TIME,
    article_key,
    get_redis,
    voted_key,
)

logger = logging.getLogger("uvicorn.error")


async def post_article(user: str, title: str, link: str, *, now: int | None = None) -> str:
    """Post a new article and rank it under both orderings.

    The poster counts as the first up-vote and is seeded into the voter set,
    so they cannot vote on their own article.

    Args:
        user: Poster's user id.
        title: Article title.
        link: Article URL.
        now: Posting timestamp in seconds (defaults to the current time).

    Returns:
        The new article id.
    """
    r = get_redis()
    article_id = str(await r.incr(KEY_ARTICLE_COUNTER))
    if now is None:
        now = int(time.time())

    article = article_key(article_id)
    voted = voted_key(article_id)

    async with r.pipeline(transaction=True) as pipe:
        pipe.sadd(voted, user)
        pipe.expire(voted, TTL_VOTED_SET)
        pipe.hset(
            article,
            mapping={
                "id": article,
                "title": title,
                "link": link,
                "poster": user,
                "time": now,
                "votes": 1,
                "negativeVotes": 0,
            },
        )
        pipe.zadd(ZSET_TIME, {article: now})
        pipe.zadd(ZSET_SCORE, {article: now + VOTE_SCORE})
        await pipe.execute()

    logger.info(f"Article posted: id={article_id} poster={user}")
    return article_id


async def get_article(article_id: str) -> dict[str, str]:
    """Get all fields of an article.

    Returns:
        Field mapping, empty if the article does not exist.
    """
    return await get_redis().hgetall(article_key(article_id))
