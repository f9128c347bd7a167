"""Ranking service for front-page article pages.

Ranking logic:
1. Global orderings read a rank ZSET directly (``score:``, ``negativeScore:``,
   ``time:``), highest score first
2. Equal scores fall back to Redis' ZREVRANGE rule: article keys in
   descending lexicographic order
3. Group orderings intersect ``group:<name>`` with a rank ZSET (MAX aggregate)
   into ``<order><name>``, cached for 60 seconds and rebuilt lazily on miss

Pages are 1-based with 25 articles each, up to MAX_PAGE.
"""

import logging

from app.stores.redis import (
    TTL_GROUP_RANKING,
    ZSET_SCORE,
    get_redis,
    group_key,
    group_ranking_key,
)

ARTICLES_PER_PAGE = 25
# Keeps the ZREVRANGE start index far below Redis' signed 64-bit limit
MAX_PAGE = 1_000_000_000

logger = logging.getLogger("uvicorn.error")


class RankingError(ValueError):
    pass


def _check_page(page: int) -> None:
    if not 1 <= page <= MAX_PAGE:
        raise RankingError(f"Page must be between 1 and {MAX_PAGE}, got {page}")


async def get_articles(page: int, order: str = ZSET_SCORE) -> list[dict[str, str]]:
    """Get one page of articles from a rank ZSET.

    Args:
        page: 1-based page number.
        order: Rank ZSET key (a global ordering or a group ranking cache key).

    Returns:
        Article field mappings, highest score first. Articles whose hash is
        gone come back as empty mappings.
    """
    _check_page(page)

    start = (page - 1) * ARTICLES_PER_PAGE
    end = start + ARTICLES_PER_PAGE - 1

    r = get_redis()
    ids = await r.zrevrange(order, start, end)
    if not ids:
        return []

    async with r.pipeline(transaction=False) as pipe:
        for article in ids:
            pipe.hgetall(article)
        return await pipe.execute()


async def get_group_articles(
    group: str,
    page: int,
    order: str = ZSET_SCORE,
) -> list[dict[str, str]]:
    """Get one page of a group's articles under the given ordering.

    Args:
        group: Group name.
        page: 1-based page number.
        order: Global rank ZSET key to rank the group by.

    Returns:
        Article field mappings, highest score first.
    """
    _check_page(page)
    key = group_ranking_key(order, group)
    r = get_redis()
    if not await r.exists(key):
        # ZINTERSTORE and EXPIRE together: the cache key never exists without a TTL
        async with r.pipeline(transaction=True) as pipe:
            pipe.zinterstore(key, [group_key(group), order], aggregate="MAX")
            pipe.expire(key, TTL_GROUP_RANKING)
            members, _ = await pipe.execute()
        logger.info(f"Group ranking rebuilt: key={key} members={members}")
    return await get_articles(page, key)
