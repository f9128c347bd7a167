"""Redis store for articles, votes, rank sets and groups.

Handles:
- Connection lifecycle (shared client, initialized on startup)
- Key naming for every entity kept in Redis

Key layout:
- article:            INCR counter for article ids
- article:<id>        HASH with the article fields
- voted:<id>          SET of users who voted (expires one week after posting)
- score: / negativeScore: / time:   ZSETs of article keys
- group:<name>        SET of article keys
- <order><name>       ZSET cache of a group ranking (expires after 60 seconds)
"""

import logging

import redis.asyncio as redis

from app.settings import get_settings

# TTL constants (in seconds)
TTL_VOTED_SET = 7 * 86400  # 1 week
TTL_GROUP_RANKING = 60  # 1 minute

# Key prefixes
PREFIX_ARTICLE = "article:"
PREFIX_VOTED = "voted:"
PREFIX_GROUP = "group:"

# Global keys
KEY_ARTICLE_COUNTER = "article:"
ZSET_SCORE = "score:"
ZSET_NEGATIVE_SCORE = "negativeScore:"
ZSET_TIME = "time:"

# Redis client (initialized on startup)
_redis: redis.Redis | None = None
logger = logging.getLogger("uvicorn.error")


async def init_redis() -> None:
    """Initialize Redis connection."""
    global _redis
    settings = get_settings()
    _redis = redis.from_url(
        settings.redis_url,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
    )
    await _redis.ping()
    logger.info("Redis connected")


async def close_redis() -> None:
    """Close Redis connection."""
    global _redis
    if _redis:
        await _redis.aclose()
        _redis = None


def get_redis() -> redis.Redis:
    """Get Redis client instance."""
    if _redis is None:
        raise RuntimeError("Redis not initialized. Call init_redis() first.")
    return _redis


# ============================================================
# Key naming
# ============================================================


def article_key(article_id: str) -> str:
    """Hash key holding an article's fields (also its rank set member)."""
    return f"{PREFIX_ARTICLE}{article_id}"


def voted_key(article_id: str) -> str:
    """Set key holding the users who already voted on an article."""
    return f"{PREFIX_VOTED}{article_id}"


def group_key(group: str) -> str:
    return f"{PREFIX_GROUP}{group}"


def group_ranking_key(order: str, group: str) -> str:
    """Cache key for a group ranking, e.g. ``score:python``."""
    return f"{order}{group}"


def article_id_from_key(key: str) -> str:
    """Extract the article id from an article key.

    Example:
        >>> article_id_from_key("article:42")
        "42"
    """
    return key.partition(":")[2]
