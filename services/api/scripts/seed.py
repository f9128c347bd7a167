#!/usr/bin/env python3
"""Seed Redis with sample articles, votes and groups.

Posts a handful of articles, casts up/down votes from a pool of users and
files the articles into groups, then prints the first page of each ordering.

Run (local):
  cd services/api
  python -m scripts.seed

Optional env vars:
  REDIS_URL="redis://localhost:6379/15"
  SEED_VOTERS=20
"""

import asyncio
import os
import random
import sys


# Ensure imports work when executed as a script/module
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.services.articles import post_article  # noqa: E402
from app.services.groups import add_groups  # noqa: E402
from app.services.ranking import get_articles, get_group_articles  # noqa: E402
from app.services.voting import VoteOutcome, article_vote  # noqa: E402
from app.stores.redis import (  # noqa: E402
    ZSET_NEGATIVE_SCORE,
    ZSET_SCORE,
    ZSET_TIME,
    close_redis,
    init_redis,
)

SAMPLE_ARTICLES = [
    ("alice", "Sorted sets in practice", "https://redis.io/docs/data-types/sorted-sets/", ["redis"]),
    ("bob", "Async Python for services", "https://docs.python.org/3/library/asyncio.html", ["python"]),
    ("carol", "Ranking with time decay", "https://news.ycombinator.com/", ["redis", "ranking"]),
    ("dave", "FastAPI dependency patterns", "https://fastapi.tiangolo.com/", ["python"]),
]


def _titles(rows: list[dict[str, str]]) -> list[str]:
    return [row.get("title", "") for row in rows]


async def main() -> None:
    await init_redis()
    try:
        voters = [f"voter-{i}" for i in range(int(os.getenv("SEED_VOTERS", "20")))]
        rng = random.Random(42)

        article_ids: list[str] = []
        for user, title, link, groups in SAMPLE_ARTICLES:
            article_id = await post_article(user, title, link)
            await add_groups(article_id, groups)
            article_ids.append(article_id)

        outcomes = {outcome.value: 0 for outcome in VoteOutcome}
        for voter in voters:
            article_id = rng.choice(article_ids)
            outcome = await article_vote(voter, article_id, negative=rng.random() < 0.25)
            outcomes[outcome.value] += 1

        print(
            {
                "ok": True,
                "articles": article_ids,
                "votes": outcomes,
                "score": _titles(await get_articles(1, ZSET_SCORE)),
                "negative": _titles(await get_articles(1, ZSET_NEGATIVE_SCORE)),
                "time": _titles(await get_articles(1, ZSET_TIME)),
                "group:redis": _titles(await get_group_articles("redis", 1)),
            }
        )
    finally:
        await close_redis()


if __name__ == "__main__":
    asyncio.run(main())
