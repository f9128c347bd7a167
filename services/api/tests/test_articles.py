import pytest

from app.services.articles import get_article, post_article
from app.services.voting import ONE_WEEK_IN_SECONDS, VOTE_SCORE
from app.stores import redis as redis_store
from app.stores.redis import ZSET_SCORE, ZSET_TIME, get_redis

NOW = 1_700_000_000


@pytest.mark.asyncio
async def test_post_article_returns_fresh_ids(fake_redis):
    ids = [await post_article("u1", f"title {i}", "https://example.com") for i in range(3)]
    assert ids == ["1", "2", "3"]


@pytest.mark.asyncio
async def test_post_article_stores_fields(fake_redis):
    article_id = await post_article("u1", "A title", "https://example.com/a", now=NOW)

    assert await get_article(article_id) == {
        "id": f"article:{article_id}",
        "title": "A title",
        "link": "https://example.com/a",
        "poster": "u1",
        "time": str(NOW),
        "votes": "1",
        "negativeVotes": "0",
    }


@pytest.mark.asyncio
async def test_post_article_ranks_under_time_and_score(fake_redis):
    article_id = await post_article("u1", "A title", "https://example.com/a", now=NOW)
    member = f"article:{article_id}"

    assert await fake_redis.zscore(ZSET_TIME, member) == NOW
    assert await fake_redis.zscore(ZSET_SCORE, member) == NOW + VOTE_SCORE


@pytest.mark.asyncio
async def test_post_article_seeds_voter_set_with_poster(fake_redis):
    article_id = await post_article("u1", "A title", "https://example.com/a", now=NOW)

    assert await fake_redis.smembers(f"voted:{article_id}") == {"u1"}
    ttl = await fake_redis.ttl(f"voted:{article_id}")
    assert 0 < ttl <= ONE_WEEK_IN_SECONDS


@pytest.mark.asyncio
async def test_get_article_missing_is_empty(fake_redis):
    assert await get_article("404") == {}


def test_get_redis_requires_init(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(redis_store, "_redis", None)
    with pytest.raises(RuntimeError):
        get_redis()
