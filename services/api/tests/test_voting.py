import pytest

from app.services.articles import get_article, post_article
from app.services.voting import ONE_WEEK_IN_SECONDS, VOTE_SCORE, VoteOutcome, article_vote
from app.stores.redis import ZSET_NEGATIVE_SCORE, ZSET_SCORE

NOW = 1_700_000_000


@pytest.fixture
async def article_id(fake_redis) -> str:
    return await post_article("u1", "A title", "https://example.com/a", now=NOW)


@pytest.mark.asyncio
async def test_up_vote_increments_votes_and_score(fake_redis, article_id):
    outcome = await article_vote("u2", article_id, now=NOW + 60)

    assert outcome is VoteOutcome.ACCEPTED
    article = await get_article(article_id)
    assert article["votes"] == "2"
    assert article["negativeVotes"] == "0"
    assert await fake_redis.zscore(ZSET_SCORE, f"article:{article_id}") == NOW + 2 * VOTE_SCORE


@pytest.mark.asyncio
async def test_down_vote_increments_negative_votes_and_negative_score(fake_redis, article_id):
    outcome = await article_vote("u3", article_id, negative=True, now=NOW + 60)

    assert outcome is VoteOutcome.ACCEPTED
    article = await get_article(article_id)
    assert article["votes"] == "1"
    assert article["negativeVotes"] == "1"
    assert await fake_redis.zscore(ZSET_NEGATIVE_SCORE, f"article:{article_id}") == VOTE_SCORE
    assert await fake_redis.zscore(ZSET_SCORE, f"article:{article_id}") == NOW + VOTE_SCORE


@pytest.mark.asyncio
async def test_second_vote_by_same_user_changes_nothing(fake_redis, article_id):
    assert await article_vote("u2", article_id, now=NOW + 60) is VoteOutcome.ACCEPTED

    # Switching sides does not get around the dedup either
    assert await article_vote("u2", article_id, now=NOW + 61) is VoteOutcome.REJECTED_DUPLICATE
    assert (
        await article_vote("u2", article_id, negative=True, now=NOW + 62)
        is VoteOutcome.REJECTED_DUPLICATE
    )

    article = await get_article(article_id)
    assert article["votes"] == "2"
    assert article["negativeVotes"] == "0"
    assert await fake_redis.zscore(ZSET_SCORE, f"article:{article_id}") == NOW + 2 * VOTE_SCORE
    assert await fake_redis.zscore(ZSET_NEGATIVE_SCORE, f"article:{article_id}") is None


@pytest.mark.asyncio
async def test_poster_cannot_vote_on_own_article(fake_redis, article_id):
    assert await article_vote("u1", article_id, now=NOW + 60) is VoteOutcome.REJECTED_DUPLICATE
    assert (await get_article(article_id))["votes"] == "1"


@pytest.mark.asyncio
async def test_vote_after_one_week_has_no_effect(fake_redis, article_id):
    before = await get_article(article_id)

    outcome = await article_vote("u2", article_id, now=NOW + ONE_WEEK_IN_SECONDS + 1)

    assert outcome is VoteOutcome.REJECTED_STALE
    assert await get_article(article_id) == before
    assert await fake_redis.zscore(ZSET_SCORE, f"article:{article_id}") == NOW + VOTE_SCORE
    # The user was never recorded, so the stale check runs before dedup
    assert not await fake_redis.sismember(f"voted:{article_id}", "u2")


@pytest.mark.asyncio
async def test_vote_exactly_one_week_after_posting_is_accepted(fake_redis, article_id):
    outcome = await article_vote("u2", article_id, now=NOW + ONE_WEEK_IN_SECONDS)
    assert outcome is VoteOutcome.ACCEPTED


@pytest.mark.asyncio
async def test_vote_on_missing_article(fake_redis):
    assert await article_vote("u2", "999", now=NOW) is VoteOutcome.NOT_FOUND
    assert await fake_redis.exists("voted:999", "article:999") == 0
