"""Voting service.

Vote rules:
1. Articles accept votes for one week after posting (by the ``time:`` ZSET)
2. Each user votes at most once per article (SADD on ``voted:<id>``). The
   SADD commits before the score transaction; if that transaction fails the
   vote is lost and a retry reports a duplicate
3. An accepted vote adds VOTE_SCORE to the article's rank entry and bumps the
   matching counter field, in one transaction

VOTE_SCORE = 86400 / 200: an article needs 200 up-votes to stay level with
articles posted one day later.
"""

from enum import Enum
import logging
import time

from app.stores.redis import (
    ZSET_NEGATIVE_SCORE,
    ZSET_SCORE,
    ZSET_TIME,
    article_key,
    get_redis,
    voted_key,
)

ONE_WEEK_IN_SECONDS = 7 * 86400
VOTE_SCORE = 432

logger = logging.getLogger("uvicorn.error")


class VoteOutcome(Enum):
    """Result of a vote attempt."""

    ACCEPTED = "accepted"
    REJECTED_STALE = "rejected_stale"  # Posted more than a week ago
    REJECTED_DUPLICATE = "rejected_duplicate"  # User already voted
    NOT_FOUND = "not_found"  # No such article


async def article_vote(
    user: str,
    article_id: str,
    *,
    negative: bool = False,
    now: int | None = None,
) -> VoteOutcome:
    """Register a user's vote on an article.

    Rejections are outcomes, not errors. Redis failures propagate.

    Args:
        user: Voting user id.
        article_id: Article identifier.
        negative: Down-vote instead of up-vote.
        now: Current timestamp in seconds (defaults to the current time).

    Returns:
        VoteOutcome describing what happened.
    """
    r = get_redis()
    if now is None:
        now = int(time.time())
    cutoff = now - ONE_WEEK_IN_SECONDS
    article = article_key(article_id)

    posted_at = await r.zscore(ZSET_TIME, article)
    if posted_at is None:
        logger.debug(f"Vote rejected: article {article_id} not found")
        return VoteOutcome.NOT_FOUND
    if posted_at < cutoff:
        logger.debug(f"Vote rejected: article {article_id} is older than one week")
        return VoteOutcome.REJECTED_STALE

    # SADD reply is the dedup gate: 0 means the user was already a member
    if not await r.sadd(voted_key(article_id), user):
        logger.debug(f"Vote rejected: {user} already voted on article {article_id}")
        return VoteOutcome.REJECTED_DUPLICATE

    rank_set, counter = (ZSET_NEGATIVE_SCORE, "negativeVotes") if negative else (ZSET_SCORE, "votes")
    async with r.pipeline(transaction=True) as pipe:
        pipe.zincrby(rank_set, VOTE_SCORE, article)
        pipe.hincrby(article, counter, 1)
        await pipe.execute()

    return VoteOutcome.ACCEPTED
