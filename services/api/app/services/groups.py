"""Group membership service.

Groups are plain SETs of article keys at ``group:<name>``. An article can be
in any number of groups; re-adding is a no-op.
"""

from collections.abc import Iterable

from app.stores.redis import article_key, get_redis, group_key


async def add_groups(article_id: str, groups: Iterable[str]) -> None:
    """Add an article to each of the given groups."""
    article = article_key(article_id)
    async with get_redis().pipeline(transaction=False) as pipe:
        for group in groups:
            pipe.sadd(group_key(group), article)
        await pipe.execute()
