"""Ranking endpoints.

GET /v1/rankings/{ordering}?page=          - Global ranking page
GET /v1/groups/{group}/articles?page=&order=  - Group ranking page (cached 60s)
"""

from enum import Enum

from fastapi import APIRouter, Path, Query

from app.schemas import Article, ArticlePage
from app.services.ranking import MAX_PAGE, get_articles, get_group_articles
from app.stores.redis import ZSET_NEGATIVE_SCORE, ZSET_SCORE, ZSET_TIME

router = APIRouter()


class Ordering(str, Enum):
    """Public names of the global rank sets."""

    SCORE = "score"
    NEGATIVE = "negative"
    TIME = "time"


_ORDERING_KEYS = {
    Ordering.SCORE: ZSET_SCORE,
    Ordering.NEGATIVE: ZSET_NEGATIVE_SCORE,
    Ordering.TIME: ZSET_TIME,
}


def _to_articles(rows: list[dict[str, str]]) -> list[Article]:
    # Ranked keys whose hash is missing come back empty
    return [Article.from_hash(row) for row in rows if row]


@router.get("/rankings/{ordering}", response_model=ArticlePage)
async def get_ranking(
    ordering: Ordering = Path(description="Rank set to page through"),
    page: int = Query(default=1, ge=1, le=MAX_PAGE, description="1-based page number"),
) -> ArticlePage:
    """Get a page of the global ranking, highest score first."""
    rows = await get_articles(page, _ORDERING_KEYS[ordering])
    return ArticlePage(ordering=ordering.value, page=page, articles=_to_articles(rows))


@router.get("/groups/{group}/articles", response_model=ArticlePage)
async def get_group_ranking(
    group: str = Path(min_length=1, max_length=100, description="Group name"),
    page: int = Query(default=1, ge=1, le=MAX_PAGE, description="1-based page number"),
    order: Ordering = Query(default=Ordering.SCORE, description="Rank set to rank the group by"),
) -> ArticlePage:
    """Get a page of a group's articles.

    The group ranking is materialized on first request and reused for up to
    60 seconds.
    """
    rows = await get_group_articles(group, page, _ORDERING_KEYS[order])
    return ArticlePage(
        ordering=order.value,
        group=group,
        page=page,
        articles=_to_articles(rows),
    )
