"""Article endpoints.

POST /v1/articles                      - Post an article
GET  /v1/articles/{articleId}          - Read an article
POST /v1/articles/{articleId}/votes    - Vote on an article
POST /v1/articles/{articleId}/groups   - Add an article to groups

Routers are thin: call services for business logic.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path

from app.schemas import (
    Article,
    ErrorDetail,
    ErrorResponse,
    GroupsRequest,
    HTTPErrorResponse,
    PostArticleRequest,
    PostArticleResponse,
    VoteRequest,
    VoteResponse,
)
from app.services.articles import get_article, post_article
from app.services.groups import add_groups
from app.services.voting import article_vote

router = APIRouter()

ArticleId = Annotated[
    str,
    Path(
        alias="articleId",
        description="Article identifier",
        pattern=r"^[0-9]+$",
        max_length=20,
    ),
]


def _not_found(article_id: str) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail=ErrorResponse(
            error=ErrorDetail(
                code="ARTICLE_NOT_FOUND",
                message=f"Article {article_id} not found",
                detail={"article_id": article_id},
            )
        ).model_dump(),
    )


@router.post("", response_model=PostArticleResponse, status_code=201)
async def create_article(request: PostArticleRequest) -> PostArticleResponse:
    """Post an article. The poster's own vote is counted."""
    article_id = await post_article(request.user, request.title, request.link)
    data = await get_article(article_id)
    return PostArticleResponse(article_id=article_id, article=Article.from_hash(data))


@router.get("/{articleId}", response_model=Article, responses={404: {"model": HTTPErrorResponse}})
async def read_article(article_id: ArticleId) -> Article:
    """Get an article by id.

    Raises:
        HTTPException 404: If the article does not exist.
    """
    data = await get_article(article_id)
    if not data:
        raise _not_found(article_id)
    return Article.from_hash(data)


@router.post("/{articleId}/votes", response_model=VoteResponse)
async def vote(request: VoteRequest, article_id: ArticleId) -> VoteResponse:
    """Vote on an article.

    Stale and duplicate votes are reported in ``outcome``, not as errors.
    """
    outcome = await article_vote(request.user, article_id, negative=request.negative)
    return VoteResponse(outcome=outcome.value)


@router.post(
    "/{articleId}/groups",
    status_code=204,
    responses={404: {"model": HTTPErrorResponse}},
)
async def add_to_groups(request: GroupsRequest, article_id: ArticleId) -> None:
    """Add an article to groups.

    Raises:
        HTTPException 404: If the article does not exist.
    """
    if not await get_article(article_id):
        raise _not_found(article_id)
    await add_groups(article_id, request.groups)
