"""Schemas for the article, vote and ranking endpoints."""

from pydantic import BaseModel, Field

from app.stores.redis import article_id_from_key


class Article(BaseModel):
    """An article as stored in its Redis hash."""

    article_id: str = Field(alias="articleId")
    title: str
    link: str
    poster: str
    posted_at: int = Field(alias="postedAt")
    votes: int = Field(ge=0)
    negative_votes: int = Field(alias="negativeVotes", ge=0)

    model_config = {"populate_by_name": True}

    @classmethod
    def from_hash(cls, data: dict[str, str]) -> "Article":
        """Build from the string fields returned by HGETALL."""
        return cls(
            article_id=article_id_from_key(data["id"]),
            title=data["title"],
            link=data["link"],
            poster=data["poster"],
            posted_at=data["time"],
            votes=data["votes"],
            negative_votes=data.get("negativeVotes", 0),
        )


class PostArticleRequest(BaseModel):
    """Request body for posting an article."""

    user: str = Field(min_length=1, max_length=100)
    title: str = Field(min_length=1, max_length=300)
    link: str = Field(min_length=1, max_length=2048)


class PostArticleResponse(BaseModel):
    article_id: str = Field(alias="articleId")
    article: Article

    model_config = {"populate_by_name": True}


class VoteRequest(BaseModel):
    """Request body for voting on an article."""

    user: str = Field(min_length=1, max_length=100)
    negative: bool = False


class VoteResponse(BaseModel):
    """Vote outcome: accepted, rejected_stale, rejected_duplicate or not_found."""

    outcome: str


class GroupsRequest(BaseModel):
    groups: list[str] = Field(min_length=1)


class ArticlePage(BaseModel):
    """One page of a ranking."""

    ordering: str
    group: str | None = None
    page: int = Field(ge=1)
    articles: list[Article]
