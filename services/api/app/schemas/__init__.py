"""Pydantic schemas for API request/response validation."""

from app.schemas.common import ErrorDetail, ErrorResponse, HTTPErrorResponse
from app.schemas.articles import (
    Article,
    ArticlePage,
    GroupsRequest,
    PostArticleRequest,
    PostArticleResponse,
    VoteRequest,
    VoteResponse,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "HTTPErrorResponse",
    "Article",
    "ArticlePage",
    "GroupsRequest",
    "PostArticleRequest",
    "PostArticleResponse",
    "VoteRequest",
    "VoteResponse",
]
