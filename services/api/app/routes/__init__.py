"""API routes."""

from fastapi import APIRouter

from app.routes import articles, rankings

api_router = APIRouter()

# Article endpoints (post, read, vote, groups)
api_router.include_router(articles.router, prefix="/v1/articles", tags=["articles"])

# Ranking endpoints (global and group pages)
api_router.include_router(rankings.router, prefix="/v1", tags=["rankings"])
