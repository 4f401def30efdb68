"""
Reusable FastAPI dependencies that resolve a path id to a stored row.

Usage in a router::

    @router.get("/{article_id}")
    async def get_article(article: dict = Depends(get_article_or_404)):
        ...

Each dependency receives the request's session through ``get_db`` and
raises ``NotFound`` before the endpoint body runs, so every endpoint that
addresses a single row answers 404 the same way.
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blogful.database import get_db
from blogful.exceptions import NotFound
from blogful.services import article_service, comment_service, user_service


async def get_article_or_404(article_id: int, db: AsyncSession = Depends(get_db)) -> dict:
    article = await article_service.get_article(db, article_id)
    if article is None:
        raise NotFound("Article")
    return article


async def get_user_or_404(user_id: int, db: AsyncSession = Depends(get_db)) -> dict:
    user = await user_service.get_user(db, user_id)
    if user is None:
        raise NotFound("User")
    return user


async def get_comment_or_404(comment_id: int, db: AsyncSession = Depends(get_db)) -> dict:
    comment = await comment_service.get_comment(db, comment_id)
    if comment is None:
        raise NotFound("Comment")
    return comment
