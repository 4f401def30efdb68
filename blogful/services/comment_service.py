"""
Comment service: persistence for comments attached to an Article.

Comments cannot be edited through the API; they are created, read and
deleted.  Creating one checks that the parent article exists first so the
router can answer 404 instead of surfacing a foreign-key failure.
"""
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blogful.database import flush_or_fail
from blogful.exceptions import NotFound
from blogful.models import Article, Comment, User
from blogful.schemas import CommentCreate
from blogful.services.article_service import isoformat


def comment_to_dict(comment: Comment) -> dict:
    return {
        "id": comment.id,
        "content": comment.content,
        "article_id": comment.article_id,
        "user_id": comment.user_id,
        "date_commented": isoformat(comment.date_commented),
    }


async def list_comments(db: AsyncSession) -> list[dict]:
    result = await db.execute(select(Comment).order_by(Comment.id))
    return [comment_to_dict(c) for c in result.scalars().all()]


async def get_comment(db: AsyncSession, comment_id: int) -> dict | None:
    comment = await db.get(Comment, comment_id)
    if comment is None:
        return None
    return comment_to_dict(comment)


async def insert_comment(db: AsyncSession, data: CommentCreate) -> dict:
    """
    Insert a comment on ``data.article_id`` and return the stored row.

    Raises ``NotFound`` when the referenced article (or user, if given)
    does not exist.
    """
    if await db.get(Article, data.article_id) is None:
        raise NotFound("Article")
    if data.user_id is not None and await db.get(User, data.user_id) is None:
        raise NotFound("User")

    comment = Comment(
        content=data.content,
        article_id=data.article_id,
        user_id=data.user_id,
        date_commented=datetime.now(timezone.utc),
    )
    db.add(comment)
    await flush_or_fail(db)
    return comment_to_dict(comment)


async def delete_comment(db: AsyncSession, comment_id: int) -> bool:
    comment = await db.get(Comment, comment_id)
    if comment is None:
        return False

    await db.delete(comment)
    await flush_or_fail(db)
    return True
