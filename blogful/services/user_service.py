"""
User service: CRUD operations for the User aggregate.

Users are only referenced by comments; there is no login, so a user row is
a display identity and nothing more.
"""
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blogful.database import flush_or_fail
from blogful.models import User
from blogful.schemas import UserCreate
from blogful.services.article_service import isoformat


def user_to_dict(user: User) -> dict:
    """Serialise a User ORM instance to a plain dict."""
    return {
        "id": user.id,
        "fullname": user.fullname,
        "username": user.username,
        "nickname": user.nickname,
        "date_created": isoformat(user.date_created),
    }


async def list_users(db: AsyncSession) -> list[dict]:
    """Return all users in insertion order."""
    result = await db.execute(select(User).order_by(User.id))
    return [user_to_dict(u) for u in result.scalars().all()]


async def get_user(db: AsyncSession, user_id: int) -> dict | None:
    user = await db.get(User, user_id)
    if user is None:
        return None
    return user_to_dict(user)


async def insert_user(db: AsyncSession, data: UserCreate) -> dict:
    """
    Create a new user and return its serialised dict.

    Username uniqueness is enforced at the database level (unique
    constraint); the router is responsible for translating the resulting
    ``IntegrityError`` into a 409 response.
    """
    user = User(
        fullname=data.fullname,
        username=data.username,
        nickname=data.nickname,
        date_created=datetime.now(timezone.utc),
    )
    db.add(user)
    # Raw flush: the router maps the IntegrityError of a duplicate username to 409.
    await db.flush()
    return user_to_dict(user)


async def delete_user(db: AsyncSession, user_id: int) -> bool:
    user = await db.get(User, user_id)
    if user is None:
        return False

    await db.delete(user)
    await flush_or_fail(db)
    return True
