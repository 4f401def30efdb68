"""
Article service: persistence for the Article aggregate.

Design notes
------------
- Functions return plain dicts holding exactly what was stored.
  Sanitization is the router's job, on both the write and the read path.
- ``date_published`` is always assigned here, at insert time; any value the
  client sent is ignored.
- Service functions flush but do not commit; the transaction boundary
  is owned by the ``get_db`` dependency in the router layer.
"""
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blogful.database import flush_or_fail
from blogful.models import Article
from blogful.schemas import ArticleCreate, ArticleUpdate


# ---------------------------------------------------------------------------
# Serialisation helpers
# ---------------------------------------------------------------------------

def isoformat(value: datetime | None) -> str | None:
    """
    ISO-8601 string for *value*, always carrying a UTC offset.

    Some backends (SQLite) hand timezone-aware columns back naive, so a
    naive value is taken to be UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def article_to_dict(article: Article) -> dict:
    """Serialise an Article ORM instance to a plain dict."""
    return {
        "id": article.id,
        "title": article.title,
        "style": article.style,
        "content": article.content,
        "date_published": isoformat(article.date_published),
    }


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

async def list_articles(db: AsyncSession) -> list[dict]:
    """Return every article in insertion order."""
    result = await db.execute(select(Article).order_by(Article.id))
    return [article_to_dict(a) for a in result.scalars().all()]


async def get_article(db: AsyncSession, article_id: int) -> dict | None:
    """Return the article dict for *article_id*, or None when absent."""
    article = await db.get(Article, article_id)
    if article is None:
        return None
    return article_to_dict(article)


async def insert_article(db: AsyncSession, data: ArticleCreate) -> dict:
    """Insert a new article and return the stored row."""
    article = Article(
        title=data.title,
        style=data.style,
        content=data.content,
        date_published=datetime.now(timezone.utc),
    )
    db.add(article)
    await flush_or_fail(db)
    return article_to_dict(article)


async def update_article(
    db: AsyncSession, article_id: int, data: ArticleUpdate
) -> dict | None:
    """
    Merge the fields explicitly set on *data* into the stored article.

    Returns the updated dict, or None when the article does not exist.
    Fields not supplied are left untouched
    (``model_dump(exclude_unset=True)``).
    """
    article = await db.get(Article, article_id)
    if article is None:
        return None

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(article, field, value)

    await flush_or_fail(db)
    return article_to_dict(article)


async def delete_article(db: AsyncSession, article_id: int) -> bool:
    """
    Delete the article identified by *article_id*.

    Returns True on success, False when the article does not exist.
    """
    article = await db.get(Article, article_id)
    if article is None:
        return False

    await db.delete(article)
    await flush_or_fail(db)
    return True
