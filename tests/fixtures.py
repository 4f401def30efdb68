"""
Row factories shared by the endpoint and service tests.

Rows are inserted straight through the ORM so tests can seed data the API
would never accept, such as unsanitized markup written before sanitization
was enforced.
"""
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from blogful.models import Article, User

PUBLISHED = datetime(2029, 1, 22, 16, 28, 32, tzinfo=timezone.utc)


def make_users_array() -> list[dict]:
    return [
        {"id": 1, "fullname": "Sam Gamgee", "username": "sam.gamgee", "nickname": "Sam"},
        {"id": 2, "fullname": "Peregrin Took", "username": "peregrin.took", "nickname": "Pippin"},
        {"id": 3, "fullname": "Frodo Baggins", "username": "frodo.baggins", "nickname": None},
    ]


def make_articles_array() -> list[dict]:
    return [
        {
            "id": 1,
            "title": "First test post!",
            "style": "How-to",
            "content": "Lorem ipsum dolor sit amet, consectetur adipisicing elit.",
        },
        {
            "id": 2,
            "title": "Second test post!",
            "style": "News",
            "content": "Cum, exercitationem cupiditate dignissimos est perspiciatis.",
        },
        {
            "id": 3,
            "title": "Third test post!",
            "style": "Listicle",
            "content": "Possimus, voluptate? Necessitatibus est laborum nostrum.",
        },
    ]


def make_malicious_article() -> tuple[dict, dict]:
    malicious = {
        "id": 911,
        "title": 'naughty naughty <script>alert("xss");</script>',
        "style": "How-to",
        "content": (
            'Bad image <img src="https://url.to.file.which/does-not.exist" '
            'onerror="alert(document.cookie);">. But not <strong>all</strong> bad.'
        ),
    }
    expected = {
        **malicious,
        "title": 'naughty naughty &lt;script&gt;alert("xss");&lt;/script&gt;',
        "content": (
            'Bad image <img src="https://url.to.file.which/does-not.exist">. '
            "But not <strong>all</strong> bad."
        ),
    }
    return malicious, expected


def as_response(article: dict) -> dict:
    """The JSON body the API returns for a row seeded by ``insert_articles``."""
    return {**article, "date_published": PUBLISHED.isoformat()}


async def insert_articles(db: AsyncSession, articles: list[dict]) -> None:
    db.add_all(Article(date_published=PUBLISHED, **fields) for fields in articles)
    await db.commit()


async def insert_users(db: AsyncSession, users: list[dict]) -> None:
    db.add_all(User(date_created=PUBLISHED, **fields) for fields in users)
    await db.commit()
