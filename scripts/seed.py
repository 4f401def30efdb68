"""Create the blogful schema and optionally load sample rows."""
import asyncio
import argparse
import time

from blogful.database import engine, async_session, Base
from blogful.models import Article, ArticleStyle, Comment, User

USERS = [
    {"fullname": "Sam Gamgee", "username": "sam.gamgee", "nickname": "Sam"},
    {"fullname": "Peregrin Took", "username": "peregrin.took", "nickname": "Pippin"},
    {"fullname": "Frodo Baggins", "username": "frodo.baggins", "nickname": None},
]

ARTICLES = [
    ("First test post!", ArticleStyle.HOW_TO),
    ("Second test post!", ArticleStyle.NEWS),
    ("Third test post!", ArticleStyle.LISTICLE),
    ("Fourth test post!", ArticleStyle.STORY),
]


async def seed(schema_only: bool = False, reset: bool = False):
    start = time.perf_counter()

    async with engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    print("Schema ready: users, articles, comments")

    if schema_only:
        await engine.dispose()
        return

    async with async_session() as session:
        users = [User(**fields) for fields in USERS]
        session.add_all(users)
        await session.flush()
        print(f"  Created {len(users)} users")

        articles = [
            Article(
                title=title,
                style=style.value,
                content=f"{title} Lorem ipsum dolor sit amet, consectetur adipisicing elit.",
            )
            for title, style in ARTICLES
        ]
        session.add_all(articles)
        await session.flush()
        print(f"  Created {len(articles)} articles")

        comments = [
            Comment(
                content=f"Comment from {user.nickname or user.username}.",
                article_id=article.id,
                user_id=user.id,
            )
            for article in articles
            for user in users
        ]
        session.add_all(comments)
        await session.commit()
        print(f"  Created {len(comments)} comments")

    await engine.dispose()
    print(f"\nSeeding complete in {time.perf_counter() - start:.1f}s")


def main():
    parser = argparse.ArgumentParser(description="Create and seed the blogful database")
    parser.add_argument("--schema-only", action="store_true", help="Create tables without sample rows")
    parser.add_argument("--reset", action="store_true", help="Drop existing tables first")
    args = parser.parse_args()
    asyncio.run(seed(schema_only=args.schema_only, reset=args.reset))


if __name__ == "__main__":
    main()
