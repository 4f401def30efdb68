from fastapi import APIRouter, Body, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from blogful.database import get_db
from blogful.dependencies import get_article_or_404
from blogful.sanitizer import sanitize_article
from blogful.services import article_service
from blogful.validators import validate_article_create, validate_article_update

router = APIRouter(prefix="/api/articles", tags=["articles"])


@router.get("")
async def list_articles(db: AsyncSession = Depends(get_db)):
    articles = await article_service.list_articles(db)
    return [sanitize_article(a) for a in articles]


@router.get("/{article_id}")
async def get_article(article: dict = Depends(get_article_or_404)):
    # Rows stored before sanitization was enforced are cleaned on the way out.
    return sanitize_article(article)


@router.post("", status_code=201)
async def create_article(
    response: Response,
    payload: dict | None = Body(None),
    db: AsyncSession = Depends(get_db),
):
    data = validate_article_create(payload)
    # Sanitizing can empty a field (a lone disallowed tag), so check again.
    clean = validate_article_create(sanitize_article(data.model_dump()))
    article = await article_service.insert_article(db, clean)
    response.headers["Location"] = f"{router.prefix}/{article['id']}"
    return sanitize_article(article)


@router.patch("/{article_id}", status_code=204)
async def update_article(
    article: dict = Depends(get_article_or_404),
    payload: dict | None = Body(None),
    db: AsyncSession = Depends(get_db),
):
    data = validate_article_update(payload)
    patch = validate_article_update(sanitize_article(data.model_dump(exclude_unset=True)))
    await article_service.update_article(db, article["id"], patch)
    return Response(status_code=204)


@router.delete("/{article_id}", status_code=204)
async def delete_article(
    article: dict = Depends(get_article_or_404),
    db: AsyncSession = Depends(get_db),
):
    await article_service.delete_article(db, article["id"])
    return Response(status_code=204)
