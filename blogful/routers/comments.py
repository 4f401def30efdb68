from fastapi import APIRouter, Body, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from blogful.database import get_db
from blogful.dependencies import get_comment_or_404
from blogful.sanitizer import sanitize_comment
from blogful.services import comment_service
from blogful.validators import validate_comment_create

router = APIRouter(prefix="/api/comments", tags=["comments"])


@router.get("")
async def list_comments(db: AsyncSession = Depends(get_db)):
    return [sanitize_comment(c) for c in await comment_service.list_comments(db)]


@router.get("/{comment_id}")
async def get_comment(comment: dict = Depends(get_comment_or_404)):
    return sanitize_comment(comment)


@router.post("", status_code=201)
async def create_comment(
    response: Response,
    payload: dict | None = Body(None),
    db: AsyncSession = Depends(get_db),
):
    data = validate_comment_create(payload)
    clean = validate_comment_create(sanitize_comment(data.model_dump()))
    comment = await comment_service.insert_comment(db, clean)
    response.headers["Location"] = f"{router.prefix}/{comment['id']}"
    return sanitize_comment(comment)


@router.delete("/{comment_id}", status_code=204)
async def delete_comment(
    comment: dict = Depends(get_comment_or_404),
    db: AsyncSession = Depends(get_db),
):
    await comment_service.delete_comment(db, comment["id"])
    return Response(status_code=204)
