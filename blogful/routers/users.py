from fastapi import APIRouter, Body, Depends, Response
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blogful.database import get_db
from blogful.dependencies import get_user_or_404
from blogful.exceptions import Conflict
from blogful.sanitizer import sanitize_user
from blogful.services import user_service
from blogful.validators import validate_user_create

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
async def list_users(db: AsyncSession = Depends(get_db)):
    return [sanitize_user(u) for u in await user_service.list_users(db)]


@router.get("/{user_id}")
async def get_user(user: dict = Depends(get_user_or_404)):
    return sanitize_user(user)


@router.post("", status_code=201)
async def create_user(
    response: Response,
    payload: dict | None = Body(None),
    db: AsyncSession = Depends(get_db),
):
    data = validate_user_create(payload)
    clean = validate_user_create(sanitize_user(data.model_dump()))
    try:
        user = await user_service.insert_user(db, clean)
    except IntegrityError:
        raise Conflict("A user with this username already exists")
    response.headers["Location"] = f"{router.prefix}/{user['id']}"
    return sanitize_user(user)


@router.delete("/{user_id}", status_code=204)
async def delete_user(
    user: dict = Depends(get_user_or_404),
    db: AsyncSession = Depends(get_db),
):
    await user_service.delete_user(db, user["id"])
    return Response(status_code=204)
