"""
Request-body validation for the write endpoints.

Validation runs before anything touches the store.  Presence checks come
first and report the first missing field in declaration order; the payload
is then parsed through the matching pydantic schema, and a type error is
reported against the first offending field.
"""
from typing import Any, Iterable, TypeVar

from pydantic import BaseModel, ValidationError

from blogful.exceptions import InvalidField, MissingField, NoUpdatableFields
from blogful.schemas import ArticleCreate, ArticleUpdate, CommentCreate, UserCreate

SchemaT = TypeVar("SchemaT", bound=BaseModel)

ARTICLE_REQUIRED_FIELDS: tuple[str, ...] = ("title", "style", "content")
ARTICLE_UPDATABLE_FIELDS: tuple[str, ...] = ("title", "style", "content")
USER_REQUIRED_FIELDS: tuple[str, ...] = ("fullname", "username")
COMMENT_REQUIRED_FIELDS: tuple[str, ...] = ("content", "article_id")


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def require_fields(payload: dict, fields: Iterable[str]) -> None:
    """Raise ``MissingField`` for the first of *fields* absent from *payload*."""
    for field in fields:
        if _is_blank(payload.get(field)):
            raise MissingField(field)


def parse_payload(schema: type[SchemaT], payload: dict) -> SchemaT:
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        loc = exc.errors()[0].get("loc") or ("body",)
        raise InvalidField(str(loc[0])) from exc


def validate_article_create(payload: dict | None) -> ArticleCreate:
    payload = payload or {}
    require_fields(payload, ARTICLE_REQUIRED_FIELDS)
    return parse_payload(ArticleCreate, payload)


def validate_article_update(payload: dict | None) -> ArticleUpdate:
    """
    Keep only the updatable fields that carry a value.

    Raises ``NoUpdatableFields`` when nothing is left to update.  The
    returned model has only the kept fields marked as set, so
    ``model_dump(exclude_unset=True)`` yields exactly the patch.
    """
    payload = payload or {}
    patch = {
        field: payload[field]
        for field in ARTICLE_UPDATABLE_FIELDS
        if not _is_blank(payload.get(field))
    }
    if not patch:
        raise NoUpdatableFields()
    return parse_payload(ArticleUpdate, patch)


def validate_user_create(payload: dict | None) -> UserCreate:
    payload = payload or {}
    require_fields(payload, USER_REQUIRED_FIELDS)
    return parse_payload(UserCreate, payload)


def validate_comment_create(payload: dict | None) -> CommentCreate:
    payload = payload or {}
    require_fields(payload, COMMENT_REQUIRED_FIELDS)
    return parse_payload(CommentCreate, payload)
