from pydantic import BaseModel, ConfigDict, Field

from blogful.models import ArticleStyle


# --- Article ---

class ArticleBase(BaseModel):
    model_config = ConfigDict(extra="ignore", use_enum_values=True)


class ArticleCreate(ArticleBase):
    title: str
    style: ArticleStyle
    content: str


class ArticleUpdate(ArticleBase):
    title: str | None = None
    style: ArticleStyle | None = None
    content: str | None = None


# --- User ---

class UserCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    fullname: str
    username: str = Field(max_length=100)
    nickname: str | None = None


# --- Comment ---

class CommentCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: str
    article_id: int
    user_id: int | None = None
