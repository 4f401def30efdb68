import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blogful.config import settings
from blogful.database import engine
from blogful.exceptions import install_exception_handlers
from blogful.middleware import RequestLoggingMiddleware
from blogful.routers import articles, comments, users

VERSION = "1.0.0"

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting blogful API (env=%s)", settings.APP_ENV)
    yield
    await engine.dispose()


app = FastAPI(
    title="Blogful API",
    description="Articles, users and comments with sanitized free-text fields",
    version=VERSION,
    lifespan=lifespan,
)

# Middleware
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"],
)

install_exception_handlers(app)

# Routers
app.include_router(articles.router)
app.include_router(users.router)
app.include_router(comments.router)


@app.get("/health")
async def health():
    return {"status": "healthy", "version": VERSION}
