import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request

from config import Settings, get_settings
from database import init_db
from repositories import (
    ArticleRepository,
    UserRepository,
    get_article_repository,
    get_user_repository,
)
import messages
import schemas

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def read_root(settings: Settings = Depends(get_app_settings)):
    return schemas.Blog(
        title=settings.title,
        banner=schemas.Banner(**settings.banner.model_dump()),
    )


def list_articles(repository: ArticleRepository = Depends(get_article_repository)):
    return repository.find_all_by_order_by_added_at_desc()


def get_article(
    slug: str,
    repository: ArticleRepository = Depends(get_article_repository),
    settings: Settings = Depends(get_app_settings),
):
    article = repository.find_by_slug(slug)
    if article is None:
        logger.info("Article %r not found", slug)
        raise HTTPException(status_code=404, detail=messages.not_found("article", settings.locale))
    return article


def list_users(repository: UserRepository = Depends(get_user_repository)):
    return repository.find_all()


def get_user(
    login: str,
    repository: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_app_settings),
):
    user = repository.find_by_login(login)
    if user is None:
        logger.info("User %r not found", login)
        raise HTTPException(status_code=404, detail=messages.not_found("user", settings.locale))
    return user


# (method, path, handler, response model)
ROUTES = [
    ("GET", "/", read_root, schemas.Blog),
    ("GET", "/api/article/", list_articles, List[schemas.Article]),
    ("GET", "/api/article/{slug}", get_article, schemas.Article),
    ("GET", "/api/user/", list_users, List[schemas.User]),
    ("GET", "/api/user/{login}", get_user, schemas.User),
]


def build_router() -> APIRouter:
    router = APIRouter()
    for method, path, handler, response_model in ROUTES:
        router.add_api_route(path, handler, methods=[method], response_model=response_model)
    return router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application.

    ``settings`` controls blog metadata, locale and logging. The database is
    always the one configured through ``BLOG_DATABASE_URL``.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    # tables are created on startup, never migrated
    init_db()

    app = FastAPI(title=settings.title, debug=settings.debug)
    app.state.settings = settings
    app.include_router(build_router())
    logger.info("Registered %d routes", len(ROUTES))
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_settings().host, port=get_settings().port)
