import os
from datetime import datetime

# must be set before the application modules build their engine
os.environ["BLOG_DATABASE_URL"] = "sqlite://"
os.environ["BLOG_LOCALE"] = "en"

import pytest
from fastapi.testclient import TestClient

from database import Base, SessionLocal, engine
from main import create_app
import models


@pytest.fixture(autouse=True)
def reset_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(create_app())


@pytest.fixture
def john_doe(db):
    user = models.User(login="johnDoe", firstname="John", lastname="Doe")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def make_article(db, john_doe):
    def _make(slug, added_at=None, title=None, content="dolor sit amet", author=None):
        article = models.Article(
            title=title or slug,
            slug=slug,
            content=content,
            author=author or john_doe,
            added_at=added_at or datetime(2024, 1, 1, 12, 0, 0),
        )
        db.add(article)
        db.commit()
        db.refresh(article)
        return article

    return _make
