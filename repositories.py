import logging
from typing import List, Optional

from fastapi import Depends
from sqlalchemy.orm import Session, joinedload

from database import get_db
import models

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[models.User]:
        """All users, no particular order."""
        return self.db.query(models.User).all()

    def find_by_id(self, user_id: int) -> Optional[models.User]:
        return self.db.get(models.User, user_id)

    def find_by_login(self, login: str) -> Optional[models.User]:
        """``WHERE login = :login``."""
        logger.debug("Looking up user by login %r", login)
        return self.db.query(models.User).filter(models.User.login == login).first()


class ArticleRepository:
    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        # author is always serialized with the article
        return self.db.query(models.Article).options(joinedload(models.Article.author))

    def find_all_by_order_by_added_at_desc(self) -> List[models.Article]:
        """All articles, ``ORDER BY added_at DESC, id DESC``.

        Articles sharing a timestamp come back most recently inserted first.
        """
        return (
            self._query()
            .order_by(models.Article.added_at.desc(), models.Article.id.desc())
            .all()
        )

    def find_by_id(self, article_id: int) -> Optional[models.Article]:
        return self._query().filter(models.Article.id == article_id).first()

    def find_by_slug(self, slug: str) -> Optional[models.Article]:
        """``WHERE slug = :slug``."""
        logger.debug("Looking up article by slug %r", slug)
        return self._query().filter(models.Article.slug == slug).first()


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_article_repository(db: Session = Depends(get_db)) -> ArticleRepository:
    return ArticleRepository(db)
