from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class User(BaseModel):
    id: int
    login: str
    firstname: str
    lastname: str
    description: Optional[str] = None

    class Config:
        from_attributes = True


class Article(BaseModel):
    id: int
    title: str
    slug: str
    content: str
    author: User
    added_at: datetime

    class Config:
        from_attributes = True


class Banner(BaseModel):
    title: Optional[str] = None
    content: str = ""


class Blog(BaseModel):
    title: str
    banner: Banner
