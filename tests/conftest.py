from __future__ import annotations

from typing import Any, Callable

import pytest
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import declarative_base, relationship

from jsonapi_view import JSONAPISchema, JSONAPIView, SchemaRegistry


class Person:
    def __init__(self, id: int, name: str, email: str = "", articles: list | None = None) -> None:
        self.id = id
        self.name = name
        self.email = email
        self.articles = articles if articles is not None else []


class Article:
    def __init__(
        self,
        id: int,
        title: str,
        body: str = "",
        author: Person | None = None,
        comments: list | None = None,
    ) -> None:
        self.id = id
        self.title = title
        self.body = body
        self.author = author
        self.comments = comments if comments is not None else []


class Comment:
    def __init__(self, id: int, body: str, author: Person | None = None) -> None:
        self.id = id
        self.body = body
        self.author = author


class Tag:
    def __init__(self, id: int, label: str) -> None:
        self.id = id
        self.label = label


class PersonSchema(JSONAPISchema):
    class Meta:
        type_ = "people"
        fields = ["name", "email"]
        relationships = ["articles"]


class ArticleSchema(JSONAPISchema):
    class Meta:
        type_ = "articles"
        fields = ["title", "body"]
        relationships = ["author", "comments"]
        include_paths = ["author"]


class CommentSchema(JSONAPISchema):
    class Meta:
        type_ = "comments"
        fields = ["body"]
        relationships = ["author"]


Base = declarative_base()


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    posts = relationship("Post", back_populates="author")


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    author_id = Column(Integer, ForeignKey("users.id"))
    author = relationship("User", back_populates="posts")


@pytest.fixture
def registry() -> SchemaRegistry:
    return SchemaRegistry(
        entities={"Article": Article, "Person": Person, "Comment": Comment},
        schemas={"Article": ArticleSchema, "Person": PersonSchema, "Comment": CommentSchema},
    )


@pytest.fixture
def make_view(registry: SchemaRegistry) -> Callable[..., JSONAPIView]:
    def factory(view_vars: dict[str, Any] | None = None, **kwargs: Any) -> JSONAPIView:
        kwargs.setdefault("registry", registry)
        kwargs.setdefault("debug", False)
        return JSONAPIView(view_vars, **kwargs)

    return factory


@pytest.fixture
def blog() -> dict[str, Any]:
    """Two articles by one author, with comments by the author and a reader."""
    author = Person(1, "Ada", "ada@example.com")
    reader = Person(2, "Grace", "grace@example.com")
    first = Article(
        10,
        "Encoders",
        "Body one",
        author=author,
        comments=[Comment(100, "Nice", author=reader), Comment(101, "Thanks", author=author)],
    )
    second = Article(11, "Schemas", "Body two", author=author)
    author.articles = [first, second]
    return {"author": author, "reader": reader, "articles": [first, second]}
