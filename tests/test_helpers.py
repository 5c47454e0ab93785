from __future__ import annotations

import pytest

from jsonapi_view import JSONAPIErrorBuilder, Link, UnresolvableResourceType
from jsonapi_view.core.links import render_links
from jsonapi_view.encoder import EncodingParameters
from jsonapi_view.encoder.parameters import build_include_tree
from jsonapi_view.pagination import get_pagination_links
from jsonapi_view.utils import parse_query_params


def test_pagination_links_keep_placeholders() -> None:
    links = get_pagination_links({"self": "/a?page=2", "next": "/a?page=3"})

    assert list(links) == ["self", "first", "last", "prev", "next"]
    assert links["first"] is None
    assert render_links(links) == {"self": "/a?page=2", "next": "/a?page=3"}


def test_link_rendering() -> None:
    assert Link("/articles/1").to_value("http://x/") == "http://x/articles/1"
    assert Link("http://y/a", treat_as_href=True).to_value("http://x") == "http://y/a"
    assert Link("/a", meta={"count": 1}).to_value() == {"href": "/a", "meta": {"count": 1}}


def test_include_tree() -> None:
    tree = build_include_tree(["author", "comments.author", "comments.article", ""])

    assert tree == {"author": {}, "comments": {"author": {}, "article": {}}}


def test_fields_for() -> None:
    parameters = EncodingParameters.create(None, {"articles": ["title"]})

    assert parameters.fields_for("articles") == frozenset({"title"})
    assert parameters.fields_for("people") is None
    assert parameters.include_paths is None


def test_parse_query_params() -> None:
    parsed = parse_query_params(
        {"include": "author, comments.author", "fields[articles]": "title,body", "sort": "-id"}
    )

    assert parsed == {
        "include": ["author", "comments.author"],
        "fields": {"articles": ["title", "body"]},
    }
    assert parse_query_params({})["include"] is None


def test_error_object_from_exception() -> None:
    builder = JSONAPIErrorBuilder()

    error = builder.from_exception(UnresolvableResourceType("nope"))

    assert error == {
        "status": "500",
        "code": "unresolvable_resource_type",
        "title": "Internal Server Error",
        "detail": "nope",
    }
    with pytest.raises(ValueError):
        builder.error_object()


def test_dotenv_loaded_on_first_settings_read(monkeypatch) -> None:
    from jsonapi_view import config

    calls = []
    config._load_env.cache_clear()
    monkeypatch.setattr(config, "load_dotenv", lambda: calls.append(True))
    monkeypatch.setenv("JSONAPI_VIEW_DEBUG", "yes")

    assert calls == []
    assert config.is_debug() is True
    config.default_url_prefix()
    assert calls == [True]
    config._load_env.cache_clear()
