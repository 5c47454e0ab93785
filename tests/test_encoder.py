from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any

import pytest

from conftest import Article, ArticleSchema, Comment, Person, Tag
from jsonapi_view import (
    Encoder,
    EncoderOptions,
    EncodingParameters,
    SchemaRegistry,
    UnresolvableResourceType,
)


def make_encoder(registry: SchemaRegistry, url_prefix: str | None = None) -> Encoder:
    view = SimpleNamespace(url_prefix=url_prefix, registry=registry)
    schemas = dict(
        registry.resolve(name, view) for name in ("Article", "Person", "Comment")
    )
    return Encoder.instance(schemas, EncoderOptions(url_prefix=url_prefix))


def resource_keys(document: dict[str, Any]) -> list[tuple[str, str]]:
    data = document["data"]
    primary = data if isinstance(data, list) else [data]
    return [(item["type"], item["id"]) for item in primary + document.get("included", [])]


def test_compound_document_deduplicates_included(registry, blog) -> None:
    encoder = make_encoder(registry)
    parameters = EncodingParameters.create(["author", "comments.author"])

    document = json.loads(encoder.encode_data(blog["articles"], parameters))

    keys = resource_keys(document)
    assert len(keys) == len(set(keys))
    assert [(item["type"], item["id"]) for item in document["included"]] == [
        ("people", "1"),
        ("comments", "100"),
        ("comments", "101"),
        ("people", "2"),
    ]


def test_primary_resources_are_not_included(registry, blog) -> None:
    encoder = make_encoder(registry)
    first_article = blog["articles"][0]
    parameters = EncodingParameters.create(["author"])

    document = encoder.serialize_data([first_article, blog["author"]], parameters)

    assert "included" not in document
    assert len(document["data"]) == 2


def test_cyclic_relationships_terminate(registry, blog) -> None:
    encoder = make_encoder(registry)
    parameters = EncodingParameters.create(["articles.author.articles.author"])

    document = encoder.serialize_data(blog["author"], parameters)

    assert document["data"]["id"] == "1"
    assert sorted(item["id"] for item in document["included"]) == ["10", "11"]


def test_same_resource_walked_through_different_paths(registry, blog) -> None:
    encoder = make_encoder(registry)
    parameters = EncodingParameters.create(["author", "comments.author.articles"])

    document = encoder.serialize_data(blog["articles"][0], parameters)

    included = [(item["type"], item["id"]) for item in document["included"]]
    # The reader is reached through comments and the second article through the author.
    assert ("people", "2") in included
    assert ("articles", "11") in included
    assert ("articles", "10") not in included
    assert len(included) == len(set(included))


def test_schema_default_include_paths(registry, blog) -> None:
    encoder = make_encoder(registry)

    default = encoder.serialize_data(blog["articles"][1])
    explicit = encoder.serialize_data(blog["articles"][1], EncodingParameters.create([]))

    assert [item["type"] for item in default["included"]] == ["people"]
    assert "included" not in explicit


def test_fieldsets_restrict_attributes_and_relationships(registry, blog) -> None:
    encoder = make_encoder(registry)
    parameters = EncodingParameters.create(
        ["author"], {"articles": ["title", "author", "unknown"]}
    )

    document = encoder.serialize_data(blog["articles"][0], parameters)

    assert document["data"]["attributes"] == {"title": "Encoders"}
    assert set(document["data"]["relationships"]) == {"author"}
    author = document["included"][0]
    assert author["attributes"] == {"name": "Ada", "email": "ada@example.com"}


def test_empty_fieldset_drops_attributes(registry) -> None:
    encoder = make_encoder(registry)
    parameters = EncodingParameters.create([], {"articles": []})

    document = encoder.serialize_data(Article(1, "Hidden"), parameters)

    assert document["data"] == {"type": "articles", "id": "1"}


def test_single_entity_matches_schema_extraction(registry) -> None:
    encoder = make_encoder(registry)
    article = Article(4, "Round trip", "Body")
    schema = ArticleSchema(None, "Article")

    data = json.loads(encoder.encode_data(article, EncodingParameters.create([])))["data"]

    assert data["type"] == schema.get_type()
    assert data["id"] == schema.get_id(article)
    assert data["attributes"] == schema.get_attributes(article)


def test_to_one_and_to_many_linkage(registry) -> None:
    encoder = make_encoder(registry)
    article = Article(1, "Linkage", comments=[Comment(2, "c")])

    relationships = encoder.serialize_data(article, EncodingParameters.create([]))["data"][
        "relationships"
    ]

    assert relationships == {
        "author": {"data": None},
        "comments": {"data": [{"type": "comments", "id": "2"}]},
    }


def test_url_prefix_links(registry) -> None:
    encoder = make_encoder(registry, url_prefix="https://api.test/v1/")
    article = Article(1, "Links", author=Person(2, "Ada"))

    data = encoder.serialize_data(article, EncodingParameters.create([]))["data"]

    assert data["links"] == {"self": "https://api.test/v1/articles/1"}
    assert data["relationships"]["author"] == {
        "data": {"type": "people", "id": "2"},
        "links": {
            "self": "https://api.test/v1/articles/1/relationships/author",
            "related": "https://api.test/v1/articles/1/author",
        },
    }


def test_subclass_uses_parent_schema(registry) -> None:
    class FeaturedArticle(Article):
        pass

    encoder = make_encoder(registry)

    data = encoder.serialize_data(FeaturedArticle(9, "Featured"), EncodingParameters.create([]))[
        "data"
    ]

    assert data["type"] == "articles"


def test_unregistered_related_entity_raises(registry) -> None:
    encoder = make_encoder(registry)
    article = Article(1, "Tags", author=Tag(1, "python"))

    with pytest.raises(UnresolvableResourceType):
        encoder.serialize_data(article, EncodingParameters.create([]))


def test_encode_meta_ignores_data_nodes(registry) -> None:
    encoder = make_encoder(registry).with_meta({"ignored": True})

    assert json.loads(encoder.encode_meta({"count": 2})) == {"meta": {"count": 2}}


def test_top_level_key_order(registry) -> None:
    encoder = make_encoder(registry)
    encoder.with_jsonapi_version().with_meta({"m": 1}).with_links({"self": "/articles"})

    document = encoder.serialize_data([], EncodingParameters.create([]))

    assert list(document) == ["jsonapi", "meta", "links", "data"]


def test_repeated_primary_entity_rendered_once(registry, blog) -> None:
    encoder = make_encoder(registry)
    article = blog["articles"][0]

    document = encoder.serialize_data([article, article], EncodingParameters.create(["author"]))

    assert [item["id"] for item in document["data"]] == ["10"]
    assert [(item["type"], item["id"]) for item in document["included"]] == [("people", "1")]


def test_included_relationship_hidden_by_fieldset(registry, blog) -> None:
    encoder = make_encoder(registry)
    parameters = EncodingParameters.create(["author"], {"articles": ["title"]})

    document = encoder.serialize_data(blog["articles"][0], parameters)

    assert "relationships" not in document["data"]
    assert [(item["type"], item["id"]) for item in document["included"]] == [("people", "1")]
