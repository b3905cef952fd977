import pytest
from api_record.naming import (
    pluralize,
    resource_path_for,
    root_key_for,
    singularize,
    underscore,
)


@pytest.mark.parametrize(
    "word, expected",
    [
        ("FirstName", "first_name"),
        ("firstName", "first_name"),
        ("HTTPStatus", "http_status"),
        ("first-name", "first_name"),
        ("already_snake", "already_snake"),
        ("id", "id"),
    ],
)
def test_underscore(word, expected):
    assert underscore(word) == expected


@pytest.mark.parametrize(
    "word, expected",
    [
        ("user", "users"),
        ("category", "categories"),
        ("box", "boxes"),
        ("status", "statuses"),
        ("person", "people"),
        ("knife", "knives"),
        ("equipment", "equipment"),
        ("BlogCategory", "BlogCategories"),
        ("TestApiRecord", "TestApiRecords"),
        ("SalesPerson", "SalesPeople"),
    ],
)
def test_pluralize(word, expected):
    assert pluralize(word) == expected


def test_singularize_reverses_common_rules():
    assert singularize("users") == "user"
    assert singularize("categories") == "category"
    assert singularize("people") == "person"
    assert singularize("statuses") == "status"


def test_resource_path_and_root_key():
    assert resource_path_for("TestApiRecord") == "test_api_records"
    assert resource_path_for("Person") == "people"
    assert root_key_for("TestApiRecord") == "test_api_record"
    assert root_key_for("BlogPosts") == "blog_post"
    assert root_key_for("Person") == "person"
