from typing import Any, Dict, Optional

from api_record import ApiRecord, RecordAttributes, RecordConfig
from api_record.error_list import BASE, ErrorList
from api_record.messages import MessageCatalog, unknown_error_message
from api_record.reconcile import collect_errors, normalize_keys, reconcile
from api_record.response import ApiResponse


class ProfileAttributes(RecordAttributes):
    display_name: Optional[str] = None
    home_address: Optional[Dict[str, Any]] = None


class Profile(ApiRecord):
    config = RecordConfig(schema=ProfileAttributes)


def test_normalize_keys_is_recursive():
    body = {
        "displayName": "Jo",
        "homeAddress": {"streetName": "Main", "geoPoint": {"latValue": 1}},
        "tagList": [{"tagName": "x"}, "plain"],
        3: "non-string key",
    }
    assert normalize_keys(body) == {
        "display_name": "Jo",
        "home_address": {"street_name": "Main", "geo_point": {"lat_value": 1}},
        "tag_list": [{"tag_name": "x"}, "plain"],
        3: "non-string key",
    }


def test_reconcile_overwrites_declared_attributes_only():
    profile = Profile(display_name="old")
    applied = reconcile(
        profile, {"id": 4, "displayName": "new", "unexpectedField": True}
    )
    assert applied == {"id": 4, "display_name": "new"}
    assert profile.id == 4
    assert profile.display_name == "new"
    assert "unexpected_field" not in profile.attributes


def test_reconcile_is_idempotent():
    body = {"id": 4, "displayName": "Jo", "homeAddress": {"streetName": "Main"}}
    once = Profile()
    reconcile(once, body)
    twice = Profile()
    reconcile(twice, body)
    reconcile(twice, body)
    assert once.attributes == twice.attributes
    assert twice.home_address == {"street_name": "Main"}


def test_reconcile_ignores_empty_and_non_object_bodies():
    profile = Profile(id=1, display_name="Jo")
    for body in (None, {}, "", "<html>", []):
        assert reconcile(profile, body) == {}
    assert profile.attributes == {"id": 1, "display_name": "Jo", "home_address": None}


def test_collect_errors_adds_general_message_and_field_messages():
    profile = Profile()
    response = ApiResponse(
        status_code=422,
        body={"display_name": ["is too short", "is reserved"], "id": "is locked"},
    )
    collect_errors(profile, response)
    assert profile.errors[BASE] == ["An unknown error occurred"]
    assert profile.errors["display_name"] == ["is too short", "is reserved"]
    assert profile.errors["id"] == ["is locked"]
    assert len(profile.errors) == 4


def test_collect_errors_with_non_mapping_body_adds_only_general_message():
    profile = Profile()
    collect_errors(profile, ApiResponse(status_code=422, body="Unprocessable"))
    assert profile.errors.to_dict() == {BASE: ["An unknown error occurred"]}


def test_unknown_error_message_prefers_type_specific_key():
    catalog = MessageCatalog(
        {
            "api_record.errors.models.blog_post.response.unknown_error": "Post rejected",
            "api_record.errors.response.unknown_error": "Generic",
        }
    )
    assert unknown_error_message("BlogPost", catalog) == "Post rejected"
    assert unknown_error_message("Comment", catalog) == "Generic"
    assert unknown_error_message("Comment", MessageCatalog()) == "Unknown error"


def test_error_list_keeps_order_and_full_messages():
    errors = ErrorList()
    errors.add("name", "can't be blank")
    errors.add(BASE, "Something broke")
    errors.add("name", "is too short")
    assert errors.fields == ["name", BASE]
    assert errors["name"] == ["can't be blank", "is too short"]
    assert errors.full_messages() == [
        "name: can't be blank",
        "Something broke",
        "name: is too short",
    ]
    assert "name" in errors
    errors.clear()
    assert not errors.any()
