import pytest
from api_record.intents import (
    build_payload,
    create_intent,
    destroy_intent,
    find_intent,
    list_intent,
    update_intent,
)


def test_find_and_destroy_target_item_path_without_payload():
    find = find_intent("contacts", 7)
    assert (find.method, find.path, find.params, find.json) == (
        "GET",
        "contacts/7",
        None,
        None,
    )
    destroy = destroy_intent("contacts", 7)
    assert (destroy.method, destroy.path, destroy.json) == ("DELETE", "contacts/7", None)


def test_list_defaults_to_first_page_of_30():
    intent = list_intent("contacts")
    assert intent.method == "GET"
    assert intent.path == "contacts"
    assert intent.params == {"page": 1, "limit": 30}


@pytest.mark.parametrize("page, limit", [(0, 30), (1, 0), (-1, -1)])
def test_list_rejects_non_positive_paging(page, limit):
    with pytest.raises(ValueError):
        list_intent("contacts", page=page, limit=limit)


def test_payload_drops_identifier():
    attrs = {"id": 1, "name": "John", "email": "john@x.com"}
    assert build_payload(attrs) == {"name": "John", "email": "john@x.com"}
    # input is not mutated
    assert attrs["id"] == 1


def test_payload_drops_identifier_before_wrapping():
    attrs = {"id": 1, "name": "John", "email": None}
    payload = build_payload(attrs, root_key="contact", exclude_none=True)
    assert payload == {"contact": {"name": "John"}}


def test_custom_identifier_field():
    payload = build_payload({"uuid": "abc", "id": 3}, id_field="uuid")
    assert payload == {"id": 3}


def test_create_and_update_intents():
    create = create_intent("contacts", {"name": "John"})
    assert (create.method, create.path, create.json) == (
        "POST",
        "contacts",
        {"name": "John"},
    )
    update = update_intent("contacts", 1, {"name": "John"})
    assert (update.method, update.path, update.json) == (
        "PUT",
        "contacts/1",
        {"name": "John"},
    )
