import asyncio

import pytest

from core.exceptions import NotFoundError, ValidationError
from models.contact import ContactCreate, ContactUpdate
from services.contacts import InMemoryContactStore, build_contact_store, MongoContactStore


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def store():
    return InMemoryContactStore()


def make(store, **fields):
    data = {"name": "Ann", "email": "a@x.com", "phone": "123", **fields}
    return run(store.create(ContactCreate(**data)))


def test_create_assigns_unique_ids(store):
    ids = {make(store).id for _ in range(5)}
    assert len(ids) == 5
    assert run(store.count()) == 5


def test_create_keeps_optional_fields_empty(store):
    contact = make(store)
    assert contact.address is None
    assert contact.notes is None


def test_create_reports_every_missing_field(store):
    with pytest.raises(ValidationError) as exc:
        run(store.create(ContactCreate(name="Ann")))
    assert "email" in exc.value.message
    assert "phone" in exc.value.message
    assert run(store.count()) == 0


def test_list_newest_first_even_with_equal_timestamps(store):
    a = make(store, name="A")
    b = make(store, name="B")
    # Force identical creation times; insertion order breaks the tie
    store._contacts[b.id] = store._contacts[b.id].model_copy(update={"created_at": a.created_at})
    assert [c.id for c in run(store.list())] == [b.id, a.id]


def test_returned_contacts_are_copies(store):
    contact = make(store)
    contact.name = "Changed"
    assert run(store.get(contact.id)).name == "Ann"


def test_update_only_touches_given_fields(store):
    contact = make(store, notes="n")
    updated = run(store.update(contact.id, ContactUpdate(address="X")))
    assert updated.address == "X"
    assert (updated.name, updated.email, updated.phone, updated.notes) == ("Ann", "a@x.com", "123", "n")
    assert updated.created_at == contact.created_at


def test_update_empty_value_keeps_existing(store):
    contact = make(store)
    assert run(store.update(contact.id, ContactUpdate(name=""))).name == "Ann"


def test_update_whitespace_value_overwrites(store):
    contact = make(store, notes="n")
    assert run(store.update(contact.id, ContactUpdate(notes="  "))).notes == "  "


def test_missing_ids_raise_not_found(store):
    for operation in (store.get("x"), store.update("x", ContactUpdate()), store.delete("x")):
        with pytest.raises(NotFoundError):
            run(operation)


def test_delete_removes_from_list_and_search(store):
    contact = make(store, name="John")
    run(store.delete(contact.id))
    assert run(store.list()) == []
    assert run(store.search("john")) == []


def test_search_matches_any_field(store):
    by_name = make(store, name="John Doe", email="x@x.com", phone="1")
    by_email = make(store, name="Zed", email="bojo@x.com", phone="2")
    by_phone = make(store, name="Amy", email="amy@x.com", phone="0700")
    assert {c.id for c in run(store.search("jO"))} == {by_name.id, by_email.id}
    assert [c.id for c in run(store.search("070"))] == [by_phone.id]


def test_build_contact_store_by_name():
    assert isinstance(build_contact_store("memory"), InMemoryContactStore)
    assert isinstance(build_contact_store("mongo"), MongoContactStore)
    with pytest.raises(ValueError):
        build_contact_store("redis")
