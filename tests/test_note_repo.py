from bson import ObjectId

from notes_web.repositories import note_repo


def test_create_returns_id_and_stores_owner(db):
    created = note_repo.create_note(title="Groceries", body="Milk, eggs", user_id="u1")

    doc = db["note"].find_one({"_id": ObjectId(created["id"])})
    assert doc["title"] == "Groceries"
    assert doc["body"] == "Milk, eggs"
    assert doc["user_id"] == "u1"
    assert doc["created_at"] == doc["updated_at"]


def test_list_items_only_for_owner_newest_first(db):
    first = note_repo.create_note(title="first", body="b", user_id="u1")
    note_repo.create_note(title="foreign", body="b", user_id="u2")
    second = note_repo.create_note(title="second", body="b", user_id="u1")

    items = note_repo.get_note_list_items(user_id="u1")

    assert items == [
        {"id": second["id"], "title": "second"},
        {"id": first["id"], "title": "first"},
    ]


def test_list_items_empty(db):
    assert note_repo.get_note_list_items(user_id="nobody") == []


def test_get_note_scoped_to_owner(db):
    created = note_repo.create_note(title="t", body="b", user_id="u1")

    note = note_repo.get_note(note_id=created["id"], user_id="u1")
    assert note["id"] == created["id"]
    assert "_id" not in note
    assert note_repo.get_note(note_id=created["id"], user_id="u2") is None


def test_get_note_malformed_id(db):
    assert note_repo.get_note(note_id="not-an-id", user_id="u1") is None


def test_delete_note_scoped_to_owner(db):
    created = note_repo.create_note(title="t", body="b", user_id="u1")

    assert note_repo.delete_note(note_id=created["id"], user_id="u2") is False
    assert note_repo.delete_note(note_id=created["id"], user_id="u1") is True
    assert note_repo.delete_note(note_id=created["id"], user_id="u1") is False
    assert note_repo.delete_note(note_id="xyz", user_id="u1") is False
