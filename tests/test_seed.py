from notes_web.repositories import note_repo
from scripts.seed import DEMO_NOTES, seed


def test_seed_is_repeatable(db):
    first = seed("rachel@remix.run", "racheliscool")
    second = seed("rachel@remix.run", "racheliscool")

    assert db["user"].count_documents({}) == 1
    assert db["note"].count_documents({}) == len(DEMO_NOTES)
    assert note_repo.get_note_list_items(user_id=str(first["_id"])) == []
    titles = {i["title"] for i in note_repo.get_note_list_items(user_id=str(second["_id"]))}
    assert titles == {t for t, _ in DEMO_NOTES}
