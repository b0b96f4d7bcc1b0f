from datetime import datetime

from eventure.models.event import EventStatus


def _favorite(client, event_id, user_id):
    return client.post(f"/favorites/{event_id}", json={"user_id": user_id})


def test_add_favorite_then_duplicate(client, make_user, make_event):
    event = make_event()
    user = make_user()

    first = _favorite(client, event.id, user.id)
    again = _favorite(client, event.id, user.id)

    assert first.status_code == 201
    assert first.json()["message"] == "Event added to favorites"
    assert again.status_code == 200
    assert again.json()["message"] == "Event already in favorites"


def test_favorite_unlisted_event_is_not_found(client, make_user, make_event):
    pending = make_event(status=EventStatus.PENDING.value)

    res = _favorite(client, pending.id, make_user().id)

    assert res.status_code == 404
    assert res.json()["detail"] == "Event not found or not available"


def test_list_favorites_newest_first(client, make_user, make_event, add_favorite, add_rsvp):
    user = make_user()
    older = make_event()
    newer = make_event()
    add_favorite(older, user, created_at=datetime(2029, 1, 1))
    add_favorite(newer, user, created_at=datetime(2029, 2, 1))
    add_rsvp(newer, make_user())

    data = client.get("/favorites", params={"user_id": user.id}).json()

    assert [e["id"] for e in data] == [newer.id, older.id]
    assert data[0]["rsvp_count"] == 1
    assert data[0]["favorited_at"] is not None


def test_check_and_remove_favorite(client, make_user, make_event):
    event = make_event()
    user = make_user()
    _favorite(client, event.id, user.id)

    assert client.get(f"/favorites/check/{event.id}", params={"user_id": user.id}).json() == {"is_favorited": True}

    res = client.request("DELETE", f"/favorites/{event.id}", json={"user_id": user.id})
    assert res.status_code == 200
    assert client.get(f"/favorites/check/{event.id}", params={"user_id": user.id}).json() == {"is_favorited": False}

    missing = client.request("DELETE", f"/favorites/{event.id}", json={"user_id": user.id})
    assert missing.status_code == 404


def test_clear_favorites(client, make_user, make_event):
    user = make_user()
    for event in (make_event(), make_event()):
        _favorite(client, event.id, user.id)

    res = client.request("DELETE", "/favorites", json={"user_id": user.id})

    assert res.json() == {"message": "All favorites cleared", "count": 2}
    assert client.get("/favorites", params={"user_id": user.id}).json() == []
