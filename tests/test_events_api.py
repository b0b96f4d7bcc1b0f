from eventure.models.event import Event, EventStatus

from conftest import NEAR_PROVIDENCE, PROVIDENCE, PROVIDENCE_ZIP


def _event_body(user_id, **overrides):
    body = {
        "user_id": user_id,
        "title": "Jazz Night",
        "description": "Live jazz downtown",
        "category": "Music",
        "starts_at": "2030-03-01T19:00:00",
        "ends_at": "2030-03-01T22:00:00",
        "address_line1": "1 Main St",
        "city": "Providence",
        "state": "RI",
        "zip_code": PROVIDENCE_ZIP,
        "ticket_price": 15,
        "capacity": 50,
    }
    body.update(overrides)
    return body


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_search_endpoint_radius(client, make_zip, make_event, make_user, add_rsvp):
    make_zip()
    near = make_event(coordinate=NEAR_PROVIDENCE)
    add_rsvp(near, make_user())

    res = client.get("/events", params={"zip": PROVIDENCE_ZIP, "radius": "5"})

    assert res.status_code == 200
    data = res.json()
    assert [e["id"] for e in data] == [near.id]
    assert data[0]["rsvp_count"] == 1
    assert data[0]["distance_miles"] > 1.9


def test_search_endpoint_bad_input_is_empty_list(client, make_zip, make_event):
    make_zip()
    make_event(coordinate=NEAR_PROVIDENCE)

    for params in ({"zip": PROVIDENCE_ZIP}, {"zip": "abc", "radius": "5"}, {"zip": "99999", "radius": "5"}):
        res = client.get("/events", params=params)
        assert res.status_code == 200
        assert res.json() == []


def test_search_endpoint_ordering_and_limit(client, make_event):
    first = make_event()
    second = make_event()

    res = client.get("/events", params={"orderBy": "starts_at", "order": "DESC", "limit": "1"})

    assert [e["id"] for e in res.json()] == [second.id]
    assert first.id != second.id


def test_categories_lists_only_listed_events(client, make_event):
    make_event(category="Sports")
    make_event(category="Music")
    make_event(category="Music")
    make_event(category="Art", status=EventStatus.PENDING.value)

    assert client.get("/events/categories").json() == ["Music", "Sports"]


def test_create_event_starts_pending_with_zip_coordinate(client, db, organizer, make_zip):
    make_zip()

    res = client.post("/events", json=_event_body(organizer.id))

    assert res.status_code == 201
    data = res.json()
    assert data["status"] == "pending"
    assert data["created_by"] == organizer.id
    assert (data["lat"], data["lng"]) == PROVIDENCE
    assert data["rsvp_count"] == 0
    # 승인 전에는 공개 검색에 나오지 않음
    assert client.get("/events").json() == []


def test_create_event_without_known_zip_has_no_coordinate(client, organizer):
    res = client.post("/events", json=_event_body(organizer.id, zip_code="99999"))

    assert res.status_code == 201
    assert res.json()["lat"] is None
    assert res.json()["lng"] is None


def test_create_event_requires_organizer(client, make_user):
    attendee = make_user()

    res = client.post("/events", json=_event_body(attendee.id))

    assert res.status_code == 403
    assert res.json()["detail"] == "Only organizers can create events"


def test_create_event_unknown_user(client):
    assert client.post("/events", json=_event_body(999)).status_code == 404


def test_create_event_rejects_end_before_start(client, organizer):
    res = client.post("/events", json=_event_body(organizer.id, ends_at="2030-03-01T18:00:00"))

    assert res.status_code == 422


def test_update_event_by_owner(client, organizer, make_event):
    event = make_event()

    res = client.put(f"/events/{event.id}", json=_event_body(organizer.id, title="Updated"))

    assert res.status_code == 200
    assert res.json()["title"] == "Updated"
    # 수정은 검수 상태를 바꾸지 않음
    assert res.json()["status"] == "approved"


def test_update_event_by_other_user_is_forbidden(client, make_user, make_event):
    event = make_event()
    other = make_user(role="organizer")

    res = client.put(f"/events/{event.id}", json=_event_body(other.id))

    assert res.status_code == 403
    assert res.json()["detail"] == "You can only edit your own events"


def test_delete_event_cascades(client, db, organizer, make_user, make_event, add_rsvp):
    event = make_event()
    add_rsvp(event, make_user())
    event_id = event.id

    res = client.request("DELETE", f"/events/{event_id}", json={"user_id": organizer.id})

    assert res.status_code == 200
    db.expire_all()
    assert db.query(Event).filter(Event.id == event_id).first() is None
    assert client.get(f"/events/{event_id}").status_code == 404


def test_delete_event_by_other_user_is_forbidden(client, make_user, make_event):
    event = make_event()

    res = client.request("DELETE", f"/events/{event.id}", json={"user_id": make_user().id})

    assert res.status_code == 403


def test_detail_hides_unlisted_events_except_from_owner(client, organizer, make_user, make_event):
    pending = make_event(status=EventStatus.PENDING.value)

    assert client.get(f"/events/{pending.id}").status_code == 404
    assert client.get(f"/events/{pending.id}", params={"user_id": make_user().id}).status_code == 404
    assert client.get(f"/events/{pending.id}", params={"user_id": organizer.id}).status_code == 200


def test_detail_organizer_email_follows_contact_setting(client, make_user, make_event):
    shy = make_user(role="organizer", show_contact_info=False)
    open_ = make_user(role="organizer", show_contact_info=True)
    hidden = make_event(created_by=shy.id)
    shown = make_event(created_by=open_.id)

    assert client.get(f"/events/{hidden.id}").json()["organizer"]["email"] is None
    assert client.get(f"/events/{shown.id}").json()["organizer"]["email"] == open_.email


def test_mine_lists_all_statuses(client, organizer, make_user, make_event):
    approved = make_event()
    pending = make_event(status=EventStatus.PENDING.value)
    make_event(created_by=make_user(role="organizer").id)

    res = client.get("/events/mine", params={"user_id": organizer.id})

    assert [e["id"] for e in res.json()] == [approved.id, pending.id]


def test_attending_lists_rsvped_listed_events(client, make_user, make_event, add_rsvp):
    attendee = make_user()
    going = make_event()
    hidden = make_event(is_public=False)
    make_event()
    add_rsvp(going, attendee)
    add_rsvp(hidden, attendee)

    res = client.get("/events/attending", params={"user_id": attendee.id})

    data = res.json()
    assert [e["id"] for e in data] == [going.id]
    assert data[0]["rsvp_status"] == "going"
    assert data[0]["rsvp_count"] == 1
