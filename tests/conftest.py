# 테스트 공통 픽스처: in-memory SQLite + get_db 오버라이드

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RUN_MIGRATIONS_ON_STARTUP"] = "false"
os.environ["GEOCODING_ENABLED"] = "false"

from datetime import datetime  # noqa: E402
from itertools import count  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from eventure.database import get_db  # noqa: E402
from eventure.main import app  # noqa: E402
from eventure.models.base import Base  # noqa: E402
from eventure.models.event import Event, EventStatus  # noqa: E402
from eventure.models.favorite import Favorite  # noqa: E402
from eventure.models.rsvp import RSVP, RsvpStatus  # noqa: E402
from eventure.models.user import User, UserRole  # noqa: E402
from eventure.models.zip_location import ZipLocation  # noqa: E402

PROVIDENCE_ZIP = "02903"
PROVIDENCE = (41.8240, -71.4128)
# PROVIDENCE에서 북쪽으로 약 2마일
NEAR_PROVIDENCE = (41.8530, -71.4128)
# PROVIDENCE에서 약 41마일
BOSTON = (42.3601, -71.0589)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    seq = count(1)

    def _make(role: str = UserRole.USER.value, show_contact_info: bool = False, **kwargs) -> User:
        n = next(seq)
        user = User(
            first_name=kwargs.pop("first_name", f"User{n}"),
            last_name=kwargs.pop("last_name", "Tester"),
            email=kwargs.pop("email", f"user{n}@example.com"),
            role=role,
            show_contact_info=show_contact_info,
            **kwargs,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def organizer(make_user):
    return make_user(role=UserRole.ORGANIZER.value)


@pytest.fixture
def admin(make_user):
    return make_user(role=UserRole.ADMIN.value)


@pytest.fixture
def make_event(db, organizer):
    seq = count(1)

    def _make(coordinate=None, **kwargs) -> Event:
        n = next(seq)
        lat, lng = coordinate if coordinate is not None else (None, None)
        event = Event(
            title=kwargs.pop("title", f"Event {n}"),
            description=kwargs.pop("description", "Something to do"),
            category=kwargs.pop("category", "Music"),
            status=kwargs.pop("status", EventStatus.APPROVED.value),
            is_public=kwargs.pop("is_public", True),
            starts_at=kwargs.pop("starts_at", datetime(2030, 1, n % 28 + 1, 18, 0)),
            created_at=kwargs.pop("created_at", datetime(2029, 1, n % 28 + 1, 9, 0)),
            created_by=kwargs.pop("created_by", organizer.id),
            lat=lat,
            lng=lng,
            **kwargs,
        )
        db.add(event)
        db.commit()
        db.refresh(event)
        return event

    return _make


@pytest.fixture
def make_zip(db):
    def _make(zip_code: str = PROVIDENCE_ZIP, coordinate=PROVIDENCE) -> ZipLocation:
        row = ZipLocation(zip_code=zip_code, lat=coordinate[0], lng=coordinate[1])
        db.add(row)
        db.commit()
        return row

    return _make


@pytest.fixture
def add_rsvp(db):
    def _add(event: Event, user: User, status: str = RsvpStatus.GOING.value) -> RSVP:
        rsvp = RSVP(event_id=event.id, user_id=user.id, status=status)
        db.add(rsvp)
        db.commit()
        return rsvp

    return _add


@pytest.fixture
def add_favorite(db):
    def _add(event: Event, user: User, created_at=None) -> Favorite:
        favorite = Favorite(event_id=event.id, user_id=user.id)
        if created_at is not None:
            favorite.created_at = created_at
        db.add(favorite)
        db.commit()
        return favorite

    return _add
