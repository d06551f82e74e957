"""Tests for the activity feed endpoints."""

from __future__ import annotations

import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[4]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")

from useractivity.config import get_settings

get_settings.cache_clear()

from useractivity.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from useractivity.infrastructure.models import (  # noqa: E402
    ActorModel,
    CommentModel,
    PageModel,
    RecentChangeModel,
    UserRelationshipModel,
)
from main import create_app  # noqa: E402


def _recently(**delta) -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0) - timedelta(**delta)


@pytest.fixture(autouse=True)
def reset_database() -> None:
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    _seed()
    yield
    Base.metadata.drop_all(bind=engine)


def _seed() -> None:
    """Insert two users, a friendship and some recent edits and comments."""

    with SessionLocal() as session:
        session.add_all(
            [
                ActorModel(id=1, user_id=1, name="Sam"),
                ActorModel(id=2, user_id=2, name="Bob"),
                PageModel(id=10, namespace=0, title="PageB"),
            ]
        )
        session.add_all(
            [
                RecentChangeModel(id=1, timestamp=_recently(minutes=30), actor_id=1, namespace=0, title="PageA"),
                RecentChangeModel(id=2, timestamp=_recently(minutes=10), actor_id=1, namespace=0, title="PageA"),
                RecentChangeModel(id=3, timestamp=_recently(minutes=5), actor_id=2, namespace=0, title="Other"),
                CommentModel(id=1, page_id=10, actor_id=1, text="<b>Nice</b>", created_at=_recently(minutes=20)),
                UserRelationshipModel(id=1, actor_id=1, related_actor_id=2, kind=1, created_at=_recently(days=10)),
            ]
        )
        session.commit()


@pytest.fixture()
def client():
    with TestClient(create_app()) as test_client:
        yield test_client


def test_user_feed_lists_own_activity(client: TestClient) -> None:
    response = client.get("/activity/users/Sam")

    assert response.status_code == 200
    items = response.json()
    assert [(item["type"], item["target_title"]) for item in items] == [
        ("edit", "PageA"),
        ("comment", "PageB"),
        ("edit", "PageA"),
        ("friend", ""),
    ]
    assert items[3]["recipient_name"] == "Bob"
    assert items[1]["summary_text"] == "&lt;b&gt;Nice&lt;/b&gt;"


def test_user_grouped_feed(client: TestClient) -> None:
    response = client.get("/activity/users/Sam/grouped")

    assert response.status_code == 200
    assert [line["text"] for line in response.json()] == [
        "Sam edited the page PageA (2 edits)",
        "Sam commented on the page PageB",
    ]


def test_friends_filter_shows_activity_of_friends(client: TestClient) -> None:
    response = client.get("/activity/users/Sam", params={"filter": "friends"})

    assert response.status_code == 200
    assert [(item["actor_name"], item["target_title"]) for item in response.json()] == [
        ("Bob", "Other")
    ]


def test_site_feed_respects_toggles_and_limit(client: TestClient) -> None:
    response = client.get(
        "/activity/",
        params={"filter": "all", "limit": 2, "show_comments": False, "show_relationships": False},
    )

    assert response.status_code == 200
    assert [item["actor_name"] for item in response.json()] == ["Bob", "Sam"]


def test_unknown_user_returns_404(client: TestClient) -> None:
    response = client.get("/activity/users/Nobody/grouped")

    assert response.status_code == 404
    assert response.json()["detail"] == "User 'Nobody' not found"


def test_limit_is_validated(client: TestClient) -> None:
    response = client.get("/activity/", params={"limit": 0})

    assert response.status_code == 422
