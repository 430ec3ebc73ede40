"""End-to-end tests for the reaction endpoints."""

import pytest
from fastapi.testclient import TestClient

from social.domain.value import COMMON_EMOJIS
from social.interface.api.app import create_app
from social.persistence.repository.inmemory import InMemoryDatabase
from tests.di import build_test_container
from tests.factories import add_comment, add_post, add_user, auth_headers


@pytest.fixture
def db():
    return InMemoryDatabase()


@pytest.fixture
def client(db):
    app_instance = create_app(container=build_test_container(database=db))
    with TestClient(app_instance) as test_client:
        yield test_client


@pytest.fixture
def comment(db):
    user = add_user(db)
    post = add_post(db, user.id)
    return add_comment(db, post.id, user.id)


class TestReactionEndpoints:
    def test_emoji_list(self, client):
        response = client.get("/api/reactions/emoji-list")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["total_count"] == len(data["emojis"])
        heart = {
            "name": "heart",
            "unicode": COMMON_EMOJIS["heart"],
            "display_name": "Heart",
        }
        assert heart in data["emojis"]

    def test_toggle_requires_authentication(self, client, comment):
        response = client.post(
            f"/api/reactions/comment/{comment.id}", json={"emoji_name": "like"}
        )

        assert response.status_code == 401
        assert response.json()["error"]["message"] == (
            "Authentication required to react to comments"
        )

    def test_toggle_cycle(self, client, comment):
        """Add, replace, then remove one user's reaction."""
        headers = auth_headers(comment.author_id)
        url = f"/api/reactions/comment/{comment.id}"

        added = client.post(url, json={"emoji_name": "like"}, headers=headers)
        updated = client.post(url, json={"emoji_name": "fire"}, headers=headers)
        removed = client.post(url, json={"emoji_name": "fire"}, headers=headers)

        assert added.json()["data"]["action"] == "added"
        assert updated.json()["data"]["action"] == "updated"
        assert updated.json()["data"]["reaction_counts"] == [
            {"emoji_name": "fire", "count": 1}
        ]
        assert removed.json()["data"]["action"] == "removed"
        assert removed.json()["data"]["reaction"] is None
        assert removed.json()["message"] == "Reaction removed successfully"

    def test_cookie_authentication(self, client, db, comment):
        token = auth_headers(comment.author_id)["Authorization"].removeprefix("Bearer ")
        client.cookies.set("auth_token", token)

        response = client.post(
            f"/api/reactions/comment/{comment.id}", json={"emoji_name": "clap"}
        )

        assert response.status_code == 200
        assert len(db.reactions) == 1

    def test_get_counts(self, client, db, comment):
        bob = add_user(db, "bob")
        url = f"/api/reactions/comment/{comment.id}"
        client.post(url, json={"emoji_name": "wow"}, headers=auth_headers(comment.author_id))
        client.post(url, json={"emoji_name": "wow"}, headers=auth_headers(bob.id))

        response = client.get(url)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["reaction_counts"] == [{"emoji_name": "wow", "count": 2}]
        assert data["total_reactions"] == 2

    @pytest.mark.parametrize("emoji_name", ["!!!", "rocket"])
    def test_malformed_emoji(self, client, comment, emoji_name):
        response = client.post(
            f"/api/reactions/comment/{comment.id}",
            json={"emoji_name": emoji_name},
            headers=auth_headers(comment.author_id),
        )

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "VALIDATION_ERROR"

    def test_missing_comment(self, client, db):
        user = add_user(db)

        response = client.post(
            "/api/reactions/comment/404",
            json={"emoji_name": "like"},
            headers=auth_headers(user.id),
        )

        assert response.status_code == 404

    def test_non_positive_comment_id_is_rejected(self, client, db):
        user = add_user(db)

        response = client.post(
            "/api/reactions/comment/0",
            json={"emoji_name": "like"},
            headers=auth_headers(user.id),
        )

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "VALIDATION_ERROR"
        assert db.reactions == {}
