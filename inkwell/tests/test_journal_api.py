"""Journal endpoints."""

from __future__ import annotations

from datetime import date, timedelta
from unittest.mock import patch

import pytest

pytestmark = pytest.mark.integration

from inkwell.core.auth.auth_service import issue_tokens
from inkwell.domains.prompts.services import prompt_service

TODAY = date(2026, 10, 19)


def _on_day(day: date):
    return patch("inkwell.core.utils.clock.today", return_value=day)


def _post_entry(client, headers, content="Quiet morning with coffee", mood=None, day=TODAY):
    prompt = prompt_service.create_prompt(f"Prompt for {content}")
    payload = {"content": content, "prompt_id": prompt.id}
    if mood is not None:
        payload["mood"] = mood
    with _on_day(day):
        return client.post("/api/journal", json=payload, headers=headers)


@pytest.fixture()
def other_headers(other_user):
    return {"Authorization": f"Bearer {issue_tokens(other_user)['access_token']}"}


def test_routes_require_auth(client):
    assert client.get("/api/journal").status_code == 401
    assert client.get("/api/journal/stats").status_code == 401


class TestCreateEntryApi:
    def test_create(self, client, auth_headers, user):
        resp = _post_entry(client, auth_headers, mood="content")

        assert resp.status_code == 201
        body = resp.get_json()
        assert body["streak"] == 1
        entry = body["entry"]
        assert entry["user_id"] == user.id
        assert entry["entry_date"] == "2026-10-19"
        assert entry["word_count"] == 4
        assert entry["mood"] == "content"
        assert entry["prompt"]["is_used"] is True

    def test_streak_grows_day_to_day(self, client, auth_headers):
        _post_entry(client, auth_headers, "day one", day=TODAY - timedelta(days=1))
        resp = _post_entry(client, auth_headers, "day two", day=TODAY)

        assert resp.get_json()["streak"] == 2

    def test_unknown_prompt(self, client, auth_headers):
        resp = client.post(
            "/api/journal", json={"content": "hi", "prompt_id": "missing"}, headers=auth_headers
        )

        assert resp.status_code == 404

    def test_missing_prompt_id(self, client, auth_headers):
        resp = client.post("/api/journal", json={"content": "hi"}, headers=auth_headers)

        assert resp.status_code == 400
        assert resp.get_json()["error"] == "validation_error"

    def test_empty_content_is_allowed(self, client, auth_headers, prompt):
        resp = client.post(
            "/api/journal", json={"content": "", "prompt_id": prompt.id}, headers=auth_headers
        )

        assert resp.status_code == 201
        assert resp.get_json()["entry"]["word_count"] == 0


class TestReadEntriesApi:
    def test_list(self, client, auth_headers):
        _post_entry(client, auth_headers, "older", day=TODAY - timedelta(days=1))
        _post_entry(client, auth_headers, "newer", day=TODAY)

        body = client.get("/api/journal", headers=auth_headers).get_json()

        assert body["total"] == 2
        assert [e["content"] for e in body["items"]] == ["newer", "older"]

    def test_list_by_date(self, client, auth_headers):
        _post_entry(client, auth_headers, "older", day=TODAY - timedelta(days=1))
        _post_entry(client, auth_headers, "newer", day=TODAY)

        body = client.get("/api/journal?date=2026-10-18", headers=auth_headers).get_json()

        assert [e["content"] for e in body["items"]] == ["older"]

    def test_list_bad_date(self, client, auth_headers):
        assert client.get("/api/journal?date=yesterday", headers=auth_headers).status_code == 400

    def test_get_entry(self, client, auth_headers):
        entry_id = _post_entry(client, auth_headers).get_json()["entry"]["id"]

        resp = client.get(f"/api/journal/{entry_id}", headers=auth_headers)

        assert resp.status_code == 200
        assert resp.get_json()["entry"]["id"] == entry_id

    def test_other_users_entry_is_not_found(self, client, auth_headers, other_headers):
        entry_id = _post_entry(client, other_headers).get_json()["entry"]["id"]

        assert client.get(f"/api/journal/{entry_id}", headers=auth_headers).status_code == 404
        assert client.get("/api/journal", headers=auth_headers).get_json()["total"] == 0


class TestChangeEntriesApi:
    def test_patch(self, client, auth_headers):
        entry_id = _post_entry(client, auth_headers, mood="calm").get_json()["entry"]["id"]

        resp = client.patch(
            f"/api/journal/{entry_id}", json={"content": "rewritten in full"}, headers=auth_headers
        )

        assert resp.status_code == 200
        entry = resp.get_json()["entry"]
        assert entry["content"] == "rewritten in full"
        assert entry["word_count"] == 3
        assert entry["mood"] == "calm"

    def test_patch_other_users_entry(self, client, auth_headers, other_headers):
        entry_id = _post_entry(client, other_headers).get_json()["entry"]["id"]

        resp = client.patch(f"/api/journal/{entry_id}", json={"content": "mine now"}, headers=auth_headers)

        assert resp.status_code == 404

    def test_delete(self, client, auth_headers):
        entry_id = _post_entry(client, auth_headers).get_json()["entry"]["id"]

        assert client.delete(f"/api/journal/{entry_id}", headers=auth_headers).status_code == 200
        assert client.get(f"/api/journal/{entry_id}", headers=auth_headers).status_code == 404

    def test_delete_missing(self, client, auth_headers):
        assert client.delete("/api/journal/missing", headers=auth_headers).status_code == 404


class TestStatsAndCalendarApi:
    def test_stats(self, client, auth_headers):
        _post_entry(client, auth_headers, "one two", mood="happy")
        _post_entry(client, auth_headers, "three four five six", mood="happy")
        _post_entry(client, auth_headers, "seven")

        stats = client.get("/api/journal/stats", headers=auth_headers).get_json()["stats"]

        assert stats == {
            "total_entries": 3,
            "total_words": 7,
            "average_words_per_entry": pytest.approx(7 / 3),
            "entries_by_mood": {"happy": 2, "unknown": 1},
        }

    def test_calendar(self, client, auth_headers):
        _post_entry(client, auth_headers, "a", day=date(2026, 10, 2))
        _post_entry(client, auth_headers, "b", day=date(2026, 10, 2))
        _post_entry(client, auth_headers, "c", day=date(2026, 10, 9))

        body = client.get("/api/journal/calendar/2026/10", headers=auth_headers).get_json()

        assert body == {"ok": True, "year": 2026, "month": 10, "dates": ["2026-10-02", "2026-10-09"]}

    def test_calendar_bad_month(self, client, auth_headers):
        resp = client.get("/api/journal/calendar/2026/13", headers=auth_headers)

        assert resp.status_code == 400
        assert resp.get_json()["error"] == "validation_error"
