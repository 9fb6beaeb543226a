"""Prompt endpoints."""

from __future__ import annotations

from datetime import date
from unittest.mock import patch

import pytest

pytestmark = pytest.mark.integration

from inkwell.domains.prompts.services import prompt_service

TODAY = date(2026, 10, 19)


def test_routes_require_auth(client):
    assert client.get("/api/prompts/today").status_code == 401
    assert client.post("/api/prompts", json={"text": "x"}).status_code == 401


class TestCreatePromptApi:
    def test_create(self, client, auth_headers):
        resp = client.post(
            "/api/prompts",
            json={"text": "What are you curious about?", "category": "curiosity", "scheduled_date": "2026-10-20"},
            headers=auth_headers,
        )

        assert resp.status_code == 201
        prompt = resp.get_json()["prompt"]
        assert prompt["text"] == "What are you curious about?"
        assert prompt["category"] == "curiosity"
        assert prompt["scheduled_date"] == "2026-10-20"
        assert prompt["is_used"] is False

    def test_missing_text(self, client, auth_headers):
        resp = client.post("/api/prompts", json={"category": "none"}, headers=auth_headers)

        assert resp.status_code == 400
        assert resp.get_json()["error"] == "validation_error"

    def test_blank_text(self, client, auth_headers):
        resp = client.post("/api/prompts", json={"text": "   "}, headers=auth_headers)

        assert resp.status_code == 400
        assert resp.get_json()["error"] == "validation_error"


class TestPromptSelectionApi:
    def test_today_prefers_scheduled(self, client, auth_headers):
        prompt_service.create_prompt("Anything else")
        scheduled = prompt_service.create_prompt("Scheduled one", scheduled_date=TODAY)

        with patch("inkwell.core.utils.clock.today", return_value=TODAY):
            resp = client.get("/api/prompts/today", headers=auth_headers)

        assert resp.status_code == 200
        assert resp.get_json()["prompt"]["id"] == scheduled.id

    def test_random(self, client, auth_headers, prompt):
        resp = client.get("/api/prompts/random", headers=auth_headers)

        assert resp.get_json()["prompt"]["id"] == prompt.id

    def test_random_on_empty_pool(self, client, auth_headers):
        resp = client.get("/api/prompts/random", headers=auth_headers)

        assert resp.status_code == 404
        body = resp.get_json()
        assert body["error"] == "not_found"
        assert body["message"] == "No available prompts found"

    def test_get_by_id(self, client, auth_headers, prompt):
        resp = client.get(f"/api/prompts/{prompt.id}", headers=auth_headers)

        assert resp.get_json()["prompt"]["category"] == "gratitude"

    def test_get_missing(self, client, auth_headers):
        assert client.get("/api/prompts/missing", headers=auth_headers).status_code == 404


class TestUseAndHistoryApi:
    def test_use_marks_prompt(self, client, auth_headers, prompt):
        resp = client.post(f"/api/prompts/{prompt.id}/use", headers=auth_headers)

        assert resp.status_code == 200
        assert resp.get_json()["prompt"]["is_used"] is True

    def test_use_missing(self, client, auth_headers):
        assert client.post("/api/prompts/missing/use", headers=auth_headers).status_code == 404

    def test_history(self, client, auth_headers):
        for day in (1, 2, 3):
            p = prompt_service.create_prompt(f"Day {day}", scheduled_date=date(2026, 10, day))
            prompt_service.mark_as_used(p.id)

        resp = client.get("/api/prompts/history?limit=2", headers=auth_headers)

        assert resp.status_code == 200
        assert [p["text"] for p in resp.get_json()["items"]] == ["Day 3", "Day 2"]

    def test_history_bad_limit(self, client, auth_headers):
        resp = client.get("/api/prompts/history?limit=0", headers=auth_headers)

        assert resp.status_code == 400
