"""Streak transitions driven by calendar-day gaps between entries."""

from __future__ import annotations

from datetime import date, timedelta
from unittest.mock import patch

import pytest

pytestmark = pytest.mark.integration

from inkwell.core.errors import NotFoundError
from inkwell.core.users import services as user_directory
from inkwell.domains.journal.services import journal_service
from inkwell.domains.prompts.services import prompt_service
from inkwell.extensions import db

TODAY = date(2026, 10, 19)


def _set_history(user, *, streak: int, last_entry_date):
    user.streak = streak
    user.last_entry_date = last_entry_date
    db.session.commit()


def _on_day(day: date):
    return patch("inkwell.core.utils.clock.today", return_value=day)


class TestUpdateStreak:
    def test_first_entry_starts_streak(self, app, user):
        with _on_day(TODAY):
            updated = user_directory.update_streak(user.id)

        assert updated.streak == 1
        assert updated.last_entry_date == TODAY

    def test_consecutive_day_increments(self, app, user):
        _set_history(user, streak=3, last_entry_date=TODAY - timedelta(days=1))

        with _on_day(TODAY):
            updated = user_directory.update_streak(user.id)

        assert updated.streak == 4
        assert updated.last_entry_date == TODAY

    def test_same_day_keeps_streak_and_refreshes_date(self, app, user):
        with _on_day(TODAY):
            user_directory.update_streak(user.id)
            user_directory.update_streak(user.id)
            updated = user_directory.update_streak(user.id)

        assert updated.streak == 1
        assert updated.last_entry_date == TODAY

    def test_gap_of_five_days_resets(self, app, user):
        _set_history(user, streak=9, last_entry_date=TODAY - timedelta(days=5))

        with _on_day(TODAY):
            updated = user_directory.update_streak(user.id)

        assert updated.streak == 1
        assert updated.last_entry_date == TODAY

    def test_gap_of_two_days_resets(self, app, user):
        _set_history(user, streak=2, last_entry_date=TODAY - timedelta(days=2))

        with _on_day(TODAY):
            assert user_directory.update_streak(user.id).streak == 1

    def test_future_last_entry_leaves_streak(self, app, user):
        _set_history(user, streak=4, last_entry_date=TODAY + timedelta(days=3))

        with _on_day(TODAY):
            updated = user_directory.update_streak(user.id)

        assert updated.streak == 4
        assert updated.last_entry_date == TODAY

    def test_walk_across_month_boundary(self, app, user):
        start = date(2026, 1, 30)
        for offset in range(4):
            with _on_day(start + timedelta(days=offset)):
                updated = user_directory.update_streak(user.id)

        assert updated.streak == 4
        assert updated.last_entry_date == date(2026, 2, 2)

    def test_streak_is_persisted(self, app, user):
        with _on_day(TODAY):
            user_directory.update_streak(user.id)
        db.session.expire_all()

        assert user_directory.find_by_id(user.id).streak == 1

    def test_unknown_user(self, app):
        with pytest.raises(NotFoundError):
            user_directory.update_streak("missing-user")


class TestEntryCreationScenarios:
    """Streak outcomes as seen through entry creation."""

    def test_new_user_first_entry(self, app, user, prompt):
        assert user.streak == 0
        assert user.last_entry_date is None

        with _on_day(TODAY):
            journal_service.create_entry(user.id, "My very first entry", prompt.id)

        assert user.streak == 1
        assert user.last_entry_date == TODAY

    def test_entry_after_yesterday_extends_streak(self, app, user, prompt):
        _set_history(user, streak=5, last_entry_date=TODAY - timedelta(days=1))

        with _on_day(TODAY):
            journal_service.create_entry(user.id, "Keeping it going", prompt.id)

        assert user.streak == 6

    def test_entry_after_eight_days_resets_streak(self, app, user, prompt):
        _set_history(user, streak=5, last_entry_date=TODAY - timedelta(days=8))

        with _on_day(TODAY):
            journal_service.create_entry(user.id, "Back again", prompt.id)

        assert user.streak == 1
        assert user.last_entry_date == TODAY

    def test_second_entry_same_day_keeps_streak(self, app, user):
        first = prompt_service.create_prompt("Morning pages")
        second = prompt_service.create_prompt("Evening review")
        _set_history(user, streak=2, last_entry_date=TODAY - timedelta(days=1))

        with _on_day(TODAY):
            journal_service.create_entry(user.id, "morning", first.id)
            journal_service.create_entry(user.id, "evening", second.id)

        assert user.streak == 3

    def test_update_and_delete_do_not_touch_streak(self, app, user, prompt):
        with _on_day(TODAY):
            entry = journal_service.create_entry(user.id, "draft", prompt.id)

        with _on_day(TODAY + timedelta(days=1)):
            journal_service.update_entry(entry.id, "final draft")
            journal_service.delete_entry(entry.id)

        assert user.streak == 1
        assert user.last_entry_date == TODAY
