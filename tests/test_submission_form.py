"""
Submission form tests - accept/reject decisions, focus tie-break and the reset transition.
"""

import pytest
from datetime import datetime, timedelta
from unittest.mock import MagicMock, call

from registration.core.form import SubmissionForm
from registration.core.models import FormValues
from registration.core.record_log import RecordLog
from registration.core.schema import Accepted, FieldName, Rejected
from registration.core.surface import FormSurface

NOW = datetime(2026, 10, 19, 12, 0, 0)

VALID = {
    "fullName": "Ada Lovelace",
    "email": "ada@example.com",
    "phone": "0401234567",
    "birthDate": "2000-01-01",
    "terms": True,
}


class TickingClock:
    """Clock advancing one second per call."""

    def __init__(self, start=NOW):
        self.current = start - timedelta(seconds=1)

    def __call__(self):
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def surface():
    return MagicMock(spec=FormSurface)


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def form(surface, clock):
    return SubmissionForm(
        surface,
        RecordLog(),
        clock=clock,
        format_timestamp=lambda moment: moment.strftime("%H:%M:%S"),
        scroll_to_new_row=True,
    )


def values(**overrides):
    data = dict(VALID)
    data.update(overrides)
    return FormValues(**data)


class TestAcceptedSubmission:
    """Test the accept path."""

    def test_end_to_end_accept(self, form, surface):
        """Test the reference submission is accepted and the surface resets."""
        outcome = form.attempt_submit(values())

        assert isinstance(outcome, Accepted)
        assert len(form.record_log) == 1
        record = form.record_log.latest()
        assert record is outcome.record
        assert record.terms_label == "Accepted"
        assert record.as_row()[1:] == ("Ada Lovelace", "ada@example.com", "0401234567", "2000-01-01", "Accepted")

        surface.append_row.assert_called_once_with(record)
        surface.scroll_to_row.assert_called_once_with(record)
        surface.reset_fields.assert_called_once_with()
        surface.focus.assert_called_once_with(FieldName.FULL_NAME)

    def test_text_fields_are_trimmed(self, form):
        outcome = form.attempt_submit(values(fullName="  Ada Lovelace  ", email=" ada@example.com", phone="0401234567 "))
        assert outcome.record.full_name == "Ada Lovelace"
        assert outcome.record.email == "ada@example.com"
        assert outcome.record.phone == "0401234567"

    def test_all_messages_cleared_on_accept(self, form, surface):
        form.attempt_submit(values(email="nope"))
        surface.reset_mock()
        form.attempt_submit(values())
        cleared = [c for c in surface.set_error.call_args_list if c == call(FieldName.EMAIL, "")]
        assert cleared
        assert form.reporter.visible_messages() == {}

    def test_repeated_identical_submissions_both_logged(self, form):
        form.attempt_submit(values())
        form.attempt_submit(values())
        assert len(form.record_log) == 2

    def test_no_scroll_when_disabled(self, surface, clock):
        form = SubmissionForm(surface, RecordLog(), clock=clock, format_timestamp=str, scroll_to_new_row=False)
        form.attempt_submit(values())
        surface.scroll_to_row.assert_not_called()
        surface.append_row.assert_called_once()


class TestRejectedSubmission:
    """Test the reject path."""

    @pytest.mark.parametrize("overrides", [
        {"fullName": "OnlyOneName"},
        {"email": "ada@example"},
        {"phone": "+35840123"},
        {"birthDate": "2020-01-01"},
        {"birthDate": "2099-01-01"},
        {"birthDate": "2000-1-1"},
        {"terms": False},
    ])
    def test_any_invalid_field_rejects(self, form, surface, overrides):
        outcome = form.attempt_submit(values(**overrides))
        assert isinstance(outcome, Rejected)
        assert len(form.record_log) == 0
        surface.append_row.assert_not_called()
        surface.reset_fields.assert_not_called()

    def test_rejection_carries_full_result(self, form):
        outcome = form.attempt_submit(values(phone="12", terms=False))
        assert set(outcome.errors.as_dict()) == {"fullName", "email", "phone", "birthDate", "terms"}
        assert outcome.errors.invalid_fields() == [FieldName.PHONE, FieldName.TERMS]

    def test_focus_goes_to_first_invalid_by_priority(self, form, surface):
        """Test that name wins over email when both are invalid."""
        form.attempt_submit(values(fullName="J Li", email="bad"))
        surface.focus.assert_called_once_with(FieldName.FULL_NAME)

    def test_focus_skips_valid_fields(self, form, surface):
        form.attempt_submit(values(birthDate="", terms=False))
        surface.focus.assert_called_once_with(FieldName.BIRTH_DATE)

    def test_every_invalid_field_shows_its_message(self, form, surface):
        form.attempt_submit(FormValues())
        shown = {c.args[0] for c in surface.set_error.call_args_list if c.args[1]}
        assert shown == {FieldName.FULL_NAME, FieldName.EMAIL, FieldName.PHONE, FieldName.BIRTH_DATE, FieldName.TERMS}

    def test_passing_fields_lose_stale_messages(self, form):
        form.attempt_submit(values(fullName="", email=""))
        form.attempt_submit(values(email=""))
        assert form.reporter.visible_messages() == {"email": "Please enter your email address."}


class TestTimestamps:
    """Test that every attempt is stamped with a fresh moment."""

    def test_timestamp_prepared_on_open(self, form, surface):
        assert form.pending_timestamp == "12:00:00"
        surface.show_timestamp.assert_called_with("12:00:00")

    def test_record_stamped_at_attempt_not_open(self, form):
        outcome = form.attempt_submit(values())
        assert outcome.record.timestamp == "12:00:01"

    def test_fresh_timestamp_after_reset(self, form):
        form.attempt_submit(values())
        assert form.pending_timestamp == "12:00:02"

    def test_rejected_attempt_still_stamped(self, form):
        form.attempt_submit(values(terms=False))
        assert form.pending_timestamp == "12:00:01"

    def test_attempt_time_is_validation_now(self, surface):
        """Test that age is computed against the attempt's clock reading."""
        clock = MagicMock(return_value=datetime(2026, 10, 19, 9, 0, 0))
        form = SubmissionForm(surface, RecordLog(), clock=clock, format_timestamp=str)
        assert isinstance(form.attempt_submit(values(birthDate="2013-10-19")), Accepted)
        assert isinstance(form.attempt_submit(values(birthDate="2013-10-20")), Rejected)

    def test_default_formatter_uses_config(self, surface, clock):
        from registration.core import config
        form = SubmissionForm(surface, RecordLog(), clock=clock)
        assert form.pending_timestamp == NOW.strftime(config.TIMESTAMP_FORMAT)
