"""
Submission orchestration: one validation pass, then accept-and-reset or reject.
"""

from datetime import datetime
from typing import Callable, Optional

from registration.core import config
from registration.core.models import FormValues, SubmissionRecord
from registration.core.record_log import RecordLog
from registration.core.reporter import ErrorReporter
from registration.core.schema import Accepted, FieldName, Outcome, Rejected
from registration.core.surface import FormSurface
from registration.core.validators import validate_all
from util.logging import logger


class SubmissionForm:
    """
    Decides whether a submission attempt is accepted.

    Only an attempt where all five fields validate creates a record. The
    clock and timestamp formatter are injectable so attempts are reproducible.
    """

    def __init__(
        self,
        surface: FormSurface,
        record_log: RecordLog,
        reporter: Optional[ErrorReporter] = None,
        clock: Callable[[], datetime] = datetime.now,
        format_timestamp: Optional[Callable[[datetime], str]] = None,
        scroll_to_new_row: Optional[bool] = None,
    ):
        self.surface = surface
        self.record_log = record_log
        self.reporter = reporter or ErrorReporter(surface)
        self.clock = clock
        self.format_timestamp = format_timestamp or config.format_timestamp
        self.scroll_to_new_row = config.SCROLL_TO_NEW_ROW if scroll_to_new_row is None else scroll_to_new_row
        self.pending_timestamp = ""
        self._prepare_timestamp()

    def _prepare_timestamp(self) -> str:
        """Stamp the surface with the current moment for the next attempt."""
        self.pending_timestamp = self.format_timestamp(self.clock())
        self.surface.show_timestamp(self.pending_timestamp)
        return self.pending_timestamp

    def attempt_submit(self, values: FormValues) -> Outcome:
        now = self.clock()
        self.pending_timestamp = self.format_timestamp(now)
        self.surface.show_timestamp(self.pending_timestamp)

        values = values.trimmed()
        errors = validate_all(values, now)
        self.reporter.report(errors)

        if not errors.is_valid:
            focused = self.reporter.focus_first_invalid(errors)
            logger.log_submission_rejected(
                self.pending_timestamp,
                [field.value for field in errors.invalid_fields()],
                focused.value if focused else None,
            )
            return Rejected(errors)

        record = SubmissionRecord.from_values(values, self.pending_timestamp)
        self.record_log.append(record)
        self.surface.append_row(record)
        if self.scroll_to_new_row:
            self.surface.scroll_to_row(record)
        logger.log_submission_accepted(record.timestamp, len(self.record_log))

        self.reset()
        return Accepted(record)

    def reset(self) -> None:
        """Clear the surface for the next entry and return focus to the name field."""
        self.surface.reset_fields()
        next_timestamp = self._prepare_timestamp()
        self.surface.focus(FieldName.FULL_NAME)
        logger.log_form_reset(next_timestamp)
