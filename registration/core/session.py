"""
Single-threaded dispatch of inbound form events.
"""

from typing import Optional, Union

from registration.core.form import SubmissionForm
from registration.core.models import FormValues
from registration.core.record_log import RecordLog
from registration.core.reporter import ErrorReporter
from registration.core.schema import FieldChanged, FieldName, Outcome, SubmissionRequested
from registration.core.surface import FormSurface
from util.logging import logger


class IntakeSession:
    """
    Wires the form, reporter and record log to one surface.

    Each event is handled to completion before dispatch returns; the caller's
    event loop is what guarantees one event at a time.
    """

    def __init__(self, surface: FormSurface, **form_options):
        self.surface = surface
        self.record_log = RecordLog()
        self.reporter = ErrorReporter(surface)
        self.form = SubmissionForm(surface, self.record_log, self.reporter, **form_options)

    def dispatch(self, event: Union[SubmissionRequested, FieldChanged]) -> Optional[Outcome]:
        if isinstance(event, SubmissionRequested):
            return self.form.attempt_submit(event.values)
        if isinstance(event, FieldChanged):
            self.reporter.clear_on_edit(event.field)
            return None
        logger.error(f"Unsupported form event: {type(event).__name__}")
        raise TypeError(f"unsupported event type: {type(event).__name__}")

    def submit(self, values: FormValues) -> Outcome:
        return self.dispatch(SubmissionRequested(values))

    def field_changed(self, field: Union[FieldName, str]) -> None:
        self.dispatch(FieldChanged(FieldName(field)))
