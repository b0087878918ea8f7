"""
FormSurface implementation backed by the registration screen's widgets.
"""

from textual.widgets import Checkbox, DataTable, Input, Static

from registration.core.models import SubmissionRecord
from registration.core.schema import FIELD_ORDER, FieldName
from registration.core.surface import FormSurface

TEXT_FIELDS = [FieldName.FULL_NAME, FieldName.EMAIL, FieldName.PHONE, FieldName.BIRTH_DATE]

LOG_COLUMNS = ("Timestamp", "Full name", "Email", "Phone", "Birth date", "Terms")


def error_id(field: FieldName) -> str:
    return f"err-{field.value}"


class TextualSurface(FormSurface):
    """Adapter translating core outbound calls into widget updates on a screen."""

    def __init__(self, screen):
        self.screen = screen

    def set_error(self, field: FieldName, message: str) -> None:
        self.screen.query_one(f"#{error_id(field)}", Static).update(message)

    def focus(self, field: FieldName) -> None:
        self.screen.query_one(f"#{field.value}").focus()

    def append_row(self, record: SubmissionRecord) -> None:
        self.screen.query_one("#records", DataTable).add_row(*record.as_row())

    def scroll_to_row(self, record: SubmissionRecord) -> None:
        table = self.screen.query_one("#records", DataTable)
        if table.row_count:
            table.move_cursor(row=table.row_count - 1)

    def reset_fields(self) -> None:
        for field in TEXT_FIELDS:
            self.screen.query_one(f"#{field.value}", Input).value = ""
        self.screen.query_one(f"#{FieldName.TERMS.value}", Checkbox).value = False

    def show_timestamp(self, text: str) -> None:
        self.screen.query_one("#timestamp", Static).update(f"Timestamp: {text}")


def field_ids():
    """Widget ids for every input, in focus priority order."""
    return [field.value for field in FIELD_ORDER]
