"""
Per-field error reporting and focus management.
"""

from typing import Dict, Optional, Union

from registration.core.schema import FIELD_ORDER, FieldName, ValidationResult
from registration.core.surface import FormSurface
from util.logging import logger


class ErrorReporter:
    """
    Holds the visible message for each field and pushes changes to the surface.

    Editing a field after a rejected attempt only clears that field's message;
    the field is not re-checked until the next full submission.
    """

    def __init__(self, surface: FormSurface):
        self.surface = surface
        self._messages: Dict[FieldName, str] = {field: "" for field in FIELD_ORDER}

    def report(self, errors: ValidationResult) -> None:
        """Show every non-empty message and clear every field that passed."""
        for field, message in errors:
            self._messages[field] = message
            self.surface.set_error(field, message)

    def focus_first_invalid(self, errors: ValidationResult) -> Optional[FieldName]:
        field = errors.first_invalid()
        if field is not None:
            self.surface.focus(field)
        return field

    def clear_on_edit(self, field: Union[FieldName, str]) -> None:
        field = FieldName(field)
        if not self._messages[field]:
            return
        self._messages[field] = ""
        self.surface.set_error(field, "")
        logger.log_field_cleared(field.value)

    def message_for(self, field: Union[FieldName, str]) -> str:
        return self._messages[FieldName(field)]

    def visible_messages(self) -> Dict[str, str]:
        """Currently visible non-empty messages keyed by field identifier."""
        return {field.value: message for field, message in self._messages.items() if message}
