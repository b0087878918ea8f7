"""
Outbound interface from the intake core to whatever draws the form.
"""

from abc import ABC, abstractmethod

from registration.core.models import SubmissionRecord
from registration.core.schema import FieldName


class FormSurface(ABC):
    """
    Abstract presentation surface.
    The core never reads widget state through this interface; values arrive as FormValues.
    """

    @abstractmethod
    def set_error(self, field: FieldName, message: str) -> None:
        """Show message next to field; an empty message clears it."""
        pass

    @abstractmethod
    def focus(self, field: FieldName) -> None:
        pass

    @abstractmethod
    def append_row(self, record: SubmissionRecord) -> None:
        pass

    @abstractmethod
    def scroll_to_row(self, record: SubmissionRecord) -> None:
        pass

    @abstractmethod
    def reset_fields(self) -> None:
        """Return every input to its empty/default state."""
        pass

    @abstractmethod
    def show_timestamp(self, text: str) -> None:
        pass
