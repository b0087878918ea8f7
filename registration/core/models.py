"""
Pydantic models for form snapshots and accepted submission records.
"""

from pydantic import BaseModel, ConfigDict, Field

TERMS_ACCEPTED = "Accepted"
TERMS_NOT_ACCEPTED = "Not accepted"


class FormValues(BaseModel):
    """Raw, untrusted values read from the input surface at one submission attempt."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    full_name: str = Field("", alias="fullName")
    email: str = ""
    phone: str = ""
    birth_date: str = Field("", alias="birthDate")
    terms: bool = False

    def trimmed(self) -> "FormValues":
        """Copy with text fields trimmed; birth date and terms stay raw."""
        return self.model_copy(update={
            "full_name": self.full_name.strip(),
            "email": self.email.strip(),
            "phone": self.phone.strip(),
        })


class SubmissionRecord(BaseModel):
    """An accepted submission, immutable once created."""
    model_config = ConfigDict(frozen=True)

    timestamp: str
    full_name: str
    email: str
    phone: str
    birth_date: str
    terms: bool

    @classmethod
    def from_values(cls, values: FormValues, timestamp: str) -> "SubmissionRecord":
        return cls(
            timestamp=timestamp,
            full_name=values.full_name,
            email=values.email,
            phone=values.phone,
            birth_date=values.birth_date,
            terms=values.terms,
        )

    @property
    def terms_label(self) -> str:
        return TERMS_ACCEPTED if self.terms else TERMS_NOT_ACCEPTED

    def as_row(self) -> tuple:
        """Display cells in log column order."""
        return (
            self.timestamp,
            self.full_name,
            self.email,
            self.phone,
            self.birth_date,
            self.terms_label,
        )
