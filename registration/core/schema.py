"""
Core value types for the registration intake flow.
Field identifiers, validation results, submission outcomes and inbound events.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

from registration.core.models import FormValues, SubmissionRecord


class FieldName(str, Enum):
    FULL_NAME = "fullName"
    EMAIL = "email"
    PHONE = "phone"
    BIRTH_DATE = "birthDate"
    TERMS = "terms"


# Focus priority on rejection
FIELD_ORDER: Tuple[FieldName, ...] = (
    FieldName.FULL_NAME,
    FieldName.EMAIL,
    FieldName.PHONE,
    FieldName.BIRTH_DATE,
    FieldName.TERMS,
)

# FieldName -> ValidationResult attribute
_ATTRIBUTES = {
    FieldName.FULL_NAME: "full_name",
    FieldName.EMAIL: "email",
    FieldName.PHONE: "phone",
    FieldName.BIRTH_DATE: "birth_date",
    FieldName.TERMS: "terms",
}


@dataclass(frozen=True)
class FieldValidationError:
    """A human-readable problem with exactly one field."""
    field: FieldName
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of one validation pass: one error string per field.

    An empty string means the field is valid. The slots are fixed, so a
    result always covers exactly the five field identifiers.
    """
    full_name: str = ""
    email: str = ""
    phone: str = ""
    birth_date: str = ""
    terms: str = ""

    @classmethod
    def from_mapping(cls, errors: Mapping[str, str]) -> "ValidationResult":
        """Build a result from a mapping keyed by field identifier."""
        known = {f.value for f in FIELD_ORDER}
        keys = {k.value if isinstance(k, FieldName) else str(k) for k in errors}
        unknown = sorted(str(k) for k in keys - known)
        if unknown:
            raise KeyError(f"unknown field identifiers: {unknown}")
        missing = [f.value for f in FIELD_ORDER if f.value not in keys]
        if missing:
            raise KeyError(f"validation result missing fields: {missing}")
        return cls(**{_ATTRIBUTES[FieldName(k)]: v for k, v in errors.items()})

    def get(self, field: Union[FieldName, str]) -> str:
        return getattr(self, _ATTRIBUTES[FieldName(field)])

    def __iter__(self) -> Iterator[Tuple[FieldName, str]]:
        for field in FIELD_ORDER:
            yield field, self.get(field)

    def as_dict(self) -> Dict[str, str]:
        return {field.value: message for field, message in self}

    @property
    def is_valid(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))

    def invalid_fields(self) -> List[FieldName]:
        return [field for field, message in self if message]

    def first_invalid(self) -> Optional[FieldName]:
        invalid = self.invalid_fields()
        return invalid[0] if invalid else None

    def errors(self) -> List[FieldValidationError]:
        return [FieldValidationError(field, message) for field, message in self if message]


@dataclass(frozen=True)
class Accepted:
    record: "SubmissionRecord"


@dataclass(frozen=True)
class Rejected:
    errors: ValidationResult


Outcome = Union[Accepted, Rejected]


# Inbound events from the presentation layer

@dataclass(frozen=True)
class SubmissionRequested:
    values: "FormValues"


@dataclass(frozen=True)
class FieldChanged:
    field: FieldName
