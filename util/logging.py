"""
Structured logging for the registration intake flow.
Entered personal data never reaches the log; only field identifiers and counts do.
"""

import logging
from typing import Any, Dict, List

from registration.core import config

# Field identifiers whose values are personal data
SENSITIVE_FIELDS = ['fullName', 'email', 'phone', 'birthDate', 'full_name', 'birth_date']


class StructuredLogger:
    """Structured logger for submission, reporting and record log operations."""

    def __init__(self, name: str = "registration_intake"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(config.get_log_level())

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None):
        """Log a structured operation."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {sanitize_payload(details)}"

        self.logger.info(message)

    def log_submission_accepted(self, timestamp: str, record_count: int):
        """Log an accepted submission."""
        log_details = {
            "timestamp": timestamp,
            "record_count": record_count
        }
        self.log_operation("submission.attempt", "accepted", log_details)

    def log_submission_rejected(self, timestamp: str, invalid_fields: List[str], focused: str = None):
        """Log a rejected submission with field identifiers only."""
        log_details = {
            "timestamp": timestamp,
            "invalid_fields": list(invalid_fields),
            "error_count": len(invalid_fields)
        }
        if focused:
            log_details["focused"] = focused

        self.log_operation("submission.attempt", "rejected", log_details)

    def log_field_cleared(self, field: str):
        """Log a per-field message cleared by a user edit."""
        self.log_operation("reporter.clear_on_edit", "cleared", {"field": field})

    def log_record_appended(self, position: int):
        """Log a record appended to the session log."""
        self.log_operation("record_log.append", "success", {"position": position})

    def log_form_reset(self, next_timestamp: str):
        """Log the form surface reset after an accepted submission."""
        self.log_operation("form.reset", "success", {"next_timestamp": next_timestamp})

    # Standard logging methods for compatibility
    def info(self, message: str) -> None:
        """Log an info message."""
        self.logger.info(message)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self.logger.warning(message)

    def error(self, message: str) -> None:
        """Log an error message."""
        self.logger.error(message)

    def debug(self, message: str) -> None:
        """Log a debug message."""
        self.logger.debug(message)

# Global logger instance
logger = StructuredLogger()


def sanitize_payload(payload: Any, reveal_sensitive: bool = False, sensitive_fields: List[str] = None) -> Any:
    """Mask personal data in payloads before logging."""
    if sensitive_fields is None:
        sensitive_fields = SENSITIVE_FIELDS

    if isinstance(payload, dict):
        sanitized = {}
        for k, v in payload.items():
            if reveal_sensitive or k not in sensitive_fields:
                sanitized[k] = sanitize_payload(v, reveal_sensitive, sensitive_fields)
            else:
                sanitized[k] = "[REDACTED]"
        return sanitized
    elif isinstance(payload, str):
        # Truncate long strings
        return payload[:100] + "..." if len(payload) > 100 else payload
    elif isinstance(payload, list):
        return [sanitize_payload(item, reveal_sensitive, sensitive_fields) for item in payload]
    else:
        return payload
