"""Registration intake: validation, submission and session record log."""
