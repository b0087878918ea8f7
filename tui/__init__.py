"""Terminal presentation layer for the registration form."""
