"""formguard: field-level input validation with range checks and form coercion."""

__version__ = "0.1.0"
