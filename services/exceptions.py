# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ValidationException(Exception):
    """Exception raised for invalid field updates (unknown key or value)."""

    def __init__(self, message: str, field: str = None,
                 errors: list = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or []
        self.context = context


class SubmissionException(Exception):
    """Exception raised when the submission backend fails."""

    def __init__(self, message: str, reference_number: str = None,
                 original_error: Exception = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.reference_number = reference_number
        self.original_error = original_error
        self.context = context

    def __str__(self):
        if self.reference_number:
            return f"[{self.reference_number}] {self.message}"
        return self.message


class SubmissionCancelled(SubmissionException):
    """Raised by a backend when the session was torn down mid-call."""
