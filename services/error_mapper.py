# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from services.translation_manager import tr
from services.exceptions import SubmissionException, ValidationException
from utils.logger import get_logger

logger = get_logger(__name__)


def map_submission_error(error: SubmissionException) -> str:
    """Map a submission failure to a user-friendly translated message.

    Technical details are logged only - never shown to the user.
    """
    original = error.original_error
    logger.warning(f"Submission failed: {error} (cause: {original!r})")

    if isinstance(original, TimeoutError):
        return tr("error.submission.timeout")
    msg = str(original) if original else ""
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return tr("error.submission.timeout")
    return tr("error.submission.failed")


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to a user-friendly message."""
    if isinstance(error, SubmissionException):
        if not error.context and context:
            error.context = context
        return map_submission_error(error)

    if isinstance(error, ValidationException):
        if error.errors:
            logger.warning(f"Validation error: {error.errors}")
        return tr("validation.check_data")

    # Log unexpected errors
    logger.warning(f"Unexpected error in {context or 'unknown'}: {error}")
    return tr("error.unexpected")
