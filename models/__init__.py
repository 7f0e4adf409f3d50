# -*- coding: utf-8 -*-
"""
Nexa Studio Data Models
"""

from .intake import (
    Budget,
    Direction,
    FormData,
    SERVICE_OPTIONS,
    SubmissionStatus,
    Timeline,
    WizardState,
)

__all__ = [
    "Budget",
    "Direction",
    "FormData",
    "SERVICE_OPTIONS",
    "SubmissionStatus",
    "Timeline",
    "WizardState",
]
