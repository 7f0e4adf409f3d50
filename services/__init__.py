# -*- coding: utf-8 -*-
"""
Nexa Studio Service Layer
"""

# Lazy imports keep the models -> services -> controllers order acyclic
__all__ = [
    "SimulatedSubmissionBackend",
    "SubmissionBackend",
    "QtScheduler",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "SimulatedSubmissionBackend":
        from .submission_service import SimulatedSubmissionBackend
        return SimulatedSubmissionBackend
    elif name == "SubmissionBackend":
        from .submission_service import SubmissionBackend
        return SubmissionBackend
    elif name == "QtScheduler":
        from .scheduler import QtScheduler
        return QtScheduler
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
