# -*- coding: utf-8 -*-
"""
Submission service for the Project Intake Wizard.

Provides:
- SubmissionRequest / SubmissionReceipt value objects
- SubmissionBackend interface and a simulated implementation
- SubmissionWorker: runs one backend call off the GUI thread
"""

import threading
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from PyQt5.QtCore import QThread, pyqtSignal

from app.config import Config
from models.intake import FormData
from services.exceptions import SubmissionCancelled, SubmissionException
from utils.logger import get_logger

logger = get_logger(__name__)


def generate_reference_number(prefix: str = None) -> str:
    """
    Generate a unique reference number for a submission.

    Format: {PREFIX}-{YYYYMMDDHHMMSS}-{SHORT_UUID}
    Example: PRJ-20260118153045-A3F2
    """
    timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
    short_id = str(uuid.uuid4())[:4].upper()
    return f"{prefix or Config.REFERENCE_PREFIX}-{timestamp}-{short_id}"


@dataclass(frozen=True)
class SubmissionRequest:
    """Snapshot of the form handed to the backend."""
    payload: Dict[str, Any]
    reference_number: str = field(default_factory=generate_reference_number)
    submitted_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_form_data(cls, form_data: FormData) -> 'SubmissionRequest':
        return cls(payload=form_data.to_dict())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reference_number": self.reference_number,
            "submitted_at": self.submitted_at.isoformat(),
            "project": dict(self.payload),
        }


@dataclass(frozen=True)
class SubmissionReceipt:
    """Acknowledgement returned by the backend."""
    reference_number: str
    received_at: datetime = field(default_factory=datetime.now)


class SubmissionBackend(ABC):
    """
    Backend collaborator receiving the final form data.

    Implementations block the calling (worker) thread and should return early
    by raising SubmissionCancelled once cancel_event is set.
    """

    @abstractmethod
    def submit(self, request: SubmissionRequest,
               cancel_event: threading.Event) -> SubmissionReceipt:
        pass


class SimulatedSubmissionBackend(SubmissionBackend):
    """Backend that only waits, standing in for the real intake endpoint."""

    def __init__(self, latency_ms: int = None, fail: bool = None):
        self.latency_ms = Config.SUBMIT_LATENCY_MS if latency_ms is None else latency_ms
        self.fail = Config.SIMULATE_SUBMIT_FAILURE if fail is None else fail

    def submit(self, request: SubmissionRequest,
               cancel_event: threading.Event) -> SubmissionReceipt:
        logger.info(f"Submitting {request.reference_number} (simulated, {self.latency_ms} ms)")

        if cancel_event.wait(self.latency_ms / 1000.0):
            raise SubmissionCancelled("Submission cancelled", request.reference_number)

        if self.fail:
            raise SubmissionException(
                "Simulated backend failure",
                reference_number=request.reference_number,
                context="submission",
            )

        return SubmissionReceipt(reference_number=request.reference_number)


class SubmissionWorker(QThread):
    """Background worker for one submission."""

    succeeded = pyqtSignal(object)  # SubmissionReceipt
    failed = pyqtSignal(object)  # SubmissionException

    def __init__(self, backend: SubmissionBackend, request: SubmissionRequest, parent=None):
        super().__init__(parent)
        self.backend = backend
        self.request = request
        self._cancel_event = threading.Event()

    def cancel(self):
        """Ask the backend to stop; the result, if any, is still emitted."""
        self._cancel_event.set()
        self.requestInterruption()

    @property
    def is_cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def run(self):
        """Run the backend call in background."""
        try:
            receipt = self.backend.submit(self.request, self._cancel_event)
        except SubmissionException as e:
            self.failed.emit(e)
        except Exception as e:
            logger.error(f"Submission {self.request.reference_number} raised: {e}", exc_info=True)
            self.failed.emit(SubmissionException(
                str(e) or e.__class__.__name__,
                reference_number=self.request.reference_number,
                original_error=e,
                context="submission",
            ))
        else:
            self.succeeded.emit(receipt)


def create_default_backend() -> SubmissionBackend:
    """Backend used by the application when none is injected."""
    return SimulatedSubmissionBackend()


def describe_receipt(receipt: Optional[SubmissionReceipt]) -> str:
    if receipt is None:
        return ""
    return f"{receipt.reference_number} @ {receipt.received_at.strftime(Config.DATETIME_FORMAT)}"
