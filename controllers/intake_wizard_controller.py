# -*- coding: utf-8 -*-
"""
Intake Wizard Controller
========================
State machine behind the "Start Your Project" wizard.

The controller owns the form data, the step position and the submission
lifecycle. The UI dispatches intents (update_field, advance, retreat,
submit, close) and renders the WizardState snapshots emitted through
state_changed. Rejected intents return False and change nothing.

Lifecycle:
    Editing(1..N) --submit--> Submitting --ok--> Succeeded --timer--> closed
                                         --error--> Failed (editing step N)
"""

from typing import Any, Iterable, List, Optional, Sequence

from PyQt5.QtCore import pyqtSignal, pyqtSlot

from app.config import Config
from controllers.base_controller import BaseController
from models.intake import (
    Budget,
    FormData,
    SERVICE_OPTIONS,
    SubmissionStatus,
    Timeline,
    WizardState,
)
from services.error_mapper import map_exception
from services.exceptions import SubmissionCancelled, ValidationException
from services.scheduler import QtScheduler, ScheduledTask, Scheduler
from services.submission_service import (
    SubmissionBackend,
    SubmissionReceipt,
    SubmissionRequest,
    SubmissionWorker,
    create_default_backend,
    describe_receipt,
)
from services.translation_manager import tr
from services.wizard import INTAKE_STEPS, Step, StepNavigator, StepValidationResult, StepValidator
from utils.logger import get_logger

logger = get_logger(__name__)


class IntakeWizardController(BaseController):
    """
    Controller for the project intake wizard.

    Collaborators:
    - backend: receives the final form data on a worker thread
    - scheduler: runs the post-success auto close and lets it be cancelled
    """

    OPERATION_SUBMIT = "submit"

    # Signals
    state_changed = pyqtSignal(object)  # WizardState
    validation_failed = pyqtSignal(object)  # StepValidationResult
    submission_started = pyqtSignal()
    submission_succeeded = pyqtSignal(object)  # SubmissionReceipt
    submission_failed = pyqtSignal(str)  # user-facing message
    opened = pyqtSignal()
    dismissed = pyqtSignal()  # host should hide the wizard

    def __init__(
        self,
        backend: Optional[SubmissionBackend] = None,
        scheduler: Optional[Scheduler] = None,
        steps: Sequence[Step] = INTAKE_STEPS,
        success_delay_ms: Optional[int] = None,
        parent=None
    ):
        super().__init__(parent)
        self._backend = backend or create_default_backend()
        self._scheduler = scheduler or QtScheduler(self)
        self._success_delay_ms = (
            Config.SUCCESS_DISMISS_DELAY_MS if success_delay_ms is None else success_delay_ms
        )

        self._navigator = StepNavigator(steps, self)
        self._navigator.validation_failed.connect(self._on_step_validation_failed)

        self._form_data = FormData()
        self._status = SubmissionStatus.IDLE
        self._reference_number = ""

        self._worker: Optional[SubmissionWorker] = None
        self._retired_workers: List[SubmissionWorker] = []
        self._dismiss_task: Optional[ScheduledTask] = None
        self._torn_down = False

    # =========================================================================
    # Queries
    # =========================================================================

    def get_state(self) -> WizardState:
        """Read-only snapshot of the session."""
        return WizardState(
            current_step_index=self._navigator.current_index,
            step_count=self._navigator.get_step_count(),
            direction=self._navigator.direction,
            submission_status=self._status,
            form_data=self._form_data.copy(),
            last_error=self.last_error,
            reference_number=self._reference_number,
        )

    @property
    def steps(self) -> Sequence[Step]:
        return self._navigator.steps

    @property
    def is_torn_down(self) -> bool:
        return self._torn_down

    @property
    def has_pending_dismiss(self) -> bool:
        return self._dismiss_task is not None and self._dismiss_task.is_active

    @property
    def can_advance(self) -> bool:
        return (
            self._is_editing()
            and self._navigator.can_go_next()
            and self._navigator.is_current_step_valid(self._form_data)
        )

    @property
    def can_retreat(self) -> bool:
        return self._is_editing() and self._navigator.can_go_previous()

    @property
    def can_submit(self) -> bool:
        return (
            self._is_editing()
            and self._navigator.is_last_step()
            and self._navigator.is_current_step_valid(self._form_data)
        )

    def get_progress_percentage(self) -> float:
        return self._navigator.get_progress_percentage()

    def validate_current_step(self) -> StepValidationResult:
        """Validation result with messages for the current step."""
        index = self._navigator.current_index
        if self._navigator.is_current_step_valid(self._form_data):
            return StepValidationResult(is_valid=True, errors=[])
        result = StepValidator.validate_step(index, self._form_data)
        if not result.has_errors():
            # Custom step whose predicate has no message table
            result.add_error(tr("validation.check_data"))
        return result

    # =========================================================================
    # Intents
    # =========================================================================

    def update_field(self, key: str, value: Any) -> bool:
        """
        Merge one field into the form data.

        Raises:
            ValidationException: unknown field or a value outside its options
        """
        if self._torn_down or not self._is_editing():
            logger.debug(f"update_field({key}) ignored: status={self._status.value}")
            return False

        setattr(self._form_data, key, self._normalize_field(key, value))
        self._clear_failure()
        self._publish()
        return True

    def toggle_service(self, service: str, checked: bool = True) -> bool:
        """Add or remove a single service (checkbox behaviour)."""
        if self._torn_down or not self._is_editing():
            return False
        services = set(self._form_data.services)
        if checked:
            services.add(service)
        else:
            services.discard(service)
        return self.update_field("services", services)

    def advance(self) -> bool:
        """Move to the next step if the current one validates."""
        if self._torn_down or not self._is_editing():
            return False
        if not self._navigator.next_step(self._form_data):
            return False
        self._clear_failure()
        self._publish()
        return True

    def retreat(self) -> bool:
        """Move to the previous step. Never validated."""
        if self._torn_down or not self._is_editing():
            return False
        if not self._navigator.previous_step():
            return False
        self._clear_failure()
        self._publish()
        return True

    def submit(self) -> bool:
        """
        Send the form to the backend.

        Single-flight: while a submission is running further calls are
        silently ignored.
        """
        if self._torn_down:
            return False
        if self._status == SubmissionStatus.SUBMITTING:
            logger.debug("submit() ignored: a submission is already in flight")
            return False
        if not self._is_editing() or not self._navigator.is_last_step():
            return False
        if not self._navigator.is_current_step_valid(self._form_data):
            self._navigator.validation_failed.emit(self._navigator.current_index)
            return False

        request = SubmissionRequest.from_form_data(self._form_data)
        worker = SubmissionWorker(self._backend, request)
        worker.succeeded.connect(self._on_submission_succeeded)
        worker.failed.connect(self._on_submission_failed)
        worker.finished.connect(self._on_worker_finished)
        self._worker = worker

        self._status = SubmissionStatus.SUBMITTING
        self._begin_operation(self.OPERATION_SUBMIT, reference=request.reference_number)
        self.submission_started.emit()
        self._publish()

        worker.start()
        return True

    def close(self) -> bool:
        """
        Discard the session and dismiss the wizard immediately.

        Rejected while a submission is in flight.
        """
        if self._torn_down:
            return False
        if self._status == SubmissionStatus.SUBMITTING:
            logger.debug("close() ignored: submission in flight")
            return False

        self._cancel_dismiss()
        self._reset_session()
        logger.info("Intake wizard closed")
        self._publish()
        self.dismissed.emit()
        return True

    def open(self) -> bool:
        """Start a fresh session (host is showing the wizard)."""
        if self._torn_down or self._status == SubmissionStatus.SUBMITTING:
            return False
        self._cancel_dismiss()
        self._reset_session()
        logger.info("Intake wizard opened")
        self._publish()
        self.opened.emit()
        return True

    @pyqtSlot()
    def complete_and_close(self):
        """End a successful session: reset everything and dismiss."""
        self._dismiss_task = None
        if self._torn_down or self._status != SubmissionStatus.SUCCEEDED:
            return
        logger.info(f"Submission {self._reference_number} complete, closing wizard")
        self._reset_session()
        self._publish()
        self.dismissed.emit()

    def teardown(self):
        """
        Detach from timers and in-flight work before the host goes away.

        Any later intent is a no-op.
        """
        if self._torn_down:
            return
        self._torn_down = True
        self._cancel_dismiss()
        if self._worker is not None:
            logger.info(f"Cancelling in-flight submission {self._worker.request.reference_number}")
            self._retire_worker(self._worker, cancel=True)
            self._worker = None
        self._reset_session()
        self._abandon_operation()
        logger.debug("Intake wizard controller torn down")

    def wait_for_workers(self, msecs: int = 2000) -> bool:
        """Block until submission threads have exited. Returns False on timeout."""
        workers = list(self._retired_workers)
        if self._worker is not None:
            workers.append(self._worker)
        return all(worker.wait(msecs) for worker in workers)

    # =========================================================================
    # Worker results
    # =========================================================================

    @pyqtSlot(object)
    def _on_submission_succeeded(self, receipt: SubmissionReceipt):
        worker = self._current_worker_or_none()
        if worker is None:
            return

        self._retire_worker(worker)
        self._worker = None
        self._status = SubmissionStatus.SUCCEEDED
        self._reference_number = receipt.reference_number
        logger.info(f"Submission succeeded: {describe_receipt(receipt)}")

        self._dismiss_task = self._scheduler.schedule(self._success_delay_ms, self.complete_and_close)
        self._finish_operation(self.OPERATION_SUBMIT)
        self.submission_succeeded.emit(receipt)
        self._publish()

    @pyqtSlot(object)
    def _on_submission_failed(self, error: Exception):
        worker = self._current_worker_or_none()
        if worker is None:
            return

        self._retire_worker(worker)
        self._worker = None
        if isinstance(error, SubmissionCancelled):
            logger.debug(f"Submission cancelled: {error}")
        message = map_exception(error, context="submission")
        self._status = SubmissionStatus.FAILED

        self._finish_operation(self.OPERATION_SUBMIT, error=message)
        self.submission_failed.emit(message)
        self._publish()

    @pyqtSlot()
    def _on_worker_finished(self):
        worker = self.sender()
        if worker in self._retired_workers:
            self._retired_workers.remove(worker)
            worker.deleteLater()

    def _current_worker_or_none(self) -> Optional[SubmissionWorker]:
        """The worker behind the current signal, if it is still the active one."""
        worker = self.sender()
        if self._torn_down or worker is None or worker is not self._worker:
            logger.debug("Ignoring result from a stale submission worker")
            return None
        if self._status != SubmissionStatus.SUBMITTING:
            return None
        return worker

    # =========================================================================
    # Helpers
    # =========================================================================

    def _is_editing(self) -> bool:
        return self._status in (SubmissionStatus.IDLE, SubmissionStatus.FAILED)

    def _normalize_field(self, key: str, value: Any) -> Any:
        if key in ("project_name", "description"):
            if value is None:
                return ""
            if not isinstance(value, str):
                raise ValidationException(f"{key} must be text", field=key)
            return value

        if key == "services":
            if value is None:
                return set()
            if isinstance(value, str) or not isinstance(value, Iterable):
                raise ValidationException("services must be a collection of names", field=key)
            services = set(value)
            unknown = sorted(s for s in services if s not in SERVICE_OPTIONS)
            if unknown:
                raise ValidationException(
                    f"Unknown services: {', '.join(map(str, unknown))}",
                    field=key,
                    errors=unknown,
                )
            return services

        if key == "budget":
            return self._coerce_choice(Budget, key, value)

        if key == "timeline":
            return self._coerce_choice(Timeline, key, value)

        raise ValidationException(f"Unknown field: {key}", field=key)

    @staticmethod
    def _coerce_choice(enum_cls, key: str, value: Any):
        if value is None:
            return enum_cls.UNSET
        if isinstance(value, enum_cls):
            return value
        try:
            return enum_cls(value)
        except ValueError:
            raise ValidationException(f"Invalid {key}: {value!r}", field=key) from None

    def _clear_failure(self):
        if self._status == SubmissionStatus.FAILED:
            self._status = SubmissionStatus.IDLE
            self._set_error("")

    def _reset_session(self):
        self._form_data = FormData()
        self._navigator.reset()
        self._status = SubmissionStatus.IDLE
        self._reference_number = ""
        self._set_error("")

    def _cancel_dismiss(self):
        if self._dismiss_task is not None:
            self._dismiss_task.cancel()
            self._dismiss_task = None

    def _retire_worker(self, worker: SubmissionWorker, cancel: bool = False):
        """Drop the worker's result signals but keep it alive until its thread ends."""
        worker.succeeded.disconnect(self._on_submission_succeeded)
        worker.failed.disconnect(self._on_submission_failed)
        if cancel:
            worker.cancel()
        if worker.isFinished():
            worker.deleteLater()
        else:
            self._retired_workers.append(worker)

    def _on_step_validation_failed(self, step_index: int):
        result = self.validate_current_step()
        logger.debug(f"Step {step_index + 1} blocked: {result.errors}")
        self.validation_failed.emit(result)

    def _publish(self):
        self.state_changed.emit(self.get_state())
