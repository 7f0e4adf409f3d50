# -*- coding: utf-8 -*-
"""
Shared fixtures and fakes for the test suite.

- ManualScheduler: scheduler whose timers fire only when a test says so
- GatedBackend: submission backend that blocks until released
"""

import os
import sys
import tempfile
import threading
from pathlib import Path

# Headless Qt and throwaway log files, set before any project import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("LOGS_DIR", str(Path(tempfile.gettempdir()) / "nexa-studio-test-logs"))

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from controllers.intake_wizard_controller import IntakeWizardController
from services.exceptions import SubmissionCancelled
from services.scheduler import ScheduledTask, Scheduler
from services.submission_service import SubmissionBackend, SubmissionReceipt
from services.translation_manager import set_language


class ManualTask(ScheduledTask):
    """Scheduled callback that runs only through fire()."""

    def __init__(self, delay_ms, callback):
        self.delay_ms = delay_ms
        self.callback = callback
        self._active = True

    def cancel(self):
        self._active = False

    @property
    def is_active(self):
        return self._active

    def fire(self):
        if self._active:
            self._active = False
            self.callback()


class ManualScheduler(Scheduler):
    """Records scheduled callbacks instead of starting timers."""

    def __init__(self):
        self.tasks = []

    def schedule(self, delay_ms, callback):
        task = ManualTask(delay_ms, callback)
        self.tasks.append(task)
        return task

    def pending(self):
        return [task for task in self.tasks if task.is_active]

    def fire_all(self):
        for task in self.pending():
            task.fire()


class GatedBackend(SubmissionBackend):
    """Counts calls and blocks each one until release() is called."""

    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []
        self.started = threading.Event()
        self._released = threading.Event()
        self._lock = threading.Lock()

    def submit(self, request, cancel_event):
        with self._lock:
            self.calls.append(request)
        self.started.set()
        while not self._released.wait(0.01):
            if cancel_event.is_set():
                raise SubmissionCancelled("cancelled", request.reference_number)
        if self.fail:
            raise ConnectionError("backend unreachable")
        return SubmissionReceipt(reference_number=request.reference_number)

    def release(self):
        self._released.set()

    def reset(self, fail=None):
        """Block again for the next call."""
        if fail is not None:
            self.fail = fail
        self.started.clear()
        self._released.clear()


@pytest.fixture(autouse=True)
def english():
    """All assertions on messages use the English catalogue."""
    set_language("en")
    yield


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def backend():
    backend = GatedBackend()
    yield backend
    backend.release()


@pytest.fixture
def controller(qapp, backend, scheduler):
    """Controller wired to the gated backend and manual scheduler."""
    controller = IntakeWizardController(backend=backend, scheduler=scheduler, success_delay_ms=2000)
    yield controller
    backend.release()
    controller.teardown()
    controller.wait_for_workers()
