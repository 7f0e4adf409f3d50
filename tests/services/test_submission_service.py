# -*- coding: utf-8 -*-
"""
Tests for the submission backend and worker thread.
"""

import re
import threading

import pytest

from models.intake import Budget, FormData, Timeline
from services.exceptions import SubmissionCancelled, SubmissionException
from services.submission_service import (
    SimulatedSubmissionBackend,
    SubmissionBackend,
    SubmissionRequest,
    SubmissionWorker,
    generate_reference_number,
)


@pytest.fixture
def request_():
    form = FormData(
        project_name="Acme",
        description="Landing page",
        services={"Marketing", "Brand Development"},
        budget=Budget.RANGE_10K_25K,
        timeline=Timeline.MONTHS_3_4,
    )
    return SubmissionRequest.from_form_data(form)


class TestSubmissionRequest:

    def test_reference_number_format(self):
        assert re.fullmatch(r"PRJ-\d{14}-[0-9A-F]{4}", generate_reference_number())

    def test_payload_is_serializable_snapshot(self, request_):
        data = request_.to_dict()

        assert data["reference_number"] == request_.reference_number
        assert data["project"]["services"] == ["Brand Development", "Marketing"]
        assert data["project"]["budget"] == "10000-25000"
        assert data["project"]["timeline"] == "3-4"


class TestSimulatedBackend:

    def test_success_returns_receipt_with_reference(self, request_):
        backend = SimulatedSubmissionBackend(latency_ms=0, fail=False)

        receipt = backend.submit(request_, threading.Event())

        assert receipt.reference_number == request_.reference_number

    def test_failure_raises_submission_exception(self, request_):
        backend = SimulatedSubmissionBackend(latency_ms=0, fail=True)

        with pytest.raises(SubmissionException) as excinfo:
            backend.submit(request_, threading.Event())
        assert excinfo.value.reference_number == request_.reference_number

    def test_cancel_returns_early(self, request_):
        backend = SimulatedSubmissionBackend(latency_ms=60000, fail=False)
        cancel_event = threading.Event()
        cancel_event.set()

        with pytest.raises(SubmissionCancelled):
            backend.submit(request_, cancel_event)


class _RaisingBackend(SubmissionBackend):
    def submit(self, request, cancel_event):
        raise TimeoutError("gateway timed out")


class TestSubmissionWorker:

    def test_success_is_emitted(self, qtbot, request_):
        worker = SubmissionWorker(SimulatedSubmissionBackend(latency_ms=0, fail=False), request_)

        with qtbot.waitSignal(worker.succeeded, timeout=2000) as blocker:
            worker.start()
        worker.wait()

        assert blocker.args[0].reference_number == request_.reference_number

    def test_unexpected_error_is_wrapped(self, qtbot, request_):
        worker = SubmissionWorker(_RaisingBackend(), request_)

        with qtbot.waitSignal(worker.failed, timeout=2000) as blocker:
            worker.start()
        worker.wait()

        error = blocker.args[0]
        assert isinstance(error, SubmissionException)
        assert isinstance(error.original_error, TimeoutError)
        assert error.reference_number == request_.reference_number

    def test_cancel_stops_slow_backend(self, qtbot, request_):
        worker = SubmissionWorker(SimulatedSubmissionBackend(latency_ms=60000, fail=False), request_)

        with qtbot.waitSignal(worker.failed, timeout=2000) as blocker:
            worker.start()
            worker.cancel()
        worker.wait()

        assert worker.is_cancelled
        assert isinstance(blocker.args[0], SubmissionCancelled)
