# -*- coding: utf-8 -*-
"""
Tests for IntakeWizardController.

Submissions run on a real QThread against GatedBackend; the auto close
timer is driven by ManualScheduler.
"""

import pytest

from models.intake import Budget, Direction, FormData, SubmissionStatus, Timeline
from services.exceptions import ValidationException


def fill_project_details(controller, name="Acme", description="Build site"):
    controller.update_field("project_name", name)
    controller.update_field("description", description)


def fill_to_last_step(controller):
    """Enter valid data for steps 1 and 2 and move to step 3."""
    fill_project_details(controller)
    assert controller.advance()
    controller.update_field("services", {"Marketing"})
    assert controller.advance()


def fill_all_steps(controller):
    fill_to_last_step(controller)
    controller.update_field("budget", "5000-10000")
    controller.update_field("timeline", "1-2")


STEP_VALUES = [
    {"project_name": "Acme", "description": "Build site"},
    {"services": {"Marketing"}},
    {"budget": "5000-10000", "timeline": "1-2"},
]

STEP_BLANKS = [
    {"project_name": "", "description": ""},
    {"services": set()},
    {"budget": None, "timeline": None},
]


def apply_intent(controller, intent):
    """Dispatch one named intent; fill/clear act on the current step's fields."""
    index = controller.get_state().current_step_index
    if intent == "fill":
        for key, value in STEP_VALUES[index].items():
            controller.update_field(key, value)
    elif intent == "clear":
        for key, value in STEP_BLANKS[index].items():
            controller.update_field(key, value)
    else:
        getattr(controller, intent)()


def submit_and_wait(controller, backend, qtbot):
    """Submit and block until the worker thread has picked the request up."""
    assert controller.submit()
    qtbot.waitUntil(backend.started.is_set, timeout=2000)


class TestInitialState:

    def test_fresh_session(self, controller):
        state = controller.get_state()

        assert state.current_step_index == 0
        assert state.step_number == 1
        assert state.step_count == 3
        assert state.direction == Direction.NONE
        assert state.submission_status == SubmissionStatus.IDLE
        assert state.form_data == FormData()

    def test_state_is_a_snapshot(self, controller):
        state = controller.get_state()
        state.form_data.services.add("Marketing")

        assert controller.get_state().form_data.services == set()


class TestUpdateField:

    def test_merges_single_field(self, controller, qtbot):
        with qtbot.waitSignal(controller.state_changed) as blocker:
            assert controller.update_field("project_name", "Acme")

        assert blocker.args[0].form_data.project_name == "Acme"
        assert controller.get_state().form_data.description == ""

    def test_enum_fields_accept_values(self, controller):
        controller.update_field("budget", "25000-50000")
        controller.update_field("timeline", Timeline.MONTHS_5_6)

        form = controller.get_state().form_data
        assert form.budget == Budget.RANGE_25K_50K
        assert form.timeline == Timeline.MONTHS_5_6

    def test_toggle_service(self, controller):
        controller.toggle_service("Marketing")
        controller.toggle_service("Brand Development")
        controller.toggle_service("Marketing", checked=False)

        assert controller.get_state().form_data.services == {"Brand Development"}

    def test_unknown_field_is_rejected(self, controller):
        with pytest.raises(ValidationException) as excinfo:
            controller.update_field("phone", "555")
        assert excinfo.value.field == "phone"

    def test_unknown_service_is_rejected(self, controller):
        with pytest.raises(ValidationException) as excinfo:
            controller.update_field("services", {"Marketing", "Catering"})

        assert excinfo.value.errors == ["Catering"]
        assert controller.get_state().form_data.services == set()

    def test_budget_outside_options_is_rejected(self, controller):
        with pytest.raises(ValidationException):
            controller.update_field("budget", "1-2")


class TestNavigation:

    def test_advance_with_empty_step_is_rejected(self, controller, qtbot):
        with qtbot.waitSignal(controller.validation_failed) as blocker:
            assert not controller.advance()

        assert len(blocker.args[0].errors) == 2
        assert controller.get_state().current_step_index == 0

    def test_whitespace_name_blocks_advance(self, controller):
        fill_project_details(controller, name="   ")

        assert not controller.can_advance
        assert not controller.advance()

    def test_advance_moves_forward(self, controller):
        fill_project_details(controller)

        assert controller.advance()
        state = controller.get_state()
        assert state.step_number == 2
        assert state.direction == Direction.FORWARD

    def test_retreat_keeps_entered_data(self, controller):
        fill_project_details(controller)
        controller.advance()
        controller.update_field("services", {"Marketing"})

        assert controller.retreat()
        state = controller.get_state()
        assert state.step_number == 1
        assert state.direction == Direction.BACKWARD
        assert state.form_data.services == {"Marketing"}

    def test_retreat_on_first_step_is_rejected(self, controller):
        assert not controller.retreat()
        assert controller.get_state().direction == Direction.NONE

    def test_retreat_is_not_validated(self, controller):
        fill_to_last_step(controller)
        controller.update_field("services", set())

        assert controller.retreat()
        assert controller.retreat()
        assert controller.get_state().step_number == 1

    def test_progress(self, controller):
        assert controller.get_progress_percentage() == 0.0
        fill_to_last_step(controller)
        assert controller.get_progress_percentage() == 100.0

    def test_empty_services_block_step_two(self, controller):
        fill_project_details(controller)
        controller.advance()
        controller.update_field("services", set())

        assert not controller.advance()
        assert controller.get_state().step_number == 2

        controller.update_field("services", {"Marketing"})
        assert controller.advance()
        state = controller.get_state()
        assert state.step_number == 3
        assert state.is_editable

    @pytest.mark.parametrize("intents", [
        ["retreat", "retreat", "advance", "retreat"],
        ["fill", "advance", "fill", "advance", "advance", "advance", "fill", "advance"],
        ["fill", "advance", "fill", "advance", "retreat", "retreat", "retreat", "advance"],
        ["fill", "advance", "clear", "advance", "retreat", "clear", "advance", "advance"],
        ["fill", "advance", "fill", "advance", "fill", "submit", "advance", "retreat", "submit"],
    ])
    def test_step_index_stays_in_range(self, controller, intents):
        for intent in intents:
            apply_intent(controller, intent)
            state = controller.get_state()
            assert 0 <= state.current_step_index < state.step_count


class TestSubmit:

    def test_submit_before_last_step_is_rejected(self, controller, backend):
        fill_project_details(controller)

        assert not controller.submit()
        assert backend.calls == []

    def test_submit_with_incomplete_last_step_is_rejected(self, controller, backend, qtbot):
        fill_to_last_step(controller)
        controller.update_field("budget", "5000-10000")

        with qtbot.waitSignal(controller.validation_failed):
            assert not controller.submit()
        assert controller.get_state().submission_status == SubmissionStatus.IDLE
        assert backend.calls == []

    def test_submit_enters_submitting(self, controller, backend, qtbot):
        fill_all_steps(controller)

        with qtbot.waitSignal(controller.submission_started):
            submit_and_wait(controller, backend, qtbot)

        assert controller.get_state().is_submitting
        assert controller.is_loading

    def test_single_flight(self, controller, backend, qtbot):
        fill_all_steps(controller)
        submit_and_wait(controller, backend, qtbot)

        assert not controller.submit()
        assert not controller.submit()

        with qtbot.waitSignal(controller.submission_succeeded, timeout=2000):
            backend.release()
        assert len(backend.calls) == 1

    def test_intents_are_rejected_while_submitting(self, controller, backend, qtbot):
        fill_all_steps(controller)
        submit_and_wait(controller, backend, qtbot)

        with qtbot.assertNotEmitted(controller.state_changed):
            assert not controller.update_field("project_name", "Other")
            assert not controller.retreat()
            assert not controller.advance()
            assert not controller.close()
            assert not controller.open()

        assert controller.get_state().form_data.project_name == "Acme"

    def test_payload_matches_form(self, controller, backend, qtbot):
        fill_all_steps(controller)
        submit_and_wait(controller, backend, qtbot)

        assert backend.calls[0].payload == {
            "project_name": "Acme",
            "description": "Build site",
            "services": ["Marketing"],
            "budget": "5000-10000",
            "timeline": "1-2",
        }


class TestSuccess:

    def test_success_schedules_auto_close(self, controller, backend, scheduler, qtbot):
        fill_all_steps(controller)
        submit_and_wait(controller, backend, qtbot)

        with qtbot.waitSignal(controller.submission_succeeded, timeout=2000) as blocker:
            backend.release()

        state = controller.get_state()
        assert state.is_succeeded
        assert state.reference_number == blocker.args[0].reference_number
        assert state.reference_number == backend.calls[0].reference_number
        assert not controller.is_loading
        assert [task.delay_ms for task in scheduler.pending()] == [2000]
        assert controller.has_pending_dismiss

    def test_timer_resets_and_dismisses(self, controller, backend, scheduler, qtbot):
        fill_all_steps(controller)
        submit_and_wait(controller, backend, qtbot)
        with qtbot.waitSignal(controller.submission_succeeded, timeout=2000):
            backend.release()

        with qtbot.waitSignal(controller.dismissed):
            scheduler.fire_all()

        state = controller.get_state()
        assert state.submission_status == SubmissionStatus.IDLE
        assert state.current_step_index == 0
        assert state.direction == Direction.NONE
        assert state.form_data == FormData()
        assert state.reference_number == ""
        assert not controller.has_pending_dismiss

    def test_intents_are_rejected_after_success(self, controller, backend, qtbot):
        fill_all_steps(controller)
        submit_and_wait(controller, backend, qtbot)
        with qtbot.waitSignal(controller.submission_succeeded, timeout=2000):
            backend.release()

        assert not controller.submit()
        assert not controller.update_field("project_name", "Other")
        assert not controller.retreat()
        assert len(backend.calls) == 1

    def test_close_during_success_cancels_timer(self, controller, backend, scheduler, qtbot):
        fill_all_steps(controller)
        submit_and_wait(controller, backend, qtbot)
        with qtbot.waitSignal(controller.submission_succeeded, timeout=2000):
            backend.release()
        task = scheduler.pending()[0]

        with qtbot.waitSignal(controller.dismissed):
            assert controller.close()

        assert not task.is_active
        with qtbot.assertNotEmitted(controller.dismissed):
            task.fire()
            controller.complete_and_close()


class TestFailure:

    def fail_submission(self, controller, backend, qtbot):
        backend.fail = True
        fill_all_steps(controller)
        submit_and_wait(controller, backend, qtbot)
        with qtbot.waitSignal(controller.submission_failed, timeout=2000) as blocker:
            backend.release()
        return blocker.args[0]

    def test_failure_keeps_data_and_reports(self, controller, backend, scheduler, qtbot):
        message = self.fail_submission(controller, backend, qtbot)

        state = controller.get_state()
        assert state.is_failed
        assert state.step_number == 3
        assert state.form_data.project_name == "Acme"
        assert state.last_error == message
        assert message == "We couldn't submit your project. Please try again."
        assert scheduler.pending() == []
        assert not controller.is_loading

    def test_failure_reports_operation_error(self, controller, backend, qtbot):
        with qtbot.waitSignal(controller.operation_error, timeout=2000) as blocker:
            self.fail_submission(controller, backend, qtbot)

        assert blocker.args[0] == "submit"
        assert controller.current_operation is None

    def test_resubmit_after_failure(self, controller, backend, qtbot):
        self.fail_submission(controller, backend, qtbot)
        controller.wait_for_workers()
        backend.reset(fail=False)

        submit_and_wait(controller, backend, qtbot)
        with qtbot.waitSignal(controller.submission_succeeded, timeout=2000):
            backend.release()

        assert len(backend.calls) == 2
        assert controller.get_state().is_succeeded

    def test_editing_clears_failure(self, controller, backend, qtbot):
        self.fail_submission(controller, backend, qtbot)

        assert controller.update_field("timeline", "6+")

        state = controller.get_state()
        assert state.submission_status == SubmissionStatus.IDLE
        assert state.last_error == ""

    def test_close_after_failure_discards_session(self, controller, backend, qtbot):
        self.fail_submission(controller, backend, qtbot)

        assert controller.close()
        assert controller.get_state().form_data == FormData()


class TestClose:

    def test_close_resets_immediately(self, controller, qtbot):
        fill_to_last_step(controller)

        with qtbot.waitSignal(controller.dismissed):
            assert controller.close()

        state = controller.get_state()
        assert state.current_step_index == 0
        assert state.form_data == FormData()

    def test_reopen_starts_blank(self, controller, qtbot):
        fill_project_details(controller)
        controller.close()

        with qtbot.waitSignal(controller.opened):
            assert controller.open()
        assert controller.get_state().form_data.is_empty()


class TestTeardown:

    def test_teardown_during_submission_ignores_result(self, controller, backend, scheduler, qtbot):
        fill_all_steps(controller)
        submit_and_wait(controller, backend, qtbot)

        with qtbot.assertNotEmitted(controller.submission_succeeded):
            with qtbot.assertNotEmitted(controller.submission_failed):
                controller.teardown()
                assert controller.wait_for_workers()
                qtbot.wait(50)

        assert controller.is_torn_down
        assert scheduler.pending() == []

    def test_teardown_cancels_pending_timer(self, controller, backend, scheduler, qtbot):
        fill_all_steps(controller)
        submit_and_wait(controller, backend, qtbot)
        with qtbot.waitSignal(controller.submission_succeeded, timeout=2000):
            backend.release()
        task = scheduler.pending()[0]

        controller.teardown()

        assert not task.is_active
        with qtbot.assertNotEmitted(controller.dismissed):
            controller.complete_and_close()

    def test_intents_after_teardown_are_noops(self, controller, backend):
        controller.teardown()

        assert not controller.update_field("project_name", "Acme")
        assert not controller.advance()
        assert not controller.submit()
        assert not controller.close()
        assert not controller.open()
        assert backend.calls == []
