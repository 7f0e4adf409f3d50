# -*- coding: utf-8 -*-
"""
Tests for the Project Intake Wizard dialog.
"""

import pytest
from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QDialog

from ui.wizards.project_intake import IntakeWizardDialog


@pytest.fixture
def dialog(controller, qtbot):
    """Wizard dialog bound to the test controller."""
    dialog = IntakeWizardDialog(controller)
    qtbot.addWidget(dialog)
    controller.open()
    dialog.show()
    return dialog


def complete_first_two_steps(dialog, qtbot):
    details = dialog.step_pages[0]
    qtbot.keyClicks(details.project_name_input, "Acme")
    details.description_input.setPlainText("A new storefront")
    qtbot.mouseClick(dialog.footer.btn_next, Qt.LeftButton)

    dialog.step_pages[1].checkboxes["Website Development"].setChecked(True)
    qtbot.mouseClick(dialog.footer.btn_next, Qt.LeftButton)


class TestRendering:

    def test_opens_on_first_step(self, dialog):
        assert dialog.stack.currentWidget() is dialog.step_pages[0]
        assert not dialog.footer.btn_previous.isVisible()
        assert not dialog.footer.btn_next.isEnabled()
        assert dialog.step_indicator.circle_text(1) == "1"
        assert dialog.header.progress_label.text() == "Step 1 of 3"

    def test_typing_updates_controller(self, dialog, controller, qtbot):
        qtbot.keyClicks(dialog.step_pages[0].project_name_input, "Acme")

        assert controller.get_state().form_data.project_name == "Acme"
        assert not dialog.footer.btn_next.isEnabled()

        dialog.step_pages[0].description_input.setPlainText("Shop")
        assert dialog.footer.btn_next.isEnabled()

    def test_next_slides_forward(self, dialog, qtbot):
        qtbot.keyClicks(dialog.step_pages[0].project_name_input, "Acme")
        dialog.step_pages[0].description_input.setPlainText("Shop")

        with qtbot.waitSignal(dialog.step_transition) as blocker:
            qtbot.mouseClick(dialog.footer.btn_next, Qt.LeftButton)

        assert blocker.args == [1, "forward"]
        assert dialog.stack.currentWidget() is dialog.step_pages[1]
        assert dialog.step_indicator.circle_text(1) == "✓"

    def test_back_keeps_values(self, dialog, qtbot):
        complete_first_two_steps(dialog, qtbot)

        with qtbot.waitSignal(dialog.step_transition) as blocker:
            qtbot.mouseClick(dialog.footer.btn_previous, Qt.LeftButton)

        assert blocker.args == [1, "backward"]
        assert dialog.step_pages[1].checkboxes["Website Development"].isChecked()

    def test_last_step_shows_submit(self, dialog, qtbot):
        complete_first_two_steps(dialog, qtbot)

        assert dialog.stack.currentWidget() is dialog.step_pages[2]
        assert dialog.footer.btn_next.text() == "Submit"
        assert not dialog.footer.btn_next.isEnabled()


class TestSubmission:

    def test_submit_success_shows_panel_then_closes(self, dialog, controller, backend, scheduler, qtbot):
        complete_first_two_steps(dialog, qtbot)
        budget = dialog.step_pages[2]
        budget.budget_combo.setCurrentIndex(1)
        budget.timeline_combo.setCurrentIndex(2)

        qtbot.mouseClick(dialog.footer.btn_next, Qt.LeftButton)
        assert dialog.footer.btn_next.text() == "Submitting..."
        assert not dialog.footer.btn_next.isEnabled()
        assert not dialog.header.btn_close.isEnabled()

        with qtbot.waitSignal(controller.submission_succeeded, timeout=2000):
            backend.release()

        assert dialog.stack.currentWidget() is dialog.success_panel
        assert controller.get_state().reference_number in dialog.success_panel.reference_label.text()

        scheduler.fire_all()
        assert dialog.result() == QDialog.Rejected
        assert not dialog.isVisible()

    def test_close_button_discards_session(self, dialog, controller, qtbot):
        qtbot.keyClicks(dialog.step_pages[0].project_name_input, "Acme")

        with qtbot.waitSignal(controller.dismissed):
            qtbot.mouseClick(dialog.header.btn_close, Qt.LeftButton)

        assert controller.get_state().form_data.project_name == ""
        assert dialog.step_pages[0].project_name_input.text() == ""

    def test_failure_offers_retry(self, dialog, controller, backend, qtbot):
        backend.fail = True
        complete_first_two_steps(dialog, qtbot)
        dialog.step_pages[2].budget_combo.setCurrentIndex(4)
        dialog.step_pages[2].timeline_combo.setCurrentIndex(4)

        qtbot.mouseClick(dialog.footer.btn_next, Qt.LeftButton)
        with qtbot.waitSignal(controller.submission_failed, timeout=2000):
            backend.release()

        assert dialog.stack.currentWidget() is dialog.step_pages[2]
        assert dialog.footer.btn_next.text() == "Retry"
        assert dialog.footer.btn_next.isEnabled()
        assert dialog.error_label.isVisible()
        assert dialog.step_pages[2].budget_combo.currentData() == "50000+"
