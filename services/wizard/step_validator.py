# -*- coding: utf-8 -*-
"""
Step validation service for the Project Intake Wizard.

Validates form data for each step without UI coupling. The bare predicates
are pure and side-effect free; StepValidator adds translated messages for
the UI.
"""

from dataclasses import dataclass
from typing import List

from models.intake import Budget, FormData, Timeline
from services.translation_manager import tr


@dataclass
class StepValidationResult:
    """Result of step validation."""
    is_valid: bool
    errors: List[str]

    def add_error(self, message: str):
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def has_errors(self) -> bool:
        return len(self.errors) > 0


def validate_project_details(form_data: FormData) -> bool:
    """Step 1: project name and description are filled in."""
    return form_data.project_name.strip() != "" and form_data.description.strip() != ""


def validate_services(form_data: FormData) -> bool:
    """Step 2: at least one service is selected."""
    return len(form_data.services) > 0


def validate_budget_timeline(form_data: FormData) -> bool:
    """Step 3: budget and timeline are both chosen."""
    return form_data.budget != Budget.UNSET and form_data.timeline != Timeline.UNSET


class StepValidator:
    """Validates wizard step data based on the form data."""

    # Step constants
    STEP_DETAILS = 0
    STEP_SERVICES = 1
    STEP_BUDGET = 2

    STEP_COUNT = 3

    @staticmethod
    def is_step_valid(step_index: int, form_data: FormData) -> bool:
        """
        Check a step without building messages.

        Unknown steps are never valid.
        """
        if step_index == StepValidator.STEP_DETAILS:
            return validate_project_details(form_data)
        elif step_index == StepValidator.STEP_SERVICES:
            return validate_services(form_data)
        elif step_index == StepValidator.STEP_BUDGET:
            return validate_budget_timeline(form_data)
        return False

    @staticmethod
    def validate_step(step_index: int, form_data: FormData) -> StepValidationResult:
        """
        Validate step data.

        Args:
            step_index: Current step index (0-based)
            form_data: Form data collected so far

        Returns:
            StepValidationResult with one message per missing field
        """
        result = StepValidationResult(is_valid=True, errors=[])

        if step_index == StepValidator.STEP_DETAILS:
            if not form_data.project_name.strip():
                result.add_error(tr("validation.field_required", field=tr("field.project_name")))
            if not form_data.description.strip():
                result.add_error(tr("validation.field_required", field=tr("field.description")))

        elif step_index == StepValidator.STEP_SERVICES:
            if not form_data.services:
                result.add_error(tr("validation.services_required"))

        elif step_index == StepValidator.STEP_BUDGET:
            if form_data.budget == Budget.UNSET:
                result.add_error(tr("validation.select_required", field=tr("field.budget")))
            if form_data.timeline == Timeline.UNSET:
                result.add_error(tr("validation.select_required", field=tr("field.timeline")))

        else:
            result.add_error(tr("validation.unknown_step"))

        return result
