# -*- coding: utf-8 -*-
"""Step definitions of the Project Intake Wizard."""

from dataclasses import dataclass
from typing import Callable, Tuple

from models.intake import FormData
from services.translation_manager import tr
from services.wizard.step_validator import (
    validate_budget_timeline,
    validate_project_details,
    validate_services,
)


@dataclass(frozen=True)
class Step:
    """One page of the wizard with its own validator."""
    id: int
    title_key: str
    description_key: str
    validate: Callable[[FormData], bool]

    @property
    def title(self) -> str:
        return tr(self.title_key)

    @property
    def description(self) -> str:
        return tr(self.description_key)


INTAKE_STEPS: Tuple[Step, ...] = (
    Step(1, "step.details.title", "step.details.description", validate_project_details),
    Step(2, "step.services.title", "step.services.description", validate_services),
    Step(3, "step.budget.title", "step.budget.description", validate_budget_timeline),
)
