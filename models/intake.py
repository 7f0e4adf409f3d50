# -*- coding: utf-8 -*-
"""
Project intake models.

Form data collected by the intake wizard and the immutable state snapshot
the wizard controller hands to the UI layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Set


class Budget(Enum):
    """Budget range options (values match the submission payload)."""
    UNSET = ""
    RANGE_5K_10K = "5000-10000"
    RANGE_10K_25K = "10000-25000"
    RANGE_25K_50K = "25000-50000"
    RANGE_50K_PLUS = "50000+"


class Timeline(Enum):
    """Timeline options in months."""
    UNSET = ""
    MONTHS_1_2 = "1-2"
    MONTHS_3_4 = "3-4"
    MONTHS_5_6 = "5-6"
    MONTHS_6_PLUS = "6+"


class Direction(Enum):
    """Which way the last step transition moved (rendering hint only)."""
    NONE = "none"
    FORWARD = "forward"
    BACKWARD = "backward"


class SubmissionStatus(Enum):
    """Submission lifecycle of a wizard session."""
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


SERVICE_OPTIONS = (
    "Website Development",
    "Mobile App Development",
    "Brand Development",
    "Marketing",
)

# Value, display label
BUDGET_CHOICES = [
    (Budget.RANGE_5K_10K, "$5,000 - $10,000"),
    (Budget.RANGE_10K_25K, "$10,000 - $25,000"),
    (Budget.RANGE_25K_50K, "$25,000 - $50,000"),
    (Budget.RANGE_50K_PLUS, "$50,000+"),
]

TIMELINE_CHOICES = [
    (Timeline.MONTHS_1_2, "1-2 months"),
    (Timeline.MONTHS_3_4, "3-4 months"),
    (Timeline.MONTHS_5_6, "5-6 months"),
    (Timeline.MONTHS_6_PLUS, "6+ months"),
]


@dataclass
class FormData:
    """Project details entered by a prospective client."""

    project_name: str = ""
    description: str = ""
    services: Set[str] = field(default_factory=set)
    budget: Budget = Budget.UNSET
    timeline: Timeline = Timeline.UNSET

    FIELDS = ("project_name", "description", "services", "budget", "timeline")

    def copy(self) -> 'FormData':
        """Return an independent copy (services set is not shared)."""
        return FormData(
            project_name=self.project_name,
            description=self.description,
            services=set(self.services),
            budget=self.budget,
            timeline=self.timeline,
        )

    def is_empty(self) -> bool:
        """Check if nothing has been entered yet."""
        return self == FormData()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-friendly payload."""
        return {
            "project_name": self.project_name,
            "description": self.description,
            "services": sorted(self.services),
            "budget": self.budget.value,
            "timeline": self.timeline.value,
        }


@dataclass(frozen=True)
class WizardState:
    """
    Read-only snapshot of a wizard session.

    current_step_index is 0-based; step_number is the 1-based position
    shown to the user.
    """

    current_step_index: int = 0
    step_count: int = 3
    direction: Direction = Direction.NONE
    submission_status: SubmissionStatus = SubmissionStatus.IDLE
    form_data: FormData = field(default_factory=FormData)
    last_error: str = ""
    reference_number: str = ""

    @property
    def step_number(self) -> int:
        return self.current_step_index + 1

    @property
    def is_first_step(self) -> bool:
        return self.current_step_index == 0

    @property
    def is_last_step(self) -> bool:
        return self.current_step_index == self.step_count - 1

    @property
    def is_submitting(self) -> bool:
        return self.submission_status == SubmissionStatus.SUBMITTING

    @property
    def is_succeeded(self) -> bool:
        return self.submission_status == SubmissionStatus.SUCCEEDED

    @property
    def is_failed(self) -> bool:
        return self.submission_status == SubmissionStatus.FAILED

    @property
    def is_editable(self) -> bool:
        """Fields can change only while no submission is running or done."""
        return self.submission_status in (SubmissionStatus.IDLE, SubmissionStatus.FAILED)
