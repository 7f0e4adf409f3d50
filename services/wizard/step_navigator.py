# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between wizard steps.

Handles:
- Step progression (next/previous)
- Step validation before moving forward
- Transition direction (animation hint for the UI)
- Progress tracking
"""

from typing import Optional, Sequence

from PyQt5.QtCore import QObject, pyqtSignal

from models.intake import Direction, FormData
from services.wizard.steps import Step
from utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    Tracks the current step of a wizard and its last transition direction.

    Holds no widgets: the controller owns the navigator and the UI only
    sees the resulting index and direction.
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    validation_failed = pyqtSignal(int)  # step index that blocked navigation

    def __init__(self, steps: Sequence[Step], parent: Optional[QObject] = None):
        """
        Initialize the navigator.

        Args:
            steps: Ordered step definitions (fixed configuration)
            parent: Parent QObject
        """
        super().__init__(parent)
        if not steps:
            raise ValueError("A wizard needs at least one step")
        self.steps = tuple(steps)
        self.current_index = 0
        self.direction = Direction.NONE

    def get_current_step(self) -> Step:
        """Get the current step."""
        return self.steps[self.current_index]

    def get_step_count(self) -> int:
        """Get total number of steps."""
        return len(self.steps)

    def is_last_step(self) -> bool:
        return self.current_index == len(self.steps) - 1

    def can_go_next(self) -> bool:
        """Check if there is a step after the current one."""
        return self.current_index < len(self.steps) - 1

    def can_go_previous(self) -> bool:
        """Check if there is a step before the current one."""
        return self.current_index > 0

    def is_current_step_valid(self, form_data: FormData) -> bool:
        return self.get_current_step().validate(form_data)

    def next_step(self, form_data: FormData) -> bool:
        """
        Navigate to the next step if the current one validates.

        Args:
            form_data: Data the current step is validated against

        Returns:
            True if navigation was successful
        """
        if not self.can_go_next():
            logger.debug(f"Cannot go next: already at last step ({self.current_index})")
            return False

        if not self.is_current_step_valid(form_data):
            logger.debug(f"Step {self.current_index} validation failed, staying")
            self.validation_failed.emit(self.current_index)
            return False

        return self._navigate_to(self.current_index + 1, Direction.FORWARD)

    def previous_step(self) -> bool:
        """Navigate to the previous step."""
        if not self.can_go_previous():
            logger.debug(f"Cannot go previous: already at first step ({self.current_index})")
            return False

        return self._navigate_to(self.current_index - 1, Direction.BACKWARD)

    def _navigate_to(self, new_index: int, direction: Direction) -> bool:
        """Move to a step index that is known to be in range."""
        old_index = self.current_index
        self.current_index = new_index
        self.direction = direction

        logger.info(f"Navigating: Step {old_index + 1} → {new_index + 1} ({direction.value})")
        self.step_changed.emit(old_index, new_index)
        return True

    def reset(self):
        """Reset navigator to the first step with no direction."""
        old_index = self.current_index
        self.current_index = 0
        self.direction = Direction.NONE
        if old_index != 0:
            self.step_changed.emit(old_index, 0)

    def get_progress_percentage(self) -> float:
        """
        Get current progress as percentage.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        if len(self.steps) <= 1:
            return 100.0
        return (self.current_index / (len(self.steps) - 1)) * 100.0
