# -*- coding: utf-8 -*-
"""
Wizard services - step definitions, validation and navigation for the
Project Intake Wizard, free of any widget code.
"""

from .step_validator import StepValidator, StepValidationResult
from .steps import Step, INTAKE_STEPS
from .step_navigator import StepNavigator

__all__ = [
    'StepValidator',
    'StepValidationResult',
    'Step',
    'INTAKE_STEPS',
    'StepNavigator',
]
