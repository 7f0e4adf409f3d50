# -*- coding: utf-8 -*-
"""
Project Intake Steps Package.

- Step 1: Project Details
- Step 2: Services Selection
- Step 3: Budget & Timeline
"""

from .project_details_step import ProjectDetailsStep
from .services_step import ServicesStep
from .budget_timeline_step import BudgetTimelineStep

__all__ = [
    'ProjectDetailsStep',
    'ServicesStep',
    'BudgetTimelineStep'
]
