# -*- coding: utf-8 -*-
"""
Wizard Framework - shared widgets for multi-step wizards.

Wizard state lives in controllers; this package only holds the page base
class that renders it.
"""

from .base_step import BaseStep

__all__ = [
    'BaseStep',
]
