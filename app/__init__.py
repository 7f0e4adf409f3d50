# -*- coding: utf-8 -*-
"""
Nexa Studio Application Core Module
"""

from .config import Config

__all__ = ["Config"]
