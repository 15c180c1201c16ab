# Utility functions
from .selectors import render_selector

__all__ = ['render_selector']
