"""
Input validation package.
"""

from .validators import DataValidator, BusinessValidator, blank_to_none

__all__ = [
    'DataValidator',
    'BusinessValidator',
    'blank_to_none',
]
