"""
Domain entities package.
"""

from .doctor import Doctor

__all__ = [
    "Doctor",
]
