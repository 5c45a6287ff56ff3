"""
clinicbook - doctor profile service for clinic appointment backends.
"""

__version__ = "0.1.0"
