"""
Configuration module for session settings.
"""

from .see_config import SeeConfig

__all__ = ["SeeConfig"]
