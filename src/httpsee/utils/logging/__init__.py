"""Logging configuration."""

from .logging_config import NOISY_LIBRARIES, setup_logging

__all__ = ["NOISY_LIBRARIES", "setup_logging"]
