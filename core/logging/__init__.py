"""Logging utilities for the social service."""

from core.logging.config import setup_logging

__all__ = ["setup_logging"]
