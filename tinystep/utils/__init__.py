"""Utility functions."""

from .kinds import json_kind

__all__ = ["json_kind"]
