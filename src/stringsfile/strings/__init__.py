"""Strings file parsing and models."""

from .models import StringEntry
from .parser import StringsParser

__all__ = ["StringEntry", "StringsParser"]
