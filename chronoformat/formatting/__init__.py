"""Formatting calendar values as text."""

# flake8: noqa: F401
from .formattable import format, format_into
from .metadata import Metadata, metadata
