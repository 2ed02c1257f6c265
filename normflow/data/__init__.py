"""Tabular input loading and schema checks used by the CLI."""

from normflow.data.loader import SUPPORTED_SUFFIXES, load_table
from normflow.data.validation import require_columns, require_numeric

__all__ = ["SUPPORTED_SUFFIXES", "load_table", "require_columns", "require_numeric"]
