"""
Service layer for the personnel roster.

This package contains framework-agnostic business logic (spreadsheet
import and roster queries) used by the API and the CLI.
"""

__version__ = "1.0.0"
