"""
FastAPI application for the personnel roster.

This package contains the REST API for importing personnel spreadsheets
and searching the roster.
"""

__version__ = "1.0.0"
