"""Shared utilities for wordgraph."""

from .error_handling import ErrorContext, ErrorHandler, ErrorSeverity, Result

__all__ = [
    'ErrorContext',
    'ErrorHandler',
    'ErrorSeverity',
    'Result',
]
