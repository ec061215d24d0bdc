"""Standardized error handling utilities.

Query-style operations in wordgraph report problems as descriptive strings.
Operations that touch the outside world (reading the source text, writing
the DOT file, running Graphviz, persisting a walk) report through the
``Result`` type defined here so callers decide what is fatal.
"""

import logging
import subprocess
import traceback
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar('T')
E = TypeVar('E', bound=Exception)

_MISSING = object()


class ErrorSeverity(Enum):
    """Error severity levels for consistent error classification."""
    LOW = "low"           # Optional outputs (rendering, persistence)
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical" # Session cannot continue (ingestion)


@dataclass
class ErrorContext:
    """Context information for error reporting and debugging."""
    operation: str
    component: str
    file_path: Optional[str] = None
    additional_info: Optional[Dict[str, Any]] = None
    severity: ErrorSeverity = ErrorSeverity.MEDIUM


class Result(Generic[T, E]):
    """Result type for operations that may fail.

    Exactly one of value or error is set. ``None`` is a legal success value.
    """

    def __init__(self, value: Any = _MISSING, error: Optional[E] = None):
        if value is not _MISSING and error is not None:
            raise ValueError("Result cannot have both value and error")
        if value is _MISSING and error is None:
            raise ValueError("Result must have either value or error")

        self._value = None if value is _MISSING else value
        self._error = error

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result.success({self._value!r})"
        return f"Result.failure({self._error!r})"

    @property
    def is_success(self) -> bool:
        """True if the result represents success."""
        return self._error is None

    @property
    def is_failure(self) -> bool:
        """True if the result represents failure."""
        return self._error is not None

    @property
    def value(self) -> T:
        """Get the success value. Raises if this is a failure."""
        if self._error is not None:
            raise RuntimeError(f"Attempted to get value from failed result: {self._error}")
        return self._value

    @property
    def error(self) -> E:
        """Get the error. Raises if this is a success."""
        if self._error is None:
            raise RuntimeError("Attempted to get error from successful result")
        return self._error

    @classmethod
    def success(cls, value: T) -> 'Result[T, E]':
        """Create a successful result."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: E) -> 'Result[T, E]':
        """Create a failed result."""
        return cls(error=error)


class ErrorHandler:
    """Centralized error handling with consistent logging."""

    def __init__(self, component_name: str = "WordGraph"):
        self.component_name = component_name

    def safe_execute(
        self,
        operation: Callable[[], T],
        context: Optional[ErrorContext] = None
    ) -> Result[T, Exception]:
        """Safely execute operation returning Result type.

        Args:
            operation: Function to execute
            context: Error context for logging

        Returns:
            Result object with success value or error
        """
        try:
            return Result.success(operation())
        except Exception as e:
            self._log_error(e, context)
            return Result.failure(e)

    def safe_file_operation(
        self,
        file_path: str,
        operation: Callable[[str], T],
        operation_name: str = "file_operation",
        severity: ErrorSeverity = ErrorSeverity.MEDIUM
    ) -> Result[T, Exception]:
        """Run ``operation(file_path)`` and capture I/O failures in a Result."""
        context = ErrorContext(
            operation=operation_name,
            component=self.component_name,
            file_path=str(file_path),
            severity=severity
        )
        return self.safe_execute(lambda: operation(file_path), context)

    def safe_subprocess_call(
        self,
        command: List[str],
        context: Optional[ErrorContext] = None,
        timeout: Optional[float] = None
    ) -> Result[str, Exception]:
        """Safely execute subprocess commands.

        A missing executable surfaces as a failed Result carrying
        ``FileNotFoundError``.
        """
        def run_command():
            try:
                result = subprocess.run(
                    command,
                    capture_output=True,
                    text=True,
                    check=True,
                    timeout=timeout
                )
                return result.stdout
            except subprocess.CalledProcessError as e:
                raise RuntimeError(f"Command failed: {' '.join(command)}\nError: {e.stderr}")
            except subprocess.TimeoutExpired:
                raise TimeoutError(f"Command timed out after {timeout}s: {' '.join(command)}")

        return self.safe_execute(run_command, context)

    def _log_error(self, error: Exception, context: Optional[ErrorContext] = None):
        """Log error with context information."""
        if context:
            logger.error(
                f"Error in {context.component}.{context.operation}: {error}",
                extra={
                    'component': context.component,
                    'operation': context.operation,
                    'file_path': context.file_path,
                    'severity': context.severity.value,
                    'additional_info': context.additional_info
                }
            )
        else:
            logger.error(f"Error in {self.component_name}: {error}")

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Stack trace: {traceback.format_exc()}")
