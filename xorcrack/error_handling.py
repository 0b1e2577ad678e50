"""
Error handling and reporting for xorcrack.

The cryptanalysis engine never raises; the fallible boundaries are decoding
user supplied text, reading input and configuration. Those raise subclasses
of XorCrackError, which the CLI reports through ErrorHandler.
"""

import sys
import traceback
import logging
from enum import Enum
from typing import Optional, Dict, Any
from dataclasses import dataclass


class ErrorSeverity(Enum):
    """Error severity levels."""
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


class ErrorCategory(Enum):
    """Categories of errors that can occur."""
    INPUT_ERROR = "Input Error"
    DECODING_ERROR = "Decoding Error"
    CONFIGURATION_ERROR = "Configuration Error"
    INTERNAL_ERROR = "Internal Error"


@dataclass
class ErrorContext:
    """Context information for an error."""
    source: Optional[str] = None
    function: Optional[str] = None
    encoding: Optional[str] = None
    position: Optional[int] = None
    additional_info: Optional[Dict[str, Any]] = None


class XorCrackError(Exception):
    """Base exception class for xorcrack errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.INTERNAL_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: Optional[ErrorContext] = None,
        suggestion: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.suggestion = suggestion
        self.original_exception = original_exception

    def __str__(self):
        """Format error message with all context."""
        lines = [f"{self.severity.value}: {self.category.value}: {self.message}"]

        if self.context.source:
            lines.append(f"  Source: {self.context.source}")
        if self.context.function:
            lines.append(f"  Function: {self.context.function}")
        if self.context.encoding:
            lines.append(f"  Encoding: {self.context.encoding}")
        if self.context.position is not None:
            lines.append(f"  Position: {self.context.position}")
        if self.context.additional_info:
            for key, value in self.context.additional_info.items():
                lines.append(f"  {key}: {value}")

        if self.suggestion:
            lines.append(f"  Suggestion: {self.suggestion}")

        if self.original_exception:
            lines.append(
                f"  Caused by: {type(self.original_exception).__name__}: "
                f"{self.original_exception}"
            )

        return "\n".join(lines)


class InputError(XorCrackError):
    """Error related to invalid input."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("category", ErrorCategory.INPUT_ERROR)
        super().__init__(message, **kwargs)


class MalformedInputError(InputError, ValueError):
    """
    Text could not be decoded as base-16 or base-64.

    Raised on a bad length, a character outside the alphabet or a misplaced
    '=' pad. The offending character index is kept in ``context.position``.
    """

    def __init__(self, message: str, encoding: Optional[str] = None,
                 position: Optional[int] = None, **kwargs):
        kwargs.setdefault("category", ErrorCategory.DECODING_ERROR)
        kwargs.setdefault("context", ErrorContext(encoding=encoding, position=position))
        super().__init__(message, **kwargs)

    @property
    def position(self) -> Optional[int]:
        return self.context.position

    @property
    def encoding(self) -> Optional[str]:
        return self.context.encoding


class ConfigurationError(XorCrackError):
    """Error related to configuration."""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION_ERROR,
            **kwargs
        )


class ErrorHandler:
    """Central error handler for xorcrack."""

    def __init__(self, debug_mode: bool = False):
        self.debug_mode = debug_mode
        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Set up logging configuration for the xorcrack logger tree."""
        logger = logging.getLogger("xorcrack")
        level = logging.DEBUG if self.debug_mode else logging.INFO
        logger.setLevel(level)

        if not logger.handlers:
            console_handler = logging.StreamHandler(sys.stderr)
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        for handler in logger.handlers:
            handler.setLevel(level)

        return logger

    def handle_error(
        self,
        error: Exception,
        context: Optional[ErrorContext] = None,
        reraise: bool = False
    ):
        """
        Handle an error with appropriate logging and reporting.

        Args:
            error: The exception to handle
            context: Additional context information
            reraise: Whether to re-raise the exception after handling
        """
        if isinstance(error, XorCrackError):
            self._log_error(error)
        else:
            wrapped = XorCrackError(
                message=str(error),
                context=context,
                original_exception=error
            )
            self._log_error(wrapped)

        if self.debug_mode:
            traceback.print_exception(type(error), error, error.__traceback__)

        if reraise:
            raise error

    def _log_error(self, error: XorCrackError):
        """Log an xorcrack error with the level matching its severity."""
        error_message = str(error)

        if error.severity == ErrorSeverity.CRITICAL:
            self.logger.critical(error_message)
        elif error.severity == ErrorSeverity.ERROR:
            self.logger.error(error_message)
        elif error.severity == ErrorSeverity.WARNING:
            self.logger.warning(error_message)
        else:
            self.logger.info(error_message)

    def log_warning(self, message: str, context: Optional[ErrorContext] = None):
        """Log a warning message."""
        warning = XorCrackError(
            message=message,
            severity=ErrorSeverity.WARNING,
            context=context
        )
        self._log_error(warning)

    def log_info(self, message: str):
        """Log an informational message."""
        self.logger.info(message)


# Global error handler instance
_error_handler: Optional[ErrorHandler] = None


def get_error_handler(debug_mode: bool = False) -> ErrorHandler:
    """Get or create the global error handler."""
    global _error_handler
    if _error_handler is None:
        _error_handler = ErrorHandler(debug_mode=debug_mode)
    elif debug_mode and not _error_handler.debug_mode:
        _error_handler = ErrorHandler(debug_mode=True)
    return _error_handler


# Common error messages with suggestions
ERROR_MESSAGES = {
    "file_not_found": {
        "message": "Input file not found: {path}",
        "suggestion": "Check that the file path is correct and the file exists."
    },
    "empty_input": {
        "message": "No input provided ({source})",
        "suggestion": "Pass the text as an argument, a file path, or pipe it on stdin."
    },
    "invalid_key": {
        "message": "Invalid key: {key!r}",
        "suggestion": "Repeating-key XOR needs a key of at least one byte."
    },
}


def create_error(
    error_key: str,
    severity: ErrorSeverity = ErrorSeverity.ERROR,
    context: Optional[ErrorContext] = None,
    **format_args
) -> XorCrackError:
    """
    Create an input error from a predefined error message.

    Args:
        error_key: Key in ERROR_MESSAGES dictionary
        severity: Error severity level
        context: Error context
        **format_args: Arguments to format the error message

    Returns:
        Configured InputError instance
    """
    if error_key not in ERROR_MESSAGES:
        return XorCrackError(
            message=f"Unknown error: {error_key}",
            severity=severity,
            context=context
        )

    error_info = ERROR_MESSAGES[error_key]
    message = error_info["message"].format(**format_args)
    suggestion = error_info.get("suggestion")

    return InputError(
        message,
        severity=severity,
        context=context,
        suggestion=suggestion
    )
