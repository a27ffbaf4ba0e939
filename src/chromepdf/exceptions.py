#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the chromepdf library.

This module defines specialized exception classes for the error conditions
that can occur while assembling a render request and submitting it to the
remote rendering service. Transport-native exceptions (httpx) never escape the
library; they are wrapped into ``ApiError``.

Exception Hierarchy
-------------------
- ChromePdfError (base exception)

  - ValidationError (option/argument validation)

  - ConfigurationError (unreadable or invalid configuration files)

  - EncodingError (payload could not be serialized to JSON)

  - ApiError (transport failures and HTTP error statuses)

  - FileError (local input file access)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, undecodable content)

"""

from typing import Any


class ChromePdfError(Exception):
    """Base exception class for all chromepdf-specific errors.

    Catching this will catch every library-specific error.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(ChromePdfError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class ConfigurationError(ChromePdfError):
    """Exception raised when a configuration file cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path of the offending configuration file
    original_error : Exception, optional
        The original parse or I/O error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class EncodingError(ChromePdfError):
    """Exception raised when the request payload cannot be encoded as JSON.

    Raised before any network I/O is attempted, for example when template or
    content strings contain lone surrogates or a float option is NaN.
    """


class ApiError(ChromePdfError):
    """Exception raised when the rendering service call fails.

    Connection, DNS and TLS failures as well as HTTP error statuses all
    surface as this single exception kind.

    Parameters
    ----------
    message : str
        Description of the failure, embedding the original message
    status_code : int, optional
        HTTP status code returned by the service, if a response was received
    original_error : Exception, optional
        The transport exception that caused the failure

    Attributes
    ----------
    status_code : int or None
        HTTP status code, or None for transport-level failures

    """

    def __init__(self, message: str, status_code: int | None = None, original_error: Exception | None = None):
        """Initialize the API error with an optional status code."""
        super().__init__(message, original_error=original_error)
        self.status_code = status_code


class FileError(ChromePdfError):
    """Base exception for local input file errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when an input file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when an input file cannot be read or decoded."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


__all__ = [
    "ChromePdfError",
    "ValidationError",
    "ConfigurationError",
    "EncodingError",
    "ApiError",
    "FileError",
    "FileNotFoundError",
    "FileAccessError",
]
