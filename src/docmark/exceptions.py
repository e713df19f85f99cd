#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the docmark library.

This module defines specialized exception classes for the error conditions
that can occur while compiling documentation source into a semantic tree.

Exception Hierarchy
-------------------
- DocmarkError (base exception)

  - ValidationError (parameter/option/table validation)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, undecodable content)

  - ParsingError (source compilation failures)
    - UnsupportedTokenKindError (token kind without a node mapping)

  - ReferenceNotFoundError (lookup miss in a knowledge-base table)

  - RenderingError (output generation failures)

Only ``ReferenceNotFoundError`` is recoverable: the inline link extensions
catch it and downgrade it to a ``ResolverMiss`` diagnostic. Everything else
aborts the compilation of the current document.

"""

from typing import Any


class DocmarkError(Exception):
    """Base exception class for all docmark-specific errors.

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


class ValidationError(DocmarkError):
    """Exception raised for invalid input parameters, options or table entries.

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


class FileError(DocmarkError):
    """Base exception for file access and I/O errors.

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
    """Exception raised when a source file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when a source file exists but cannot be read.

    This covers permission errors, directories passed as files and content
    that is not valid UTF-8.

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(DocmarkError):
    """Exception raised when compiling a document fails.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of compilation where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class UnsupportedTokenKindError(ParsingError):
    """Exception raised when the tokenizer yields a token with no node mapping.

    The compiler closes its grammar, so this always indicates a gap between
    the tokenizer configuration and the tree builder.

    Parameters
    ----------
    token_type : str
        The unmapped token type
    token : dict, optional
        The offending token, kept for debugging

    """

    def __init__(self, token_type: str, token: dict[str, Any] | None = None, message: str | None = None):
        """Initialize the unsupported token error."""
        if message is None:
            message = f"Unsupported token type: {token_type!r}"
        super().__init__(message, parsing_stage="tree_building")
        self.token_type = token_type
        self.token = token


class ReferenceNotFoundError(DocmarkError):
    """Exception raised when a knowledge-base lookup misses.

    Parameters
    ----------
    identifier : str
        The key that was looked up
    table : str
        Name of the table that was searched (``"symbols"``, ``"glossary"``, ``"basis"``)

    """

    def __init__(self, identifier: str, table: str, message: str | None = None):
        """Initialize the reference lookup error."""
        if message is None:
            message = f"No {table} entry for {identifier!r}"
        super().__init__(message)
        self.identifier = identifier
        self.table = table


class RenderingError(DocmarkError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage
