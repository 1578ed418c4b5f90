#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the org2confluence library.

This module defines specialized exception classes for the error conditions
that can occur while loading a document tree and transcoding it to
Confluence wiki markup.

Exception Hierarchy
-------------------
- Org2ConfluenceError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)

  - ParsingError (malformed document tree input)

  - RenderingError (output generation failures)
    - UnsupportedNodeKindError (no translator for a node kind)
    - UnresolvedReferenceError (internal link target missing, strict mode only)
    - OutputWriteError (file write failures)

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from org2confluence.ast.nodes import SourceLocation


class Org2ConfluenceError(Exception):
    """Base exception class for all org2confluence-specific errors.

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


class ValidationError(Org2ConfluenceError):
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


class InvalidOptionsError(ValidationError):
    """Exception raised when incorrect options class is provided to a renderer.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'. "
                f"Please provide the correct options type for the renderer."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(Org2ConfluenceError):
    """Exception raised when a serialized document tree cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the parsing error
    original_error : Exception, optional
        The original exception that caused this error

    """


class RenderingError(Org2ConfluenceError):
    """Exception raised when output generation fails.

    Parameters
    ----------
    message : str
        Description of the rendering error
    rendering_stage : str, optional
        Stage of rendering where the error occurred
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error=original_error)
        self.rendering_stage = rendering_stage


class UnsupportedNodeKindError(RenderingError):
    """Exception raised when no translator exists for a node kind.

    Neither the dialect nor any base dialect it derives from defines a
    translator for the node. This aborts the whole export.

    Parameters
    ----------
    kind : str
        The node kind that could not be dispatched
    dialect : str
        Name of the dialect registry that was consulted
    source_location : SourceLocation, optional
        Where the offending node came from, if known

    """

    def __init__(self, kind: str, dialect: str, source_location: "SourceLocation | None" = None):
        """Initialize the error with the offending kind and its location."""
        message = f"No translator for node kind '{kind}' in dialect '{dialect}' or its base dialects"
        if source_location is not None:
            location = source_location.describe()
            if location:
                message += f" (at {location})"
        super().__init__(message, rendering_stage="dispatch")
        self.kind = kind
        self.dialect = dialect
        self.source_location = source_location


class UnresolvedReferenceError(RenderingError):
    """Exception raised for an internal link that resolves to nothing.

    Only raised when strict link resolution is requested; by default an
    unresolved link renders with an empty target.

    Parameters
    ----------
    link_type : str
        Type of the link (``custom-id``, ``id`` or ``fuzzy``)
    target : str
        The path that failed to resolve

    """

    def __init__(self, link_type: str, target: str):
        """Initialize the error with the unresolved link details."""
        super().__init__(f"Unable to resolve {link_type} link: {target}", rendering_stage="links")
        self.link_type = link_type
        self.target = target


class OutputWriteError(RenderingError):
    """Exception raised when rendered output cannot be written.

    Parameters
    ----------
    message : str
        Description of the write error
    output_path : str, optional
        Path of the destination that failed

    """

    def __init__(self, message: str, output_path: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        super().__init__(message, rendering_stage="output", original_error=original_error)
        self.output_path = output_path


__all__ = [
    "Org2ConfluenceError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "UnsupportedNodeKindError",
    "UnresolvedReferenceError",
    "OutputWriteError",
]
