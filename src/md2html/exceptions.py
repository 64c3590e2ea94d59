#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/exceptions.py
"""Custom exceptions for the md2html library.

This module defines specialized exception classes for the error conditions
that can occur while turning a document tree into HTML. These exceptions
provide more specific error information than generic built-ins.

Exception Hierarchy
-------------------
- Md2HtmlError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)

  - RenderingError (output generation failures)
    - MalformedTreeError (input tree violates the node/event contract)
    - OutputWriteError (output sink rejected a write)

"""

from typing import Any


class Md2HtmlError(Exception):
    """Base exception class for all md2html-specific errors.

    Catching this will catch all library-specific errors.

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


class ValidationError(Md2HtmlError):
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
    """Exception raised when an incorrect options class is provided to a renderer.

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
    original_error : Exception, optional
        The original exception that caused this error

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


class RenderingError(Md2HtmlError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    Attributes
    ----------
    rendering_stage : str or None
        Where in the rendering process the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class MalformedTreeError(RenderingError):
    """Exception raised when the document tree breaks the node/event contract.

    This signals a bug in whatever built the tree, not bad document data:
    a structural Start/End marker reached the renderer as a leaf item, a
    Start/End pair did not match up, or an event outside the supported set
    was encountered. Rendering stops immediately; the library never skips
    or coerces the offending node.

    Parameters
    ----------
    message : str
        Description of the contract violation
    node : any, optional
        The node or event that triggered the error

    Attributes
    ----------
    node : any
        The offending node or event

    """

    def __init__(self, message: str, node: Any = None):
        """Initialize the malformed tree error."""
        super().__init__(message, rendering_stage="traversal")
        self.node = node


class OutputWriteError(RenderingError):
    """Exception raised when the output sink rejects a write.

    Parameters
    ----------
    sink_description : str
        Short description of the sink that failed (usually its repr)
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    sink_description : str
        Description of the sink that failed

    """

    def __init__(self, sink_description: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write to output sink: {sink_description}"
        super().__init__(message, rendering_stage="sink_write", original_error=original_error)
        self.sink_description = sink_description


__all__ = [
    "Md2HtmlError",
    "ValidationError",
    "InvalidOptionsError",
    "RenderingError",
    "MalformedTreeError",
    "OutputWriteError",
]
